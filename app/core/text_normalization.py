"""
Text normalization utilities shared by every extractor.

Resume text arrives with arbitrary blank lines and indentation. Line order is
kept because the name heuristic depends on what appears at the top.
"""

import re
from typing import List


LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def normalize_lines(text: str) -> List[str]:
    """
    Split text into trimmed, non-empty lines.

    Examples:
      "Jane Doe\\n\\n  Engineer  \\n" -> ["Jane Doe", "Engineer"]
      "" -> []
    """
    if not text:
        return []
    lines = (line.strip() for line in LINE_BREAK_RE.split(text))
    return [line for line in lines if line]


def is_blank(text: str) -> bool:
    """True when text has no non-whitespace content at all."""
    return not text or not text.strip()
