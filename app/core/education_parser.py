"""
Education parsing module for detecting degree phrases in resume text.

Deterministic, pattern-based: a degree keyword followed by free-text field of
study up to the next comma or line break. The institution is never resolved,
so every entry carries the placeholder institution.
"""

import re
import logging
from typing import List, Tuple

from app.core.schemas import EducationEntry, INSTITUTION_PLACEHOLDER

logger = logging.getLogger(__name__)


# ===== DEGREE PATTERNS =====
# Applied in this order; matches are concatenated, never deduplicated.

DEGREE_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(
        r"\b(?P<degree>bachelor|master|phd|doctorate|mba|bs|ms|ba|ma)\s+"
        r"(?:of\s+)?(?:science\s+)?(?:in\s+)?(?P<field>[^,\n]+)",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?P<degree>associate|diploma)\s+(?:in\s+)?(?P<field>[^,\n]+)",
        re.IGNORECASE,
    ),
)


def format_degree(degree_type: str, field: str) -> str:
    """
    Build the degree label from a matched keyword and field text.

    Examples:
        ("BACHELOR", "Computer Science ") -> "Bachelor Computer Science"
        ("phd", "Physics") -> "Phd Physics"
    """
    return f"{degree_type.capitalize()} {field.strip()}"


def extract_education(text: str) -> List[EducationEntry]:
    """
    Extract every degree phrase from text.

    One line may yield several entries, and a degree repeated in two sections
    yields two entries.
    """
    entries: List[EducationEntry] = []
    if not text:
        return entries

    for pattern in DEGREE_PATTERNS:
        for m in pattern.finditer(text):
            degree = format_degree(m.group("degree"), m.group("field"))
            logger.debug(f"Education match: '{m.group(0).strip()}' -> degree='{degree}'")
            entries.append(EducationEntry(degree=degree, institution=INSTITUTION_PLACEHOLDER))

    return entries
