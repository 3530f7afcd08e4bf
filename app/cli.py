"""Batch resume analysis CLI.

Usage:
  resume-extractor PATH [--reference-year YEAR] [--indent N]

PATH may be a single .txt/.md resume or a directory searched recursively.
Results are written to stdout as a JSON array.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from app.core.config import LOG_LEVEL, get_reference_year
from app.core.resume_analyzer import analyze_file, batch_analyze


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="resume-extractor",
        description="Extract structured candidate data from plain-text resumes",
    )
    p.add_argument("path", help="Resume file or directory of resumes")
    p.add_argument(
        "--reference-year",
        type=int,
        default=None,
        help="Year used for the experience estimate (default: REFERENCE_YEAR or current year)",
    )
    p.add_argument("--indent", type=int, default=2, help="JSON indent (default: 2)")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    path = Path(args.path)
    if not path.exists():
        print(f"Path not found: {path}", file=sys.stderr)
        return 2

    reference_year = args.reference_year if args.reference_year is not None else get_reference_year()
    if path.is_dir():
        results = batch_analyze(path, reference_year=reference_year)
    else:
        results = [analyze_file(path, reference_year=reference_year)]

    payload = [r.model_dump(exclude_none=True) for r in results]
    print(json.dumps(payload, indent=args.indent))
    return 0 if all(r.success for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
