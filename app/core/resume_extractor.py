from datetime import date
from typing import List, Optional, Tuple
import re
import logging

from app.core.schemas import (
    ContactInfo,
    ExtractedData,
    WorkEntry,
    DURATION_PLACEHOLDER,
    UNKNOWN_CANDIDATE,
)
from app.core.education_parser import extract_education
from app.core.text_normalization import normalize_lines

logger = logging.getLogger(__name__)


# ===== NAME =====

NAME_SCAN_LINES = 3
NAME_MIN_LEN = 3
NAME_MAX_LEN = 50
# Header/contact lines that can never be the candidate name
NAME_SKIP_RE = re.compile(r"resume|cv|curriculum|email|phone|@|\d{3}[-\s]\d{3}", re.IGNORECASE)
NAME_RE = re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+")

# ===== SKILLS =====

# (keyword, canonical form). Declaration order is output order.
TECH_SKILLS: Tuple[Tuple[str, str], ...] = tuple(
    (kw, kw.lower())
    for kw in (
        "ruby", "rails", "javascript", "react", "python", "java", "c#", "php",
        "html", "css", "sql", "postgresql", "mysql", "mongodb", "redis", "aws",
        "docker", "kubernetes", "git", "angular", "vue", "node.js", "typescript",
        "swift", "kotlin", "android", "ios",
    )
)
# Lookarounds instead of \b so keywords ending in punctuation ("c#") still need a clean right edge
SKILL_PATTERNS: Tuple[Tuple[re.Pattern, str], ...] = tuple(
    (re.compile(rf"(?<!\w){re.escape(kw)}(?!\w)", re.IGNORECASE), canonical)
    for kw, canonical in TECH_SKILLS
)

# ===== EXPERIENCE =====

# Matches start at the first digit of a run
EXPERIENCE_PHRASE_RE = re.compile(r"(?<!\d)(\d+)[+\s]*years?\s+(?:of\s+)?experience", re.IGNORECASE)
YEAR_TOKEN_RE = re.compile(r"\b(?:19|20)\d{2}\b")
EARLIEST_CAREER_YEAR = 1990

# ===== CONTACT =====

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}")
# "Austin, TX" or "Berlin, Germany"
LOCATION_RE = re.compile(r"[A-Z][a-z]+,\s*[A-Z]{2}|[A-Z][a-z]+\s*,\s*[A-Z][a-z]+")

# ===== WORK HISTORY =====

# The separator may only start where a whitespace run starts (or after a one-character title)
WORK_LINE_RE = re.compile(
    r"^(.+?)(?<![^\n]\s)(?:\s+at\s+|\s+@\s+|\s+-\s+)(.+?)$",
    re.IGNORECASE | re.MULTILINE,
)
WORK_FIELD_MAX_LEN = 100
MAX_WORK_ENTRIES = 5


def extract_name(lines: List[str]) -> str:
    """
    Find the candidate name in the first few lines.

    Header lines ("Resume", "CV") and contact lines (email, phone) are skipped.
    The first remaining line that starts with two capitalized words wins and is
    returned verbatim.

    Examples:
      ["John Doe", "Software Engineer"] -> "John Doe"
      ["RESUME", "Jane Smith"] -> "Jane Smith"
      ["john doe"] -> "Unknown"
    """
    for line in lines[:NAME_SCAN_LINES]:
        if NAME_SKIP_RE.search(line):
            continue
        if len(line) < NAME_MIN_LEN or len(line) > NAME_MAX_LEN:
            continue
        if NAME_RE.match(line):
            return line.strip()

    return UNKNOWN_CANDIDATE


def _dedupe_preserve_order(items: List[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def extract_skills(text: str) -> List[str]:
    """Match the fixed technology vocabulary as whole words, case-insensitively."""
    skills = [canonical for pattern, canonical in SKILL_PATTERNS if pattern.search(text)]
    return _dedupe_preserve_order(skills)


def estimate_from_work_history(text: str, reference_year: Optional[int] = None) -> float:
    """
    Estimate years of experience from the span of years mentioned in the text.

    Only years in [1990, reference_year] count. The result is the larger of
    (reference_year - earliest) and (latest - earliest).

    Example (reference_year=2024):
      "Worked 2015 to 2020." -> max(2024 - 2015, 2020 - 2015) = 9.0
    """
    current_year = reference_year if reference_year is not None else date.today().year
    years = {int(tok) for tok in YEAR_TOKEN_RE.findall(text)}
    if not years:
        return 0.0

    years = {y for y in years if EARLIEST_CAREER_YEAR <= y <= current_year}
    if not years:
        return 0.0

    earliest = min(years)
    latest = max(years)
    return float(max(current_year - earliest, latest - earliest))


def extract_experience_years(text: str, reference_year: Optional[int] = None) -> float:
    """
    Total years of experience.

    Explicit "N years experience" phrases win, and the largest one is used.
    Without any, fall back to the year-span estimate.
    """
    matches = EXPERIENCE_PHRASE_RE.findall(text)
    if matches:
        years = max(float(m) for m in matches)
        logger.debug(f"Experience from explicit phrases {matches} -> {years}")
        return years

    years = estimate_from_work_history(text, reference_year)
    logger.debug(f"Experience estimated from year span -> {years}")
    return years


def extract_contact(text: str) -> ContactInfo:
    """First email, phone and location match. Fields without a match stay None."""
    contact = ContactInfo()

    m = EMAIL_RE.search(text)
    if m:
        contact.email = m.group(0)

    m = PHONE_RE.search(text)
    if m:
        contact.phone = m.group(0)

    m = LOCATION_RE.search(text)
    if m:
        contact.location = m.group(0)

    return contact


def extract_work_history(text: str) -> List[WorkEntry]:
    """
    Find "Title at Company", "Title @ Company" and "Title - Company" lines.

    Any line containing " at " or " - " qualifies, so address lines and
    date ranges can show up as entries. Matches with a side longer than
    100 characters are dropped. At most 5 entries are kept, in document order.
    """
    experiences: List[WorkEntry] = []
    for m in WORK_LINE_RE.finditer(text):
        title, company = m.group(1), m.group(2)
        if len(title) > WORK_FIELD_MAX_LEN or len(company) > WORK_FIELD_MAX_LEN:
            logger.debug(f"Skipping oversized work line: '{m.group(0)[:40]}...'")
            continue

        experiences.append(
            WorkEntry(title=title.strip(), company=company.strip(), duration=DURATION_PLACEHOLDER)
        )

    return experiences[:MAX_WORK_ENTRIES]


def extract_basic_data(text: str, reference_year: Optional[int] = None) -> ExtractedData:
    """
    Run every extractor over a plain-text resume and assemble the record.

    Never raises for string input; empty text yields an all-default record.
    """
    text = text or ""
    lines = normalize_lines(text)

    data = ExtractedData(
        candidate_name=extract_name(lines),
        skills=extract_skills(text),
        total_years_experience=extract_experience_years(text, reference_year),
        education=extract_education(text),
        contact_info=extract_contact(text),
        work_experience=extract_work_history(text),
    )
    logger.debug(
        f"Extracted: name='{data.candidate_name}', skills={len(data.skills)}, "
        f"years={data.total_years_experience}, education={len(data.education)}, "
        f"work={len(data.work_experience)}"
    )
    return data
