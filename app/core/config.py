"""
Configuration settings for the resume extraction service.

Values come from the environment (or a local .env file).
"""

from dotenv import load_dotenv
load_dotenv()
import os
import logging
from typing import Optional

logger = logging.getLogger(__name__)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Uploads larger than this are rejected with 413
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", str(1024 * 1024)))

# Only plain-text sources are read; PDF/DOCX must be converted first
SUPPORTED_EXTENSIONS = (".txt", ".md")


def get_reference_year() -> Optional[int]:
    """
    Pinned year for the experience estimate, or None to use the current year.

    A malformed REFERENCE_YEAR is ignored with a warning.
    """
    raw = (os.getenv("REFERENCE_YEAR") or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid REFERENCE_YEAR={raw!r}; using the current year")
        return None
