from datetime import datetime
from typing import Optional
import logging

from app.core.schemas import AnalysisResult
from app.core.resume_extractor import extract_basic_data
from app.core.text_normalization import is_blank

logger = logging.getLogger(__name__)

EMPTY_RESUME_ERROR = "Could not extract text from resume file or file is empty"


def _timestamp() -> str:
    return datetime.now().isoformat(timespec="seconds")


def failure_result(error: str, file_path: Optional[str] = None) -> AnalysisResult:
    return AnalysisResult(success=False, error=error, file_path=file_path, timestamp=_timestamp())


def analyze_text(
    text: str,
    file_path: Optional[str] = None,
    reference_year: Optional[int] = None,
) -> AnalysisResult:
    """
    Analyze a plain-text resume already held in memory.

    Blank text is reported as a failure result. Anything else is handed to
    the extraction engine, which always succeeds.
    """
    if is_blank(text):
        logger.warning(f"Empty resume text (source={file_path or 'inline'})")
        return failure_result(EMPTY_RESUME_ERROR, file_path=file_path)

    extracted = extract_basic_data(text, reference_year=reference_year)
    logger.info(f"Resume analysis completed for {extracted.candidate_name}")

    return AnalysisResult(
        success=True,
        file_path=file_path,
        candidate_name=extracted.candidate_name,
        resume_text=text,
        extracted_data=extracted,
        timestamp=_timestamp(),
    )
