"""
Resume file analysis.

Reads plain-text resumes from disk and runs them through the analysis flow.
Problems with the source file (missing, unsupported extension, undecodable)
become failure results instead of exceptions, so a batch keeps going past a
bad file.
"""

from pathlib import Path
from typing import List, Optional, Union
import logging

from app.core.config import SUPPORTED_EXTENSIONS
from app.core.schemas import AnalysisResult
from app.core.text_parser import analyze_text, failure_result

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _is_supported(path: Path) -> bool:
    return path.suffix.lower() in SUPPORTED_EXTENSIONS


def analyze_file(file_path: PathLike, reference_year: Optional[int] = None) -> AnalysisResult:
    """
    Read a resume file and analyze it.

    Only .txt/.md files are read, decoded as UTF-8.
    """
    path = Path(file_path)
    logger.info(f"Analyzing resume: {path.name}")

    if not _is_supported(path):
        logger.warning(f"Unsupported resume format '{path.suffix}': {path}")
        return failure_result(
            f"Unsupported file format '{path.suffix or path.name}'. Convert the resume to .txt",
            file_path=str(path),
        )

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning(f"Resume file not found: {path}")
        return failure_result(f"File not found: {path}", file_path=str(path))
    except UnicodeDecodeError as e:
        logger.warning(f"Resume file is not valid UTF-8: {path} ({e.reason})")
        return failure_result(f"Could not decode {path.name} as UTF-8", file_path=str(path))
    except OSError as e:
        logger.warning(f"Error reading file {path}: {e}")
        return failure_result(f"Error reading file {path}: {e.strerror or e}", file_path=str(path))

    return analyze_text(text, file_path=str(path), reference_year=reference_year)


def find_resume_files(directory: PathLike) -> List[Path]:
    """All supported resume files under directory (recursive), sorted by path."""
    root = Path(directory)
    return sorted(p for p in root.rglob("*") if p.is_file() and _is_supported(p))


def batch_analyze(directory: PathLike, reference_year: Optional[int] = None) -> List[AnalysisResult]:
    logger.info(f"Starting batch analysis of resumes in: {directory}")

    files = find_resume_files(directory)
    if not files:
        logger.warning(f"No resume files found in {directory}")
        return []

    results: List[AnalysisResult] = []
    for index, path in enumerate(files, start=1):
        logger.debug(f"[{index}/{len(files)}] Processing: {path.name}")
        results.append(analyze_file(path, reference_year=reference_year))

    logger.info(f"Batch analysis completed. Processed {len(results)} resumes")
    return results
