from typing import List

from app.core.schemas import AnalysisResult, UNKNOWN_CANDIDATE

NO_CANDIDATE_DATA = "No candidate data available"


def _format_years(years: float) -> str:
    # 5.0 -> "5", 2.5 -> "2.5"
    return f"{years:g}"


def prepare_candidate_summary(result: AnalysisResult) -> str:
    """
    Condense an analysis result into the short plain-text profile used for
    screening and interview-question prompts.

    Example:
      Candidate: Jane Doe
      Experience: 5 years
      Skills: python, sql
      Education: Bachelor Computer Science from Institution not specified
    """
    data = result.extracted_data
    if data is None:
        return NO_CANDIDATE_DATA

    summary: List[str] = [
        f"Candidate: {result.candidate_name or UNKNOWN_CANDIDATE}",
        f"Experience: {_format_years(data.total_years_experience)} years",
        f"Skills: {', '.join(data.skills) if data.skills else 'Not specified'}",
    ]

    if data.education:
        first = data.education[0]
        summary.append(f"Education: {first.degree} from {first.institution}")

    return "\n".join(summary)
