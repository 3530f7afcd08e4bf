from typing import Optional

from fastapi import APIRouter, UploadFile, File, HTTPException
from starlette.concurrency import run_in_threadpool

from app.core.config import MAX_UPLOAD_BYTES, SUPPORTED_EXTENSIONS, get_reference_year
from app.core.candidate_summary import prepare_candidate_summary
from app.core.schemas import AnalysisResult, CandidateSummary, ResumeTextRequest
from app.core.text_normalization import is_blank
from app.core.text_parser import analyze_text

router = APIRouter(tags=["parse"])

TEXT_CONTENT_TYPES = {"text/plain", "text/markdown"}


def _reference_year(requested: Optional[int]) -> Optional[int]:
    return requested if requested is not None else get_reference_year()


def _require_text(text: str) -> None:
    if is_blank(text):
        raise HTTPException(status_code=422, detail="Resume text is empty.")


@router.post(
    "/parse",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    summary="Parse Resume",
    description="Extract structured candidate information from a plain-text resume file (TXT or MD).",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "success": True,
                        "file_path": "resume.txt",
                        "candidate_name": "John Doe",
                        "resume_text": "John Doe\nSoftware Engineer at Tech Corp\n...",
                        "extracted_data": {
                            "candidate_name": "John Doe",
                            "skills": ["python", "sql", "docker"],
                            "total_years_experience": 5.0,
                            "education": [
                                {
                                    "degree": "Bachelor Computer Science",
                                    "institution": "Institution not specified"
                                }
                            ],
                            "contact_info": {
                                "email": "john@example.com",
                                "phone": "(555) 123-4567",
                                "location": "Austin, TX"
                            },
                            "work_experience": [
                                {
                                    "title": "Software Engineer",
                                    "company": "Tech Corp",
                                    "duration": "Duration not specified"
                                }
                            ]
                        },
                        "timestamp": "2024-05-01T10:15:00"
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File too large"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File has no extractable text"}
    }
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (TXT or MD format)")
):
    """
    Parse a resume file and extract candidate information.

    **Supported formats:**
    - TXT (.txt)
    - Markdown (.md)

    Convert PDF/DOCX resumes to plain text first.
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"File exceeds {MAX_UPLOAD_BYTES} bytes.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").split(";")[0].strip().lower()

    if content_type not in TEXT_CONTENT_TYPES and not filename.endswith(SUPPORTED_EXTENSIONS):
        raise HTTPException(status_code=415, detail=f"Unsupported content type: {file.content_type}")

    text = raw.decode("utf-8", errors="replace")
    _require_text(text)
    # Extraction runs off the event loop
    return await run_in_threadpool(
        analyze_text, text, file_path=file.filename, reference_year=_reference_year(None)
    )


@router.post(
    "/parse/text",
    response_model=AnalysisResult,
    response_model_exclude_none=True,
    summary="Parse Resume Text",
    description="Extract structured candidate information from resume text sent in the request body.",
)
def parse_resume_text(request: ResumeTextRequest):
    _require_text(request.text)
    return analyze_text(request.text, reference_year=_reference_year(request.reference_year))


@router.post(
    "/summary",
    response_model=CandidateSummary,
    summary="Candidate Summary",
    description="Short plain-text candidate profile suitable for screening prompts.",
)
def candidate_summary(request: ResumeTextRequest):
    _require_text(request.text)
    result = analyze_text(request.text, reference_year=_reference_year(request.reference_year))
    return CandidateSummary(
        candidate_name=result.candidate_name,
        summary=prepare_candidate_summary(result),
    )
