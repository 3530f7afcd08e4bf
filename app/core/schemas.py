from pydantic import BaseModel, Field
from typing import List, Optional


INSTITUTION_PLACEHOLDER = "Institution not specified"
DURATION_PLACEHOLDER = "Duration not specified"
UNKNOWN_CANDIDATE = "Unknown"


class ContactInfo(BaseModel):
    """Contact details found in the resume. None means the pattern never matched."""
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None  # City, ST or City, Country


class EducationEntry(BaseModel):
    """Education entry in extracted data."""
    degree: str = Field(..., description="Capitalized degree type followed by the field text")
    institution: str = INSTITUTION_PLACEHOLDER


class WorkEntry(BaseModel):
    title: str
    company: str
    duration: str = DURATION_PLACEHOLDER


class ExtractedData(BaseModel):
    candidate_name: str = UNKNOWN_CANDIDATE
    skills: List[str] = Field(default_factory=list, description="Lower-cased, in vocabulary order")
    total_years_experience: float = 0.0
    education: List[EducationEntry] = Field(default_factory=list)
    contact_info: ContactInfo = Field(default_factory=ContactInfo)
    work_experience: List[WorkEntry] = Field(default_factory=list, description="At most 5 entries")


class AnalysisResult(BaseModel):
    success: bool
    error: Optional[str] = None
    file_path: Optional[str] = None
    candidate_name: Optional[str] = None
    resume_text: Optional[str] = None
    extracted_data: Optional[ExtractedData] = None
    timestamp: str = Field(..., description="ISO-8601 time the analysis finished")


class ResumeTextRequest(BaseModel):
    text: str = Field(..., description="Plain-text resume body")
    reference_year: Optional[int] = Field(
        default=None,
        description="Year used by the experience estimate when no explicit 'N years experience' phrase exists",
    )


class CandidateSummary(BaseModel):
    candidate_name: str
    summary: str
