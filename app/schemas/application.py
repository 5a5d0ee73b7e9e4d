# app/schemas/application.py

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import List, Optional

from app.models.enums import ApplicationStatus, ApplicationType


# Everything except identity may be left blank on the forms
OPTIONAL_TEXT_FIELDS = (
    "city",
    "state",
    "college",
    "current_year",
    "degree",
    "specialization",
    "cgpa_percentage",
    "passing_year",
    "frameworks",
    "database",
    "github_portfolio",
    "has_projects",
    "has_internship",
    "experience_duration",
    "mode",
    "hours_per_day",
    "duration",
    "why_select_you",
    "ready_to_learn",
    "father_name",
    "father_occupation",
    "native_place",
    "personal_vehicle",
    "reference_source",
)

LIST_FIELDS = ("technologies", "programming_languages")


# ============================================================
# APPLICATION SUBMISSION (Internship + Work From Home forms)
# ============================================================
class ApplicationSubmission(BaseModel):
    # Identity (required)
    full_name: str = Field(min_length=1)
    email: EmailStr
    mobile: str = Field(min_length=1)

    # Demographic
    city: Optional[str] = None
    state: Optional[str] = None
    college: Optional[str] = None

    # Academic
    current_year: Optional[str] = None
    degree: Optional[str] = None
    specialization: Optional[str] = None
    cgpa_percentage: Optional[str] = None
    passing_year: Optional[str] = None

    # Skills
    technologies: List[str] = Field(default_factory=list)
    programming_languages: List[str] = Field(default_factory=list)
    frameworks: Optional[str] = None
    database: Optional[str] = None
    github_portfolio: Optional[str] = None

    # Experience
    has_projects: Optional[str] = None
    has_internship: Optional[str] = None
    experience_duration: Optional[str] = None

    # Availability
    mode: Optional[str] = None
    hours_per_day: Optional[str] = None
    duration: Optional[str] = None

    # Motivation
    why_select_you: Optional[str] = None
    ready_to_learn: Optional[str] = None

    application_type: ApplicationType = ApplicationType.Internship

    # Work From Home only
    father_name: Optional[str] = None
    father_occupation: Optional[str] = None
    native_place: Optional[str] = None
    personal_vehicle: Optional[str] = None
    reference_source: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        str_strip_whitespace = True
        frozen = True

    @field_validator(
        "mobile",
        "cgpa_percentage",
        "passing_year",
        "experience_duration",
        "duration",
        mode="before",
    )
    def numbers_as_text(cls, v):
        # Selects and number inputs may post 6 instead of "6"
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("technologies", "programming_languages", mode="before")
    def unique_in_order(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple, set)):
            return v
        cleaned = [str(item).strip() for item in v if item is not None]
        return list(dict.fromkeys(item for item in cleaned if item))

    @property
    def is_work_from_home(self) -> bool:
        return self.application_type == ApplicationType.WorkFromHome


# ============================================================
# SUBMISSION RESPONSE
# ============================================================
class SheetResult(BaseModel):
    sheet: str
    success: bool
    error: Optional[str] = None


class SubmissionResponse(BaseModel):
    success: bool = True
    message: str
    score: Optional[int] = None
    status: ApplicationStatus
    sheets_updated: List[str]
    results: List[SheetResult]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
