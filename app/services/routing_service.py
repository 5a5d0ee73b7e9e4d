import re
from typing import List, Optional

from app.core.constants import (
    MASTER_HEADERS,
    MASTER_SHEET,
    PLACEHOLDER,
    REJECTED_SHEET,
    TECH_SHEET_MAP,
    WFH_HEADERS,
    WFH_SHEET,
)
from app.models.enums import ApplicationStatus
from app.schemas.application import ApplicationSubmission


def tech_sheet_name(technology: str) -> str:
    """
    Canonical tab name for a catalog technology; anything else gets its
    whitespace runs collapsed into underscores.
    """
    return TECH_SHEET_MAP.get(technology) or re.sub(r"\s+", "_", technology)


def route_sheets(application: ApplicationSubmission, status: ApplicationStatus) -> List[str]:
    sheets = [MASTER_SHEET]

    if application.is_work_from_home:
        sheets.append(WFH_SHEET)
        return sheets

    if status == ApplicationStatus.Rejected:
        sheets.append(REJECTED_SHEET)
        return sheets

    # One tab per selected technology, duplicates kept on purpose
    for tech in application.technologies:
        sheets.append(tech_sheet_name(tech))

    return sheets


# ------------------------------------------------------------
# ROW LAYOUTS
# ------------------------------------------------------------
def headers_for_sheet(sheet_name: str) -> List[str]:
    if sheet_name == WFH_SHEET:
        return WFH_HEADERS
    return MASTER_HEADERS


def _joined(values: List[str]) -> str:
    return ", ".join(values) if values else PLACEHOLDER


def build_master_row(
    application: ApplicationSubmission,
    timestamp: str,
    score: Optional[int],
    status: ApplicationStatus,
) -> list:
    a = application
    return [
        timestamp,
        a.application_type.value,
        a.full_name,
        a.email,
        a.mobile,
        a.city,
        a.state,
        a.college,
        a.current_year,
        a.degree,
        a.specialization,
        a.cgpa_percentage,
        a.passing_year,
        _joined(a.technologies),
        _joined(a.programming_languages),
        a.frameworks,
        a.database,
        a.github_portfolio,
        a.has_projects,
        a.has_internship,
        a.experience_duration,
        a.mode,
        a.hours_per_day,
        a.duration,
        a.why_select_you,
        a.ready_to_learn,
        a.father_name,
        a.father_occupation,
        a.native_place,
        a.personal_vehicle,
        score if score is not None else PLACEHOLDER,
        # Unscored WFH rows keep the master columns aligned
        status.value if score is not None else PLACEHOLDER,
    ]


def build_wfh_row(application: ApplicationSubmission, timestamp: str) -> list:
    a = application
    return [
        timestamp,
        a.application_type.value,
        a.full_name,
        a.email,
        a.mobile,
        a.city,
        a.state,
        a.college,
        a.degree,
        a.father_name,
        a.father_occupation,
        a.native_place,
        a.personal_vehicle,
        a.reference_source,
    ]


def build_row_for_sheet(
    sheet_name: str,
    application: ApplicationSubmission,
    timestamp: str,
    score: Optional[int],
    status: ApplicationStatus,
) -> list:
    if sheet_name == WFH_SHEET:
        return build_wfh_row(application, timestamp)
    return build_master_row(application, timestamp, score, status)
