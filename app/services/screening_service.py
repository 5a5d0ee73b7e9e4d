from app.core.constants import PLACEHOLDER, SHORTLIST_THRESHOLD
from app.models.enums import ApplicationStatus, CurrentYear, HoursPerDay
from app.schemas.application import (
    ApplicationSubmission,
    LIST_FIELDS,
    OPTIONAL_TEXT_FIELDS,
)

SENIOR_YEARS = {CurrentYear.Final.value, CurrentYear.Passout.value}
COMMITTED_HOURS = {HoursPerDay.Medium.value, HoursPerDay.FullTime.value}


def _is_provided(value) -> bool:
    return bool(value) and value != PLACEHOLDER


# ------------------------------------------------------------
# NORMALIZER
# ------------------------------------------------------------
def normalize_application(application: ApplicationSubmission) -> ApplicationSubmission:
    """
    Returns a copy where every optional text field is either the submitted
    value or the placeholder, and list fields are lists. Never fails.
    """
    updates = {}

    for field in OPTIONAL_TEXT_FIELDS:
        value = getattr(application, field)
        if value is None or not str(value).strip():
            updates[field] = PLACEHOLDER

    for field in LIST_FIELDS:
        if getattr(application, field) is None:
            updates[field] = []

    if not updates:
        return application
    return application.model_copy(update=updates)


# ------------------------------------------------------------
# SCORING (0 - 100)
# ------------------------------------------------------------
def calculate_score(application: ApplicationSubmission) -> int:
    score = 0

    # GitHub / Portfolio link
    if _is_provided(application.github_portfolio):
        score += 20

    # Real projects
    if application.has_projects == "yes":
        score += 25

    # Final year / Passout
    if application.current_year in SENIOR_YEARS:
        score += 15

    # 4+ hours availability
    if application.hours_per_day in COMMITTED_HOURS:
        score += 20

    # Prior internship
    if application.has_internship == "yes":
        score += 20

    return score


# ------------------------------------------------------------
# STATUS (auto-reject rules run before the threshold)
# ------------------------------------------------------------
def determine_status(application: ApplicationSubmission, score: int) -> ApplicationStatus:
    if not application.programming_languages:
        return ApplicationStatus.Rejected

    if application.has_projects == "no" and application.ready_to_learn == "no":
        return ApplicationStatus.Rejected

    if application.hours_per_day == HoursPerDay.Low.value and application.duration == "1":
        return ApplicationStatus.Rejected

    if score >= SHORTLIST_THRESHOLD:
        return ApplicationStatus.Shortlisted

    return ApplicationStatus.UnderReview
