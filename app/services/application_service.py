from datetime import datetime, timezone
from typing import Optional

from loguru import logger

from app.models.enums import ApplicationStatus
from app.schemas.application import (
    ApplicationSubmission,
    SheetResult,
    SubmissionResponse,
)
from app.services.routing_service import build_row_for_sheet, route_sheets
from app.services.screening_service import (
    calculate_score,
    determine_status,
    normalize_application,
)
from app.services.sheets_service import SheetsError, TabularSink


def screen_application(application: ApplicationSubmission):
    """
    Normalizes, scores and classifies a submission.
    Work From Home applications are accepted as-is and never scored.
    """
    record = normalize_application(application)

    if record.is_work_from_home:
        return record, None, ApplicationStatus.Received

    score = calculate_score(record)
    status = determine_status(record, score)
    return record, score, status


def _thank_you_message(record: ApplicationSubmission, status: ApplicationStatus) -> str:
    if record.is_work_from_home:
        return f"Thank you {record.full_name}! Your work from home application has been received."
    return (
        f"Thank you {record.full_name}! Your application has been received "
        f"and is {status.value.lower()}."
    )


def submit_application(
    application: ApplicationSubmission,
    sink: TabularSink,
    timestamp: Optional[str] = None,
) -> SubmissionResponse:

    # ---------------------------------------
    # 1. Screen
    # ---------------------------------------
    record, score, status = screen_application(application)
    logger.info(
        f"Application from {record.email} ({record.application_type.value}): "
        f"score={score}, status={status.value}"
    )

    # ---------------------------------------
    # 2. Route
    # ---------------------------------------
    sheets = route_sheets(record, status)
    logger.info(f"Sheets to update: {sheets}")

    # ---------------------------------------
    # 3. Make sure every tab + header exists
    #    (connectivity / permission errors propagate)
    # ---------------------------------------
    sink.ensure_tables_exist(sheets)

    # ---------------------------------------
    # 4. Best-effort fan-out, one attempt per destination
    # ---------------------------------------
    timestamp = timestamp or datetime.now(timezone.utc).isoformat()
    results = []
    master_error: Optional[Exception] = None

    for index, sheet in enumerate(sheets):
        row = build_row_for_sheet(sheet, record, timestamp, score, status)
        try:
            sink.append_row(sheet, row)
            results.append(SheetResult(sheet=sheet, success=True))
            logger.success(f"Added to sheet: {sheet}")
        except SheetsError as e:
            logger.error(f"Error writing to sheet {sheet}: {e.details}")
            results.append(SheetResult(sheet=sheet, success=False, error=e.details))
            if index == 0:
                master_error = e
        except Exception as e:
            logger.exception(f"Unexpected error writing to sheet {sheet}")
            results.append(SheetResult(sheet=sheet, success=False, error=str(e) or type(e).__name__))
            if index == 0:
                master_error = e

    # The master tab is the record of truth; without it the submission is lost
    if master_error is not None:
        raise master_error

    return SubmissionResponse(
        message=_thank_you_message(record, status),
        score=score,
        status=status,
        sheets_updated=sheets,
        results=results,
    )
