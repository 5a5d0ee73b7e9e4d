from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.deps import get_sheets_sink
from app.core.rate_limiter import limiter, submission_limit
from app.schemas.application import ApplicationSubmission, SubmissionResponse
from app.services.application_service import submit_application
from app.services.sheets_service import SheetsError, TabularSink

router = APIRouter(
    prefix="/api",
    tags=["Applications"]
)


# ------------------------------------------------------------
# SUBMIT APPLICATION (Internship + Work From Home)
# ------------------------------------------------------------
@router.post("/submit-application", response_model=SubmissionResponse)
@limiter.limit(submission_limit)
async def submit(
    request: Request,
    payload: ApplicationSubmission,
    sink: TabularSink = Depends(get_sheets_sink),
):
    logger.info(
        f"Application submission started: {payload.full_name} <{payload.email}> "
        f"technologies={payload.technologies}"
    )

    try:
        # Google client calls are blocking
        result = await run_in_threadpool(submit_application, payload, sink)
    except SheetsError:
        # Mapped to 403 / 404 / 500 by the handler in main.py
        raise
    except Exception as e:
        logger.exception("Fatal error processing application")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Failed to process application",
                "details": str(e) or "Unknown error",
            },
        )

    logger.success(f"Application submission completed: {result.status.value}")
    return result
