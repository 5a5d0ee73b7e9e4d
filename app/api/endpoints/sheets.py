from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from loguru import logger

from app.api.deps import get_sheets_sink
from app.core.config import settings
from app.services.sheets_service import SheetsConfigError, SheetsError

router = APIRouter(
    prefix="/api",
    tags=["Sheets"]
)


# ------------------------------------------------------------
# CONNECTION TEST (setup diagnostics)
# ------------------------------------------------------------
@router.get("/test-sheets")
async def test_sheets(request: Request):
    try:
        sink = get_sheets_sink(request)
    except SheetsConfigError as e:
        return {
            "success": False,
            "error": "Missing environment variables",
            "missing": e.missing,
        }

    try:
        info = await run_in_threadpool(sink.describe)
    except SheetsError as e:
        logger.error(f"Connection test failed: {e.details}")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": "Failed to connect to Google Sheets",
                "details": e.to_response(),
                "serviceAccount": settings.GOOGLE_CLIENT_EMAIL,
                "sheetId": settings.GOOGLE_SHEET_ID,
            },
        )

    logger.info(f"Connected to sheet '{info['title']}' with tabs {info['tabs']}")
    return {
        "success": True,
        "message": "Successfully connected to Google Sheets",
        "sheetTitle": info["title"],
        "existingTabs": info["tabs"],
        "serviceAccount": settings.GOOGLE_CLIENT_EMAIL,
        "sheetId": settings.GOOGLE_SHEET_ID,
    }
