# app/api/deps.py

from fastapi import Request

from app.core.config import settings
from app.services.sheets_service import GoogleSheetsSink, TabularSink


# ------------------------------------------------------------
# Sheets sink (built at startup, retried lazily if it failed)
# ------------------------------------------------------------
def get_sheets_sink(request: Request) -> TabularSink:
    sink = getattr(request.app.state, "sheets_sink", None)
    if sink is None:
        # Raises SheetsConfigError listing the missing variables
        sink = GoogleSheetsSink(settings)
        request.app.state.sheets_sink = sink
    return sink
