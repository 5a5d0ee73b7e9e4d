# app/services/sheets_service.py

from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from loguru import logger

from app.core.config import Settings
from app.services.routing_service import headers_for_sheet

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


# ------------------------------------------------------------
# ERRORS
# ------------------------------------------------------------
class SheetsError(Exception):
    status_code = 500
    error = "Failed to write to Google Sheets"

    def __init__(self, details: str, **extra):
        super().__init__(details)
        self.details = details
        self.extra = extra

    def to_response(self) -> dict:
        return {"error": self.error, "details": self.details, **self.extra}


class SheetsConfigError(SheetsError):
    error = "Server configuration error. Missing environment variables."

    def __init__(self, missing: List[str]):
        super().__init__(", ".join(missing), missing=missing)
        self.missing = missing

    def to_response(self) -> dict:
        return {"error": self.error, "details": self.missing}


class SheetNotFoundError(SheetsError):
    status_code = 404
    error = "Google Sheet not found"


class SheetPermissionError(SheetsError):
    status_code = 403
    error = "Permission denied to access Google Sheet"


class SheetsUnavailableError(SheetsError):
    error = "Could not reach Google Sheets"


def column_letter(index: int) -> str:
    """1 -> A, 26 -> Z, 32 -> AF"""
    letters = ""
    while index > 0:
        index, rem = divmod(index - 1, 26)
        letters = chr(65 + rem) + letters
    return letters


def a1_range(sheet_name: str, cells: str) -> str:
    escaped = sheet_name.replace("'", "''")
    return f"'{escaped}'!{cells}"


# ------------------------------------------------------------
# SINK INTERFACE
# ------------------------------------------------------------
class TabularSink(ABC):
    """Append-only storage keyed by table (tab) name."""

    @abstractmethod
    def ensure_tables_exist(self, names: Iterable[str]) -> None:
        """Creates missing tables and writes their header row. Idempotent."""

    @abstractmethod
    def append_row(self, table_name: str, row: list) -> None:
        """Appends one row; raises a SheetsError when the table is unreachable."""

    @abstractmethod
    def describe(self) -> Dict:
        """Title and table names of the underlying store."""


# ------------------------------------------------------------
# GOOGLE SHEETS
# ------------------------------------------------------------
class GoogleSheetsSink(TabularSink):
    def __init__(self, settings: Settings, service=None):
        missing = settings.missing_google_settings()
        if missing:
            raise SheetsConfigError(missing)

        self.sheet_id = settings.GOOGLE_SHEET_ID
        self.client_email = settings.GOOGLE_CLIENT_EMAIL

        if service is None:
            try:
                credentials = service_account.Credentials.from_service_account_info(
                    settings.service_account_info(), scopes=SCOPES
                )
            except ValueError as e:
                raise SheetsUnavailableError(
                    f"Invalid service account credentials: {e}"
                ) from e
            logger.info(f"Creating Sheets client for {self.client_email}")
            service = build("sheets", "v4", credentials=credentials, cache_discovery=False)

        self.service = service

    # --------------------------------------------------------
    # Request execution + error translation
    # --------------------------------------------------------
    def _execute(self, request):
        try:
            return request.execute()
        except HttpError as e:
            raise self._translate_http_error(e) from e
        except GoogleAuthError as e:
            raise SheetsUnavailableError(
                f"Authentication failed. Check if the private key is correctly formatted ({e})"
            ) from e
        except (OSError, httplib2.HttpLib2Error) as e:
            raise SheetsUnavailableError(f"Could not reach Google Sheets: {e}") from e

    def _translate_http_error(self, error: HttpError) -> SheetsError:
        status = getattr(error.resp, "status", None)
        if status == 404:
            return SheetNotFoundError(
                "The sheet ID is invalid or the sheet has been deleted",
                sheetId=self.sheet_id,
            )
        if status == 403:
            return SheetPermissionError(
                f"Please share the sheet with: {self.client_email}",
                sheetId=self.sheet_id,
            )
        return SheetsUnavailableError(str(error), code=status)

    # --------------------------------------------------------
    # Sink operations
    # --------------------------------------------------------
    def describe(self) -> Dict:
        response = self._execute(
            self.service.spreadsheets().get(
                spreadsheetId=self.sheet_id,
                fields="properties.title,sheets.properties.title,sheets.properties.sheetId",
            )
        )
        sheets = response.get("sheets", [])
        return {
            "title": response.get("properties", {}).get("title"),
            "tabs": [s["properties"]["title"] for s in sheets],
            "tab_ids": {s["properties"]["title"]: s["properties"].get("sheetId") for s in sheets},
        }

    def ensure_tables_exist(self, names: Iterable[str]) -> None:
        wanted = list(dict.fromkeys(names))
        existing = self.describe()["tabs"]

        missing = [name for name in wanted if name not in existing]
        if missing:
            self._execute(
                self.service.spreadsheets().batchUpdate(
                    spreadsheetId=self.sheet_id,
                    body={"requests": [{"addSheet": {"properties": {"title": name}}} for name in missing]},
                )
            )
            logger.info(f"Created missing sheets: {', '.join(missing)}")

        # Refresh ids so new tabs can get a filter
        tab_ids = self.describe()["tab_ids"]
        filter_requests = []

        for name in wanted:
            header_check = self._execute(
                self.service.spreadsheets().values().get(
                    spreadsheetId=self.sheet_id, range=a1_range(name, "A1:A1")
                )
            )
            if header_check.get("values"):
                continue

            headers = headers_for_sheet(name)
            last_col = column_letter(len(headers))
            self._execute(
                self.service.spreadsheets().values().update(
                    spreadsheetId=self.sheet_id,
                    range=a1_range(name, f"A1:{last_col}1"),
                    valueInputOption="RAW",
                    body={"values": [headers]},
                )
            )

            tab_id = tab_ids.get(name)
            if tab_id is not None:
                filter_requests.append({
                    "setBasicFilter": {
                        "filter": {
                            "range": {
                                "sheetId": tab_id,
                                "startRowIndex": 0,
                                "endRowIndex": 1,
                                "startColumnIndex": 0,
                                "endColumnIndex": len(headers),
                            }
                        }
                    }
                })

        if filter_requests:
            self._execute(
                self.service.spreadsheets().batchUpdate(
                    spreadsheetId=self.sheet_id, body={"requests": filter_requests}
                )
            )
            logger.info("Added headers and auto-filters to sheets")

    def append_row(self, table_name: str, row: list) -> None:
        last_col = column_letter(len(headers_for_sheet(table_name)))
        self._execute(
            self.service.spreadsheets().values().append(
                spreadsheetId=self.sheet_id,
                range=a1_range(table_name, f"A:{last_col}"),
                valueInputOption="RAW",
                body={"values": [row]},
            )
        )


def create_sheets_sink(settings: Settings) -> Optional[GoogleSheetsSink]:
    """
    Builds the production sink at startup. Returns None (and logs) when
    credentials are missing so the app can still boot and report it.
    """
    try:
        return GoogleSheetsSink(settings)
    except SheetsError as e:
        logger.warning(f"Google Sheets sink not configured: {e.details}")
        return None
