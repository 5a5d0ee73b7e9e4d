import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from app.main import app
from app.core.rate_limiter import limiter
from app.schemas.application import ApplicationSubmission
from app.services.routing_service import headers_for_sheet
from app.services.sheets_service import SheetsUnavailableError, TabularSink


class InMemorySink(TabularSink):
    """Stands in for the spreadsheet; tabs are plain lists of rows."""

    def __init__(self, fail_on=()):
        self.tables = {}
        self.appended = []
        self.ensure_calls = []
        self.fail_on = set(fail_on)

    def ensure_tables_exist(self, names):
        names = list(names)
        self.ensure_calls.append(names)
        for name in names:
            self.tables.setdefault(name, [headers_for_sheet(name)])

    def append_row(self, table_name, row):
        if table_name in self.fail_on:
            raise SheetsUnavailableError(f"Unable to append to {table_name}")
        self.tables[table_name].append(list(row))
        self.appended.append((table_name, list(row)))

    def describe(self):
        return {"title": "Test Applications", "tabs": list(self.tables), "tab_ids": {}}


@pytest.fixture
def make_sink():
    return InMemorySink


@pytest.fixture
def sink():
    return InMemorySink()


@pytest.fixture
def internship_payload():
    # Scores 100 and clears every auto-reject rule
    return {
        "fullName": "Asha Verma",
        "email": "asha.verma@example.com",
        "mobile": "9876543210",
        "city": "Indore",
        "state": "Madhya Pradesh",
        "college": "IPS Academy",
        "currentYear": "Final",
        "degree": "B.Tech",
        "specialization": "Computer Science",
        "cgpaPercentage": "8.4",
        "passingYear": "2025",
        "technologies": ["Web Development", "AI / ML"],
        "programmingLanguages": ["Python", "JavaScript"],
        "frameworks": "React, FastAPI",
        "database": "PostgreSQL",
        "githubPortfolio": "https://github.com/ashaverma",
        "hasProjects": "yes",
        "hasInternship": "yes",
        "experienceDuration": "3 months",
        "mode": "Remote",
        "hoursPerDay": "4-6",
        "duration": "3",
        "whySelectYou": "I ship side projects every month.",
        "readyToLearn": "yes",
        "applicationType": "Internship",
    }


@pytest.fixture
def wfh_payload():
    return {
        "fullName": "Ravi Kumar",
        "email": "ravi.kumar@example.com",
        "mobile": "9123456780",
        "city": "Bhopal",
        "state": "Madhya Pradesh",
        "college": "Bhopal",
        "degree": "BCA",
        "fatherName": "Suresh Kumar",
        "fatherOccupation": "Farmer",
        "nativePlace": "Sehore",
        "personalVehicle": "yes",
        "referenceSource": "instagram",
        "applicationType": "Work From Home",
    }


@pytest.fixture
def make_application(internship_payload):
    def _make(**overrides):
        return ApplicationSubmission.model_validate({**internship_payload, **overrides})
    return _make


@pytest_asyncio.fixture
async def client(sink):
    """
    httpx >= 0.27 client over ASGITransport.
    Startup events do not run here, so the sink is placed on app.state directly.
    """
    limiter.enabled = False
    app.state.sheets_sink = sink
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
    app.state.sheets_sink = None
    limiter.enabled = True
