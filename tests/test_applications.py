import pytest

from app.core.config import REQUIRED_GOOGLE_SETTINGS, settings
from app.main import app
from app.services.sheets_service import SheetNotFoundError, SheetPermissionError


@pytest.mark.asyncio
async def test_submit_internship_application(client, sink, internship_payload):
    res = await client.post("/api/submit-application", json=internship_payload)
    assert res.status_code == 200

    data = res.json()
    assert data["success"] is True
    assert data["score"] == 100
    assert data["status"] == "Shortlisted"
    assert data["sheetsUpdated"] == ["All_Applications", "Web_Development", "AI_ML"]
    assert "Asha Verma" in data["message"]
    assert len(sink.tables["All_Applications"]) == 2


@pytest.mark.asyncio
async def test_internship_is_the_default_type(client, internship_payload):
    internship_payload.pop("applicationType")

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 200
    assert res.json()["score"] == 100


@pytest.mark.asyncio
async def test_rejected_application_returns_200(client, internship_payload):
    internship_payload["programmingLanguages"] = []

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 200
    assert res.json()["status"] == "Rejected"
    assert res.json()["sheetsUpdated"] == ["All_Applications", "Rejected"]


@pytest.mark.asyncio
async def test_submit_work_from_home_application(client, sink, wfh_payload):
    res = await client.post("/api/submit-application", json=wfh_payload)
    assert res.status_code == 200

    data = res.json()
    assert data["score"] is None
    assert data["status"] == "Received"
    assert data["sheetsUpdated"] == ["All_Applications", "WFH_Applications"]
    assert sink.tables["WFH_Applications"][1][2] == "Ravi Kumar"


@pytest.mark.asyncio
async def test_numeric_fields_are_accepted(client, internship_payload):
    internship_payload.update({"duration": 1, "hoursPerDay": "2-3", "passingYear": 2025})

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 200
    assert res.json()["status"] == "Rejected"


@pytest.mark.asyncio
async def test_missing_required_field_is_422(client, sink, internship_payload):
    internship_payload.pop("email")

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 422
    assert res.json()["error"] == "Invalid application data"
    assert sink.appended == []


@pytest.mark.asyncio
async def test_blank_name_is_422(client, internship_payload):
    internship_payload["fullName"] = "   "

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 422


@pytest.mark.asyncio
async def test_permission_denied_maps_to_403(client, sink, internship_payload):
    def deny(names):
        raise SheetPermissionError("Please share the sheet with: bot@example.com", sheetId="abc")
    sink.ensure_tables_exist = deny

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 403
    assert res.json()["error"] == "Permission denied to access Google Sheet"
    assert res.json()["sheetId"] == "abc"


@pytest.mark.asyncio
async def test_missing_spreadsheet_maps_to_404(client, sink, internship_payload):
    def missing(names):
        raise SheetNotFoundError("The sheet ID is invalid or the sheet has been deleted")
    sink.ensure_tables_exist = missing

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 404


@pytest.mark.asyncio
async def test_missing_configuration_is_500(client, internship_payload, monkeypatch):
    app.state.sheets_sink = None
    for name in REQUIRED_GOOGLE_SETTINGS:
        monkeypatch.setattr(settings, name, None)

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 500
    assert res.json()["details"] == list(REQUIRED_GOOGLE_SETTINGS)


@pytest.mark.asyncio
async def test_unexpected_master_error_is_500(client, sink, internship_payload):
    def explode(table_name, row):
        raise RuntimeError("boom")
    sink.append_row = explode

    res = await client.post("/api/submit-application", json=internship_payload)

    assert res.status_code == 500
    assert res.json() == {"error": "Failed to process application", "details": "boom"}
