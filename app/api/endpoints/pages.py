from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from app.core.constants import (
    DEGREES,
    PROGRAMMING_LANGUAGES,
    REFERENCE_SOURCES,
    TECHNOLOGIES,
)
from app.models.enums import CurrentYear, HoursPerDay, WorkMode

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))

router = APIRouter(
    prefix="/apply",
    tags=["Forms"],
    include_in_schema=False,
)


@router.get("")
async def landing(request: Request):
    return templates.TemplateResponse(request, "index.html", {})


@router.get("/internship")
async def internship_form(request: Request):
    return templates.TemplateResponse(
        request,
        "internship.html",
        {
            "technologies": TECHNOLOGIES,
            "languages": PROGRAMMING_LANGUAGES,
            "degrees": DEGREES,
            "years": [y.value for y in CurrentYear],
            "hours": [h.value for h in HoursPerDay],
            "modes": [m.value for m in WorkMode],
            "durations": ["1", "2", "3", "6"],
        },
    )


@router.get("/work-from-home")
async def work_from_home_form(request: Request):
    return templates.TemplateResponse(
        request,
        "work_from_home.html",
        {"degrees": DEGREES, "reference_sources": REFERENCE_SOURCES},
    )
