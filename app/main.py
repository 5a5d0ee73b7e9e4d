# app/main.py

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import sys
import time
import psutil

from app.core.config import settings
from app.core.rate_limiter import limiter
from app.services.sheets_service import SheetsError, create_sheets_sink

# Routers
from app.api.endpoints import (
    applications as applications_router,
    pages as pages_router,
    sheets as sheets_router,
)

# ------------------------------------------------------------
# LOGURU CONFIGURATION
# ------------------------------------------------------------
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
           "<level>{level}</level> | "
           "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
           "<level>{message}</level>",
    colorize=True,
    backtrace=True,
    diagnose=settings.ENV != "prod",
)

# ------------------------------------------------------------
# FASTAPI APP INIT
# ------------------------------------------------------------
app = FastAPI(
    title="Internship Intake Backend",
    version="1.0.0",
    description="Collects internship and work-from-home applications into Google Sheets.",
)

START_TIME = time.time()

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


# ------------------------------------------------------------
# ERROR HANDLERS
# ------------------------------------------------------------
@app.exception_handler(SheetsError)
async def sheets_error_handler(request: Request, exc: SheetsError):
    logger.error(f"Google Sheets error ({exc.status_code}): {exc.details}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Rejected malformed submission: {len(exc.errors())} error(s)")
    return JSONResponse(
        status_code=422,
        content={
            "error": "Invalid application data",
            "details": jsonable_encoder(exc.errors()),
        },
    )


# ------------------------------------------------------------
# METRICS API
# ------------------------------------------------------------
@app.get("/api/metrics", tags=["System"])
async def metrics(request: Request):
    # 1. System Stats
    uptime_seconds = int(time.time() - START_TIME)
    cpu_usage = psutil.cpu_percent(interval=None)
    ram_usage = psutil.virtual_memory().percent
    try:
        disk_usage = psutil.disk_usage('/').percent
    except OSError:
        disk_usage = 0

    # 2. Spreadsheet Health & Latency Check
    sink = getattr(request.app.state, "sheets_sink", None)
    sheets_latency = 0
    sheets_status = "Not Configured"

    if sink is not None:
        sheets_start = time.time()
        try:
            await run_in_threadpool(sink.describe)
            sheets_status = "Connected"
            sheets_latency = round((time.time() - sheets_start) * 1000, 2)
        except SheetsError:
            sheets_status = "Error"

    # 3. Logs
    current_time = time.strftime("%H:%M:%S")
    logs = [
        {"time": current_time, "level": "INFO", "msg": f"Health check: Sheets Latency {sheets_latency}ms"}
    ]
    if sheets_status != "Connected":
        logs.append({"time": current_time, "level": "ERROR", "msg": f"Google Sheets: {sheets_status}."})

    return {
        "status": "Online",
        "version": app.version,
        "cpu": cpu_usage,
        "ram": ram_usage,
        "disk": disk_usage,
        "uptime": uptime_seconds,
        "sheets": sheets_status,
        "sheets_latency": sheets_latency,
        "logs": logs
    }


# ------------------------------------------------------------
# CORS CONFIGURATION
# ------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        settings.FRONTEND_URL,
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "*"],
)

# ------------------------------------------------------------
# REGISTER ROUTERS
# ------------------------------------------------------------
app.include_router(applications_router.router)
app.include_router(sheets_router.router)
app.include_router(pages_router.router)


# ------------------------------------------------------------
# APPLICATION STARTUP EVENTS
# ------------------------------------------------------------
@app.on_event("startup")
async def on_startup():
    logger.info("Starting Internship Intake Backend...")

    missing = settings.missing_google_settings()
    if missing:
        logger.warning(f"Missing Google Sheets settings: {', '.join(missing)}")

    app.state.sheets_sink = create_sheets_sink(settings)

    if app.state.sheets_sink is not None:
        try:
            info = await run_in_threadpool(app.state.sheets_sink.describe)
            logger.success(f"Connected to Google Sheet '{info['title']}'.")
        except SheetsError as e:
            logger.warning(f"Google Sheet not reachable at startup: {e.details}")

    logger.success("Backend startup completed successfully.\n")


# ------------------------------------------------------------
# ROOT HEALTH CHECK
# ------------------------------------------------------------
@app.get("/", tags=["System"])
async def root():
    return {
        "status": "ok",
        "service": "Internship Intake Backend",
        "version": app.version,
        "message": "Backend running successfully",
        "apply_url": "/apply",
    }
