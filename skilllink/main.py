# skilllink/main.py
"""
SkillLink API server.

Skill-exchange marketplace: users advertise skills, post learning requests,
accept each other's requests and schedule meetings.
"""
import logging
import time
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from skilllink import models  # noqa: F401 - register tables on Base.metadata
from skilllink.api import admin, auth, requests, sessions, skills
from skilllink.config import settings
from skilllink.database import Base, engine
from skilllink.errors import SkillLinkError

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create database tables
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="SkillLink API", version="1.0.0")

UPLOAD_DIR = Path(settings.UPLOAD_DIR)
UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
app.mount("/uploads", StaticFiles(directory=str(UPLOAD_DIR)), name="uploads")

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "%s %s - Status: %s - Duration: %.2fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


# ======================
# ERROR HANDLERS
# ======================
def _message_response(status_code: int, message: str, headers=None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message}, headers=headers)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = ".".join(location)
    message = first.get("msg", "Invalid value")
    return f"{field}: {message}" if field else message


@app.exception_handler(SkillLinkError)
async def skilllink_error_handler(request: Request, exc: SkillLinkError):
    return _message_response(exc.status_code, exc.message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _message_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return _message_response(status.HTTP_400_BAD_REQUEST, _validation_message(exc))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions"""
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    return _message_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred",
    )


# API routers
app.include_router(auth.router, prefix="/api")      # /api/auth/*
app.include_router(admin.router, prefix="/api")     # /api/admin/*
app.include_router(requests.router, prefix="/api")  # /api/requests/*
app.include_router(sessions.router, prefix="/api")  # /api/sessions/*
app.include_router(skills.router, prefix="/api")    # /api/skills/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillLink API is running",
        "version": app.version,
    }
