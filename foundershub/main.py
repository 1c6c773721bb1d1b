"""FastAPI application for Founders Hub."""
import os

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.orm import Session
from starlette.exceptions import HTTPException as StarletteHTTPException

from foundershub.api.deps import get_db
from foundershub.api.v1.router import api_router
from foundershub.core.config import settings
from foundershub.core.logging_config import get_logger, setup_logging
from foundershub.core.rate_limit import limiter
from foundershub.middleware import LoggingMiddleware

setup_logging(level=settings.LOG_LEVEL)
logger = get_logger(__name__)

# Checked after logging is up so the failure is reported
settings.validate_production_config()

# Paths the SPA catch-all must never answer for
RESERVED_PREFIXES = ("api", "docs", "redoc", "openapi.json")


def error_response(status_code: int, message: str, headers=None) -> JSONResponse:
    """Every failure is reported as {"error": message}."""
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def validation_message(exc: RequestValidationError) -> str:
    """First validation problem, phrased for humans."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = str(first.get("msg", "Invalid request"))
    # Messages from our field validators arrive as "Value error, <text>"
    if message.startswith("Value error, "):
        return message[len("Value error, "):]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        # Malformed bodies and params are client errors, never 422
        return error_response(400, validation_message(exc))

    @app.exception_handler(RateLimitExceeded)
    async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
        logger.warning("rate_limit_exceeded", limit=str(exc.detail))
        return error_response(429, f"Rate limit exceeded: {exc.detail}")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", exception_type=type(exc).__name__, exc_info=exc)
        return error_response(500, "Internal server error")


def mount_frontend(app: FastAPI, build_path: str) -> None:
    """Serve a built single-page frontend, falling back to index.html."""
    build_root = os.path.realpath(build_path)
    index_file = os.path.join(build_root, "index.html")

    assets_path = os.path.join(build_root, "assets")
    if os.path.isdir(assets_path):
        app.mount("/assets", StaticFiles(directory=assets_path), name="assets")

    @app.get("/", response_class=FileResponse, include_in_schema=False)
    async def serve_index():
        return FileResponse(index_file)

    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str):
        if full_path.startswith(RESERVED_PREFIXES):
            raise HTTPException(status_code=404, detail="Not found")

        candidate = os.path.realpath(os.path.join(build_root, full_path))
        if candidate.startswith(build_root + os.sep) and os.path.isfile(candidate):
            return FileResponse(candidate)

        # Unknown paths belong to client-side routing
        return FileResponse(index_file)


logger.info(
    "application_starting",
    app_title=settings.APP_TITLE,
    app_version=settings.APP_VERSION,
    environment=settings.ENVIRONMENT,
)

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION
)
app.state.limiter = limiter
register_exception_handlers(app)

app.add_middleware(LoggingMiddleware)


@app.middleware("http")
async def add_api_version_header(request: Request, call_next):
    """Add X-API-Version header to all responses for version tracking."""
    response = await call_next(request)
    response.headers["X-API-Version"] = settings.APP_VERSION
    return response

# Bearer tokens travel in headers, so no credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Request-ID", "X-API-Version"],
)

app.include_router(api_router)


# Registered ahead of the frontend catch-all
@app.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """
    Liveness plus a database round trip.

    Returns 503 with ``database.status == "error"`` if the database is unreachable.
    """
    payload = {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": {"status": "connected"},
    }

    try:
        db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("health_check_failed", error=str(e))
        payload["status"] = "unhealthy"
        payload["database"]["status"] = "error"
        return JSONResponse(status_code=503, content=payload)

    return payload


if os.path.isdir(settings.FRONTEND_BUILD_PATH):
    mount_frontend(app, settings.FRONTEND_BUILD_PATH)
