"""
Buffalo Dashboard FastAPI Application - Main entry point.

Serves the REST API used by the admin UI and the managed app:

- /api/config - App name and API endpoint (single record)
- /api/buttons - Button links shown in the managed app
- /api/auth - Admin login and token verification
- /api/health - Health check

With RESTRICTED_MODE enabled, link creation and deletion are disabled,
only url/description edits are accepted, and mutating routes require a
bearer token from /api/auth/login.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError

from buffalo_dashboard import __version__
from buffalo_dashboard.api.v1 import api_router
from buffalo_dashboard.core.config import settings
from buffalo_dashboard.core.exceptions import AppError, StoreError, ValidationError
from buffalo_dashboard.core.logging import configure_logging
from buffalo_dashboard.db.base import async_session_maker, init_db
from buffalo_dashboard.schemas.common import HealthResponse
from buffalo_dashboard.seed import seed_defaults

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    await init_db()
    if settings.SEED_ON_STARTUP:
        async with async_session_maker() as session:
            await seed_defaults(session, settings)
            await session.commit()
    logger.info(
        f"{settings.APP_NAME} started (restricted_mode={settings.RESTRICTED_MODE})"
    )
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    description="Admin backend for managed app button links and configuration.",
    lifespan=lifespan,
    docs_url=f"{settings.API_PREFIX}/docs" if settings.DEBUG else None,
    redoc_url=f"{settings.API_PREFIX}/redoc" if settings.DEBUG else None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# HEALTH CHECK
# ============================================================================

@app.get(f"{settings.API_PREFIX}/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(code=200, message="API is healthy.")


# ============================================================================
# API ENDPOINTS
# ============================================================================

app.include_router(api_router, prefix=settings.API_PREFIX)


# ============================================================================
# ERROR HANDLERS
# Every failure is returned as {"success": false, "message": ...}
# ============================================================================

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    """Domain errors raised by the service layer."""
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are reported as 400 like other validation errors."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        message = ValidationError.default_message
    return _error_response(ValidationError.status_code, message)


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Database failures."""
    logger.exception(f"Database error on {request.method} {request.url.path}")
    message = str(exc) if settings.DEBUG else StoreError.default_message
    return _error_response(StoreError.status_code, message)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    if settings.DEBUG:
        return _error_response(500, str(exc))
    return _error_response(500, "Internal server error")


# ============================================================================
# STATIC ADMIN UI
# Mounted last so API routes take precedence.
# ============================================================================

if settings.STATIC_DIR and Path(settings.STATIC_DIR).is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "buffalo_dashboard.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG
    )
