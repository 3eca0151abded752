"""
BadGateway - FastAPI Application Entry Point

Local API behind the BadGateway desktop request tool: executes
requests, imports cURL commands, highlights JSON responses and keeps
a summary history.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from .config import get_settings
from .database import init_db
from .exceptions import register_exception_handlers
from .logging_config import get_logger, setup_logging
from .routers import curl, execute, highlight, history
from .schemas.request import DEFAULT_REQUEST, RequestSpec


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    settings = get_settings()
    setup_logging(settings.log_level, json_format=settings.log_json)
    try:
        init_db(history_dir=settings.history_dir)
    except (OSError, SQLAlchemyError) as e:
        # history then loads as empty; requests still work
        logger.warning("history_store_unavailable", history_dir=str(settings.history_dir), error=str(e))
    yield


app = FastAPI(
    title="BadGateway",
    description="Request engine for the BadGateway desktop HTTP client",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Register global exception handlers
register_exception_handlers(app)


@app.get("/")
async def root():
    """Root endpoint returning API information."""
    return {
        "name": "BadGateway",
        "version": "0.1.0",
        "docs": "/docs"
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/api/defaults", response_model=RequestSpec)
async def default_request():
    """The request a fresh session starts with."""
    return DEFAULT_REQUEST


# Register routers
app.include_router(execute.router)
app.include_router(curl.router)
app.include_router(highlight.router)
app.include_router(history.router)
