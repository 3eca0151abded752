"""
Custom exception classes and error handling for the BadGateway API.

Provides consistent error responses across all API endpoints.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from .logging_config import get_logger
from .services.formatting import ERROR_SUMMARY_LENGTH, truncate


logger = get_logger(__name__)


class ErrorResponse(BaseModel):
    """Standard error response format."""
    detail: str
    error_code: str | None = None
    summary: str | None = None


class APIException(Exception):
    """Base exception for API errors."""

    def __init__(
        self,
        detail: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_code: str | None = None,
        summary: str | None = None
    ):
        self.detail = detail
        self.status_code = status_code
        self.error_code = error_code
        self.summary = summary
        super().__init__(detail)


class ResourceNotFoundError(APIException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            detail=f"{resource_type} with id {resource_id} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            error_code="RESOURCE_NOT_FOUND"
        )


class CurlImportError(APIException):
    """Exception raised when pasted text cannot be imported as a cURL command."""

    def __init__(self, detail: str = "Text is not a cURL command with a URL"):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_400_BAD_REQUEST,
            error_code="CURL_IMPORT_REJECTED"
        )


class TransportFailedError(APIException):
    """Exception raised when an executed request never produced a response."""

    def __init__(self, detail: str):
        super().__init__(
            detail=detail,
            status_code=status.HTTP_502_BAD_GATEWAY,
            error_code="TRANSPORT_ERROR",
            summary=truncate(detail, ERROR_SUMMARY_LENGTH)
        )


async def api_exception_handler(request: Request, exc: APIException) -> JSONResponse:
    """Handler for custom API exceptions."""
    content = {"detail": exc.detail, "error_code": exc.error_code}
    if exc.summary is not None:
        content["summary"] = exc.summary
    return JSONResponse(status_code=exc.status_code, content=content)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handler for Pydantic validation errors."""
    error_messages = []
    for error in exc.errors():
        loc = " -> ".join(str(part) for part in error["loc"])
        error_messages.append(f"{loc}: {error['msg']}")

    detail = "; ".join(error_messages) if error_messages else "Validation error"

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": detail, "error_code": "VALIDATION_ERROR"}
    )


async def sqlalchemy_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handler for SQLAlchemy database errors."""
    logger.error("database_error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Database error occurred", "error_code": "DATABASE_ERROR"}
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI application."""
    app.add_exception_handler(APIException, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
