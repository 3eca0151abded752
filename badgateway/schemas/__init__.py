"""
Pydantic schemas package.

Exports all schemas for engine values and API request/response validation.
"""

from .request import (
    HttpMethod,
    HTTP_METHODS,
    NoAuth,
    BearerAuth,
    BasicAuth,
    Auth,
    RequestSpec,
    PartialRequestSpec,
    DEFAULT_REQUEST,
)

from .execute import (
    ExecuteResponse,
    TransportError,
    ExecuteResult,
)

from .highlight import (
    StyleClass,
    Span,
    FormatRequest,
    FormatResponse,
)

from .history import (
    HistoryEntryCreate,
    HistoryEntryResponse,
    HistoryListResponse,
)

from .curl import (
    CurlImportRequest,
    CurlImportResponse,
)

__all__ = [
    # Request schemas
    "HttpMethod",
    "HTTP_METHODS",
    "NoAuth",
    "BearerAuth",
    "BasicAuth",
    "Auth",
    "RequestSpec",
    "PartialRequestSpec",
    "DEFAULT_REQUEST",
    # Execute schemas
    "ExecuteResponse",
    "TransportError",
    "ExecuteResult",
    # Highlight schemas
    "StyleClass",
    "Span",
    "FormatRequest",
    "FormatResponse",
    # History schemas
    "HistoryEntryCreate",
    "HistoryEntryResponse",
    "HistoryListResponse",
    # cURL import schemas
    "CurlImportRequest",
    "CurlImportResponse",
]
