"""
Pydantic schemas for request execution.

Defines the response captured by the transport adapter, the transport
failure value, and the display-ready result returned by the API.
"""

from pydantic import BaseModel, ConfigDict, Field

from .highlight import Span


class ExecuteResponse(BaseModel):
    """
    Response received for one executed request.

    Any status code counts as a response here, including 4xx and 5xx.
    Headers keep their received order and duplicates.
    """
    model_config = ConfigDict(frozen=True)

    status: int = Field(ge=100, le=599)
    status_text: str = ""
    headers: list[tuple[str, str]] = []
    body: str = ""
    duration_ms: int
    size: int


class TransportError(BaseModel):
    """A request that failed before a response could be read."""
    model_config = ConfigDict(frozen=True)

    error: str


class ExecuteResult(BaseModel):
    """Response plus everything the response panel shows for it."""
    response: ExecuteResponse
    formatted_body: str
    spans: list[Span]
    size_label: str
    headers_text: str
