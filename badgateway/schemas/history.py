"""
Pydantic schemas for request history.

History keeps only a summary per completed response: method, URL and
status code.
"""

from pydantic import BaseModel, ConfigDict

from .request import HttpMethod


class HistoryEntryCreate(BaseModel):
    """Schema for appending a history summary."""
    method: HttpMethod
    url: str
    status: int


class HistoryEntryResponse(HistoryEntryCreate):
    """Schema for a stored history summary."""
    id: int
    label: str = ""

    model_config = ConfigDict(from_attributes=True)


class HistoryListResponse(BaseModel):
    """Schema for history list response."""
    items: list[HistoryEntryResponse]
    total: int
