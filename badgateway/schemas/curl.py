"""
Pydantic schemas for cURL import.
"""

from pydantic import BaseModel

from .request import DEFAULT_REQUEST, PartialRequestSpec, RequestSpec


class CurlImportRequest(BaseModel):
    """Pasted command text and the request it should be merged into."""
    text: str
    current: RequestSpec = DEFAULT_REQUEST


class CurlImportResponse(BaseModel):
    """Recognised fields and the merged request."""
    partial: PartialRequestSpec
    spec: RequestSpec
