"""
Formatting and highlighting API routes.
"""

from fastapi import APIRouter

from ..schemas.highlight import FormatRequest, FormatResponse
from ..services.highlight import highlight


router = APIRouter(prefix="/api/format", tags=["format"])


@router.post("", response_model=FormatResponse)
def format_text(payload: FormatRequest):
    """Pretty-print text as JSON when possible and return its highlight spans."""
    formatted, spans = highlight(payload.text)
    return FormatResponse(formatted=formatted, spans=spans)
