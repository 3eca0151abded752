"""
Request execution API routes.

Executes a request description, records a history summary for every
response received, and returns the response ready for display.
"""

import httpx
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import TransportFailedError
from ..logging_config import get_logger
from ..schemas.execute import ExecuteResult, TransportError
from ..schemas.history import HistoryEntryCreate
from ..schemas.request import RequestSpec
from ..services.formatting import format_headers, format_size
from ..services.highlight import highlight
from ..services.history_service import append_history
from ..services.transport import send


logger = get_logger(__name__)

router = APIRouter(prefix="/api/execute", tags=["execute"])


def get_transport() -> httpx.AsyncBaseTransport | None:
    """Dependency returning the httpx transport; None means the real network."""
    return None


@router.post(
    "",
    response_model=ExecuteResult,
    responses={
        200: {"model": ExecuteResult, "description": "Response received"},
        502: {"description": "Transport error"},
    }
)
async def execute_request(
    spec: RequestSpec,
    db: Session = Depends(get_db),
    transport: httpx.AsyncBaseTransport | None = Depends(get_transport)
):
    """
    Execute a request.

    Any HTTP status counts as a response and is recorded in history.
    A history store that cannot be written does not fail the request.

    Args:
        spec: The request to send
        db: Database session
        transport: httpx transport to send through

    Returns:
        ExecuteResult with the response, formatted body and spans

    Raises:
        TransportFailedError: 502 if no response could be read
    """
    result = await send(spec, transport=transport)

    if isinstance(result, TransportError):
        raise TransportFailedError(result.error)

    try:
        append_history(
            db=db,
            entry=HistoryEntryCreate(method=spec.method, url=spec.url, status=result.status)
        )
    except SQLAlchemyError as e:
        # history failures never discard a received response
        db.rollback()
        logger.warning("history_append_failed", method=spec.method, url=spec.url, error=str(e))

    formatted, spans = highlight(result.body)
    return ExecuteResult(
        response=result,
        formatted_body=formatted,
        spans=spans,
        size_label=format_size(result.size),
        headers_text=format_headers(result.headers)
    )
