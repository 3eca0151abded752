"""
History service for request summaries.

Appends one summary per completed response and loads them back in
arrival order. A missing or unreadable store loads as empty history.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..logging_config import get_logger
from ..models.history import HistoryEntry
from ..schemas.history import HistoryEntryCreate, HistoryEntryResponse
from ..schemas.request import RequestSpec
from .formatting import HISTORY_LABEL_LENGTH, truncate


logger = get_logger(__name__)


# Number of entries shown in the recent-history sidebar
RECENT_LIMIT = 50


def append_history(db: Session, entry: HistoryEntryCreate) -> HistoryEntry:
    """
    Persist a history summary.

    Args:
        db: Database session
        entry: Method, URL and status of the completed request

    Returns:
        The stored history row
    """
    history = HistoryEntry(
        method=entry.method,
        url=entry.url,
        status=entry.status
    )
    db.add(history)
    db.commit()
    db.refresh(history)
    return history


def load_history(db: Session) -> list[HistoryEntry]:
    """
    Load all history entries, oldest first.

    Returns an empty list when the store is missing or corrupt.
    """
    try:
        return db.query(HistoryEntry).order_by(HistoryEntry.id.asc()).all()
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("history_load_failed", error=str(e))
        return []


def recent_history(entries: list[HistoryEntry], limit: int = RECENT_LIMIT) -> list[HistoryEntry]:
    """Return the newest entries first, at most limit of them."""
    if limit <= 0:
        return []
    return list(reversed(entries[-limit:]))


def to_response(entry: HistoryEntry) -> HistoryEntryResponse:
    """Convert a stored entry to its API schema with a short display label."""
    response = HistoryEntryResponse.model_validate(entry)
    return response.model_copy(update={"label": truncate(entry.url, HISTORY_LABEL_LENGTH)})


def recall(entry: HistoryEntry, current: RequestSpec) -> RequestSpec:
    """Restore a history entry's method and URL into the current request."""
    return current.model_copy(update={"method": entry.method, "url": entry.url})
