"""
History API routes.

History summaries are appended automatically when requests are
executed; these routes only read them.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..exceptions import ResourceNotFoundError
from ..models.history import HistoryEntry
from ..schemas.history import HistoryEntryResponse, HistoryListResponse
from ..schemas.request import DEFAULT_REQUEST, RequestSpec
from ..services.history_service import (
    RECENT_LIMIT,
    load_history,
    recall,
    recent_history,
    to_response,
)


router = APIRouter(prefix="/api/history", tags=["history"])


def get_entry_or_404(db: Session, history_id: int) -> HistoryEntry:
    entry = db.query(HistoryEntry).filter(HistoryEntry.id == history_id).first()
    if entry is None:
        raise ResourceNotFoundError("History entry", history_id)
    return entry


@router.get("", response_model=HistoryListResponse)
def list_history(db: Session = Depends(get_db)):
    """
    Get all history entries in arrival order (oldest first).

    A missing or corrupt history store is returned as an empty list.
    """
    entries = load_history(db)
    return HistoryListResponse(items=[to_response(e) for e in entries], total=len(entries))


@router.get("/recent", response_model=HistoryListResponse)
def list_recent_history(limit: int = RECENT_LIMIT, db: Session = Depends(get_db)):
    """Get the most recent history entries, newest first."""
    entries = load_history(db)
    items = recent_history(entries, limit)
    return HistoryListResponse(items=[to_response(e) for e in items], total=len(entries))


@router.get("/{history_id}", response_model=HistoryEntryResponse)
def get_history_entry(history_id: int, db: Session = Depends(get_db)):
    """
    Get a single history entry by ID.

    Raises:
        ResourceNotFoundError: 404 if the entry does not exist
    """
    return to_response(get_entry_or_404(db, history_id))


@router.get("/{history_id}/recall", response_model=RequestSpec)
def recall_history_entry(history_id: int, db: Session = Depends(get_db)):
    """Build a request from the default request with the entry's method and URL."""
    return recall(get_entry_or_404(db, history_id), DEFAULT_REQUEST)
