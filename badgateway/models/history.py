"""
History model for storing completed request summaries.

Each completed response appends one row. Rows are never updated; the
auto-increment id preserves arrival order.
"""

from sqlalchemy import String, Text, Integer
from sqlalchemy.orm import Mapped, mapped_column

from ..database import Base


class HistoryEntry(Base):
    """
    SQLAlchemy model for request history.

    Attributes:
        id: Insertion-ordered identifier
        method: HTTP method used (uppercase)
        url: Target URL as entered, without assembled query params
        status: HTTP response status code
    """
    __tablename__ = "history"

    id: Mapped[int] = mapped_column(primary_key=True)
    method: Mapped[str] = mapped_column(String(10))
    url: Mapped[str] = mapped_column(Text)
    status: Mapped[int] = mapped_column(Integer)
