"""
Models package for BadGateway.

Exports all SQLAlchemy models for database operations.
"""

from .history import HistoryEntry

__all__ = [
    "HistoryEntry",
]
