"""
Database configuration for the BadGateway history store.

History summaries live in a SQLite file inside the configured history
directory, accessed through SQLAlchemy.
"""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from .config import get_settings


HISTORY_DB_NAME = "badgateway_history.db"


def database_url(history_dir: Path) -> str:
    """Build the SQLite URL for the history file inside history_dir."""
    return f"sqlite:///{Path(history_dir) / HISTORY_DB_NAME}"


def create_db_engine(url: str) -> Engine:
    """Create an engine with the SQLite settings the API needs."""
    return create_engine(
        url,
        connect_args={"check_same_thread": False},  # Required for SQLite with FastAPI
        echo=False
    )


engine = create_db_engine(database_url(get_settings().history_dir))

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def init_db(bind: Engine | None = None, history_dir: Path | None = None):
    """
    Create the history directory and tables if they don't exist.

    Args:
        bind: Engine to create tables on, defaults to the module engine
        history_dir: Directory to create, defaults to the configured one
    """
    if history_dir is None:
        history_dir = get_settings().history_dir
    Path(history_dir).mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    """
    Dependency function for FastAPI to get database sessions.

    Yields a database session and ensures it's closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
