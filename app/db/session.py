"""
Database session management.

Provides SQLModel engine and session creation.  SQLite is the default
backend; PostgreSQL is used when DATABASE_URL points at it.
"""

from pathlib import Path
from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create an engine with backend-specific options.

    SQLite gets ``check_same_thread=False`` (FastAPI runs sync handlers in
    a thread pool), foreign keys switched on, and a StaticPool when the
    database lives in memory.
    """
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, echo=echo,
                             pool_pre_ping=True,  # Verify connections before using
                             pool_size=5,  # Connection pool size
                             max_overflow=10  # Max connections beyond pool_size
                             )

    in_memory = url.database in (None, "", ":memory:")
    if not in_memory:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)

    sqlite_engine = create_engine(database_url, echo=echo, connect_args={"check_same_thread": False},
                                  poolclass=StaticPool if in_memory else None)

    @event.listens_for(sqlite_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return sqlite_engine


# Create database engine
engine = build_engine(settings.SQLALCHEMY_DATABASE_URI, echo=settings.SQL_ECHO)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
