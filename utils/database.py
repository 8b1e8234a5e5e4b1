"""
Database utilities and engine management.

This module provides the core database engine that can be used by any layer:
- API routes
- Services
- Repositories
- Scripts

No dependencies on higher-level modules (api, services).
"""

from functools import lru_cache
from typing import Generator

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import create_engine, Session, SQLModel

from config.settings import settings


def build_engine(db_url: str) -> Engine:
    """
    Create an engine for the given URL.

    Note:
        postgresql:// URLs use the psycopg (v3) driver. SQLite connections
        enable foreign keys so ON DELETE CASCADE holds there too.
    """
    if db_url.startswith("postgresql://"):
        db_url = db_url.replace("postgresql://", "postgresql+psycopg://", 1)

    if db_url.startswith("sqlite"):
        engine = create_engine(db_url, connect_args={"check_same_thread": False})

        @event.listens_for(engine, "connect")
        def enable_foreign_keys(dbapi_conn, connection_record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        db_url,
        connect_args={"connect_timeout": 10},  # Fail fast if the database is slow
        pool_pre_ping=True,  # Verify connection before use
        pool_recycle=300,
        pool_timeout=30,
    )


@lru_cache()
def get_engine() -> Engine:
    """
    Get cached database engine.

    Returns:
        SQLAlchemy engine singleton
    """
    return build_engine(settings.DATABASE_URL)


def init_db(engine: Engine) -> None:
    """Create any missing tables (local/dev; production uses Alembic)."""
    import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields:
        SQLModel Session that auto-closes after request

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            ...
    """
    engine = get_engine()
    with Session(engine) as session:
        yield session
