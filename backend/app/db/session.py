"""
Database engine and session management.

The engine is built once by the application lifespan and kept on
``app.state``; requests get their own session through ``get_db``.
"""

from collections.abc import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the configured database URL."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across FastAPI's threadpool
        connect_args["check_same_thread"] = False

    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build the session factory bound to ``engine``."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
