"""Database package."""

from app.db.base import Base
from app.db.session import create_db_engine, create_session_factory, get_db

__all__ = ["Base", "create_db_engine", "create_session_factory", "get_db"]
