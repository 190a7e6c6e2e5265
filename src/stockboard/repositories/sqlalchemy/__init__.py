"""SQLAlchemy repository implementations."""

from stockboard.repositories.sqlalchemy.database import (
    create_db_engine,
    create_session_factory,
    init_db,
    Base,
)
from stockboard.repositories.sqlalchemy.quote_cache_repo import SqlAlchemyQuoteCacheBackend

__all__ = [
    "create_db_engine",
    "create_session_factory",
    "init_db",
    "Base",
    "SqlAlchemyQuoteCacheBackend",
]
