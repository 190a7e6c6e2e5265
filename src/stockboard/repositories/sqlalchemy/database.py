"""Engine and session setup for the SQL quote cache backend."""

from sqlalchemy import create_engine, Engine
from sqlalchemy.orm import sessionmaker, declarative_base

Base = declarative_base()


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for database_url."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Refresh workers write through the store from pool threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args, echo=False)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(engine: Engine) -> None:
    """Create the quote_cache table if missing. Connects, so a bad URL fails here."""
    from stockboard.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)
