# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
SQLAlchemy engine, session factory, declarative base, and the FastAPI
dependency that provides a DB session per request.

The engine (and its connection pool) is the only state shared between
requests; every request gets its own session.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from core.config import settings


def _engine_kwargs(url: str) -> dict:
    # SQLite connections are handed between Starlette's worker threads
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    # pool_pre_ping keeps idle connections alive across MySQL's wait_timeout
    return {"pool_pre_ping": True}


engine = create_engine(settings.database_url, **_engine_kwargs(settings.database_url))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    FastAPI dependency.  Yields a session for the duration of the request,
    then closes it.  Use with Depends(get_db).
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
