"""
Storage for the Fort Golf results archive.

The archive engine is bound on first use, from DATABASE_URL or a SQLite file
beside this package. Callers that want a different store (tests, maintenance
scripts) bind one explicitly with configure_archive(url).
"""

import os

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

DEFAULT_ARCHIVE_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "fortgolf.db")

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False)

_engine: Engine | None = None


def archive_url() -> str:
    """URL of the archive store named by the environment."""
    url = os.environ.get("DATABASE_URL") or f"sqlite:///{DEFAULT_ARCHIVE_PATH}"
    # SQLAlchemy only knows the postgresql:// scheme
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def configure_archive(url: str | None = None) -> Engine:
    """Bind archive sessions to url, replacing any engine bound before."""
    global _engine
    url = url or archive_url()
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    if _engine is not None:
        _engine.dispose()
    _engine = create_engine(url, connect_args=connect_args)
    SessionLocal.configure(bind=_engine)
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        return configure_archive()
    return _engine


def get_db():
    """Dependency that yields an archive session."""
    get_engine()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create the archive tables if they are missing."""
    Base.metadata.create_all(bind=get_engine())
