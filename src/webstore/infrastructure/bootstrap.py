"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from webstore.config import Settings
from webstore.infrastructure.persistence.orm import Base
from webstore.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

_session_factory: sessionmaker[Session] | None = None


def build_engine(settings: Settings) -> Engine:
    """Create the engine and the schema (migrations are not managed here)."""
    url = make_url(settings.database_url)
    kwargs: dict = {"echo": settings.sql_echo}
    if url.get_backend_name() == "sqlite":
        if url.database in (None, "", ":memory:"):
            # One shared connection, or every session would see its own empty database.
            kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
        else:
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(url, **kwargs)
    Base.metadata.create_all(engine)
    return engine


def session_factory(settings: Settings | None = None) -> sessionmaker[Session]:
    global _session_factory
    if _session_factory is None:
        engine = build_engine(settings or Settings.from_env())
        _session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    return _session_factory


def unit_of_work(settings: Settings | None = None) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(session_factory(settings))


def reset() -> None:
    """Forget the cached engine (tests switch databases between runs)."""
    global _session_factory
    _session_factory = None
