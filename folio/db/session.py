# folio/db/session.py
from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from folio.core.config import Settings


def create_db_engine(settings: Settings) -> Engine:
    """
    Build the SQLAlchemy engine for the configured database.

    PostgreSQL connections get a per-statement timeout; SQLite is allowed for
    local runs and tests.
    """
    url = make_url(settings.DATABASE_URI)
    if url.get_backend_name() == "sqlite":
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url.database in (None, "", ":memory:"):
            # One shared connection, otherwise every checkout sees an empty database.
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)

    connect_args = {}
    if url.get_backend_name() == "postgresql" and settings.DB_STATEMENT_TIMEOUT_MS:
        connect_args["options"] = f"-c statement_timeout={settings.DB_STATEMENT_TIMEOUT_MS}"
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency yielding one session per request from the factory wired by create_app.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
