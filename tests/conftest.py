"""Shared fixtures: an app wired to an in-memory SQLite database."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from folio.core.config import Settings
from folio.core.security import create_access_token
from folio.db.models_registry import Base
from folio.main import create_app

AUTHOR_ID = "user-1"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret-key",
        LOG_TO_FILES=False,
        LOG_LEVEL="WARNING",
        SITE_URL="https://blog.folio.dev",
        SITE_TITLE="Folio Test Blog",
    )


@pytest.fixture
def app(settings):
    app = create_app(settings)
    Base.metadata.create_all(bind=app.state.engine)
    yield app
    app.state.engine.dispose()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def auth_headers(settings):
    token = create_access_token(
        settings,
        subject=AUTHOR_ID,
        claims={"email": "author@folio.dev", "first_name": "Ada", "last_name": "Writer"},
    )
    return {"Authorization": f"Bearer {token}"}


def naive(value: datetime) -> datetime:
    """SQLite hands timestamps back without tzinfo; compare everything as naive UTC."""
    return value.replace(tzinfo=None)
