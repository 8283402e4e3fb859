"""Pytest configuration and shared fixtures for QuillNotes tests.

Every test gets its own temporary SQLite database so option state never leaks
between tests or into the real data directory.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from quillnotes.infra.database import create_session_factory
from quillnotes.infra.repositories import SQLModelOptionRepository
from quillnotes.models import Option  # noqa: F401  # registers the table
from quillnotes.services.options import OptionService


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep config lookups away from the developer's environment and data dir."""

    monkeypatch.setenv("QUILLNOTES_DATA_DIR", str(tmp_path / "data"))
    for name in (
        "QUILLNOTES_DATABASE_URL",
        "QUILLNOTES_START_NOTE_ID",
        "QUILLNOTES_SAFE_MODE",
        "QUILLNOTES_DEV_MODE",
    ):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the application wires up."""

    return create_session_factory(db_engine)


@pytest.fixture
def option_repo(session_factory) -> SQLModelOptionRepository:
    return SQLModelOptionRepository(session_factory)


@pytest.fixture
def option_service(option_repo) -> OptionService:
    """Option store backed by the per-test database."""

    return OptionService(option_repo)


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Flask app over a fresh, bootstrapped instance."""

    monkeypatch.setenv("QUILLNOTES_DATABASE_URL", f"sqlite:///{tmp_path / 'app.db'}")

    from quillnotes import create_app
    from quillnotes.context import bootstrap_instance

    app = create_app("testing")
    bootstrap_instance(app.extensions["quillnotes"])
    yield app
    app.extensions["quillnotes"].engine.dispose()


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client
