import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from main import create_app


def make_settings(database_url: str, **overrides) -> Settings:
    return Settings(_env_file=None, DATABASE_URL=database_url, **overrides)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "contacts.db"


@pytest.fixture
def settings(db_path):
    return make_settings(f"sqlite+aiosqlite:///{db_path}", DB_CREATE_TABLES=True)


@pytest.fixture
def client(settings):
    """Client over a fresh SQLite file with the contacts table created on startup."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def unreachable_client(tmp_path):
    """Client whose database file lives in a directory that does not exist."""
    app_settings = make_settings(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'contacts.db'}")
    with TestClient(create_app(app_settings)) as test_client:
        yield test_client
