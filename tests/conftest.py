"""Pytest configuration and fixtures."""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from devevent.config import Settings, get_settings
from devevent.database import connection_cache, open_database
from devevent.web import reset_page_cache

SAMPLE_EVENT_FORM = {
    "title": "React Summit 2025",
    "description": "The biggest React conference worldwide.",
    "overview": "Two days of React and the wider ecosystem.",
    "venue": "Kromhouthal",
    "location": "Amsterdam, Netherlands",
    "date": "2025-06-13",
    "time": "09:00",
    "mode": "hybrid",
    "audience": "Frontend developers",
    "agenda": '["Keynote", "Workshops"]',
    "organizer": "GitNation",
    "tags": '["react", "frontend"]',
}

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


@pytest.fixture(autouse=True)
def reset_process_state():
    """Each test starts with no cached connection, page or settings."""
    connection_cache.reset()
    reset_page_cache()
    get_settings.cache_clear()
    yield
    connection_cache.reset()
    reset_page_cache()
    get_settings.cache_clear()


@pytest.fixture
def database_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'devevent.db'}"


@pytest.fixture
def app_env(tmp_path, monkeypatch, database_url):
    """Point settings at a temporary database and image directory."""
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("IMAGES_DIR", str(tmp_path / "images"))
    monkeypatch.setenv("BASE_URL", "http://testserver")
    monkeypatch.setenv("UPLOAD_BACKEND", "local")
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("PAGE_CACHE_SECONDS", "3600")
    get_settings.cache_clear()


@pytest.fixture
def client(app_env):
    """Test client with a fresh app; the lifespan runs on enter and exit."""
    from devevent.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def create_event(client):
    """Create an event through the API and return its JSON."""

    def _create(**overrides) -> dict:
        form = {**SAMPLE_EVENT_FORM, **overrides}
        response = client.post(
            "/api/events",
            data=form,
            files={"image": ("poster.png", PNG_BYTES, "image/png")},
        )
        assert response.status_code == 201, response.text
        return response.json()["event"]

    return _create


@pytest_asyncio.fixture
async def database(database_url):
    db = await open_database(Settings(database_url=database_url))
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session() as session:
        yield session
