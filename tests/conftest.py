"""Test fixtures for Sitemapper.

Provides:
- SQLite test database (overrides get_db)
- FastAPI TestClient built through create_app()
- Mock for the search engine ping endpoint
- Seed data helpers
"""

import os
import pytest
from datetime import datetime, timedelta
from unittest.mock import patch, MagicMock

# Force SQLite before any app imports
os.environ["DATABASE_URL"] = "sqlite:///./test_sitemapper.db"
os.environ["ENVIRONMENT"] = "test"
os.environ.pop("SITE_BASE_URL", None)
os.environ.pop("SITEMAP_EXTRA_TYPES", None)

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.database import Base, get_db

TEST_DATABASE_URL = "sqlite:///./test_sitemapper.db"
test_engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

BASE_URL = "http://testserver"


def override_get_db():
    db = TestSessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


@pytest.fixture(scope="session", autouse=True)
def create_tables():
    """Create all tables once per test session."""
    Base.metadata.create_all(bind=test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()
    try:
        os.remove("test_sitemapper.db")
    except OSError:
        pass


@pytest.fixture(autouse=True)
def clean_tables():
    """Truncate all tables between tests."""
    db = TestSessionLocal()
    try:
        for table in reversed(Base.metadata.sorted_tables):
            db.execute(table.delete())
        db.commit()
    finally:
        db.close()


@pytest.fixture()
def db_session():
    """Provide a clean DB session for tests that need direct DB access."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture()
def make_client():
    """Build a TestClient for an app created with the given settings overrides."""
    from fastapi.testclient import TestClient
    from app.core.config import Settings
    from main import create_app

    apps = []

    def _make(**overrides):
        overrides.setdefault("ENVIRONMENT", "test")
        app = create_app(Settings(**overrides))
        app.dependency_overrides[get_db] = override_get_db
        apps.append(app)
        return TestClient(app)

    yield _make

    for app in apps:
        app.dependency_overrides.clear()


@pytest.fixture()
def client(make_client):
    """Synchronous TestClient with default sitemap settings."""
    with make_client() as c:
        yield c


@pytest.fixture()
def seed_pages(db_session):
    """Insert a small site tree: home, about, a hidden page, drafts, an error page."""
    from app.database import PageModel
    created = datetime.utcnow() - timedelta(days=400)
    pages = [
        PageModel(title="Home", url_segment="home", published=True, version=2,
                  sort_order=1, created_at=created, last_edited=created),
        PageModel(title="About Us", url_segment="about-us", published=True, version=3,
                  sort_order=2, priority=0.8, created_at=created, last_edited=created),
        PageModel(title="Hidden", url_segment="hidden", published=True, version=1,
                  sort_order=3, show_in_search=False, created_at=created),
        PageModel(title="Draft", url_segment="draft", published=False, version=1,
                  sort_order=4, created_at=created),
        PageModel(title="Page not found", url_segment="page-not-found", page_type="ErrorPage",
                  published=True, version=1, sort_order=5, created_at=created),
        PageModel(title="Members", url_segment="members", can_view_type="LoggedInUsers",
                  published=True, version=1, sort_order=6, created_at=created),
        PageModel(title="Switched off", url_segment="switched-off", priority=0.0,
                  published=True, version=1, sort_order=7, created_at=created),
    ]
    for p in pages:
        db_session.add(p)
    db_session.commit()
    return pages


@pytest.fixture()
def seed_events(db_session):
    from app.database import EventModel
    events = [
        EventModel(title="Open Day", slug="open-day"),
        EventModel(title="Staff Party", slug="staff-party", is_public=False),
        EventModel(title="Archived", slug="archived", priority=0.0),
        EventModel(title="Conference", slug="conference", priority=0.4),
    ]
    for e in events:
        db_session.add(e)
    db_session.commit()
    return events


@pytest.fixture()
def mock_ping_endpoint():
    """Mock the search engine ping call."""
    with patch("requests.get") as mock_get:
        resp = MagicMock()
        resp.status_code = 200
        resp.text = "Sitemap Notification Received"
        mock_get.return_value = resp
        yield mock_get
