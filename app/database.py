"""Database configuration and SQLAlchemy models"""

import logging
from datetime import datetime
from sqlalchemy import create_engine, Column, Integer, String, Float, Boolean, Text, DateTime
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import settings
from app.schemas.sitemap import ContentItem

logger = logging.getLogger("sitemapper.database")

DATABASE_URL = settings.DATABASE_URL

# Build engine with appropriate settings
if "sqlite" in DATABASE_URL:
    engine = create_engine(DATABASE_URL, connect_args={"check_same_thread": False})
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=5,
        max_overflow=10,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def init_db():
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


class SitemapMixin:
    """Capability shared by every content type that can appear in sitemap.xml.

    Subclasses must implement ``absolute_link``; the remaining hooks have
    defaults suitable for simple, always-public content.
    """

    priority = Column(Float, nullable=True)  # NULL means "use the default"
    created_at = Column(DateTime, default=datetime.utcnow)
    last_edited = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def absolute_link(self, base_url: str) -> str:
        raise NotImplementedError(f"{type(self).__name__} must implement absolute_link()")

    def can_view(self) -> bool:
        return True

    def revision_count(self):
        return None

    def searchable(self):
        return None

    def is_type_excluded(self) -> bool:
        return False

    def sitemap_item(self, base_url: str) -> ContentItem:
        return ContentItem(
            absolute_url=self.absolute_link(base_url),
            created_at=self.created_at,
            last_modified=self.last_edited,
            revision_count=self.revision_count(),
            viewable=self.can_view(),
            priority=self.priority,
            show_in_search=self.searchable(),
            type_excluded=self.is_type_excluded(),
        )


def _join_links(base_url: str, *parts: str) -> str:
    path = "/".join(p.strip("/") for p in parts if p and p.strip("/"))
    return f"{base_url.rstrip('/')}/{path}/" if path else f"{base_url.rstrip('/')}/"


class PageModel(SitemapMixin, Base):
    __tablename__ = "pages"

    HOME_SEGMENT = "home"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    url_segment = Column(String, nullable=False, index=True)
    page_type = Column(String, default="Page")  # Page, RedirectorPage, ErrorPage
    redirect_url = Column(String, nullable=True)  # RedirectorPage target
    can_view_type = Column(String, default="Anyone")  # Anyone, LoggedInUsers
    show_in_search = Column(Boolean, default=True)
    published = Column(Boolean, default=False)  # live stage exists
    version = Column(Integer, default=1)
    sort_order = Column(Integer, default=0)
    content = Column(Text, nullable=True)

    def absolute_link(self, base_url: str) -> str:
        if self.page_type == "RedirectorPage" and self.redirect_url:
            if "://" in self.redirect_url:
                return self.redirect_url
            return _join_links(base_url, self.redirect_url)
        if self.url_segment == self.HOME_SEGMENT:
            return _join_links(base_url)
        return _join_links(base_url, self.url_segment)

    def can_view(self) -> bool:
        # Crawlers are anonymous
        return self.can_view_type == "Anyone"

    def revision_count(self):
        return self.version

    def searchable(self):
        return self.show_in_search

    def is_type_excluded(self) -> bool:
        return self.page_type == "ErrorPage"


class EventModel(SitemapMixin, Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    slug = Column(String, nullable=False, index=True)
    is_public = Column(Boolean, default=True)
    starts_at = Column(DateTime, nullable=True)

    def absolute_link(self, base_url: str) -> str:
        return _join_links(base_url, "events", self.slug)

    def can_view(self) -> bool:
        return bool(self.is_public)


class ActivityLogModel(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    action = Column(String, nullable=False)
    entity_type = Column(String, nullable=True)
    entity_id = Column(String, nullable=True)
    details = Column(Text, nullable=True)
    timestamp = Column(DateTime, default=datetime.utcnow)


# Content types that may be registered as extra sitemap items, by identifier.
CONTENT_TYPES = {
    "Event": EventModel,
}
