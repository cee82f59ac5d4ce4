"""
Publishing Service
Moves pages between draft and live, records the action in ActivityLogModel,
and pings the search engine about the changed sitemap.
"""
import logging
from datetime import datetime

from sqlalchemy.orm import Session

from app.database import ActivityLogModel, PageModel
from app.services.sitemap_ping import SitemapPinger

logger = logging.getLogger("sitemapper.publishing")


class PublishingService:

    def __init__(self, db: Session, pinger: SitemapPinger, base_url: str, is_dev: bool):
        self.db = db
        self.pinger = pinger
        self.base_url = base_url
        self.is_dev = is_dev

    def publish(self, page: PageModel) -> PageModel:
        return self._set_stage(page, True, "PAGE_PUBLISHED")

    def unpublish(self, page: PageModel) -> PageModel:
        return self._set_stage(page, False, "PAGE_UNPUBLISHED")

    def _set_stage(self, page: PageModel, published: bool, action: str) -> PageModel:
        page.published = published
        page.version = (page.version or 0) + 1
        self.db.commit()
        self.db.refresh(page)
        logger.info(f"{action}: page #{page.id} '{page.title}' (v{page.version})")
        self._log(action, str(page.id), f"{page.title} v{page.version}")
        self.notify_search_engine()
        return page

    def notify_search_engine(self):
        """Fire-and-forget sitemap ping; failures never undo a publish."""
        try:
            response = self.pinger.ping(self.base_url, self.is_dev)
        except Exception as e:
            logger.warning(f"Sitemap ping failed: {e}")
            self._log("SITEMAP_PING_FAILED", "sitemap.xml", str(e))
            return None
        if response is not None:
            self._log("SITEMAP_PINGED", "sitemap.xml", response)
        return response

    def _log(self, action: str, entity_id: str, details: str):
        try:
            log = ActivityLogModel(
                action=action,
                entity_type="page" if action.startswith("PAGE_") else "sitemap",
                entity_id=entity_id,
                details=(details or "")[:500],
                timestamp=datetime.utcnow(),
            )
            self.db.add(log)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.warning(f"Failed to log activity: {e}")
