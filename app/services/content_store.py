"""Reads sitemap-relevant content out of the database as ContentItem views."""

from typing import List

from sqlalchemy.orm import Session

from app.database import PageModel
from app.schemas.sitemap import ContentItem


class ContentStore:

    def __init__(self, db: Session, base_url: str):
        self.db = db
        self.base_url = base_url

    def live_pages(self, searchable_only: bool = True) -> List[ContentItem]:
        query = self.db.query(PageModel).filter(PageModel.published == True)
        if searchable_only:
            query = query.filter(PageModel.show_in_search == True)
        pages = query.order_by(PageModel.sort_order, PageModel.id).all()
        return [p.sitemap_item(self.base_url) for p in pages]

    def instances_of(self, registration) -> List[ContentItem]:
        model = registration.model
        rows = self.db.query(model).order_by(model.id).all()
        return [row.sitemap_item(self.base_url) for row in rows]
