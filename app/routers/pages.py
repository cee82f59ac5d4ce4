"""
Pages API router - draft editing and publishing
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.config import Settings
from app.database import get_db, PageModel
from app.dependencies import get_base_url, get_pinger, get_settings
from app.schemas.page import Page, PageCreate, PageUpdate
from app.services.publishing import PublishingService
from app.services.sitemap_ping import SitemapPinger

logger = logging.getLogger("Sitemapper.Pages")
router = APIRouter()


def _get_page(db: Session, page_id: int) -> PageModel:
    page = db.query(PageModel).filter(PageModel.id == page_id).first()
    if not page:
        raise HTTPException(status_code=404, detail="Page not found")
    return page


def get_publishing_service(db: Session = Depends(get_db),
                           pinger: SitemapPinger = Depends(get_pinger),
                           base_url: str = Depends(get_base_url),
                           settings: Settings = Depends(get_settings)) -> PublishingService:
    return PublishingService(db, pinger, base_url, settings.is_dev)


@router.get("/", response_model=List[Page], summary="List Pages")
def list_pages(db: Session = Depends(get_db)):
    return db.query(PageModel).order_by(PageModel.sort_order, PageModel.id).all()


@router.post("/", response_model=Page, summary="Create Page",
             description="Create a draft page (not live until published)")
def create_page(page_in: PageCreate, db: Session = Depends(get_db)):
    page = PageModel(**page_in.model_dump(), published=False, version=1)
    db.add(page)
    db.commit()
    db.refresh(page)
    logger.info(f"Created page #{page.id} '{page.title}'")
    return page


@router.get("/{page_id}", response_model=Page, summary="Get Page")
def get_page(page_id: int, db: Session = Depends(get_db)):
    return _get_page(db, page_id)


@router.put("/{page_id}", response_model=Page, summary="Update Page",
            description="Edit a page; every write adds a revision")
def update_page(page_id: int, page_in: PageUpdate, db: Session = Depends(get_db)):
    page = _get_page(db, page_id)
    for field, value in page_in.model_dump(exclude_unset=True).items():
        setattr(page, field, value)
    page.version = (page.version or 0) + 1
    db.commit()
    db.refresh(page)
    return page


@router.post("/{page_id}/publish", response_model=Page, summary="Publish Page")
def publish_page(page_id: int, db: Session = Depends(get_db),
                 service: PublishingService = Depends(get_publishing_service)):
    return service.publish(_get_page(db, page_id))


@router.post("/{page_id}/unpublish", response_model=Page, summary="Unpublish Page")
def unpublish_page(page_id: int, db: Session = Depends(get_db),
                   service: PublishingService = Depends(get_publishing_service)):
    return service.unpublish(_get_page(db, page_id))
