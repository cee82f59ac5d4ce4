"""Sitemap Router - serves /sitemap.xml"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_base_url, get_sitemap_context
from app.services.content_store import ContentStore
from app.services.sitemap import SitemapAssembler, render_sitemap
from app.services.sitemap_context import SitemapContext

logger = logging.getLogger("Sitemapper.Sitemap")
router = APIRouter()

XML_CONTENT_TYPE = 'application/xml; charset="utf-8"'


@router.get("/sitemap.xml", summary="XML Sitemap",
            description="Live pages and registered extra content as an XML sitemap")
def xml_sitemap(request: Request, db: Session = Depends(get_db),
                context: SitemapContext = Depends(get_sitemap_context),
                base_url: str = Depends(get_base_url)):
    if not context.enabled:
        return PlainTextResponse("Not allowed", status_code=405)

    request_host = request.headers.get("host") or request.url.netloc
    store = ContentStore(db, base_url)
    entries = SitemapAssembler(store, context).build_sitemap(request_host, datetime.utcnow())
    logger.info(f"Serving sitemap.xml with {len(entries)} URLs to {request_host}")

    return Response(content=render_sitemap(entries),
                    headers={"Content-Type": XML_CONTENT_TYPE})
