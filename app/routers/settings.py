"""
Settings API router - sitemap switches
"""

import logging
from fastapi import APIRouter, Depends

from app.dependencies import get_sitemap_context
from app.services.sitemap_context import SitemapContext

logger = logging.getLogger("Sitemapper.Settings")
router = APIRouter()


@router.get("/sitemap", summary="Get Sitemap Settings",
            description="Current sitemap flags and registered extra content types")
def get_sitemap_settings(context: SitemapContext = Depends(get_sitemap_context)):
    return context.status()


@router.post("/sitemap/enable", summary="Enable sitemap.xml")
def enable_sitemap(context: SitemapContext = Depends(get_sitemap_context)):
    context.enable_sitemap()
    return context.status()


@router.post("/sitemap/disable", summary="Disable sitemap.xml",
             description="sitemap.xml answers 405 until re-enabled")
def disable_sitemap(context: SitemapContext = Depends(get_sitemap_context)):
    context.disable_sitemap()
    return context.status()


@router.post("/sitemap/notification/enable", summary="Enable search engine ping",
             description="Ping the search engine whenever a page is published or unpublished")
def enable_notification(context: SitemapContext = Depends(get_sitemap_context)):
    context.enable_notification()
    return context.status()


@router.post("/sitemap/notification/disable", summary="Disable search engine ping")
def disable_notification(context: SitemapContext = Depends(get_sitemap_context)):
    context.disable_notification()
    return context.status()
