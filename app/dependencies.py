"""FastAPI dependencies for the per-application sitemap state."""

from fastapi import Request

from app.core.config import Settings
from app.services.sitemap_context import SitemapContext
from app.services.sitemap_ping import SitemapPinger


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_sitemap_context(request: Request) -> SitemapContext:
    return request.app.state.sitemap


def get_pinger(request: Request) -> SitemapPinger:
    return request.app.state.pinger


def get_base_url(request: Request) -> str:
    """Configured site URL, falling back to the URL the request came in on."""
    configured = request.app.state.settings.SITE_BASE_URL
    if configured:
        return configured.rstrip("/")
    return str(request.base_url).rstrip("/")
