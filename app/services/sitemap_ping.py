"""Search engine ping

Tells a search engine that sitemap.xml changed. Off by default; never sent
from a dev environment. A single request, no retries: network errors are
raised to the caller.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from app.services.sitemap_context import SitemapContext

logger = logging.getLogger("sitemapper.ping")

DEFAULT_PING_URL = "https://www.google.com/webmasters/sitemaps/ping"


def sitemap_location(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/sitemap.xml"


class SitemapPinger:

    def __init__(self, context: SitemapContext, endpoint: str = DEFAULT_PING_URL,
                 timeout: Optional[float] = None):
        self.context = context
        self.endpoint = endpoint
        self.timeout = timeout

    def ping(self, base_url: str, is_dev: bool) -> Optional[str]:
        """Returns the response body, or None when pinging is switched off."""
        if not self.context.enabled:
            return None
        if not self.context.notification_enabled or is_dev:
            return None

        location = quote(sitemap_location(base_url), safe="")
        url = f"{self.endpoint}?sitemap={location}"
        logger.info(f"Pinging {self.endpoint} for {sitemap_location(base_url)}")

        resp = requests.get(url, timeout=self.timeout)
        logger.info(f"Sitemap ping returned HTTP {resp.status_code}")
        return resp.text
