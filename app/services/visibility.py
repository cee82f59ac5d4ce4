"""Sitemap visibility rules for content items."""

import logging
from urllib.parse import urlsplit

from app.schemas.sitemap import ContentItem

logger = logging.getLogger("sitemapper.visibility")

# Only used so urlsplit recognises the host component; any scheme works.
PLACEHOLDER_SCHEME = "http://"


def host_of(url: str) -> str:
    """Host and port of ``url`` as written (no lowercasing, no userinfo)."""
    netloc = urlsplit(url).netloc
    if not netloc:
        netloc = urlsplit(PLACEHOLDER_SCHEME + url.lstrip("/")).netloc
    return netloc.rsplit("@", 1)[-1]


def passes_basic_rules(item: ContentItem) -> bool:
    """Viewable, and not switched off with a zero priority."""
    if not item.viewable:
        return False
    return item.priority is None or item.priority > 0


def is_included(item: ContentItem, request_host: str, use_show_in_search: bool = True) -> bool:
    if not passes_basic_rules(item):
        return False
    if item.type_excluded:
        return False
    if use_show_in_search and item.show_in_search is not True:
        return False
    try:
        same_host = host_of(item.absolute_url) == host_of(request_host)
    except ValueError as e:
        logger.debug(f"Unparseable URL {item.absolute_url!r}: {e}")
        return False
    return same_host and bool(item.absolute_url)
