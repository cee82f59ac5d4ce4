"""XML Sitemap Generator

Builds sitemap.xml from live pages plus any registered extra content types.
"""

import logging
from datetime import datetime
from typing import List
from xml.etree.ElementTree import Element, SubElement, tostring

from app.schemas.sitemap import ContentItem, SitemapEntry, ChangeFrequency
from app.services.change_frequency import estimate_change_frequency
from app.services.content_store import ContentStore
from app.services.sitemap_context import SitemapContext
from app.services.visibility import is_included, passes_basic_rules

logger = logging.getLogger("sitemapper.sitemap")

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
DEFAULT_PRIORITY = 1.0
DEFAULT_REVISION_COUNT = 1


class SitemapAssembler:
    """Collects the ordered list of sitemap entries for one request."""

    def __init__(self, store: ContentStore, context: SitemapContext):
        self.store = store
        self.context = context

    def build_sitemap(self, request_host: str, now: datetime) -> List[SitemapEntry]:
        entries = self._page_entries(request_host, now)
        entries.extend(self._extra_entries())
        logger.debug(f"Built {len(entries)} sitemap entries for {request_host}")
        return entries

    def _page_entries(self, request_host: str, now: datetime) -> List[SitemapEntry]:
        use_show_in_search = self.context.use_show_in_search
        entries = []
        for item in self.store.live_pages(searchable_only=use_show_in_search):
            if not is_included(item, request_host, use_show_in_search):
                continue
            revisions = item.revision_count
            if revisions is None:
                revisions = DEFAULT_REVISION_COUNT
            created = item.created_at or now
            entries.append(_entry(item, estimate_change_frequency(created, now, revisions)))
        return entries

    def _extra_entries(self) -> List[SitemapEntry]:
        # Host, type and search visibility rules only apply to pages
        entries = []
        for registration in self.context.registry.list_registrations():
            for item in self.store.instances_of(registration):
                if passes_basic_rules(item):
                    entries.append(_entry(item, registration.change_frequency))
        return entries


def _entry(item: ContentItem, change_frequency: ChangeFrequency) -> SitemapEntry:
    priority = DEFAULT_PRIORITY if item.priority is None else item.priority
    return SitemapEntry(
        url=item.absolute_url,
        last_modified=item.last_modified,
        change_frequency=change_frequency,
        priority=priority,
    )


def _add_url(urlset: Element, entry: SitemapEntry):
    """Add a <url> entry to the urlset."""
    url_el = SubElement(urlset, "url")
    SubElement(url_el, "loc").text = entry.url
    if entry.last_modified:
        SubElement(url_el, "lastmod").text = entry.last_modified.date().isoformat()
    SubElement(url_el, "changefreq").text = entry.change_frequency.value
    SubElement(url_el, "priority").text = str(round(entry.priority, 2))


def render_sitemap(entries: List[SitemapEntry]) -> str:
    """Generate a full sitemap.xml string."""
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)

    for entry in entries:
        _add_url(urlset, entry)

    xml_declaration = '<?xml version="1.0" encoding="UTF-8"?>\n'
    return xml_declaration + tostring(urlset, encoding="unicode")
