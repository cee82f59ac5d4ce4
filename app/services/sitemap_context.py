"""Sitemap runtime state: feature flags plus the extra type registry.

One SitemapContext is built per application by ``create_app()`` and kept on
``app.state.sitemap``. Toggles are in-memory only.
"""

import logging
from typing import Optional

from app.core.config import Settings
from app.services.sitemap_registry import ExtraItemRegistry

logger = logging.getLogger("sitemapper.context")


class SitemapContext:

    def __init__(self, enabled: bool = True, notification_enabled: bool = False,
                 use_show_in_search: bool = True,
                 registry: Optional[ExtraItemRegistry] = None):
        self.enabled = enabled
        self.notification_enabled = notification_enabled
        self.use_show_in_search = use_show_in_search
        self.registry = registry if registry is not None else ExtraItemRegistry()

    @classmethod
    def from_settings(cls, settings: Settings) -> "SitemapContext":
        context = cls(
            enabled=settings.SITEMAP_ENABLED,
            notification_enabled=settings.SITEMAP_PING_ENABLED,
            use_show_in_search=settings.SITEMAP_USE_SHOW_IN_SEARCH,
        )
        for type_identifier, change_frequency in settings.extra_types:
            context.register_extra_type(type_identifier, change_frequency)
        return context

    def register_extra_type(self, type_identifier: str, change_frequency: str = "monthly"):
        self.registry.register(type_identifier, change_frequency)

    def enable_sitemap(self):
        self.enabled = True
        logger.info("sitemap.xml enabled")

    def disable_sitemap(self):
        self.enabled = False
        logger.info("sitemap.xml disabled")

    def enable_notification(self):
        self.notification_enabled = True
        logger.info("Sitemap ping on publish enabled")

    def disable_notification(self):
        self.notification_enabled = False
        logger.info("Sitemap ping on publish disabled")

    def status(self) -> dict:
        return {
            "enabled": self.enabled,
            "notification_enabled": self.notification_enabled,
            "use_show_in_search": self.use_show_in_search,
            "extra_types": [
                {"type": r.type_identifier, "changefreq": r.change_frequency.value}
                for r in self.registry.list_registrations()
            ],
        }
