"""Registry of extra (non-page) content types listed in sitemap.xml."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Type

from app.database import CONTENT_TYPES, SitemapMixin
from app.schemas.sitemap import ChangeFrequency

logger = logging.getLogger("sitemapper.registry")


@dataclass(frozen=True)
class ExtraTypeRegistration:
    type_identifier: str
    change_frequency: ChangeFrequency
    model: Type[SitemapMixin]


class ExtraItemRegistry:
    """Ordered, idempotent set of extra content type registrations."""

    def __init__(self):
        self._registrations: List[ExtraTypeRegistration] = []

    def register(self, type_identifier: str, change_frequency: str = "monthly",
                 model: Optional[Type[SitemapMixin]] = None):
        if self.is_registered(type_identifier):
            return

        try:
            frequency = ChangeFrequency(change_frequency)
        except ValueError:
            raise ValueError(
                f"Invalid change frequency {change_frequency!r} for {type_identifier}"
            ) from None

        if model is None:
            model = CONTENT_TYPES.get(type_identifier)
            if model is None:
                raise ValueError(f"Unknown content type: {type_identifier}")
        if not (isinstance(model, type) and issubclass(model, SitemapMixin)):
            raise TypeError(f"{type_identifier} does not support sitemap listing")

        self._registrations.append(ExtraTypeRegistration(type_identifier, frequency, model))
        logger.info(f"Registered {type_identifier} for sitemap.xml ({frequency.value})")

    def is_registered(self, type_identifier: str) -> bool:
        return any(r.type_identifier == type_identifier for r in self._registrations)

    def list_registrations(self) -> List[ExtraTypeRegistration]:
        return list(self._registrations)

    def __len__(self):
        return len(self._registrations)
