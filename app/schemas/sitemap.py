from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class ChangeFrequency(str, Enum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


class ContentItem(BaseModel):
    """Read-only view of a piece of site content, as the sitemap sees it."""

    model_config = ConfigDict(frozen=True)

    absolute_url: str
    created_at: Optional[datetime] = None
    last_modified: Optional[datetime] = None
    revision_count: Optional[int] = None
    viewable: bool = True
    priority: Optional[float] = None
    show_in_search: Optional[bool] = None
    type_excluded: bool = False


class SitemapEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = Field(min_length=1)
    last_modified: Optional[datetime] = None
    change_frequency: ChangeFrequency
    priority: float = Field(gt=0.0, le=1.0)
