from .sitemap import ChangeFrequency, ContentItem, SitemapEntry
from .page import Page, PageCreate, PageUpdate
