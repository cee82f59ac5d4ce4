from typing import List, Tuple
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Sitemapper"

    # Database
    DATABASE_URL: str = "sqlite:///./sitemapper.db"

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        # Handle postgres:// vs postgresql://
        if isinstance(v, str) and v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v

    # Site
    SITE_BASE_URL: str = ""  # empty: derive from the incoming request
    ENVIRONMENT: str = "dev"  # dev, test, live

    # Sitemap
    SITEMAP_ENABLED: bool = True
    SITEMAP_PING_ENABLED: bool = False
    SITEMAP_USE_SHOW_IN_SEARCH: bool = True
    SITEMAP_EXTRA_TYPES: str = ""  # e.g. "Event:weekly,NewsArticle"
    SITEMAP_PING_URL: str = "https://www.google.com/webmasters/sitemaps/ping"
    SITEMAP_PING_TIMEOUT: float = 10.0

    @field_validator("SITEMAP_EXTRA_TYPES")
    @classmethod
    def check_extra_types(cls, v: str) -> str:
        for part in v.split(","):
            part = part.strip()
            if part and not part.partition(":")[0].strip():
                raise ValueError(f"Malformed extra type entry: {part!r}")
        return v

    @property
    def extra_types(self) -> List[Tuple[str, str]]:
        """(type identifier, change frequency) pairs to register at startup."""
        pairs = []
        for part in self.SITEMAP_EXTRA_TYPES.split(","):
            part = part.strip()
            if not part:
                continue
            type_identifier, _, change_frequency = part.partition(":")
            pairs.append((type_identifier.strip(), change_frequency.strip() or "monthly"))
        return pairs

    @property
    def is_dev(self) -> bool:
        return self.ENVIRONMENT.lower() == "dev"

    class Config:
        case_sensitive = True
        env_file = ".env"


settings = Settings()
