"""Sitemapper - sitemap.xml for a content-managed site

v1.2.0 - Health report shows sitemap flags and live page count
v1.1.0 - Ping search engine on publish/unpublish (off by default)
v1.0.0 - sitemap.xml from live pages and registered extra content types
"""

import os
import logging
import importlib
from datetime import datetime

from app.version import VERSION

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
logger = logging.getLogger("Sitemapper")


def create_app(settings=None):
    from fastapi import FastAPI

    from app.core.config import settings as default_settings
    from app.services.sitemap_context import SitemapContext
    from app.services.sitemap_ping import SitemapPinger

    settings = settings or default_settings

    app = FastAPI(title=settings.PROJECT_NAME, description="XML sitemap service", version=VERSION)

    from app.database import init_db
    init_db()

    # Sitemap state lives on the app, built once at startup
    app.state.settings = settings
    app.state.sitemap = SitemapContext.from_settings(settings)
    app.state.pinger = SitemapPinger(
        app.state.sitemap,
        endpoint=settings.SITEMAP_PING_URL,
        timeout=settings.SITEMAP_PING_TIMEOUT,
    )

    router_configs = [
        ("app.routers.sitemap", "", "Sitemap"),
        ("app.routers.pages", "/api/v1/pages", "Pages"),
        ("app.routers.settings", "/api/v1/settings", "Settings"),
        ("app.routers.health", "/api/v1/health", "Health"),
    ]

    routers_loaded = []
    for module_path, prefix, tag in router_configs:
        try:
            mod = importlib.import_module(module_path)
            app.include_router(mod.router, prefix=prefix, tags=[tag])
            routers_loaded.append(tag.lower())
        except Exception as e:
            logger.warning(f"{tag} router not loaded: {e}")

    logger.info(f"Sitemapper v{VERSION}: Loaded routers: {', '.join(routers_loaded)}")

    @app.get("/")
    def root():
        return {
            "name": settings.PROJECT_NAME,
            "version": VERSION,
            "status": "running",
            "routers": routers_loaded,
            "timestamp": datetime.utcnow().isoformat(),
        }

    @app.get("/health")
    def health():
        return {
            "status": "healthy",
            "version": VERSION,
            "routers_loaded": routers_loaded,
            "router_count": len(routers_loaded),
        }

    @app.get("/version")
    def version():
        return {"version": VERSION}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    port = int(os.environ.get("PORT", 8000))
    uvicorn.run("main:app", host="0.0.0.0", port=port, reload=False)
