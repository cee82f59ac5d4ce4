"""
Health Check Router: deep system status
GET /api/v1/health/deep returns structured health report.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from sqlalchemy import func, text

from app.core.config import Settings
from app.database import get_db, engine, PageModel
from app.dependencies import get_settings, get_sitemap_context
from app.services.sitemap_context import SitemapContext

logger = logging.getLogger("Sitemapper.Health")
router = APIRouter()


@router.get("/deep", summary="Deep health check",
            description="Structured system status: DB, sitemap flags, live pages")
def deep_health(db: Session = Depends(get_db),
                context: SitemapContext = Depends(get_sitemap_context),
                settings: Settings = Depends(get_settings)):
    report = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "checks": {},
    }

    issues = []

    # ─── Database Connectivity ───
    try:
        db.execute(text("SELECT 1"))
        report["checks"]["database"] = {"status": "ok", "engine": str(engine.url).split("@")[-1] if "@" in str(engine.url) else "sqlite"}
    except Exception as e:
        report["checks"]["database"] = {"status": "error", "message": str(e)}
        issues.append("database")

    # ─── Live Pages ───
    try:
        live = db.query(func.count(PageModel.id)).filter(PageModel.published == True).scalar()
        report["checks"]["pages"] = {"status": "ok", "live": live or 0}
    except Exception as e:
        report["checks"]["pages"] = {"status": "error", "message": str(e)}
        issues.append("pages")

    # ─── Sitemap ───
    report["checks"]["sitemap"] = {
        "status": "ok" if context.enabled else "disabled",
        "enabled": context.enabled,
        "ping_enabled": context.notification_enabled,
        "ping_active": context.enabled and context.notification_enabled and not settings.is_dev,
        "extra_types": len(context.registry),
        "environment": settings.ENVIRONMENT,
    }

    if issues:
        report["status"] = "degraded"
        report["issues"] = issues
        logger.warning(f"Deep health check degraded: {issues}")

    return report
