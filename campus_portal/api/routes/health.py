"""Health check endpoints"""

from fastapi import APIRouter, Depends

from campus_portal import __version__
from campus_portal.config import PortalSettings, get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    return {"status": "healthy", "version": __version__}


@router.get("/api/v1/health")
async def api_health_check(settings: PortalSettings = Depends(get_settings)):
    """Health with the deployment environment"""
    return {
        "status": "healthy",
        "version": __version__,
        "environment": settings.environment,
    }
