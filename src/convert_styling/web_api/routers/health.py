"""
Health Check Router
==================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter, Depends

from convert_styling import __version__
from convert_styling.guides import Guide
from convert_styling.web_api.dependencies import current_guide

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check(guide: Guide = Depends(current_guide)):
    """
    Readiness check endpoint.
    Ready once the migration guide can be loaded; reports its fingerprint.
    """
    return {"status": "ready", "guide_sha1": guide.sha1}
