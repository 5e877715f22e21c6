"""Health and readiness check routes."""

from fastapi import APIRouter, Depends

from config import settings
from routes.lottie import get_animation_service
from services.animations import AnimationService

router = APIRouter()


@router.get("/ready")
async def ready() -> dict:
    """Lightweight readiness check, no external calls."""
    return {"status": "ok", "service": "lottie-proxy", "commit": settings.git_sha}


@router.get("/health")
async def health(animations: AnimationService = Depends(get_animation_service)) -> dict:
    """Readiness info plus response cache statistics."""
    return {
        "status": "ok",
        "service": "lottie-proxy",
        "commit": settings.git_sha,
        "cache": animations.cache.stats(),
    }
