"""LottieFiles proxy route: cached search and popular listings."""

from fastapi import APIRouter, Depends, Request, Response

from services.animations import DEFAULT_TYPE, AnimationService, service

router = APIRouter()


def get_animation_service() -> AnimationService:
    """Process-wide service (and its cache); overridden in tests."""
    return service


def _first_param(request: Request, name: str, default: str) -> str:
    # First occurrence wins for repeated params (?q=a&q=b -> "a")
    values = request.query_params.getlist(name)
    return values[0] if values else default


@router.options("/api/lottie")
async def lottie_preflight() -> Response:
    """CORS preflight: empty 200, no cache or upstream work."""
    return Response(status_code=200)


@router.get("/api/lottie")
async def lottie_search(
    request: Request,
    animations: AnimationService = Depends(get_animation_service),
):
    """Search animations (``q`` set) or list popular ones (``q`` empty).

    Query params: ``q`` (default ``""``) and ``type`` (default ``"animation"``).
    """
    query = _first_param(request, "q", "")
    asset_type = _first_param(request, "type", DEFAULT_TYPE)
    return await animations.get_animations(query, asset_type)
