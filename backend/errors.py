"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import settings

logger = logging.getLogger(__name__)

UPSTREAM_NAME = "LottieFiles API"


def cors_headers() -> dict[str, str]:
    """CORS headers attached to every response, including errors."""
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


class LottieProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class UpstreamStatusError(LottieProxyError):
    """Upstream answered with a non-2xx status; the status is passed through."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(
            f"{UPSTREAM_NAME} responded with status: {status_code}",
            status_code=status_code,
        )
        self.body = body


class UpstreamUnavailableError(LottieProxyError):
    """Upstream could not be reached or returned a body that is not JSON."""

    def __init__(self, cause: Exception | None = None):
        super().__init__(f"Failed to fetch data from {UPSTREAM_NAME}.", status_code=500)
        self.cause = cause


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(LottieProxyError)
    async def handle_proxy_error(_request: Request, exc: LottieProxyError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code, headers=cors_headers())

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
            headers=cors_headers(),
        )
