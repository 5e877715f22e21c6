"""FastAPI application entry point for the LottieFiles proxy."""

import logging
import sys

from fastapi import FastAPI, Request, Response

from config import settings
from errors import cors_headers, register_error_handlers

# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(
        level=logging.INFO,
        format='{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}',
        stream=sys.stdout,
    )
else:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(title="Lottie Proxy", version="1.0.0")

    # CORS: fixed headers on every response, preflight answered by the route
    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers.update(cors_headers())
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.lottie import router as lottie_router

    app.include_router(health_router)
    app.include_router(lottie_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        problems = settings.validate()
        if problems:
            logger.warning("Configuration problems: %s", "; ".join(problems))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app:app", host=settings.api_host, port=settings.api_port)
