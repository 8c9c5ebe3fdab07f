"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from photo_contest.api.middleware import (
    BodySizeLimitMiddleware,
    RequestLoggingMiddleware,
)
from photo_contest.api.photos import router as photo_router
from photo_contest.app_logging import configure_logging
from photo_contest.config import parse_allowed_origins
from photo_contest.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Photo Contest")
    app.state.container = container

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        BodySizeLimitMiddleware, max_bytes=container.settings.max_request_bytes
    )
    allowed_origins = parse_allowed_origins(container.settings.cors_allow_origins)
    if allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=allowed_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(photo_router)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Answer unparseable request bodies with an error envelope."""
        state_container: AppContainer = request.app.state.container
        body = exc.body if isinstance(exc.body, dict) else {}
        result = state_container.dispatcher.reject_malformed(
            f"{request.method} {request.url.path}",
            body.get("userid"),
            requires_registration=not _is_registration(request),
        )
        return JSONResponse(
            status_code=result.status_code, content=result.envelope.to_dict()
        )

    @app.get("/health")
    async def health(request: Request) -> dict[str, object]:
        """Simple health check endpoint."""
        state_container: AppContainer = request.app.state.container
        return {
            "status": "ok",
            "users": state_container.registry.user_count,
            "photos": state_container.registry.photo_count,
        }

    logger.info(
        "Photo contest API ready (environment=%s)", container.settings.environment
    )
    return app


def _is_registration(request: Request) -> bool:
    """Return true for the one operation open to unregistered users."""
    path = request.url.path.rstrip("/")
    return request.method == "POST" and path == "/photo/users"
