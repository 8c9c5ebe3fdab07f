"""HTTP middleware for request size limits and access logging."""

import logging
import time

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from photo_contest.domain.envelope import Envelope

access_logger = logging.getLogger("photo_contest.access")


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose body exceeds ``max_bytes``.

    A declared ``Content-Length`` is checked before reading anything; bodies
    sent without one (chunked uploads) are read, then measured.
    """

    def __init__(self, app: ASGIApp, max_bytes: int) -> None:
        super().__init__(app)
        self.max_bytes = max_bytes

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared is not None:
            if declared.isdigit() and int(declared) > self.max_bytes:
                return self._reject(request, declared)
        elif request.method in {"POST", "PUT", "PATCH"}:
            received = len(await request.body())
            if received > self.max_bytes:
                return self._reject(request, str(received))
        return await call_next(request)

    def _reject(self, request: Request, size: str) -> Response:
        access_logger.warning(
            "Rejected %s %s: body of %s bytes exceeds %d",
            request.method,
            request.url.path,
            size,
            self.max_bytes,
        )
        return JSONResponse(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            content=Envelope.error("Request body too large").to_dict(),
        )



class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration of each request."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path == "/health":
            return await call_next(request)
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start_time) * 1000
        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        access_logger.log(
            level,
            "%s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
