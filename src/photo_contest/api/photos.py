"""Photo competition API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from photo_contest.api.models import CommentRequest, SubmitPhotoRequest, UserRequest

if TYPE_CHECKING:
    from photo_contest.containers import AppContainer
    from photo_contest.domain.envelope import DispatchResult
    from photo_contest.services.dispatcher import Dispatcher

router = APIRouter(prefix="/photo", tags=["photo"])


def _dispatcher(request: Request) -> Dispatcher:
    container: AppContainer = request.app.state.container
    return container.dispatcher


def _respond(result: DispatchResult) -> JSONResponse:
    return JSONResponse(
        status_code=result.status_code, content=result.envelope.to_dict()
    )


@router.get("/")
async def list_photos(request: Request, userid: str | None = None) -> JSONResponse:
    """Return every submitted entry."""
    return _respond(_dispatcher(request).list_photos(userid))


@router.get("/{photo_id}")
async def get_photo(
    photo_id: str, request: Request, userid: str | None = None
) -> JSONResponse:
    """Return a single entry."""
    return _respond(_dispatcher(request).list_photos(userid, photo_id))


@router.post("/")
async def submit_photo(body: SubmitPhotoRequest, request: Request) -> JSONResponse:
    """Submit a new competition entry."""
    return _respond(
        _dispatcher(request).submit_photo(
            body.userid, body.location or "", body.uri or ""
        )
    )


@router.post("/users")
async def register_user(body: UserRequest, request: Request) -> JSONResponse:
    """Register a new user."""
    return _respond(_dispatcher(request).register_user(body.userid))


@router.post("/vote/{photo_id}")
async def vote(photo_id: str, body: UserRequest, request: Request) -> JSONResponse:
    """Add a vote to an entry."""
    return _respond(_dispatcher(request).vote(body.userid, photo_id))


@router.post("/comment/{photo_id}")
async def comment(
    photo_id: str, body: CommentRequest, request: Request
) -> JSONResponse:
    """Attach a comment to an entry."""
    return _respond(
        _dispatcher(request).comment(body.userid, photo_id, body.comment or "")
    )
