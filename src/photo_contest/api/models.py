"""Pydantic models for photo API request bodies."""

from pydantic import BaseModel


class UserRequest(BaseModel):
    """Body carrying only the acting userid."""

    userid: str | None = None


class SubmitPhotoRequest(UserRequest):
    """Body of a photo submission."""

    location: str | None = None
    uri: str | None = None


class CommentRequest(UserRequest):
    """Body of a comment on an entry."""

    comment: str | None = None
