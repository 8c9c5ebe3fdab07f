"""Photo contest API client adapter."""

from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from photo_contest.domain.envelope import SUCCESS
from photo_contest.domain.errors import InvalidPayload, PhotoServiceError
from photo_contest.domain.photos import PhotoEntry, is_encoded_image


class PhotoClient(Protocol):
    """Interface for photo contest API interactions."""

    async def get_photos(self, userid: str) -> list[PhotoEntry]:
        """Return every entry visible to the user."""

    async def get_photo(self, userid: str, photo_id: str) -> PhotoEntry:
        """Return a single entry."""

    async def add_photo(self, userid: str, uri: str, location: str) -> str:
        """Submit an entry and return its id."""

    async def register_user(self, userid: str) -> None:
        """Register a userid."""

    async def add_vote(self, userid: str, photo_id: str) -> None:
        """Vote on an entry."""

    async def add_comment(self, userid: str, photo_id: str, comment: str) -> None:
        """Comment on an entry."""


@dataclass
class HttpxPhotoClient(PhotoClient):
    """Photo contest client implemented with httpx."""

    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str) -> "HttpxPhotoClient":
        """Create a client with a managed httpx session."""
        return cls(base_url=base_url, http_client=httpx.AsyncClient())

    async def get_photos(self, userid: str) -> list[PhotoEntry]:
        """Fetch all entries."""
        response = await self.http_client.get(
            self._url(""), params={"userid": userid}, timeout=30
        )
        data = _check_response(response)
        return [PhotoEntry.from_dict(item) for item in data]

    async def get_photo(self, userid: str, photo_id: str) -> PhotoEntry:
        """Fetch a single entry by id."""
        response = await self.http_client.get(
            self._url(photo_id), params={"userid": userid}, timeout=30
        )
        return PhotoEntry.from_dict(_check_response(response))

    async def add_photo(self, userid: str, uri: str, location: str) -> str:
        """Submit a base64 encoded image and return the new entry id."""
        if not is_encoded_image(uri):
            raise InvalidPayload()
        response = await self.http_client.post(
            self._url(""),
            json={"userid": userid, "uri": uri, "location": location},
            timeout=60,
        )
        data = _check_response(response)
        return str(data["id"])

    async def register_user(self, userid: str) -> None:
        """Register a userid with the service."""
        response = await self.http_client.post(
            self._url("users"), json={"userid": userid}, timeout=10
        )
        _check_response(response)

    async def add_vote(self, userid: str, photo_id: str) -> None:
        """Vote on an entry."""
        response = await self.http_client.post(
            self._url(f"vote/{photo_id}"), json={"userid": userid}, timeout=10
        )
        _check_response(response)

    async def add_comment(self, userid: str, photo_id: str, comment: str) -> None:
        """Comment on an entry."""
        response = await self.http_client.post(
            self._url(f"comment/{photo_id}"),
            json={"userid": userid, "comment": comment},
            timeout=10,
        )
        _check_response(response)

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.http_client.aclose()

    def _url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}/photo/{path}"


def _check_response(response: httpx.Response) -> Any:
    """Unwrap a response envelope, raising on service errors."""
    try:
        body = response.json()
    except ValueError:
        response.raise_for_status()
        raise
    if not isinstance(body, dict) or "status" not in body:
        response.raise_for_status()
        raise PhotoServiceError(f"Unexpected response: {response.status_code}")
    if body["status"] != SUCCESS:
        raise PhotoServiceError(body.get("message"))
    response.raise_for_status()
    return body.get("data")
