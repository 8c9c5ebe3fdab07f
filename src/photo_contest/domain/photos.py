"""Domain models for the photo competition."""

from dataclasses import dataclass, field
from typing import Any

ENCODED_IMAGE_PREFIX = "data:image"


@dataclass(frozen=True)
class PhotoEntry:
    """Represents one photo submitted to the competition."""

    user: str
    id: str
    location: str
    uri: str
    votes: int = 0
    comments: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Return the JSON shape served by the API."""
        return {
            "user": self.user,
            "id": self.id,
            "votes": self.votes,
            "location": self.location,
            "uri": self.uri,
            "comments": list(self.comments),
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "PhotoEntry":
        """Build an entry from its API JSON shape."""
        comments = payload.get("comments") or []
        return cls(
            user=str(payload.get("user", "")),
            id=str(payload.get("id", "")),
            location=str(payload.get("location", "")),
            uri=str(payload.get("uri", "")),
            votes=int(payload.get("votes", 0)),
            comments=tuple(str(item) for item in comments),
        )


def is_encoded_image(uri: str | None) -> bool:
    """Return true when the uri carries a base64 encoded image."""
    return uri is not None and uri.startswith(ENCODED_IMAGE_PREFIX)
