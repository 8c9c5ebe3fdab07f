"""In-memory registry of users and photo entries."""

import threading
from dataclasses import dataclass, replace

from photo_contest.domain.errors import (
    AlreadyRegistered,
    InvalidPayload,
    NotFound,
)
from photo_contest.domain.photos import PhotoEntry, is_encoded_image


@dataclass
class PhotoRegistry:
    """Authoritative store for registered users and competition entries.

    Every mutation runs under a single lock so concurrent votes and
    submissions never lose an increment. Entries are immutable snapshots;
    updates swap in a new record at the same position.
    """

    _users: set[str]
    _entries: list[PhotoEntry]
    _positions: dict[str, int]
    _next_id: int
    _lock: threading.Lock

    def __init__(self) -> None:
        self._users = set()
        self._entries = []
        self._positions = {}
        self._next_id = 0
        self._lock = threading.Lock()

    @property
    def user_count(self) -> int:
        with self._lock:
            return len(self._users)

    @property
    def photo_count(self) -> int:
        with self._lock:
            return len(self._entries)

    def register_user(self, userid: str) -> None:
        """Register a new userid."""
        if not userid:
            raise InvalidPayload("User id is required")
        with self._lock:
            if userid in self._users:
                raise AlreadyRegistered()
            self._users.add(userid)

    def is_registered(self, userid: str | None) -> bool:
        """Return true when the userid has been registered."""
        if not userid:
            return False
        with self._lock:
            return userid in self._users

    def submit_photo(self, userid: str, location: str, uri: str) -> str:
        """Store a new entry and return its id.

        The caller is responsible for checking that ``userid`` is registered.
        """
        if not is_encoded_image(uri):
            raise InvalidPayload()
        with self._lock:
            photo_id = str(self._next_id)
            self._next_id += 1
            self._positions[photo_id] = len(self._entries)
            self._entries.append(
                PhotoEntry(user=userid, id=photo_id, location=location, uri=uri)
            )
        return photo_id

    def list_photos(self, photo_id: str | None = None) -> tuple[PhotoEntry, ...]:
        """Return all entries in submission order, or only the matching one."""
        if photo_id:
            return (self.get_photo(photo_id),)
        with self._lock:
            return tuple(self._entries)

    def get_photo(self, photo_id: str) -> PhotoEntry:
        """Return a single entry by id."""
        with self._lock:
            return self._entries[self._position(photo_id)]

    def add_vote(self, photo_id: str) -> PhotoEntry:
        """Increment the vote count of an entry by one."""
        with self._lock:
            position = self._position(photo_id)
            entry = self._entries[position]
            updated = replace(entry, votes=entry.votes + 1)
            self._entries[position] = updated
        return updated

    def add_comment(self, photo_id: str, comment: str) -> PhotoEntry:
        """Append a comment to an entry."""
        with self._lock:
            position = self._position(photo_id)
            if not comment:
                raise InvalidPayload("Comment must not be empty")
            entry = self._entries[position]
            updated = replace(entry, comments=(*entry.comments, comment))
            self._entries[position] = updated
        return updated

    def _position(self, photo_id: str) -> int:
        position = self._positions.get(photo_id)
        if position is None:
            raise NotFound()
        return position
