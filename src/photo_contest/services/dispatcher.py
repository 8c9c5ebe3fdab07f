"""Request dispatching from API operations to the photo registry."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from fastapi import status

from photo_contest.domain.envelope import DispatchResult, Envelope
from photo_contest.domain.errors import (
    InvalidPayload,
    NotFound,
    NotRegistered,
    PhotoContestError,
)
from photo_contest.services.registry import PhotoRegistry

logger = logging.getLogger(__name__)


@dataclass
class Dispatcher:
    """Maps API operations to registry calls and shapes the envelopes."""

    registry: PhotoRegistry

    def list_photos(
        self, userid: str | None, photo_id: str | None = None
    ) -> DispatchResult:
        """List every entry, or a single entry when ``photo_id`` is given."""

        def _list() -> object:
            if photo_id:
                return self.registry.get_photo(photo_id).to_dict()
            entries = self.registry.list_photos()
            if not entries:
                raise NotFound()
            return [entry.to_dict() for entry in entries]

        return self._run("list_photos", userid, _list)

    def submit_photo(
        self, userid: str | None, location: str, uri: str
    ) -> DispatchResult:
        """Submit a new competition entry."""

        def _submit() -> object:
            photo_id = self.registry.submit_photo(str(userid), location, uri)
            return {"id": photo_id}

        return self._run("submit_photo", userid, _submit)

    def register_user(self, userid: str | None) -> DispatchResult:
        """Register a userid; the only operation open to unknown users."""
        try:
            self.registry.register_user(userid or "")
        except PhotoContestError as exc:
            logger.warning("register_user rejected: %s", exc.message)
            return DispatchResult(Envelope.error(exc.message))
        logger.info("Registered user %s", userid)
        return DispatchResult(Envelope.success())

    def vote(self, userid: str | None, photo_id: str) -> DispatchResult:
        """Add one vote to an entry."""

        def _vote() -> None:
            self.registry.add_vote(photo_id)

        return self._run("vote", userid, _vote)

    def comment(
        self, userid: str | None, photo_id: str, comment: str
    ) -> DispatchResult:
        """Attach a comment to an entry."""

        def _comment() -> None:
            self.registry.add_comment(photo_id, comment)

        return self._run("comment", userid, _comment)

    def reject_malformed(
        self, operation: str, userid: object, requires_registration: bool = True
    ) -> DispatchResult:
        """Answer a request whose body failed validation.

        A missing, non-string or unknown userid is reported as unregistered,
        except for registration itself, which has no user to check yet.
        """
        known = userid if isinstance(userid, str) else None
        if requires_registration and not self.registry.is_registered(known):
            logger.warning("%s rejected: unregistered user %r", operation, userid)
            return self._not_registered()
        error = InvalidPayload(
            "Invalid request body" if known else "User id is required"
        )
        logger.warning("%s rejected: %s", operation, error.message)
        return DispatchResult(Envelope.error(error.message))

    def _not_registered(self) -> DispatchResult:
        return DispatchResult(
            Envelope.error(NotRegistered().message),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    def _run(
        self, operation: str, userid: str | None, action: Callable[[], object]
    ) -> DispatchResult:
        if not self.registry.is_registered(userid):
            logger.warning("%s rejected: unregistered user %r", operation, userid)
            return self._not_registered()
        try:
            data = action()
        except PhotoContestError as exc:
            logger.warning("%s failed for %s: %s", operation, userid, exc.message)
            return DispatchResult(Envelope.error(exc.message))
        logger.info("%s succeeded for %s", operation, userid)
        return DispatchResult(Envelope.success(data))
