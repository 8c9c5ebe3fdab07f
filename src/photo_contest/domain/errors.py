"""Error taxonomy shared by the registry, dispatcher and client."""

NOT_REGISTERED_MESSAGE = "User not registered"
ALREADY_REGISTERED_MESSAGE = "User already registered"
NOT_FOUND_MESSAGE = "No matching records"
INVALID_IMAGE_MESSAGE = "Only base64 encoded images are supported"


class PhotoContestError(Exception):
    """Base class for expected, caller-facing failures."""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotRegistered(PhotoContestError):
    """The userid is missing or was never registered."""

    default_message = NOT_REGISTERED_MESSAGE


class AlreadyRegistered(PhotoContestError):
    """The userid has already been registered."""

    default_message = ALREADY_REGISTERED_MESSAGE


class InvalidPayload(PhotoContestError):
    """A request field failed validation."""

    default_message = INVALID_IMAGE_MESSAGE


class NotFound(PhotoContestError):
    """No photo entry has the requested id."""

    default_message = NOT_FOUND_MESSAGE


class PhotoServiceError(PhotoContestError):
    """The photo service answered with an error envelope."""

    default_message = "Unknown error"
