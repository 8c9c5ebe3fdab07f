"""Response envelope models."""

from dataclasses import dataclass

SUCCESS = "success"
ERROR = "error"


@dataclass(frozen=True)
class Envelope:
    """Uniform success/error wrapper around every response payload."""

    status: str
    data: object | None = None
    message: str | None = None

    @classmethod
    def success(cls, data: object | None = None) -> "Envelope":
        """Wrap an optional payload in a success envelope."""
        return cls(status=SUCCESS, data=data)

    @classmethod
    def error(cls, message: str) -> "Envelope":
        """Build an error envelope carrying a human-readable message."""
        return cls(status=ERROR, message=message)

    def to_dict(self) -> dict[str, object]:
        """Return the JSON body, omitting absent fields."""
        body: dict[str, object] = {"status": self.status}
        if self.data is not None:
            body["data"] = self.data
        if self.message is not None:
            body["message"] = self.message
        return body


@dataclass(frozen=True)
class DispatchResult:
    """Envelope plus the transport status it should travel with."""

    envelope: Envelope
    status_code: int = 200
