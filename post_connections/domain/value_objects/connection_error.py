"""Connection error classification reported to observers."""

from enum import Enum


class ConnectionErrorKind(Enum):
    """Errors a connection may report through its observer.

    INVALID_JSON is reported when response bytes do not decode into the
    requested shape. UNEXPECTED is part of the taxonomy but is not emitted
    by any current code path.
    """

    UNEXPECTED = "unexpected"
    INVALID_JSON = "invalid_json"

    @property
    def description(self) -> str:
        """Human-readable description."""
        if self is ConnectionErrorKind.INVALID_JSON:
            return "Invalid JSON"
        return "Unexpected Error"

    def __str__(self) -> str:
        return self.description
