"""RequestDescriptor value object.

Represents a fully built POST request ready to be handed to a transport.
"""

from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Tuple

from ...const import (
    CONTENT_TYPE_FORM,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HTTP_METHOD_POST,
)


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable request descriptor.

    Descriptors are never modified after they are built. When default
    parameters change between a failure and its retry, a refreshed copy is
    produced with with_body().

    Attributes:
        url: Absolute target URL
        body: Encoded request body
        header_items: Header name/value pairs (use `headers` for a dict view)
        method: HTTP method (always POST)

    Example:
        >>> request = RequestDescriptor.create(
        ...     "https://example.com/api/login.php",
        ...     b"token=abc",
        ...     {"Content-Type": "application/x-www-form-urlencoded"},
        ... )
        >>> request.is_form_encoded
        True
    """

    url: str
    body: bytes
    header_items: Tuple[Tuple[str, str], ...] = field(default=())
    method: str = HTTP_METHOD_POST

    def __post_init__(self) -> None:
        """Validate descriptor components.

        Raises:
            ValueError: If url is empty or method is not POST
            TypeError: If body is not bytes
        """
        if not self.url:
            raise ValueError("Request URL must not be empty")

        if self.method != HTTP_METHOD_POST:
            raise ValueError(f"Only POST requests are supported, got {self.method}")

        if not isinstance(self.body, (bytes, bytearray)):
            raise TypeError(f"Body must be bytes, got {type(self.body).__name__}")

    @classmethod
    def create(
        cls, url: str, body: bytes, headers: Mapping[str, str]
    ) -> "RequestDescriptor":
        """Build a descriptor from a header mapping."""
        return cls(url=url, body=bytes(body), header_items=tuple(headers.items()))

    @property
    def headers(self) -> Dict[str, str]:
        """Get headers as a new dict."""
        return dict(self.header_items)

    @property
    def content_type(self) -> str:
        """Get Content-Type header value (empty string if absent)."""
        return self.headers.get(HEADER_CONTENT_TYPE, "")

    @property
    def is_form_encoded(self) -> bool:
        """Check if body is application/x-www-form-urlencoded."""
        return self.content_type == CONTENT_TYPE_FORM

    def with_body(self, body: bytes) -> "RequestDescriptor":
        """Return a copy with a new body and matching Content-Length.

        Args:
            body: Replacement body

        Returns:
            New descriptor; self is left untouched
        """
        headers = self.headers
        if HEADER_CONTENT_LENGTH in headers:
            headers[HEADER_CONTENT_LENGTH] = str(len(body))
        return replace(self, body=bytes(body), header_items=tuple(headers.items()))

    def __str__(self) -> str:
        """String representation for logging."""
        return f"RequestDescriptor({self.method} {self.url}, {len(self.body)} bytes)"
