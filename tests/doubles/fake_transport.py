"""Fake transport for testing without a network.

This fake implements ITransport interface for testing.
"""

from typing import List

from post_connections.domain.exceptions import TransportError
from post_connections.domain.interfaces import ITransport
from post_connections.domain.value_objects import RequestDescriptor


class FakeTransport(ITransport):
    """Fake HTTP transport for testing.

    Responses are returned in the order they were added; once the queue is
    empty the default response is returned. Failures take priority over
    queued responses.

    Attributes:
        _responses: Queued response bodies
        _calls: History of send() calls
        _failures_remaining: Number of upcoming send() calls that fail
        _closed: Whether close() has been called

    Example:
        >>> transport = FakeTransport()
        >>> transport.fail_next_send(times=2)
        >>> transport.add_response(b'{"a": "1"}')
    """

    def __init__(self, default_response: bytes = b"{}"):
        """Initialize fake transport."""
        self.default_response = default_response
        self._responses: List[bytes] = []
        self._calls: List[RequestDescriptor] = []
        self._failures_remaining = 0
        self._closed = False

    async def send(self, request: RequestDescriptor) -> bytes:
        """Simulate sending a request.

        Raises:
            TransportError: If configured to fail
        """
        self._calls.append(request)

        if self._failures_remaining > 0:
            self._failures_remaining -= 1
            raise TransportError("Simulated network failure")

        if self._responses:
            return self._responses.pop(0)
        return self.default_response

    async def close(self) -> None:
        """Simulate closing."""
        self._closed = True

    # Test helper methods

    def add_response(self, response: bytes) -> None:
        """Queue a response body."""
        self._responses.append(response)

    def fail_next_send(self, times: int = 1) -> None:
        """Make the next `times` send() calls raise TransportError."""
        self._failures_remaining += times

    def get_calls(self) -> List[RequestDescriptor]:
        """Get history of send() calls."""
        return self._calls.copy()

    @property
    def call_count(self) -> int:
        """Number of send() calls so far."""
        return len(self._calls)

    @property
    def closed(self) -> bool:
        """Check if close() was called."""
        return self._closed
