"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Types of test doubles:
- Fake: Lightweight working implementation (e.g., scripted transport)
- Spy: Records calls for verification (e.g., recording observer)
- Mock: Verifies interactions (use unittest.mock for this)

Example:
    >>> from tests.doubles import FakeTransport
    >>> transport = FakeTransport()
    >>> transport.add_response(b'{"status": "ok"}')
    >>> data = await transport.send(request)
    >>> assert data == b'{"status": "ok"}'
"""

from .fake_transport import FakeTransport
from .recording_observer import RecordingObserver

__all__ = [
    "FakeTransport",
    "RecordingObserver",
]
