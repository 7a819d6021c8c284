"""Pytest configuration and fixtures for connection tests."""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent directory to Python path so we can import post_connections
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from post_connections import Connection
from tests.doubles import FakeTransport, RecordingObserver

ROOT_URL = "https://example.com/api/"

# Smallest valid-looking JPEG payloads (SOI ... EOI)
JPEG_ONE = b"\xff\xd8\xff\xe0first-image\xff\xd9"
JPEG_TWO = b"\xff\xd8\xff\xe0second-image\xff\xd9"


@pytest.fixture
def fake_transport():
    """Create fake transport."""
    return FakeTransport()


@pytest.fixture
def observer():
    """Create recording observer."""
    return RecordingObserver()


@pytest.fixture
def connection(fake_transport, observer):
    """Create connection with fake transport and a long retry delay.

    The long delay keeps scheduled retries from firing during a test.
    """
    return Connection(
        ROOT_URL,
        {"token": "abc"},
        observer=observer,
        transport=fake_transport,
        retry_delay=60.0,
    )


@pytest.fixture
def fast_connection(fake_transport, observer):
    """Create connection whose retries fire almost immediately."""
    return Connection(
        ROOT_URL,
        {"token": "abc"},
        observer=observer,
        transport=fake_transport,
        retry_delay=0.01,
    )


@pytest.fixture
def jpeg_images():
    """Two fake JPEG payloads."""
    return [JPEG_ONE, JPEG_TWO]
