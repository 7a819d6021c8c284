"""Observer implementations."""

from .connection_observer import ConnectionObserver

__all__ = [
    "ConnectionObserver",
]
