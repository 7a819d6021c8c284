"""Domain entities (objects with identity)."""

from .pending_process import PendingProcess, ResponseHandler

__all__ = [
    "PendingProcess",
    "ResponseHandler",
]
