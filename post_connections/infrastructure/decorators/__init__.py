"""Infrastructure layer decorators."""

from .error_handler import handle_transport_errors

__all__ = [
    "handle_transport_errors",
]
