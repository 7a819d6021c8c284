"""Domain interfaces for the POST connection manager.

This module defines the contracts (interfaces) that infrastructure
implementations must fulfill. Using these interfaces enables:
- Dependency Inversion: Connection policy doesn't depend on aiohttp
- Testability: Easy to fake transports and observers in tests
"""

from .i_transport import ITransport
from .i_connection_observer import IConnectionObserver
from .i_image_encoder import IImageEncoder

__all__ = [
    "ITransport",
    "IConnectionObserver",
    "IImageEncoder",
]
