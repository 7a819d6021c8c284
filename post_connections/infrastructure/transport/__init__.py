"""HTTP transport implementations.

This module contains implementations of the transport layer interface
for POST requests over HTTP(S).
"""

from .aiohttp_transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
]
