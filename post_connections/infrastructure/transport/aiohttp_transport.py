"""HTTP transport implementation built on aiohttp.

This module implements the ITransport interface with a lazily created
aiohttp ClientSession. Only network-level failures are reported as
TransportError; HTTP status codes are passed through untouched so the
response pipeline sees every body the server sends back.
"""

import asyncio
import logging
from typing import Optional

import aiohttp
from aiohttp import ClientTimeout

from ...const import DEFAULT_REQUEST_TIMEOUT
from ...domain.exceptions import TransportError
from ...domain.interfaces import ITransport
from ...domain.value_objects import RequestDescriptor
from ..decorators import handle_transport_errors

_LOGGER = logging.getLogger(__name__)


class AiohttpTransport(ITransport):
    """aiohttp transport for POST requests.

    Attributes:
        _timeout: Total timeout for one exchange
        _session: Session (created on first send)
        _owns_session: Whether close() should close the session

    Example:
        >>> transport = AiohttpTransport(timeout=10.0)
        >>> data = await transport.send(request)
        >>> await transport.close()
    """

    def __init__(
        self,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """Initialize transport.

        Args:
            timeout: Total request timeout in seconds
            session: Optional externally managed session; it is not closed
                by close()
        """
        self._timeout = ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    @handle_transport_errors("HTTP send", reraise=True)
    async def send(self, request: RequestDescriptor) -> bytes:
        """Send request and return the response body.

        Args:
            request: Request descriptor

        Returns:
            Raw response body

        Raises:
            TransportError: On connection, protocol or timeout failures
        """
        session = await self._get_session()

        _LOGGER.debug("Sending %s", request)
        try:
            async with session.request(
                request.method,
                request.url,
                data=request.body,
                headers=request.headers,
            ) as response:
                data = await response.read()
                _LOGGER.debug(
                    "Received %d bytes from %s (status %d)",
                    len(data),
                    request.url,
                    response.status,
                )
                return data
        except asyncio.TimeoutError as err:
            raise TransportError(f"Request to {request.url} timed out") from err
        except aiohttp.ClientError as err:
            raise TransportError(f"Request to {request.url} failed: {err}") from err

    async def close(self) -> None:
        """Close the owned session (idempotent)."""
        if not self._owns_session or self._session is None:
            return
        if not self._session.closed:
            await self._session.close()
        self._session = None
