"""ITransport interface for HTTP transport implementations."""

from abc import ABC, abstractmethod

from ..value_objects import RequestDescriptor


class ITransport(ABC):
    """Interface for transport layer implementations.

    The transport performs one request/response exchange per send() call.
    It knows nothing about retries or connectivity state; those belong to
    the Connection.

    Example:
        >>> transport = AiohttpTransport()
        >>> data = await transport.send(request)
        >>> await transport.close()
    """

    @abstractmethod
    async def send(self, request: RequestDescriptor) -> bytes:
        """Send request and return the raw response body.

        Exactly one outcome is delivered per call: either the body is
        returned or TransportError is raised.

        Args:
            request: Fully built request descriptor

        Returns:
            Response body bytes (regardless of HTTP status)

        Raises:
            TransportError: If the exchange fails at the network layer

        Example:
            >>> data = await transport.send(request)
            >>> assert isinstance(data, bytes)
        """

    @abstractmethod
    async def close(self) -> None:
        """Release transport resources.

        This method should be idempotent (safe to call multiple times).
        """
