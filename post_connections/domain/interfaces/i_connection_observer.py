"""IConnectionObserver interface for connection event listeners."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..entities import PendingProcess
from ..value_objects import ConnectionErrorKind

if TYPE_CHECKING:
    from ...connection import Connection


class IConnectionObserver(ABC):
    """Interface for receiving intermediate updates from a Connection.

    Implementers normally subclass ConnectionObserver, which provides a
    logging no-op for every method, and override only what they need.

    Call order for one dispatch attempt:
        1. loading_started
        2. loading_stopped (as soon as the transport completes)
        3. connection_lost / connection_regained (only on a state change)
        4. response_is_valid (success only)
        5. error_encountered (only if response decoding fails)
    """

    @abstractmethod
    def connection_lost(self, connection: Connection) -> None:
        """Called when connectivity changes from connected to lost."""

    @abstractmethod
    def connection_regained(self, connection: Connection) -> None:
        """Called when connectivity changes from lost to connected."""

    @abstractmethod
    def loading_started(self, connection: Connection) -> None:
        """Called before each transport attempt."""

    @abstractmethod
    def loading_stopped(self, connection: Connection) -> None:
        """Called as soon as each transport attempt completes."""

    @abstractmethod
    def error_encountered(
        self, error: ConnectionErrorKind, connection: Connection
    ) -> None:
        """Called when a response cannot be decoded.

        Args:
            error: Error classification
            connection: Connection that received the response
        """

    @abstractmethod
    def response_is_valid(
        self, data: bytes, process: PendingProcess, connection: Connection
    ) -> bool:
        """Decide whether a response should reach the process handler.

        Args:
            data: Raw response body
            process: Process that produced the response
            connection: Connection that ran the process

        Returns:
            True to invoke the handler, False to drop the response silently
        """
