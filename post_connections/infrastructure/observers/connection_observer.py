"""Default connection observer.

Provides a basic implementation of every IConnectionObserver method with
an optional verbose reporting mode, so subclasses override only the
events they care about.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...domain.entities import PendingProcess
from ...domain.interfaces import IConnectionObserver
from ...domain.value_objects import ConnectionErrorKind

if TYPE_CHECKING:
    from ...connection import Connection

_LOGGER = logging.getLogger(__name__)


class ConnectionObserver(IConnectionObserver):
    """No-op observer that logs events when verbose.

    Attributes:
        verbose: Log every event at INFO level

    Example:
        >>> class SpinnerObserver(ConnectionObserver):
        ...     def loading_started(self, connection):
        ...         spinner.show()
        ...     def loading_stopped(self, connection):
        ...         spinner.hide()
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def _report(self, connection: Connection, message: str, *args) -> None:
        if self.verbose:
            _LOGGER.info("%s : " + message, connection, *args)

    def connection_lost(self, connection: Connection) -> None:
        self._report(connection, "Did lose connection")

    def connection_regained(self, connection: Connection) -> None:
        self._report(connection, "Did regain connection")

    def loading_started(self, connection: Connection) -> None:
        self._report(connection, "Did start loading")

    def loading_stopped(self, connection: Connection) -> None:
        self._report(connection, "Did stop loading")

    def error_encountered(
        self, error: ConnectionErrorKind, connection: Connection
    ) -> None:
        self._report(connection, "Did encounter error - %s", error.description)

    def response_is_valid(
        self, data: bytes, process: PendingProcess, connection: Connection
    ) -> bool:
        self._report(connection, "Response is valid")
        return True
