"""Process-wide shared Connection.

Applications that talk to a single server may register one Connection for
convenient access across modules. The shared instance is explicit: it
exists only between init_shared() and teardown_shared().
"""

from __future__ import annotations

import logging
from typing import Optional

from .connection import Connection

_LOGGER = logging.getLogger(__name__)

_shared: Optional[Connection] = None


def init_shared(connection: Connection) -> Connection:
    """Register connection as the shared instance.

    Replaces any previously registered instance without closing it.

    Returns:
        The registered connection
    """
    global _shared

    if _shared is not None and _shared is not connection:
        _LOGGER.debug("Replacing shared connection %s", _shared)
    _shared = connection
    return connection


def get_shared() -> Connection:
    """Get the shared instance.

    Raises:
        RuntimeError: If init_shared() has not been called
    """
    if _shared is None:
        raise RuntimeError("Shared connection not initialised; call init_shared()")
    return _shared


def has_shared() -> bool:
    """Check if a shared instance is registered."""
    return _shared is not None


async def teardown_shared(close: bool = True) -> Optional[Connection]:
    """Unregister the shared instance.

    Args:
        close: Also close the connection's transport

    Returns:
        The connection that was registered, or None
    """
    global _shared

    connection, _shared = _shared, None
    if connection is not None and close:
        await connection.close()
    return connection
