"""Custom exceptions for the POST connection manager.

This module defines domain-specific exceptions that represent expected
error conditions in communication with the server.
"""


class TransportError(Exception):
    """Request could not be delivered (expected network condition).

    Raised by transport implementations when the underlying HTTP exchange
    fails at the network layer: DNS failure, refused connection, dropped
    socket, timeout. Application-level problems (status codes, malformed
    JSON) are NOT transport errors; the response bytes are still delivered.

    The connection treats this as loss of connectivity and re-issues the
    request after a fixed delay, so it is logged without a stack trace.

    Example:
        >>> raise TransportError("Cannot connect to host example.com:443")
    """
