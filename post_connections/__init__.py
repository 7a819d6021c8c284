"""POST connection manager.

Issues POST requests against a root URL, tracks connectivity, retries
failed requests after connectivity loss and decodes JSON responses into
string maps. Also builds base64 and multipart/form-data image uploads.
"""

from .connection import Connection
from .config_loader import (
    ConnectionConfig,
    create_connection,
    load_connection_config,
    parse_connection_config,
)
from .domain.entities import PendingProcess
from .domain.exceptions import TransportError
from .domain.interfaces import IConnectionObserver, IImageEncoder, ITransport
from .domain.value_objects import ConnectionErrorKind, ProcessOutcome, RequestDescriptor
from .infrastructure.observers import ConnectionObserver
from .infrastructure.transport import AiohttpTransport
from .shared import get_shared, has_shared, init_shared, teardown_shared

__all__ = [
    "Connection",
    "ConnectionConfig",
    "create_connection",
    "load_connection_config",
    "parse_connection_config",
    "PendingProcess",
    "TransportError",
    "IConnectionObserver",
    "IImageEncoder",
    "ITransport",
    "ConnectionErrorKind",
    "ProcessOutcome",
    "RequestDescriptor",
    "ConnectionObserver",
    "AiohttpTransport",
    "get_shared",
    "has_shared",
    "init_shared",
    "teardown_shared",
]
