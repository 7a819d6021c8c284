"""Configuration loader for connections."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import voluptuous as vol
import yaml

from .const import DEFAULT_REQUEST_TIMEOUT, RETRY_DELAY
from .connection import Connection
from .domain.interfaces import IConnectionObserver, ITransport
from .infrastructure.observers import ConnectionObserver
from .infrastructure.transport import AiohttpTransport

_LOGGER = logging.getLogger(__name__)

CONF_ROOT_URL = "root_url"
CONF_DEFAULT_PARAMETERS = "default_parameters"
CONF_RETRY_DELAY = "retry_delay"
CONF_REQUEST_TIMEOUT = "request_timeout"
CONF_VERBOSE = "verbose"

CONNECTION_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_ROOT_URL): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_DEFAULT_PARAMETERS, default={}): vol.Any(
            None, {vol.Coerce(str): vol.Coerce(str)}
        ),
        vol.Optional(CONF_RETRY_DELAY, default=RETRY_DELAY): vol.All(
            vol.Coerce(float), vol.Range(min=0)
        ),
        vol.Optional(CONF_REQUEST_TIMEOUT, default=DEFAULT_REQUEST_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(CONF_VERBOSE, default=False): bool,
    }
)


@dataclass
class ConnectionConfig:
    """Validated connection configuration.

    Attributes:
        root_url: Root URL of the server
        default_parameters: Parameters always sent with requests
        retry_delay: Delay before re-issuing a failed request (seconds)
        request_timeout: Total HTTP timeout (seconds)
        verbose: Log every observer event
    """

    root_url: str
    default_parameters: Dict[str, str] = field(default_factory=dict)
    retry_delay: float = RETRY_DELAY
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    verbose: bool = False


def parse_connection_config(data: Any) -> ConnectionConfig:
    """Validate a configuration mapping.

    Args:
        data: Raw configuration (e.g. parsed YAML)

    Returns:
        Validated configuration

    Raises:
        ValueError: If configuration is invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Connection configuration must be a mapping")

    try:
        validated = CONNECTION_SCHEMA(data)
    except vol.Invalid as err:
        raise ValueError(f"Invalid connection configuration: {err}") from err

    return ConnectionConfig(
        root_url=validated[CONF_ROOT_URL],
        default_parameters=dict(validated[CONF_DEFAULT_PARAMETERS] or {}),
        retry_delay=validated[CONF_RETRY_DELAY],
        request_timeout=validated[CONF_REQUEST_TIMEOUT],
        verbose=validated[CONF_VERBOSE],
    )


def load_connection_config(path: Union[str, Path]) -> ConnectionConfig:
    """Load and validate connection configuration from YAML.

    The file may hold the settings at top level or under a
    ``connection:`` key.

    Args:
        path: YAML file path

    Returns:
        Validated configuration

    Raises:
        FileNotFoundError: If configuration file not found
        ValueError: If configuration is empty or invalid
    """
    config_file = Path(path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    try:
        raw = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    except yaml.YAMLError as err:
        raise ValueError(f"Invalid YAML: {err}") from err

    if not raw:
        raise ValueError("Configuration file is empty")

    if isinstance(raw, dict) and "connection" in raw:
        raw = raw["connection"]

    config = parse_connection_config(raw)
    _LOGGER.info(
        "Loaded connection configuration for %s (%d default parameters)",
        config.root_url,
        len(config.default_parameters),
    )
    return config


def create_connection(
    config: ConnectionConfig,
    observer: Optional[IConnectionObserver] = None,
    transport: Optional[ITransport] = None,
) -> Connection:
    """Create a Connection from configuration.

    Args:
        config: Validated configuration
        observer: Observer (defaults to ConnectionObserver honouring verbose)
        transport: Transport (defaults to AiohttpTransport with request_timeout)
    """
    return Connection(
        config.root_url,
        config.default_parameters,
        observer=observer or ConnectionObserver(verbose=config.verbose),
        transport=transport or AiohttpTransport(timeout=config.request_timeout),
        retry_delay=config.retry_delay,
    )
