"""Error handling decorators for standardized exception handling."""

import asyncio
import inspect
import logging
from functools import wraps
from typing import Any, Callable

from ...domain.exceptions import TransportError


def handle_transport_errors(
    operation_name: str,
    logger: logging.Logger = None,
    reraise: bool = True,
    default_return: Any = None,
):
    """Decorator for standardized transport error handling.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)
        reraise: Whether to re-raise exception after logging
        default_return: Value to return on error if not re-raising

    Example:
        @handle_transport_errors("HTTP send", reraise=True)
        async def send(self, request: RequestDescriptor) -> bytes:
            async with session.post(request.url, data=request.body) as response:
                return await response.read()
    """

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except asyncio.TimeoutError as err:
                log.warning("%s timed out: %s", operation_name, err)
                if reraise:
                    raise
                return default_return
            except TransportError as err:
                # Expected network condition - log without stack trace
                log.warning("%s transport error: %s", operation_name, err)
                if reraise:
                    raise
                return default_return
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                if reraise:
                    raise
                return default_return

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return func(*args, **kwargs)
            except Exception as err:
                log.error(
                    "%s error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                if reraise:
                    raise
                return default_return

        return async_wrapper if inspect.iscoroutinefunction(func) else sync_wrapper

    return decorator
