"""Tests for error handling decorator."""

import asyncio
import logging
import pytest

from post_connections.domain.exceptions import TransportError
from post_connections.infrastructure.decorators.error_handler import (
    handle_transport_errors,
)


class TestHandleTransportErrors:
    """Test error handling decorator."""

    @pytest.mark.asyncio
    async def test_successful_async_execution(self):
        """Test decorator with successful async function."""

        @handle_transport_errors("test operation")
        async def test_func():
            return "success"

        result = await test_func()
        assert result == "success"

    @pytest.mark.asyncio
    async def test_timeout_error_reraise(self):
        """Test timeout error with reraise=True."""

        @handle_transport_errors("test operation", reraise=True)
        async def test_func():
            raise asyncio.TimeoutError("timeout")

        with pytest.raises(asyncio.TimeoutError):
            await test_func()

    @pytest.mark.asyncio
    async def test_timeout_error_no_reraise(self):
        """Test timeout error with reraise=False."""

        @handle_transport_errors(
            "test operation", reraise=False, default_return="default"
        )
        async def test_func():
            raise asyncio.TimeoutError("timeout")

        result = await test_func()
        assert result == "default"

    @pytest.mark.asyncio
    async def test_transport_error_logged_as_warning(self, caplog):
        """Test TransportError is logged without a stack trace."""

        @handle_transport_errors("test operation", reraise=False)
        async def test_func():
            raise TransportError("host unreachable")

        with caplog.at_level(logging.WARNING):
            result = await test_func()

        assert result is None
        assert "test operation transport error" in caplog.text
        assert "host unreachable" in caplog.text
        assert all(record.exc_info is None for record in caplog.records)

    @pytest.mark.asyncio
    async def test_transport_error_reraise(self):
        """Test TransportError propagates with reraise=True."""

        @handle_transport_errors("test operation", reraise=True)
        async def test_func():
            raise TransportError("down")

        with pytest.raises(TransportError):
            await test_func()

    @pytest.mark.asyncio
    async def test_generic_exception_logged(self, caplog):
        """Test that exceptions are logged."""

        @handle_transport_errors("test operation", reraise=False)
        async def test_func():
            raise ValueError("test error")

        with caplog.at_level(logging.ERROR):
            await test_func()

        assert "test operation unexpected error" in caplog.text
        assert "test error" in caplog.text

    def test_sync_function_support(self):
        """Test decorator works with sync functions."""

        @handle_transport_errors("sync operation", reraise=False, default_return=42)
        def test_func():
            raise ValueError("error")

        result = test_func()
        assert result == 42

    @pytest.mark.asyncio
    async def test_custom_logger(self, caplog):
        """Test using custom logger."""
        custom_logger = logging.getLogger("custom")

        @handle_transport_errors("test op", logger=custom_logger, reraise=False)
        async def test_func():
            raise ValueError("error")

        with caplog.at_level(logging.ERROR):
            await test_func()

        assert "custom" in caplog.text

    @pytest.mark.asyncio
    async def test_decorated_method_receives_self(self):
        """Test decorator preserves bound method arguments."""

        class Worker:
            factor = 3

            @handle_transport_errors("work", reraise=False)
            async def run(self, value):
                return value * self.factor

        assert await Worker().run(2) == 6
