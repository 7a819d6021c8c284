"""Connection: the centre of the POST connection manager.

All requests are coordinated through instances of this class. A
Connection:
- Builds POST requests against a root URL with default parameters
- Dispatches them over a transport without blocking the caller
- Tracks connectivity (debounced, via ConnectionStateMachine)
- Re-issues failed requests after a fixed delay, indefinitely
- Keeps the last failed request so it can be resumed with fresh defaults
- Decodes JSON responses into string maps

All state lives on one asyncio event loop; no locks are used.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, Optional, Sequence, Set

from yarl import URL

from .application.services import RequestBuilderService, ResponseDecoderService
from .application.services.response_decoder_service import StringMap, StringMapArray
from .const import DEFAULT_IMAGE_PREFIX, RETRY_DELAY
from .domain.entities import PendingProcess, ResponseHandler
from .domain.exceptions import TransportError
from .domain.interfaces import IConnectionObserver, ITransport
from .domain.value_objects import ConnectionErrorKind, ProcessOutcome, RequestDescriptor
from .infrastructure.decorators import handle_transport_errors
from .infrastructure.state_machines import (
    ConnectionEvent,
    ConnectionState,
    ConnectionStateMachine,
)
from .infrastructure.transport import AiohttpTransport

_LOGGER = logging.getLogger(__name__)


class Connection:
    """POST connection with connectivity tracking and automatic retry.

    Attributes:
        root_url: Prefix for relative request targets
        default_parameters: Parameters sent with every request; read at
            build time and again when a suspended request is resumed
        observer: Optional event listener (not owned)
        transport: Transport used for every exchange
        retry_delay: Seconds to wait before re-issuing a failed request

    Example:
        >>> connection = Connection(
        ...     "https://example.com/api/",
        ...     {"token": "abc"},
        ...     observer=ConnectionObserver(verbose=True),
        ... )
        >>> task = connection.parse_json_from("user.php", print, "id=7")
        >>> outcome = await task
    """

    def __init__(
        self,
        root_url: str,
        default_parameters: Optional[Dict[str, str]] = None,
        observer: Optional[IConnectionObserver] = None,
        transport: Optional[ITransport] = None,
        retry_delay: float = RETRY_DELAY,
        request_builder: Optional[RequestBuilderService] = None,
        response_decoder: Optional[ResponseDecoderService] = None,
    ):
        """Initialize connection.

        Args:
            root_url: Root URL of the server
            default_parameters: Parameters always sent with requests
            observer: Optional observer for connection events
            transport: Transport (defaults to AiohttpTransport)
            retry_delay: Delay before re-issuing a failed request (seconds)
            request_builder: Request builder (defaults to RequestBuilderService)
            response_decoder: Response decoder (defaults to ResponseDecoderService)
        """
        self.root_url = root_url
        self.default_parameters: Dict[str, str] = dict(default_parameters or {})
        self.observer = observer
        self.transport = transport or AiohttpTransport()
        self.retry_delay = retry_delay
        self._request_builder = request_builder or RequestBuilderService()
        self._response_decoder = response_decoder or ResponseDecoderService()

        self._suspended_process: Optional[PendingProcess] = None
        self._tasks: Set[asyncio.Task] = set()
        self._retry_scheduled: Set[PendingProcess] = set()
        self._closed = False

        self._state_machine = ConnectionStateMachine()
        self._state_machine.on_state(ConnectionState.LOST, self._on_connection_lost)
        self._state_machine.on_state(
            ConnectionState.CONNECTED, self._on_connection_regained
        )

    def copy(
        self,
        observer: Optional[IConnectionObserver] = None,
        root_url: Optional[str] = None,
        default_parameters: Optional[Dict[str, str]] = None,
    ) -> Connection:
        """Copy this connection, optionally replacing some properties.

        The copy shares the transport and starts connected with nothing
        suspended.
        """
        return Connection(
            root_url if root_url is not None else self.root_url,
            default_parameters
            if default_parameters is not None
            else self.default_parameters,
            observer=observer if observer is not None else self.observer,
            transport=self.transport,
            retry_delay=self.retry_delay,
            request_builder=self._request_builder,
            response_decoder=self._response_decoder,
        )

    # ------------------------------------------------------------------
    # Connectivity state
    # ------------------------------------------------------------------

    @property
    def has_lost_connection(self) -> bool:
        """Check if the most recent transport attempt failed."""
        return self._state_machine.has_lost_connection

    @property
    def connection_state(self) -> str:
        """Get connectivity state: "connected" or "lost"."""
        return self._state_machine.state.name.lower()

    @property
    def suspended_process(self) -> Optional[PendingProcess]:
        """Get the process stored by the last transport failure (if any)."""
        return self._suspended_process

    def get_connection_info(self) -> dict:
        """Get current connection diagnostics.

        Example:
            >>> info = connection.get_connection_info()
            >>> print(f"State: {info['state']}")
        """
        return {
            "root_url": self.root_url,
            "state": self.connection_state,
            "has_suspended_process": self._suspended_process is not None,
            "active_tasks": len(self._tasks),
            "scheduled_retries": len(self._retry_scheduled),
            "closed": self._closed,
            "retry_delay": self.retry_delay,
        }

    def _on_connection_lost(self) -> None:
        _LOGGER.warning("Connection lost to %s", self.root_url)
        if self.observer is not None:
            self.observer.connection_lost(self)

    def _on_connection_regained(self) -> None:
        _LOGGER.info("Connection regained to %s", self.root_url)
        if self.observer is not None:
            self.observer.connection_regained(self)

    def did_start_loading(self) -> None:
        """Notify observer that loading started."""
        if self.observer is not None:
            self.observer.loading_started(self)

    def did_stop_loading(self) -> None:
        """Notify observer that loading stopped."""
        if self.observer is not None:
            self.observer.loading_stopped(self)

    def _report_error(self, error: ConnectionErrorKind) -> None:
        _LOGGER.warning("%s in response from %s", error.description, self.root_url)
        if self.observer is not None:
            self.observer.error_encountered(error, self)

    def _response_is_valid(self, data: bytes, process: PendingProcess) -> bool:
        if self.observer is None:
            return True
        return self.observer.response_is_valid(data, process, self)

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------

    def complete_url(self, target: str) -> str:
        """Combine a target with the root URL.

        Absolute URLs are returned unchanged; anything else is appended to
        root_url.
        """
        if URL(target).is_absolute():
            return target
        return f"{self.root_url}{target}"

    def request_for(
        self, target: str, parameters: Optional[str] = None
    ) -> RequestDescriptor:
        """Build a url-encoded request for a path or absolute URL.

        Args:
            target: Path below root_url, or absolute URL
            parameters: Optional pre-encoded extra POST parameters
        """
        return self._request_builder.request_for(
            self.complete_url(target), self.default_parameters, parameters
        )

    def base64_upload_request_for(
        self,
        images: Sequence[Any],
        target: str,
        parameters: Optional[Dict[str, str]] = None,
        image_prefix: str = DEFAULT_IMAGE_PREFIX,
    ) -> RequestDescriptor:
        """Build a request uploading images as base64 POST fields.

        Server side, image data is available as POST fields
        ``{image_prefix}1``, ``{image_prefix}2``, ... and the number of
        images as ``image_count``.
        """
        return self._request_builder.base64_upload_request_for(
            images,
            self.complete_url(target),
            self.default_parameters,
            parameters,
            image_prefix,
        )

    def upload_request_for(
        self,
        images: Sequence[Any],
        target: str,
        parameters: Optional[Dict[str, str]] = None,
        image_prefix: str = DEFAULT_IMAGE_PREFIX,
    ) -> RequestDescriptor:
        """Build a multipart/form-data request uploading images as files.

        Server side, image data is available as file uploads
        ``{image_prefix}1``, ``{image_prefix}2``, ... and the number of
        images as the POST field ``image_count``.
        """
        return self._request_builder.upload_request_for(
            images,
            self.complete_url(target),
            self.default_parameters,
            parameters,
            image_prefix,
        )

    def refresh_default_parameters(self, process: PendingProcess) -> None:
        """Refresh a process's request with the current default parameters."""
        process.refresh(
            self._request_builder.refresh_default_parameters(
                process.request, self.default_parameters
            )
        )

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def fetch_data(
        self, request: RequestDescriptor, handler: ResponseHandler
    ) -> Optional[asyncio.Task]:
        """Dispatch a request; handler receives the raw response bytes.

        Returns immediately. The returned task resolves to the
        ProcessOutcome of the first attempt; retries run on their own
        tasks. No task is created once the connection is closed.

        Must be called from a running event loop.
        """
        return self.fetch_data_from_process(PendingProcess(request, handler))

    def fetch_data_from(
        self,
        target: str,
        handler: ResponseHandler,
        parameters: Optional[str] = None,
    ) -> Optional[asyncio.Task]:
        """Build a request for target and dispatch it."""
        return self.fetch_data(self.request_for(target, parameters), handler)

    def fetch_data_from_process(
        self, process: PendingProcess
    ) -> Optional[asyncio.Task]:
        """Dispatch an existing process record.

        Returns:
            Dispatch task, or None if the connection is closed
        """
        if self._closed:
            _LOGGER.debug(
                "Dropping %s, connection to %s is closed", process, self.root_url
            )
            return None

        task = asyncio.get_running_loop().create_task(self._run_process(process))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def continue_suspended_process(self) -> Optional[asyncio.Task]:
        """Resume the suspended process once connectivity is back.

        The suspended slot is cleared, the request is refreshed with the
        current default parameters and dispatched again. Multipart upload
        requests are not refreshed: they are resent with the default
        parameters that were in effect when they were built.

        If a retry timer is still pending for the process, it keeps running;
        a failure of the resumed attempt does not start a second one.

        Returns:
            Dispatch task, or None if nothing was suspended or the
            connection is closed
        """
        process = self._suspended_process
        if process is None:
            return None

        self._suspended_process = None
        self.refresh_default_parameters(process)
        _LOGGER.debug("Continuing suspended %s", process)
        return self.fetch_data_from_process(process)

    @handle_transport_errors("Dispatch", reraise=False)
    async def _run_process(self, process: PendingProcess) -> Optional[ProcessOutcome]:
        return await self.send_process(process)

    async def send_process(self, process: PendingProcess) -> ProcessOutcome:
        """Run one attempt of a process.

        Args:
            process: Process to run

        Returns:
            Outcome of this attempt
        """
        failure: Optional[TransportError] = None

        self.did_start_loading()
        try:
            data = await self.transport.send(process.request)
        except TransportError as err:
            failure = err
        finally:
            self.did_stop_loading()

        if failure is not None:
            self._handle_transport_failure(process, failure)
            return ProcessOutcome.TRANSPORT_FAILURE

        self._state_machine.transition(ConnectionEvent.REQUEST_SUCCEEDED)
        if self._suspended_process is process:
            self._suspended_process = None

        if not self._response_is_valid(data, process):
            _LOGGER.debug("Response rejected for %s", process)
            return ProcessOutcome.RESPONSE_REJECTED

        process.handler(data)
        return ProcessOutcome.DELIVERED

    def _handle_transport_failure(
        self, process: PendingProcess, error: TransportError
    ) -> None:
        """Mark connectivity lost, suspend process and schedule its retry.

        At most one retry timer is pending per process.
        """
        if self._closed:
            _LOGGER.debug("Not retrying %s, connection is closed", process)
            return

        self._suspended_process = process
        self._state_machine.transition(ConnectionEvent.REQUEST_FAILED)

        if process in self._retry_scheduled:
            _LOGGER.debug(
                "Request to %s failed (%s), retry already scheduled",
                process.request.url,
                error,
            )
            return

        _LOGGER.debug(
            "Request to %s failed (%s), retrying in %.1fs",
            process.request.url,
            error,
            self.retry_delay,
        )
        self._retry_scheduled.add(process)
        asyncio.get_running_loop().call_later(
            self.retry_delay, self._retry_process, process
        )

    def _retry_process(self, process: PendingProcess) -> None:
        self._retry_scheduled.discard(process)
        self.fetch_data_from_process(process)

    # ------------------------------------------------------------------
    # JSON responses
    # ------------------------------------------------------------------

    def parse_json(
        self, request: RequestDescriptor, handler: Callable[[StringMap], None]
    ) -> Optional[asyncio.Task]:
        """Dispatch request; handler receives the response as a string map.

        A response that is not exactly a string->string JSON object is
        reported to the observer as INVALID_JSON and the handler is not
        called.
        """
        return self.fetch_data(
            request, self._response_decoder.map_handler(handler, self._report_error)
        )

    def parse_json_from(
        self,
        target: str,
        handler: Callable[[StringMap], None],
        parameters: Optional[str] = None,
    ) -> Optional[asyncio.Task]:
        """Build a request for target and parse its response as a string map."""
        return self.parse_json(self.request_for(target, parameters), handler)

    def parse_json_array(
        self, request: RequestDescriptor, handler: Callable[[StringMapArray], None]
    ) -> Optional[asyncio.Task]:
        """Dispatch request; handler receives a list of string maps.

        A response that is not exactly a JSON array of string->string
        objects is reported to the observer as INVALID_JSON and the handler
        is not called.
        """
        return self.fetch_data(
            request,
            self._response_decoder.map_array_handler(handler, self._report_error),
        )

    def parse_json_array_from(
        self,
        target: str,
        handler: Callable[[StringMapArray], None],
        parameters: Optional[str] = None,
    ) -> Optional[asyncio.Task]:
        """Build a request for target and parse its response as a map list."""
        return self.parse_json_array(self.request_for(target, parameters), handler)

    async def close(self) -> None:
        """Drop the suspended process and release the transport.

        Pending retry timers still fire but no longer dispatch, and so do
        later fetch calls.
        """
        self._closed = True
        self._suspended_process = None
        self._retry_scheduled.clear()
        await self.transport.close()

    def __str__(self) -> str:
        """String representation for logging."""
        return f"Connection({self.root_url})"

    def __repr__(self) -> str:
        """Developer representation."""
        return (
            f"Connection(root_url={self.root_url!r}, "
            f"state={self.connection_state!r}, "
            f"suspended={self._suspended_process is not None})"
        )
