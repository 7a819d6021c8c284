"""ResponseDecoderService for typed JSON responses.

Wraps typed response handlers into raw-bytes handlers that a Connection
can dispatch. A response that does not match the requested shape is
reported as INVALID_JSON and never reaches the typed handler.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Union

from ...domain.entities import ResponseHandler
from ...domain.value_objects import ConnectionErrorKind
from ...infrastructure.protocol import as_string_map, as_string_map_array, decode_json

_LOGGER = logging.getLogger(__name__)

StringMap = Dict[str, str]
StringMapArray = List[StringMap]
ErrorCallback = Callable[[ConnectionErrorKind], None]


class ResponseDecoderService:
    """Service for decoding response bytes into string maps.

    Example:
        >>> decoder = ResponseDecoderService()
        >>> decoder.decode_map(b'{"a": "1"}')
        {'a': '1'}
        >>> decoder.decode_map(b'[{"a": "1"}]') is None
        True
    """

    def decode_map(self, data: Union[bytes, str]) -> Optional[StringMap]:
        """Decode data as a single string->string map (None on mismatch)."""
        return as_string_map(decode_json(data))

    def decode_map_array(self, data: Union[bytes, str]) -> Optional[StringMapArray]:
        """Decode data as an array of string->string maps (None on mismatch)."""
        return as_string_map_array(decode_json(data))

    def map_handler(
        self, handler: Callable[[StringMap], None], on_error: ErrorCallback
    ) -> ResponseHandler:
        """Wrap a map handler into a raw response handler.

        Args:
            handler: Receives the decoded map
            on_error: Receives INVALID_JSON when decoding fails

        Returns:
            Handler accepting raw response bytes
        """
        return self._wrap(self.decode_map, handler, on_error)

    def map_array_handler(
        self, handler: Callable[[StringMapArray], None], on_error: ErrorCallback
    ) -> ResponseHandler:
        """Wrap a map-array handler into a raw response handler.

        Args:
            handler: Receives the decoded list of maps
            on_error: Receives INVALID_JSON when decoding fails

        Returns:
            Handler accepting raw response bytes
        """
        return self._wrap(self.decode_map_array, handler, on_error)

    @staticmethod
    def _wrap(
        decode: Callable[[bytes], Optional[Any]],
        handler: Callable[[Any], None],
        on_error: ErrorCallback,
    ) -> ResponseHandler:
        def handle(data: bytes) -> None:
            decoded = decode(data)
            if decoded is None:
                _LOGGER.debug("Response did not match expected JSON shape")
                on_error(ConnectionErrorKind.INVALID_JSON)
                return
            handler(decoded)

        return handle
