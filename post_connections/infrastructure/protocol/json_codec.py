"""JSON decoding and shape narrowing for server responses.

Responses are not treated as general JSON trees. A document is accepted
only if it is exactly a string->string object, or exactly an array of
such objects; anything else narrows to None.
"""

import json
import logging
from typing import Any, Dict, List, Optional, Union

_LOGGER = logging.getLogger(__name__)


def decode_json(data: Union[bytes, str]) -> Optional[Any]:
    """Decode JSON bytes or text.

    Returns:
        Decoded value, or None if data is not valid JSON

    Example:
        >>> decode_json(b'{"a": "1"}')
        {'a': '1'}
        >>> decode_json(b"not json") is None
        True
    """
    try:
        return json.loads(data)
    except (ValueError, TypeError) as err:
        _LOGGER.debug("JSON decode failed: %s", err)
        return None


def as_string_map(value: Any) -> Optional[Dict[str, str]]:
    """Narrow a decoded value to a string->string map.

    Example:
        >>> as_string_map({"a": "1"})
        {'a': '1'}
        >>> as_string_map({"a": 1}) is None
        True
    """
    if not isinstance(value, dict):
        return None
    if not all(isinstance(item, str) for item in value.values()):
        return None
    return value


def as_string_map_array(value: Any) -> Optional[List[Dict[str, str]]]:
    """Narrow a decoded value to an array of string->string maps.

    Example:
        >>> as_string_map_array([{"a": "1"}, {"b": "2"}])
        [{'a': '1'}, {'b': '2'}]
        >>> as_string_map_array({"a": "1"}) is None
        True
    """
    if not isinstance(value, list):
        return None
    if not all(as_string_map(item) is not None for item in value):
        return None
    return value
