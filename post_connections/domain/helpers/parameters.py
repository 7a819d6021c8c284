"""POST parameter map helpers.

Parameter maps are plain ``Dict[str, str]``. Values are written verbatim:
no percent-escaping is applied, so values containing ``&`` or ``=`` do not
survive a decode round trip.
"""

from typing import Dict, Mapping, Optional

from ...const import KEY_VALUE_SEPARATOR, PAIR_SEPARATOR


def merge_parameters(
    base: Mapping[str, str], overrides: Optional[Mapping[str, str]] = None
) -> Dict[str, str]:
    """Merge two parameter maps.

    Keys present in overrides replace keys in base; keys only in base are
    preserved unchanged. Neither input is modified.

    Args:
        base: Base parameter map
        overrides: Map whose values win on key collision

    Returns:
        New merged map

    Example:
        >>> merge_parameters({"a": "1", "b": "2"}, {"b": "3"})
        {'a': '1', 'b': '3'}
    """
    merged = dict(base)
    if overrides:
        merged.update(overrides)
    return merged


def encode_parameters(parameters: Mapping[str, str]) -> str:
    """Encode parameters as ``key=value`` pairs joined by ``&``.

    Example:
        >>> encode_parameters({"user": "bob", "token": "abc"})
        'user=bob&token=abc'
    """
    return PAIR_SEPARATOR.join(
        f"{key}{KEY_VALUE_SEPARATOR}{value}" for key, value in parameters.items()
    )


def decode_parameters(body: str) -> Dict[str, str]:
    """Decode a url-encoded body back into a parameter map.

    Splits on ``&`` then on the first ``=``. Empty segments are skipped and
    a segment without ``=`` maps to an empty value. Later duplicates win.

    Example:
        >>> decode_parameters("user=bob&token=abc")
        {'user': 'bob', 'token': 'abc'}
    """
    parameters: Dict[str, str] = {}
    for pair in body.split(PAIR_SEPARATOR):
        if not pair:
            continue
        key, _, value = pair.partition(KEY_VALUE_SEPARATOR)
        parameters[key] = value
    return parameters
