"""Line-limited base64 encoding for inline image uploads."""

import base64

from ...const import BASE64_LINE_LENGTH, BASE64_LINE_SEPARATOR


def encode_base64_lines(
    data: bytes,
    line_length: int = BASE64_LINE_LENGTH,
    separator: bytes = BASE64_LINE_SEPARATOR,
) -> str:
    """Base64-encode data, breaking output into fixed-length lines.

    No separator follows the last line.

    Args:
        data: Bytes to encode
        line_length: Characters per line (must be positive)
        separator: Line separator (CRLF by default)

    Returns:
        Encoded text

    Example:
        >>> encode_base64_lines(b"hello")
        'aGVsbG8='
    """
    if line_length <= 0:
        raise ValueError(f"line_length must be positive, got {line_length}")

    encoded = base64.b64encode(data)
    lines = [
        encoded[start : start + line_length]
        for start in range(0, len(encoded), line_length)
    ]
    return separator.join(lines).decode("ascii")
