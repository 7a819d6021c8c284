"""Constants for the POST connection manager.

Wire-format literals live here so the request builder, the multipart
encoder and the tests agree on the exact bytes.
"""

from __future__ import annotations

# Timing (in seconds)
RETRY_DELAY = 5.0  # Fixed delay before re-issuing a failed request
DEFAULT_REQUEST_TIMEOUT = 30.0  # Total timeout handed to the HTTP transport

# HTTP
HTTP_METHOD_POST = "POST"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data; boundary={boundary}"

# Uploads
DEFAULT_IMAGE_PREFIX = "image"
IMAGE_COUNT_KEY = "image_count"
IMAGE_FILE_PREFIX = "file"
IMAGE_MIME_TYPE = "image/jpg"
BOUNDARY_PREFIX = "Boundary-"
BASE64_LINE_LENGTH = 64
BASE64_LINE_SEPARATOR = b"\r\n"

# Parameter encoding
PAIR_SEPARATOR = "&"
KEY_VALUE_SEPARATOR = "="
