"""Application services for the POST connection manager.

Services provide reusable request-building and response-decoding logic.
The Connection orchestrates them around transport dispatch.
"""

from .request_builder_service import RequestBuilderService
from .response_decoder_service import ResponseDecoderService

__all__ = [
    "RequestBuilderService",
    "ResponseDecoderService",
]
