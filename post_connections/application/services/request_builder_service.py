"""RequestBuilderService for building POST request descriptors.

This service turns parameter maps and image payloads into ready-to-send
RequestDescriptor objects. It is stateless with respect to the
connection: the target URL and default parameters are passed on every
call, so a descriptor always reflects the defaults at build time.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

from ...const import (
    CONTENT_TYPE_FORM,
    CONTENT_TYPE_MULTIPART,
    DEFAULT_IMAGE_PREFIX,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    IMAGE_COUNT_KEY,
    PAIR_SEPARATOR,
)
from ...domain.helpers import decode_parameters, encode_parameters, merge_parameters
from ...domain.interfaces import IImageEncoder
from ...domain.value_objects import RequestDescriptor
from ...infrastructure.protocol import (
    MultipartEncoder,
    RawJpegEncoder,
    encode_base64_lines,
)

_LOGGER = logging.getLogger(__name__)


class RequestBuilderService:
    """Service for building form and upload requests.

    Responsibilities:
    - Merge default parameters into request bodies
    - Build url-encoded and multipart/form-data bodies
    - Refresh stalled requests with current default parameters

    Example:
        >>> builder = RequestBuilderService()
        >>> request = builder.request_for(
        ...     "https://example.com/api/list.php", {"token": "abc"}, "page=2"
        ... )
        >>> request.body
        b'token=abc&page=2'
    """

    def __init__(
        self,
        image_encoder: Optional[IImageEncoder] = None,
        boundary_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize request builder.

        Args:
            image_encoder: Converts image objects to JPEG bytes
            boundary_factory: Produces multipart boundary tokens
        """
        self._image_encoder = image_encoder or RawJpegEncoder()
        self._boundary_factory = boundary_factory or MultipartEncoder.create_boundary

    def request_for(
        self,
        url: str,
        default_parameters: Mapping[str, str],
        parameters: Optional[str] = None,
    ) -> RequestDescriptor:
        """Build a url-encoded POST request.

        The body is the encoded default parameters followed by the raw
        extra string, joined with ``&`` only when both are non-empty.

        Args:
            url: Absolute target URL
            default_parameters: Parameters sent with every request
            parameters: Optional pre-encoded extra parameters

        Returns:
            Request descriptor
        """
        post = PAIR_SEPARATOR.join(
            part for part in (encode_parameters(default_parameters), parameters) if part
        )
        body = post.encode("utf-8")
        return RequestDescriptor.create(
            url,
            body,
            {
                HEADER_CONTENT_LENGTH: str(len(body)),
                HEADER_CONTENT_TYPE: CONTENT_TYPE_FORM,
            },
        )

    def base64_upload_request_for(
        self,
        images: Sequence[Any],
        url: str,
        default_parameters: Mapping[str, str],
        parameters: Optional[Mapping[str, str]] = None,
        image_prefix: str = DEFAULT_IMAGE_PREFIX,
    ) -> RequestDescriptor:
        """Build a url-encoded request carrying base64 images.

        Server side, image ``i`` (1-based) is available as the POST field
        ``{image_prefix}{i}`` and the number of images as ``image_count``.

        Args:
            images: Images to upload (passed through the image encoder)
            url: Absolute target URL
            default_parameters: Parameters sent with every request
            parameters: Additional POST parameters
            image_prefix: POST field name prefix for each image

        Returns:
            Request descriptor
        """
        fields: Dict[str, str] = dict(parameters or {})
        for index, image in enumerate(images, start=1):
            jpeg = self._image_encoder.encode_jpeg(image)
            fields[f"{image_prefix}{index}"] = encode_base64_lines(jpeg)
        fields[IMAGE_COUNT_KEY] = str(len(images))

        _LOGGER.debug("Built base64 upload of %d image(s) for %s", len(images), url)
        return self.request_for(url, default_parameters, encode_parameters(fields))

    def upload_request_for(
        self,
        images: Sequence[Any],
        url: str,
        default_parameters: Mapping[str, str],
        parameters: Optional[Mapping[str, str]] = None,
        image_prefix: str = DEFAULT_IMAGE_PREFIX,
    ) -> RequestDescriptor:
        """Build a multipart/form-data upload request.

        Server side, image ``i`` (1-based) is available as the file upload
        ``{image_prefix}{i}`` (filename ``file{i}.jpg``) and the number of
        images as the POST field ``image_count``. Caller parameters win over
        default parameters on key collision.

        Args:
            images: Images to upload (passed through the image encoder)
            url: Absolute target URL
            default_parameters: Parameters sent with every request
            parameters: Additional POST parameters
            image_prefix: Field name prefix for each image

        Returns:
            Request descriptor
        """
        boundary = self._boundary_factory()
        jpegs = [self._image_encoder.encode_jpeg(image) for image in images]

        fields = merge_parameters(default_parameters, parameters)
        fields[IMAGE_COUNT_KEY] = str(len(images))

        body = MultipartEncoder.build_body(fields, image_prefix, jpegs, boundary)

        _LOGGER.debug(
            "Built multipart upload of %d image(s) for %s (%d bytes)",
            len(jpegs),
            url,
            len(body),
        )
        return RequestDescriptor.create(
            url,
            body,
            {
                HEADER_CONTENT_TYPE: CONTENT_TYPE_MULTIPART.format(boundary=boundary),
                HEADER_CONTENT_LENGTH: str(len(body)),
            },
        )

    def refresh_default_parameters(
        self,
        request: RequestDescriptor,
        default_parameters: Mapping[str, str],
    ) -> RequestDescriptor:
        """Overlay current default parameters onto a built request.

        The url-encoded body is decoded, current defaults replace any stale
        values, and the result is re-encoded into a new descriptor.
        Multipart requests are returned unchanged.

        Args:
            request: Previously built request
            default_parameters: Current default parameters

        Returns:
            Refreshed request descriptor
        """
        if not request.is_form_encoded:
            _LOGGER.debug("Not refreshing non form-encoded %s", request)
            return request

        current = decode_parameters(request.body.decode("utf-8"))
        refreshed = merge_parameters(current, default_parameters)
        return request.with_body(encode_parameters(refreshed).encode("utf-8"))
