"""multipart/form-data body encoder for image uploads."""

import uuid
from typing import List, Mapping

from ...const import BOUNDARY_PREFIX, IMAGE_FILE_PREFIX, IMAGE_MIME_TYPE

CRLF = b"\r\n"


class MultipartEncoder:
    """Encodes POST parameters and JPEG data as multipart/form-data.

    Body layout:
        --{boundary}
        Content-Disposition: form-data; name="{key}"

        {value}
        ... one part per parameter ...
        --{boundary}
        Content-Disposition: form-data; name="{prefix}{i}"; filename="file{i}.jpg"
        Content-Type: image/jpg

        {jpeg bytes}
        ... one part per image, i starting at 1 ...
        --{boundary}--

    Lines end with CRLF.

    Example:
        >>> boundary = MultipartEncoder.create_boundary()
        >>> body = MultipartEncoder.build_body({"x": "y"}, "image", [jpeg], boundary)
        >>> body.endswith(f"--{boundary}--\\r\\n".encode())
        True
    """

    @staticmethod
    def create_boundary() -> str:
        """Create a fresh boundary token (``Boundary-<UUID>``)."""
        return f"{BOUNDARY_PREFIX}{str(uuid.uuid4()).upper()}"

    @staticmethod
    def build_body(
        parameters: Mapping[str, str],
        file_name_key: str,
        images: List[bytes],
        boundary: str,
    ) -> bytes:
        """Build the multipart body.

        Args:
            parameters: Form fields, written before any image
            file_name_key: Field name prefix for images ("image" -> image1, image2)
            images: JPEG payloads in upload order
            boundary: Boundary token (without leading dashes)

        Returns:
            Encoded body
        """
        delimiter = f"--{boundary}".encode("utf-8") + CRLF
        body = bytearray()

        for key, value in parameters.items():
            body += delimiter
            body += f'Content-Disposition: form-data; name="{key}"'.encode("utf-8")
            body += CRLF + CRLF
            body += str(value).encode("utf-8") + CRLF

        for index, image in enumerate(images, start=1):
            body += delimiter
            body += (
                f'Content-Disposition: form-data; name="{file_name_key}{index}"; '
                f'filename="{IMAGE_FILE_PREFIX}{index}.jpg"'
            ).encode("utf-8")
            body += CRLF
            body += f"Content-Type: {IMAGE_MIME_TYPE}".encode("utf-8") + CRLF + CRLF
            body += bytes(image) + CRLF

        body += f"--{boundary}--".encode("utf-8") + CRLF
        return bytes(body)
