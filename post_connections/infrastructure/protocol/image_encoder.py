"""Default image encoder."""

from typing import Any

from ...domain.interfaces import IImageEncoder


class RawJpegEncoder(IImageEncoder):
    """Pass-through encoder for images that are already JPEG bytes.

    Applications holding decoded images plug in their own IImageEncoder.
    """

    def encode_jpeg(self, image: Any) -> bytes:
        """Return JPEG bytes unchanged.

        Raises:
            TypeError: If image is not bytes-like
        """
        if not isinstance(image, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"RawJpegEncoder expects JPEG bytes, got {type(image).__name__}"
            )
        return bytes(image)
