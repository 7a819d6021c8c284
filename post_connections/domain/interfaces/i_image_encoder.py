"""IImageEncoder interface for image upload encoding."""

from abc import ABC, abstractmethod
from typing import Any


class IImageEncoder(ABC):
    """Interface for turning an image object into JPEG bytes.

    Upload requests accept whatever image objects the encoder understands;
    the encoder produces full-quality JPEG data for the request body.
    """

    @abstractmethod
    def encode_jpeg(self, image: Any) -> bytes:
        """Encode image as full-quality JPEG.

        Args:
            image: Image object understood by this encoder

        Returns:
            JPEG bytes

        Raises:
            TypeError: If the image type is not supported
        """
