"""Wire protocol implementations.

Body encoders and response decoders used by the application services.
"""

from .base64_lines import encode_base64_lines
from .image_encoder import RawJpegEncoder
from .json_codec import as_string_map, as_string_map_array, decode_json
from .multipart_encoder import MultipartEncoder

__all__ = [
    "encode_base64_lines",
    "RawJpegEncoder",
    "as_string_map",
    "as_string_map_array",
    "decode_json",
    "MultipartEncoder",
]
