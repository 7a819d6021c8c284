"""Pure helper functions for the connection domain."""

from .parameters import decode_parameters, encode_parameters, merge_parameters

__all__ = [
    "decode_parameters",
    "encode_parameters",
    "merge_parameters",
]
