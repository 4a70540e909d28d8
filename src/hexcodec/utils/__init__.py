"""Utility modules."""

from hexcodec.utils.encoding import encode, decode, decode_to_buffer

__all__ = [
    "encode",
    "decode",
    "decode_to_buffer",
]
