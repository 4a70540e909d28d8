"""Hexadecimal encoding and decoding of byte sequences."""

import logging
from types import MappingProxyType
from typing import List, Tuple, Union

from hexcodec.exceptions import InvalidDigitError, InvalidLengthError

logger = logging.getLogger(__name__)

ByteSequence = Union[bytes, bytearray, memoryview, List[int], Tuple[int, ...]]

HEX_ALPHABET = "0123456789ABCDEF"

# Only ASCII hex digits, both cases
_DIGIT_VALUES = MappingProxyType(
    {
        **{char: value for value, char in enumerate(HEX_ALPHABET)},
        **{char: value for value, char in enumerate(HEX_ALPHABET.lower())},
    }
)


def _as_bytes(data: ByteSequence) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    elif isinstance(data, (list, tuple)):
        # bytes() raises ValueError for values outside 0..255
        return bytes(data)
    else:
        raise TypeError(f"Expected a byte sequence, got {type(data)}")


def encode(data: ByteSequence) -> str:
    """
    Convert a byte sequence to an uppercase hexadecimal string.

    Each byte becomes two characters, high nibble first.

    Args:
        data: Bytes-like object, or a list/tuple of ints in 0..255

    Returns:
        str: Hex string of length 2 * len(data), no prefix

    Raises:
        TypeError: If data is not a byte sequence
        ValueError: If a list/tuple item is outside 0..255
    """
    buf = _as_bytes(data)
    out = []
    for byte in buf:
        out.append(HEX_ALPHABET[(byte & 0xF0) >> 4])
        out.append(HEX_ALPHABET[byte & 0x0F])
    return "".join(out)


def decode(hex_str: str) -> bytes:
    """
    Convert a hexadecimal string to bytes.

    Digits are case-insensitive. The length is validated before the digits.

    Args:
        hex_str: Hex string without prefix

    Returns:
        bytes: Decoded bytes, len(hex_str) // 2 long

    Raises:
        TypeError: If hex_str is not a str
        InvalidLengthError: If hex_str has an odd number of characters
        InvalidDigitError: If hex_str contains a character outside 0-9A-Fa-f
    """
    if not isinstance(hex_str, str):
        raise TypeError(f"Expected str, got {type(hex_str)}")

    length = len(hex_str)
    if length % 2 != 0:
        logger.debug(f"Rejecting hex string of odd length {length}")
        raise InvalidLengthError(length)

    buf = bytearray(length // 2)
    for i in range(0, length, 2):
        high = _digit_value(hex_str, i)
        low = _digit_value(hex_str, i + 1)
        buf[i // 2] = (high << 4) | low

    return bytes(buf)


def decode_to_buffer(hex_str: str) -> memoryview:
    """Decode a hex string into a read-only memoryview over the result."""
    return memoryview(decode(hex_str)).toreadonly()


def _digit_value(hex_str: str, position: int) -> int:
    char = hex_str[position]
    value = _DIGIT_VALUES.get(char)
    if value is None:
        logger.debug(f"Rejecting non-hex character {char!r} at position {position}")
        raise InvalidDigitError(position, char)
    return value
