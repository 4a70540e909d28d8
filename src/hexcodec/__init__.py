"""Main package initialization."""

__version__ = "0.1.0"
__description__ = "Hexadecimal codec for byte sequences, plus a message handler marker"

from .utils.encoding import encode, decode, decode_to_buffer
from .messaging import message_handler, get_handler_config, is_message_handler
from .models.schemas import MessageHandlerConfig
from .config import HexCodecSettings, get_settings, configure_logging
from .exceptions import (
    HexCodecException,
    CodecError,
    DecodeError,
    InvalidLengthError,
    InvalidDigitError,
    HandlerConfigError,
    InvalidHandlerConfigError,
)

__all__ = [
    "encode",
    "decode",
    "decode_to_buffer",
    "message_handler",
    "get_handler_config",
    "is_message_handler",
    "MessageHandlerConfig",
    "HexCodecSettings",
    "get_settings",
    "configure_logging",
    "HexCodecException",
    "CodecError",
    "DecodeError",
    "InvalidLengthError",
    "InvalidDigitError",
    "HandlerConfigError",
    "InvalidHandlerConfigError",
]
