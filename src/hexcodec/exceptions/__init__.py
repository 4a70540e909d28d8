"""Custom exceptions for the hexcodec package."""


class HexCodecException(Exception):
    """Base exception for all hexcodec errors."""
    pass


# Codec Errors
class CodecError(HexCodecException):
    """Base exception for codec errors."""
    pass


class DecodeError(CodecError, ValueError):
    """Raised when a hex string cannot be decoded."""
    pass


class InvalidLengthError(DecodeError):
    """Raised when a hex string does not have an even number of characters."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid hex string length of <{length}>, must be even")


class InvalidDigitError(DecodeError):
    """Raised when a hex string contains a non-hex character."""

    def __init__(self, position: int, character: str):
        self.position = position
        self.character = character
        super().__init__(
            f"Invalid hex digit {character!r} at position {position}"
        )


# Message Handler Errors
class HandlerConfigError(HexCodecException):
    """Base exception for message handler configuration errors."""
    pass


class InvalidHandlerConfigError(HandlerConfigError, ValueError):
    """Raised when a message handler is given an invalid configuration."""
    pass
