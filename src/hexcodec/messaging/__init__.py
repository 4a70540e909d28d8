"""Marker for callables that handle inbound messages."""

from hexcodec.messaging.handler import (
    HANDLER_CONFIG_ATTR,
    message_handler,
    get_handler_config,
    is_message_handler,
)

__all__ = [
    "HANDLER_CONFIG_ATTR",
    "message_handler",
    "get_handler_config",
    "is_message_handler",
]
