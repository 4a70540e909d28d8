"""
Message handler marker.

Tagging a callable only attaches a MessageHandlerConfig to it. Dispatching
messages to tagged callables is left to whatever framework consumes them.

Example:
    @message_handler(max_message_size=4096)
    def on_upload(self, data: bytes) -> None:
        ...
"""

import logging
from typing import Any, Callable, Optional, TypeVar

from pydantic import ValidationError

from hexcodec.config import get_settings
from hexcodec.exceptions import InvalidHandlerConfigError
from hexcodec.models.schemas import MessageHandlerConfig

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

HANDLER_CONFIG_ATTR = "__message_handler_config__"


def message_handler(func: Optional[F] = None, *, max_message_size: Optional[int] = None):
    """
    Tag a callable as a message handler.

    Usable bare (``@message_handler``) or with arguments
    (``@message_handler(max_message_size=1024)``). The callable is returned
    unchanged apart from the attached config.

    Args:
        func: Callable to tag (when used bare)
        max_message_size: Largest accepted message in bytes, -1 for no limit.
            Defaults to the configured default_max_message_size.

    Raises:
        InvalidHandlerConfigError: If max_message_size is not an int in
            [-1, 2**63 - 1]
    """
    if max_message_size is None:
        max_message_size = get_settings().default_max_message_size

    try:
        config = MessageHandlerConfig(max_message_size=max_message_size)
    except ValidationError as e:
        raise InvalidHandlerConfigError(
            f"Invalid max_message_size {max_message_size!r}: {e.errors()[0]['msg']}"
        ) from e

    def decorator(target: F) -> F:
        if not callable(target):
            raise TypeError(f"Expected a callable, got {type(target)}")
        setattr(target, HANDLER_CONFIG_ATTR, config)
        logger.debug(
            f"Tagged {getattr(target, '__qualname__', target)!s} as message handler "
            f"(max_message_size={config.max_message_size})"
        )
        return target

    if func is not None:
        return decorator(func)
    return decorator


def get_handler_config(func: Callable[..., Any]) -> Optional[MessageHandlerConfig]:
    """Return the config attached to a tagged callable, or None."""
    config = getattr(func, HANDLER_CONFIG_ATTR, None)
    if isinstance(config, MessageHandlerConfig):
        return config
    return None


def is_message_handler(func: Callable[..., Any]) -> bool:
    return get_handler_config(func) is not None
