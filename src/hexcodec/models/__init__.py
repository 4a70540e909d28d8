"""Data models."""

from hexcodec.models.schemas import MessageHandlerConfig

__all__ = ["MessageHandlerConfig"]
