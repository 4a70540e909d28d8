"""Pydantic data models for hexcodec."""

from pydantic import BaseModel, ConfigDict, Field

from hexcodec.config import INT64_MAX

UNBOUNDED_MESSAGE_SIZE = -1


class MessageHandlerConfig(BaseModel):
    """Configuration attached to a message handler."""

    model_config = ConfigDict(frozen=True)

    max_message_size: int = Field(
        default=UNBOUNDED_MESSAGE_SIZE,
        strict=True,
        ge=UNBOUNDED_MESSAGE_SIZE,
        le=INT64_MAX,
        description="Largest message in bytes the handler accepts, -1 for no limit",
    )

    @property
    def is_unbounded(self) -> bool:
        return self.max_message_size == UNBOUNDED_MESSAGE_SIZE
