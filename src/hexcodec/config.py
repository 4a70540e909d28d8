"""Package settings and logging setup."""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

INT64_MAX = 2**63 - 1


class HexCodecSettings(BaseSettings):
    """Settings read from HEXCODEC_* environment variables or a .env file."""

    model_config = SettingsConfigDict(
        env_prefix="HEXCODEC_",
        env_file=".env",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Level for the hexcodec logger")
    default_max_message_size: int = Field(
        default=-1,
        ge=-1,
        le=INT64_MAX,
        description="Max message size for handlers tagged without one (-1 = no limit)",
    )


@lru_cache(maxsize=1)
def get_settings() -> HexCodecSettings:
    """Return the cached settings instance."""
    return HexCodecSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name; defaults to the configured log_level

    Returns:
        logging.Logger: The "hexcodec" logger
    """
    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger("hexcodec")
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)
    return logger
