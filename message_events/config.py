"""Runtime configuration for message-events.

Settings are read from ``MESSAGE_EVENTS_*`` environment variables and
validated by ``pydantic-settings``::

    MESSAGE_EVENTS_LOG_LEVEL=DEBUG
    MESSAGE_EVENTS_ANNOUNCE=false

Nothing is read at import time. Applications that want the configured log
level call :func:`configure_logging` themselves.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class MessageEventsSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="MESSAGE_EVENTS_", extra="ignore")

    # Level applied to the ``message_events`` logger hierarchy.
    log_level: str = "WARNING"

    # Emit the load announcement on the first ``info`` registration.
    announce: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value!r}")
        return level


@functools.lru_cache(maxsize=1)
def get_settings() -> MessageEventsSettings:
    """Return the cached settings instance, created on first call.

    Invalid environment values are logged and replaced by the defaults so
    that channel operations never fail on configuration.
    """
    try:
        return MessageEventsSettings()
    except ValidationError as exc:
        logger.warning("Ignoring invalid MESSAGE_EVENTS_* settings: %s", exc)
        return MessageEventsSettings.model_construct()


def configure_logging(settings: MessageEventsSettings | None = None) -> None:
    """Apply the configured level to the ``message_events`` logger."""
    settings = settings or get_settings()
    logging.getLogger("message_events").setLevel(settings.log_level)
