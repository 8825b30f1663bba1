"""Process-wide default instance and the module-level ``on``/``off`` facade."""

from __future__ import annotations

from typing import Any

from message_events.config import get_settings
from message_events.domain.bus import MessageEvents
from message_events.domain.models import ERROR, INFO, LoadAnnouncement
from message_events.services.formats import error_format, identity_format

# ── Singleton (created at import time, formats in place before any call) ──
default_events = (
    MessageEvents()
    .format(INFO, identity_format)
    .format(ERROR, error_format)
)

_info_announced = False


def _announce_load() -> None:
    default_events.invoke(INFO, LoadAnnouncement().model_dump(mode="json"))


def on(channel_id: Any = None, handler: Any = None) -> MessageEvents:
    """Register *handler* on the default instance.

    The first successful ``info`` registration also publishes a
    :class:`LoadAnnouncement` on ``info``.
    """
    global _info_announced

    default_events.on(channel_id, handler)
    if channel_id == INFO and callable(handler) and not _info_announced:
        _info_announced = True
        if get_settings().announce:
            _announce_load()
    return default_events


def off(channel_id: Any = None) -> MessageEvents:
    """Remove a handler (or all handlers) from the default instance."""
    return default_events.off(channel_id)
