"""In-memory stores backing a MessageEvents instance."""

from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)


def noop(*args: Any, **kwargs: Any) -> None:
    """Placeholder installed for channels without a handler."""
    return None


class FormatRegistry:
    """Dict-backed store of format functions, keyed by channel id.

    Entries are only ever overwritten, never removed.
    """

    def __init__(self) -> None:
        self._store: dict[str, Callable[..., Any]] = {}

    def set(self, channel_id: str, formatter: Callable[..., Any]) -> None:
        self._store[channel_id] = formatter

    def get(self, channel_id: str) -> Callable[..., Any] | None:
        return self._store.get(channel_id)

    def __contains__(self, channel_id: object) -> bool:
        return channel_id in self._store


class ChannelTable:
    """Dict-backed store of the callable currently installed per channel id."""

    def __init__(self) -> None:
        self._store: dict[str, Callable[..., Any]] = {}

    def install(self, channel_id: str, entry: Callable[..., Any]) -> None:
        logger.debug("Installing %r on channel %r", entry, channel_id)
        self._store[channel_id] = entry

    def get(self, channel_id: str) -> Callable[..., Any] | None:
        return self._store.get(channel_id)

    def resolve(self, channel_id: str) -> Callable[..., Any]:
        """Return the installed entry, or the placeholder for unknown ids."""
        return self._store.get(channel_id, noop)

    def reset(self, channel_id: str) -> None:
        if channel_id in self._store:
            logger.debug("Resetting channel %r", channel_id)
            self._store[channel_id] = noop

    def reset_all(self) -> None:
        logger.debug("Resetting %d channel(s)", len(self._store))
        for channel_id in self._store:
            self._store[channel_id] = noop

    def ids(self) -> list[str]:
        return list(self._store)

    def __contains__(self, channel_id: object) -> bool:
        return channel_id in self._store
