"""Synchronous in-process message channels with per-channel formatting.

Each channel id holds exactly one callable. A format registered for a
channel is applied to the raw dispatch arguments before the handler sees
them, regardless of whether the format or the handler was registered first.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from message_events.domain.models import ERROR, FORMAT, OFF, ON
from message_events.domain.validators import no_internal_id, valid_handler, valid_id
from message_events.repos.memory import ChannelTable, FormatRegistry, noop
from message_events.services.formats import error_format

logger = logging.getLogger(__name__)


class FormattedHandler:
    """Channel entry calling ``handler(formatter(*args))``."""

    __slots__ = ("handler", "formatter")

    def __init__(
        self, handler: Callable[..., Any], formatter: Callable[..., Any]
    ) -> None:
        self.handler = handler
        self.formatter = formatter

    def __call__(self, *args: Any) -> Any:
        return self.handler(self.formatter(*args))

    def __repr__(self) -> str:
        return (
            f"FormattedHandler(handler={self.handler!r}, "
            f"formatter={self.formatter!r})"
        )


class MessageEvents:
    """Publish/subscribe channels: one handler per channel id, last one wins.

    Validation failures are never raised; they are published on this
    instance's own ``error`` channel as an error payload dict.

    Every public attribute that is not a method resolves to a channel
    dispatcher, so ``hasattr`` is always true for such names and a misspelt
    channel (``events.of("x")``) is a silent no-op like any unknown channel.
    """

    def __init__(self) -> None:
        self._formats = FormatRegistry()
        self._channels = ChannelTable()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def format(self, channel_id: Any = None, formatter: Any = None) -> MessageEvents:
        if not (
            valid_id(channel_id, FORMAT, self._report)
            and valid_handler(formatter, FORMAT, self._report)
        ):
            return self

        self._formats.set(channel_id, formatter)
        logger.debug("Stored format for channel %r", channel_id)

        # Capture the live handler before the slot is replaced, otherwise the
        # new entry would look itself up and recurse.
        existing = self._channels.get(channel_id)
        if isinstance(existing, FormattedHandler):
            existing = existing.handler

        if existing is None or existing is noop:
            # Allow the channel to be called before a handler is installed.
            self._channels.install(channel_id, noop)
        else:
            self._channels.install(channel_id, FormattedHandler(existing, formatter))
        return self

    def on(self, channel_id: Any = None, handler: Any = None) -> MessageEvents:
        if not (
            valid_id(channel_id, ON, self._report)
            and valid_handler(handler, ON, self._report)
        ):
            return self

        formatter = self._formats.get(channel_id)
        if formatter is not None:
            self._channels.install(channel_id, FormattedHandler(handler, formatter))
        else:
            self._channels.install(channel_id, handler)
        return self

    def off(self, channel_id: Any = None) -> MessageEvents:
        """Replace handlers with the no-op placeholder; formats are kept.

        Without *channel_id* every known channel is reset.
        """
        if channel_id is None:
            self._channels.reset_all()
        elif isinstance(channel_id, str) and no_internal_id(
            channel_id, OFF, self._report
        ):
            self._channels.reset(channel_id)
        return self

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def invoke(self, channel_id: str, *args: Any) -> Any:
        """Call the entry installed for *channel_id*; unknown ids are a no-op."""
        return self._channels.resolve(channel_id)(*args)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            raise AttributeError(name)

        def dispatch(*args: Any) -> Any:
            return self.invoke(name, *args)

        dispatch.__name__ = name
        return dispatch

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def channels(self) -> list[str]:
        """Return the ids that currently have a Channel Table entry."""
        return self._channels.ids()

    def has_format(self, channel_id: str) -> bool:
        return channel_id in self._formats

    def _report(self, method: str, text: str) -> None:
        if ERROR in self._formats:
            self.invoke(ERROR, method, text)
        else:
            self.invoke(ERROR, error_format(method, text))
