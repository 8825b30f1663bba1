"""Argument checks shared by ``on``, ``off`` and ``format``.

Each check returns ``True`` when the value is acceptable. On failure it
calls *report* with the name of the rejected operation and the matching
error message, then returns ``False``. Nothing here raises.
"""

from __future__ import annotations

from typing import Any, Callable

from message_events.domain.models import (
    ERROR_INTERNAL_ID,
    ERROR_INVALID_ARGUMENTS,
    ERROR_INVALID_HANDLER,
    ERROR_INVALID_ID_LENGTH,
    INTERNAL_METHOD_IDS,
    MAX_ID_LENGTH,
)

Reporter = Callable[[str, str], Any]


def argument_is_string(value: Any, caller_id: str, report: Reporter) -> bool:
    if isinstance(value, str):
        return True
    report(caller_id, ERROR_INVALID_ARGUMENTS)
    return False


def valid_id_length(channel_id: str, caller_id: str, report: Reporter) -> bool:
    if 0 < len(channel_id) <= MAX_ID_LENGTH:
        return True
    report(caller_id, ERROR_INVALID_ID_LENGTH)
    return False


def no_internal_id(channel_id: str, caller_id: str, report: Reporter) -> bool:
    if channel_id not in INTERNAL_METHOD_IDS:
        return True
    report(caller_id, ERROR_INTERNAL_ID)
    return False


def valid_id(channel_id: Any, caller_id: str, report: Reporter) -> bool:
    """Run the id checks in order, stopping at the first failure."""
    return (
        argument_is_string(channel_id, caller_id, report)
        and valid_id_length(channel_id, caller_id, report)
        and no_internal_id(channel_id, caller_id, report)
    )


def valid_handler(handler: Any, caller_id: str, report: Reporter) -> bool:
    if callable(handler):
        return True
    report(caller_id, ERROR_INVALID_HANDLER)
    return False
