"""Format functions pre-installed on the default instance."""

from __future__ import annotations

from typing import Any

from message_events.domain.models import ErrorMessage


def identity_format(data: Any = None) -> Any:
    """Pass the payload through unchanged."""
    return data


def error_format(method: str | None = None, *text: Any) -> dict[str, Any]:
    """Build the error payload from ``(method, *words)``.

    The words are joined with single spaces, so
    ``error_format("on", "invalid", "handler")`` gives
    ``{"sender": "MessageEvents", "method": "on", "type": "error",
    "text": "invalid handler"}``.
    """
    message = ErrorMessage(
        method=None if method is None else str(method),
        text=" ".join(str(word) for word in text),
    )
    return message.model_dump(mode="json")
