"""Channel names, error-message catalog and payload models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field

from message_events._version import __app_name__, get_version


class MessageType(StrEnum):
    INFO = "info"
    ERROR = "error"


# ---------------------------------------------------------------------------
# Channel ids
# ---------------------------------------------------------------------------

INFO = MessageType.INFO.value
ERROR = MessageType.ERROR.value

ON = "on"
OFF = "off"
FORMAT = "format"

# Names of the instance's own operations; never usable as channel ids.
INTERNAL_METHOD_IDS: frozenset[str] = frozenset({"constructor", ON, OFF, FORMAT})

MAX_ID_LENGTH = 48

SENDER = __app_name__


# ---------------------------------------------------------------------------
# Error messages
# ---------------------------------------------------------------------------

ERROR_INVALID_ARGUMENTS = "invalid or missing argument(s)!"
ERROR_INVALID_HANDLER = "invalid or missing handler!"
ERROR_INTERNAL_ID = "internal method names are not allowed!"
ERROR_INVALID_ID_LENGTH = "invalid id length!"


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class ErrorMessage(BaseModel):
    """Published on the ``error`` channel when an operation is rejected."""

    sender: str = SENDER
    method: str | None = None
    type: MessageType = MessageType.ERROR
    text: str


class LoadAnnouncement(BaseModel):
    """Published once on ``info`` by the default instance on first registration."""

    sender: str = SENDER
    type: MessageType = MessageType.INFO
    loaded: bool = True
    version: str = Field(default_factory=get_version)
