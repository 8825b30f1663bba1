"""message-events: (pre)formatted message channels.

Module-level ``on`` and ``off`` operate on a shared default instance whose
``info`` and ``error`` channels come with formats installed::

    import message_events

    message_events.on("error", print)
    message_events.on("")
    # {'sender': 'MessageEvents', 'method': 'on', 'type': 'error',
    #  'text': 'invalid id length!'}

Independent instances are created with ``MessageEvents()``.
"""

import logging

from message_events._version import __version__
from message_events.config import configure_logging
from message_events.domain.bus import MessageEvents
from message_events.domain.models import (
    ERROR_INTERNAL_ID,
    ERROR_INVALID_ARGUMENTS,
    ERROR_INVALID_HANDLER,
    ERROR_INVALID_ID_LENGTH,
)
from message_events.main import default_events, off, on
from message_events.services.formats import error_format, identity_format

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ERROR_INTERNAL_ID",
    "ERROR_INVALID_ARGUMENTS",
    "ERROR_INVALID_HANDLER",
    "ERROR_INVALID_ID_LENGTH",
    "MessageEvents",
    "configure_logging",
    "__version__",
    "default_events",
    "error_format",
    "identity_format",
    "off",
    "on",
]
