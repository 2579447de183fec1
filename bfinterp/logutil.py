"""Small tagged logger writing to standard output."""

from __future__ import annotations

import sys
from enum import Enum


class LogType(Enum):
    """Kinds of log messages and the tag printed in front of them."""

    INFO = "INFO"
    ERROR = "ERROR"
    CRITICAL_ERROR = "CRIT_ERROR"
    DUMP = "D"
    INTERP_DEBUG = "DEBUG"


_SILENCED = frozenset({LogType.INFO, LogType.INTERP_DEBUG})


def log_msg(log_type: LogType, message: str, *args: object) -> str | None:
    """Print a printf-style message tagged with its type.

    Informational and interpreter debug messages are silenced. Returns the
    text written, or None when the message was silenced.
    """
    if log_type in _SILENCED:
        return None
    body = message % args if args else message
    text = f"[{log_type.value}] {body}"
    sys.stdout.write(text)
    return text