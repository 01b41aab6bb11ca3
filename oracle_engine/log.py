"""Level-filtered logging of calculation messages."""

from __future__ import annotations

import sys
from enum import IntEnum


class LogLevel(IntEnum):
    """Verbosity levels, lowest is most severe."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3

    @classmethod
    def from_value(cls, value: int) -> "LogLevel":
        """Convert an integer level; raise ValueError when it is out of range."""
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid log level: {value!r}") from None


_current_level = LogLevel.WARNING


def get_log_level() -> LogLevel:
    """Return the active log level."""
    return _current_level


def set_log_level(level: LogLevel | int) -> None:
    """Set the active log level from a LogLevel or its integer value."""
    global _current_level
    _current_level = LogLevel.from_value(int(level))


def extern_log(message: str, level: LogLevel) -> bool:
    """Write the message to stderr if its level is enabled; return whether it was written."""
    if level > _current_level:
        return False
    print(message, file=sys.stderr)
    return True


def log(message: str, level: int) -> bool:
    """Log with an integer level; raise ValueError for an invalid level."""
    return extern_log(message, LogLevel.from_value(level))