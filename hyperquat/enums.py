import logging
from enum import IntEnum


class LogLevel(IntEnum): NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4


_LOGGING_LEVELS = {
    LogLevel.NONE: logging.CRITICAL + 1,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


def to_logging_level(level: LogLevel) -> int:
    """Maps a LogLevel onto the matching stdlib logging level."""
    return _LOGGING_LEVELS[LogLevel(level)]
