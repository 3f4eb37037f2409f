"""
Library-wide constants and logging configuration.
"""
import logging
import os
from typing import Optional, Tuple

from hyperquat.enums import LogLevel, to_logging_level

EPS: float = 1e-9
"""Absolute tolerance for every approximate-zero and approximate-equality test."""

LOG_LEVEL_ENV_VAR = "HYPERQUAT_LOG_LEVEL"

logger = logging.getLogger("hyperquat")
console_handler = logging.StreamHandler()


class Settings:
    """
    Constants shared by the quaternion type. Values are read-only by
    convention; nothing in the library mutates them at runtime.
    """

    EPS: float = EPS
    """Absolute tolerance used by is_zero, equality and hashing."""

    DISPLAY_DIGITS: int = 1
    """Number of fractional digits written for each component by str()."""

    COMPONENT_SEPARATOR: str = "+"
    """Literal separating the four components of the canonical string."""

    IMAGINARY_MARKERS: Tuple[str, str, str] = ("i", "j", "k")
    """Suffixes of the three imaginary components in the canonical string."""

    LOG_LEVEL: LogLevel = LogLevel.WARNING
    """Default level used by configure_logging when none is given."""

    @classmethod
    def resolve_log_level(cls, level: Optional[LogLevel] = None) -> LogLevel:
        """
        Picks the effective log level: an explicit argument wins, then the
        HYPERQUAT_LOG_LEVEL environment variable (a LogLevel name such as
        "DEBUG"), then LOG_LEVEL.
        """
        if level is not None:
            return LogLevel(level)
        env_value = os.getenv(LOG_LEVEL_ENV_VAR)
        if env_value:
            try:
                return LogLevel[env_value.strip().upper()]
            except KeyError:
                raise ValueError(
                    f"{LOG_LEVEL_ENV_VAR} must be one of "
                    f"{', '.join(m.name for m in LogLevel)}, got {env_value!r}"
                ) from None
        return cls.LOG_LEVEL

    @classmethod
    def configure_logging(cls, level: Optional[LogLevel] = None,
                          fmt: str = "%(asctime)s-%(name)s-%(levelname)s-%(message)s") -> logging.Logger:
        """
        Attaches a stream handler to the "hyperquat" logger. Safe to call
        more than once; the handler is only added the first time.
        """
        effective = cls.resolve_log_level(level)
        logger.setLevel(to_logging_level(effective))
        console_handler.setFormatter(logging.Formatter(fmt))
        if console_handler not in logger.handlers:
            logger.addHandler(console_handler)
        return logger
