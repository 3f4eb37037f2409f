"""hyperquat: an immutable quaternion value type with a canonical text form."""

from .enums import LogLevel
from .errors import QuaternionError, InvalidFormatError, DivisionByZeroError
from .settings import EPS, Settings
from .types import Quaternion

__version__ = "0.1.0"

__all__ = [
    "Quaternion", "LogLevel",
    "QuaternionError", "InvalidFormatError", "DivisionByZeroError",
    "EPS", "Settings",
    "__version__",
]
