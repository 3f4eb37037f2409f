"""
Exception types raised by hyperquat.
"""


class QuaternionError(Exception):
    """Base class for all errors raised by the quaternion type."""


class InvalidFormatError(QuaternionError, ValueError):
    """A string could not be parsed as a canonical quaternion."""

    def __init__(self, text: str):
        super().__init__(f"Invalid input string: {text}")
        self.text = text


class DivisionByZeroError(QuaternionError, ZeroDivisionError):
    """Inversion or division of a quaternion that is (close to) zero."""
