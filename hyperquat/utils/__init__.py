# This file marks hyperquat.utils as a Python package.

from .helpers import (
    format_fixed,
    parse_double,
    strip_marker,
    split_components,
    grid_key,
)

__all__ = [
    "format_fixed",
    "parse_double",
    "strip_marker",
    "split_components",
    "grid_key",
]
