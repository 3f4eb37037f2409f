import math
import re
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Hashable

# Enough digits to hold the largest double written in fixed point.
_FIXED_POINT_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

# Decimal doubles as read by the canonical parser: optional sign, digits
# with an optional fraction and exponent, an optional f/F/d/D suffix, or
# the exact words NaN and Infinity.
_DOUBLE_RE = re.compile(
    r"(?P<number>[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
    r"(?:(?<=[\d.])[fFdD])?"
)


def format_fixed(value: float, digits: int = 1) -> str:
    """
    Formats a float in fixed point with exactly `digits` fractional digits.
    The shortest decimal form of the value (its repr) is rounded half-up,
    so 0.15 -> "0.2" and 1.45 -> "1.5".
    Non-finite values are written as NaN, Infinity and -Infinity.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    exponent = Decimal(1).scaleb(-digits)
    quantized = Decimal(repr(float(value))).quantize(exponent, context=_FIXED_POINT_CONTEXT)
    return f"{quantized:f}"


def parse_double(token: str) -> float:
    """
    Parses one numeric component. Surrounding whitespace is ignored.
    Underscores, hex floats and spellings such as "inf" or "nan" are
    rejected even though float() would accept them.

    Raises:
        ValueError: if the token is not a decimal double.
    """
    match = _DOUBLE_RE.fullmatch(token.strip())
    if match is None:
        raise ValueError(f"could not convert string to double: {token!r}")
    return float(match.group("number"))


def strip_marker(token: str, marker: str) -> str:
    """Removes a single trailing unit marker ("i", "j" or "k") if present."""
    if marker and token.endswith(marker):
        return token[:-len(marker)]
    return token


def split_components(text: str, separator: str = "+") -> list:
    """
    Splits on a literal separator and drops trailing empty segments, so
    "1+2i+3j+4k+" yields four parts while "+1+2i+3j+4k" yields five.
    """
    parts = text.split(separator)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def grid_key(value: float, cell: float) -> Hashable:
    """
    Snaps a float onto a grid of width `cell` for hashing. Values whose
    scaled form is not finite are returned unchanged.
    """
    scaled = value / cell
    if not math.isfinite(scaled):
        return value
    return round(scaled)
