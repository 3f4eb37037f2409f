import logging
import math
from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from hyperquat.errors import DivisionByZeroError, InvalidFormatError
from hyperquat.settings import Settings
from hyperquat.utils.helpers import format_fixed, grid_key, parse_double, split_components, strip_marker

logger = logging.getLogger(__name__)

Scalar = Union[int, float]


@dataclass(frozen=True, slots=True, eq=False)
class Quaternion:
    """
    An immutable quaternion r + i*I + j*J + k*K.
    r is the real part; i, j and k are the imaginary parts.

    Every operation returns a new instance. Equality is approximate: two
    quaternions are equal when each pair of components differs by less
    than Settings.EPS.
    """
    r: float
    i: float
    j: float
    k: float

    def __post_init__(self):
        # Components are stored as floats; no range or finiteness checks.
        for name in ("r", "i", "j", "k"):
            object.__setattr__(self, name, float(getattr(self, name)))

    @staticmethod
    def identity() -> "Quaternion":
        return Quaternion(1.0, 0.0, 0.0, 0.0)

    @staticmethod
    def zero() -> "Quaternion":
        return Quaternion(0.0, 0.0, 0.0, 0.0)

    # --- Accessors ---

    def get_r_part(self) -> float:
        """Real part of the quaternion."""
        return self.r

    def get_i_part(self) -> float:
        """Imaginary part i of the quaternion."""
        return self.i

    def get_j_part(self) -> float:
        """Imaginary part j of the quaternion."""
        return self.j

    def get_k_part(self) -> float:
        """Imaginary part k of the quaternion."""
        return self.k

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.i, self.j, self.k)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

    def copy(self) -> "Quaternion":
        """Returns an independent instance with the same components."""
        return Quaternion(self.r, self.i, self.j, self.k)

    def __copy__(self) -> "Quaternion":
        return self.copy()

    def __deepcopy__(self, memo) -> "Quaternion":
        return self.copy()

    # --- Text form ---

    def __str__(self) -> str:
        """
        Canonical form "a+bi+cj+dk" without brackets or spaces, one
        fractional digit per component. Negative parts keep their sign,
        so (1, -2, 3, 4) is written "1.0+-2.0i+3.0j+4.0k".
        """
        sep = Settings.COMPONENT_SEPARATOR
        digits = Settings.DISPLAY_DIGITS
        parts = [format_fixed(self.r, digits)]
        for value, marker in zip((self.i, self.j, self.k), Settings.IMAGINARY_MARKERS):
            parts.append(format_fixed(value, digits) + marker)
        return sep.join(parts)

    def __repr__(self) -> str:
        return f"Quaternion(r={self.r}, i={self.i}, j={self.j}, k={self.k})"

    @staticmethod
    def value_of(s: str) -> "Quaternion":
        """
        Parses the form produced by str(). Reverse of __str__.

        The string is split on every literal "+", so a component written
        with an explicit plus sign or a "+" exponent (e.g. "1e+5") yields
        extra segments and is rejected. Canonical output always parses,
        since negative parts appear as "+-x". Each number follows the
        decimal double grammar of parse_double: "1_0", "inf" and "nan"
        are rejected, while "NaN", "Infinity" and surrounding spaces are
        accepted.

        Raises:
            InvalidFormatError: if the string does not split into four
                segments or a segment is not a number.
        """
        parts = split_components(s, Settings.COMPONENT_SEPARATOR)
        if len(parts) != 4:
            logger.debug("Rejecting %r: expected 4 segments, got %d", s, len(parts))
            raise InvalidFormatError(s)

        tokens = [parts[0]]
        tokens.extend(strip_marker(part, marker)
                      for part, marker in zip(parts[1:], Settings.IMAGINARY_MARKERS))
        try:
            r, i, j, k = (parse_double(token) for token in tokens)
        except ValueError as e:
            logger.debug("Rejecting %r: %s", s, e)
            raise InvalidFormatError(s) from e
        return Quaternion(r, i, j, k)

    # --- Predicates ---

    def is_zero(self) -> bool:
        """True if every component is within EPS of zero."""
        eps = Settings.EPS
        return abs(self.r) < eps and abs(self.i) < eps and \
               abs(self.j) < eps and abs(self.k) < eps

    def __bool__(self) -> bool:
        return not self.is_zero()

    def equals(self, other: "Quaternion") -> bool:
        """Approximate equality: each component pair differs by less than EPS."""
        if not isinstance(other, Quaternion):
            raise TypeError(f"Cannot compare Quaternion with {type(other).__name__}.")
        eps = Settings.EPS
        return abs(self.r - other.r) < eps and abs(self.i - other.i) < eps and \
               abs(self.j - other.j) < eps and abs(self.k - other.k) < eps

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # Components are snapped to an EPS grid. Equal values that fall in
        # neighbouring grid cells can still hash differently.
        eps = Settings.EPS
        return hash(tuple(grid_key(c, eps) for c in self.as_tuple()))

    # --- Unary operations ---

    def conjugate(self) -> "Quaternion":
        """conjugate(a+bi+cj+dk) = a-bi-cj-dk"""
        return Quaternion(self.r, -self.i, -self.j, -self.k)

    def opposite(self) -> "Quaternion":
        """opposite(a+bi+cj+dk) = -a-bi-cj-dk"""
        return Quaternion(-self.r, -self.i, -self.j, -self.k)

    def __neg__(self) -> "Quaternion":
        return self.opposite()

    def __pos__(self) -> "Quaternion":
        return self.copy()

    def norm_squared(self) -> float:
        return self.r * self.r + self.i * self.i + self.j * self.j + self.k * self.k

    def norm(self) -> float:
        """Euclidean length sqrt(a*a+b*b+c*c+d*d)."""
        return math.sqrt(self.norm_squared())

    def __abs__(self) -> float:
        return self.norm()

    def inverse(self) -> "Quaternion":
        """
        1/(a+bi+cj+dk) = (a-bi-cj-dk) / (a*a+b*b+c*c+d*d)

        Raises:
            DivisionByZeroError: if the quaternion is (close to) zero.
        """
        if self.is_zero():
            logger.debug("Cannot invert %r", self)
            raise DivisionByZeroError("Quaternion is zero, cannot be inverted.")
        n2 = self.norm_squared()
        return Quaternion(self.r / n2, -self.i / n2, -self.j / n2, -self.k / n2)

    # --- Binary operations ---

    def plus(self, q: "Quaternion") -> "Quaternion":
        _require_quaternion(q, "add")
        return Quaternion(self.r + q.r, self.i + q.i, self.j + q.j, self.k + q.k)

    def minus(self, q: "Quaternion") -> "Quaternion":
        _require_quaternion(q, "subtract")
        return Quaternion(self.r - q.r, self.i - q.i, self.j - q.j, self.k - q.k)

    def times(self, other: Union["Quaternion", Scalar]) -> "Quaternion":
        """
        Hamilton product self*other when other is a Quaternion (operand
        order matters), or component-wise scaling when other is a number.
        """
        if isinstance(other, Quaternion):
            r1, i1, j1, k1 = self.r, self.i, self.j, self.k
            r2, i2, j2, k2 = other.r, other.i, other.j, other.k
            return Quaternion(
                r1 * r2 - i1 * i2 - j1 * j2 - k1 * k2,
                r1 * i2 + i1 * r2 + j1 * k2 - k1 * j2,
                r1 * j2 - i1 * k2 + j1 * r2 + k1 * i2,
                r1 * k2 + i1 * j2 - j1 * i2 + k1 * r2,
            )
        if isinstance(other, (int, float)):
            return Quaternion(self.r * other, self.i * other, self.j * other, self.k * other)
        raise TypeError(f"Cannot multiply Quaternion by {type(other).__name__}.")

    def divide_by_right(self, q: "Quaternion") -> "Quaternion":
        """Right quotient self * inverse(q)."""
        _require_quaternion(q, "divide")
        if q.is_zero():
            logger.debug("Right division of %r by zero quaternion", self)
            raise DivisionByZeroError("Right operand is 0, cannot divide by zero.")
        return self.times(q.inverse())

    def divide_by_left(self, q: "Quaternion") -> "Quaternion":
        """Left quotient inverse(q) * self."""
        _require_quaternion(q, "divide")
        if q.is_zero():
            logger.debug("Left division of %r by zero quaternion", self)
            raise DivisionByZeroError("Left operand is 0, cannot divide by zero.")
        return q.inverse().times(self)

    def dot_mult(self, q: "Quaternion") -> "Quaternion":
        """
        Dot product (conjugate(p)*q + conjugate(q)*p) / 2. The result is a
        quaternion whose imaginary parts vanish for ordinary inputs; this is
        not enforced.
        """
        _require_quaternion(q, "take the dot product of")
        return self.conjugate().times(q).plus(q.conjugate().times(self)).times(0.5)

    def pow(self, n: int) -> "Quaternion":
        """
        Integer power. Positive powers multiply on the right one factor at
        a time (q = q * self), so the result matches sequential
        accumulation exactly. Negative powers invert the positive power.
        """
        if not isinstance(n, int):
            raise TypeError(f"Quaternion exponent must be an int, not {type(n).__name__}.")
        if n == 0:
            return Quaternion.identity()
        if n == 1:
            return self.copy()
        if n == -1:
            return self.inverse()
        if n > 1:
            q = self.copy()
            for _ in range(1, n):
                q = q.times(self)
            return q
        return self.pow(-n).inverse()

    # --- Operators ---

    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, other):
        if isinstance(other, (Quaternion, int, float)):
            return self.times(other)
        return NotImplemented

    def __rmul__(self, scalar): # Handles scalar * Quaternion
        if isinstance(scalar, (int, float)):
            return self.times(scalar)
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Quaternion):
            return self.divide_by_right(other)
        if isinstance(other, (int, float)):
            if other == 0:
                raise DivisionByZeroError("Cannot divide a quaternion by scalar zero.")
            return self.times(1.0 / other)
        return NotImplemented

    def __rtruediv__(self, scalar):
        if isinstance(scalar, (int, float)):
            return self.inverse().times(scalar)
        return NotImplemented

    def __pow__(self, n, modulo=None):
        if modulo is not None or not isinstance(n, int):
            return NotImplemented
        return self.pow(n)


def _require_quaternion(value, action: str) -> None:
    if not isinstance(value, Quaternion):
        raise TypeError(f"Cannot {action} Quaternion and {type(value).__name__}.")


Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)
Quaternion.IDENTITY = Quaternion(1.0, 0.0, 0.0, 0.0)
