"""Exact rational numbers for the elimination engine.

A :class:`Fraction` is an immutable value with an integer numerator and a
positive integer denominator, always stored in lowest terms.  Both parts are
divided by their greatest common divisor on construction, so values stay
cheap to build even when exact elimination produces very long integers.
"""

import math
import sys

from sympy import igcd

# ``from_number`` stops scaling once the numerator grows past this.
FROM_NUMBER_LIMIT = 100_000_000


def _round_half_up(value) -> int:
    """Round to the nearest integer, halves away from -inf (like JS Math.round)."""
    if isinstance(value, int):
        return value
    return math.floor(value + 0.5)


class Fraction:
    """Reduced fraction with the sign carried on the numerator."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator=0, denominator=1):
        numerator = _round_half_up(numerator)
        denominator = _round_half_up(denominator)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        if numerator == 0:
            denominator = 1

        divisor = int(igcd(numerator, denominator)) or 1
        numerator //= divisor
        denominator //= divisor
        object.__setattr__(self, "_numerator", numerator)
        object.__setattr__(self, "_denominator", denominator)

    def __setattr__(self, name, value):
        raise AttributeError("Fraction objects are immutable")

    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def number(self) -> float:
        """Decimal value."""
        return self._numerator / self._denominator

    @classmethod
    def from_number(cls, number) -> "Fraction":
        """Build a fraction from a decimal number (or copy a Fraction).

        The number is scaled by 10 until it is integral or exceeds
        ``FROM_NUMBER_LIMIT``; values that are not short decimals are
        therefore only approximated.
        """
        if isinstance(number, Fraction):
            return cls(number.numerator, number.denominator)

        denominator = 1
        while number % 1 != 0:
            number *= 10
            denominator *= 10
            if abs(number) > FROM_NUMBER_LIMIT:
                break
        return cls(number, denominator)

    # ── Comparison ──────────────────────────────────────────────────────

    def equals(self, other) -> bool:
        """Exact comparison against a Fraction or a plain number."""
        if other is None:
            return False
        if isinstance(other, Fraction):
            return (self._numerator == other.numerator
                    and self._denominator == other.denominator)
        if isinstance(other, int):
            return self._denominator == 1 and self._numerator == other
        if not math.isfinite(other):
            return False
        numerator, denominator = other.as_integer_ratio()
        return self._numerator * denominator == numerator * self._denominator

    def __eq__(self, other):
        if isinstance(other, (Fraction, int, float)):
            return self.equals(other)
        return NotImplemented

    def __hash__(self):
        # Same value as hash() of an equal int or float.
        modulus = sys.hash_info.modulus
        try:
            inverse = pow(self._denominator, -1, modulus)
        except ValueError:
            result = sys.hash_info.inf
        else:
            result = hash(hash(abs(self._numerator)) * inverse)
        if self._numerator < 0:
            result = -result
        return -2 if result == -1 else result

    def _compare(self, other) -> int:
        if isinstance(other, int):
            other = Fraction(other)
        if isinstance(other, Fraction):
            left = self._numerator * other.denominator
            right = other.numerator * self._denominator
        else:
            left, right = self.number, other
        return (left > right) - (left < right)

    def __lt__(self, other):
        if not isinstance(other, (Fraction, int, float)):
            return NotImplemented
        return self._compare(other) < 0

    def __le__(self, other):
        if not isinstance(other, (Fraction, int, float)):
            return NotImplemented
        return self._compare(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, (Fraction, int, float)):
            return NotImplemented
        return self._compare(other) > 0

    def __ge__(self, other):
        if not isinstance(other, (Fraction, int, float)):
            return NotImplemented
        return self._compare(other) >= 0

    def __bool__(self):
        return self._numerator != 0

    # ── Unary operations ────────────────────────────────────────────────

    @property
    def abs(self) -> "Fraction":
        return Fraction(abs(self._numerator), self._denominator)

    @property
    def inv(self) -> "Fraction":
        """Reciprocal; undefined for zero."""
        return Fraction(self._denominator, self._numerator)

    @property
    def minus(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    def __abs__(self):
        return self.abs

    def __neg__(self):
        return self.minus

    # ── Arithmetic ──────────────────────────────────────────────────────

    def add(self, other: "Fraction") -> "Fraction":
        return Fraction(self._numerator * other.denominator + other.numerator * self._denominator,
                        self._denominator * other.denominator)

    def sub(self, other: "Fraction") -> "Fraction":
        return Fraction(self._numerator * other.denominator - other.numerator * self._denominator,
                        self._denominator * other.denominator)

    def mul(self, other: "Fraction") -> "Fraction":
        return Fraction(self._numerator * other.numerator,
                        self._denominator * other.denominator)

    def div(self, other: "Fraction") -> "Fraction":
        """Quotient; the divisor must not be zero."""
        return Fraction(self._numerator * other.denominator,
                        self._denominator * other.numerator)

    @staticmethod
    def _coerce(other):
        if isinstance(other, Fraction):
            return other
        if isinstance(other, int):
            return Fraction(other)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.sub(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.sub(self)

    def __mul__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else self.div(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        return NotImplemented if other is None else other.div(self)

    def __float__(self):
        return self.number

    # ── Display ─────────────────────────────────────────────────────────

    def __str__(self):
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __repr__(self):
        return f"Fraction({self._numerator}, {self._denominator})"
