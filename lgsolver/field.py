"""Arithmetic capability sets used by the elimination engine.

The engine never touches numbers directly; it asks a field object to add,
divide, compare against zero and so on.  ``FloatField`` works on plain
floats with a small zero tolerance, ``FractionField`` on exact
:class:`~lgsolver.fraction.Fraction` values.
"""

import math

from lgsolver.fraction import Fraction

# Absolute tolerance for "is zero" / "is one" tests in floating mode.
FLOAT_EPSILON = 1e-14

# Tolerance used when substituting a floating solution back into M·x = b.
FLOAT_CHECK_TOLERANCE = 1e-10


class Field:
    """Operations the elimination engine needs from a number type."""

    name = "abstract"
    exact = False

    def coerce(self, value):
        raise NotImplementedError

    @property
    def zero(self):
        return self.coerce(0)

    @property
    def one(self):
        return self.coerce(1)

    def add(self, a, b):
        raise NotImplementedError

    def sub(self, a, b):
        raise NotImplementedError

    def mul(self, a, b):
        raise NotImplementedError

    def div(self, a, b):
        raise NotImplementedError

    def neg(self, a):
        raise NotImplementedError

    def abs(self, a):
        raise NotImplementedError

    def inv(self, a):
        return self.div(self.one, a)

    def is_zero(self, a) -> bool:
        raise NotImplementedError

    def is_one(self, a) -> bool:
        raise NotImplementedError

    def is_negative(self, a) -> bool:
        raise NotImplementedError

    def is_integral(self, a) -> bool:
        raise NotImplementedError

    def close(self, a, b) -> bool:
        """Equality used by the verification pass."""
        raise NotImplementedError

    def dot(self, row, vector):
        total = self.zero
        for a, b in zip(row, vector):
            total = self.add(total, self.mul(a, b))
        return total

    def __repr__(self):
        return f"<{type(self).__name__}>"


class FloatField(Field):
    name = "floating point"

    def __init__(self, epsilon: float = FLOAT_EPSILON):
        self.epsilon = epsilon

    def coerce(self, value):
        if isinstance(value, Fraction):
            return value.number
        return float(value)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return a / b

    def neg(self, a):
        return -a

    def abs(self, a):
        return abs(a)

    def is_zero(self, a) -> bool:
        return abs(a) < self.epsilon

    def is_one(self, a) -> bool:
        return abs(a - 1) < self.epsilon

    def is_negative(self, a) -> bool:
        return a < 0

    def is_integral(self, a) -> bool:
        return a % 1 == 0

    def close(self, a, b) -> bool:
        return math.isclose(a, b, rel_tol=FLOAT_CHECK_TOLERANCE,
                            abs_tol=FLOAT_CHECK_TOLERANCE)


class FractionField(Field):
    name = "exact fractions"
    exact = True

    def coerce(self, value):
        return Fraction.from_number(value)

    def add(self, a, b):
        return a.add(b)

    def sub(self, a, b):
        return a.sub(b)

    def mul(self, a, b):
        return a.mul(b)

    def div(self, a, b):
        return a.div(b)

    def neg(self, a):
        return a.minus

    def abs(self, a):
        return a.abs

    def inv(self, a):
        return a.inv

    def is_zero(self, a) -> bool:
        return a.numerator == 0

    def is_one(self, a) -> bool:
        return a.numerator == 1 and a.denominator == 1

    def is_negative(self, a) -> bool:
        return a.numerator < 0

    def is_integral(self, a) -> bool:
        return a.denominator == 1

    def close(self, a, b) -> bool:
        return a.equals(b)


def field_for(exact: bool) -> Field:
    """Return the field matching the chosen numeric representation."""
    return FractionField() if exact else FloatField()
