"""
Coefficient rings for Polynomial.

A ring object bundles the arithmetic a coefficient type has to provide, so a
Polynomial can run over arbitrary-precision integers or over checked 64-bit
machine integers with the same code.
"""

import numbers

import numpy as np


class IntegerRing:
    """Arbitrary-precision integers backed by Python int."""

    name = "bigint"

    def coerce(self, x):
        if isinstance(x, bool) or not isinstance(x, numbers.Integral):
            raise ValueError(f"Cannot use {x!r} as an integer coefficient")
        return int(x)

    def from_int(self, i: int):
        return self.coerce(i)

    def to_int(self, x) -> int:
        return int(x)

    def zero(self):
        return self.from_int(0)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def neg(self, a):
        return -a

    def rem(self, a, m: int) -> int:
        """Remainder in [0, m)."""
        if m <= 0:
            raise ValueError(f"Modulus must be positive, got {m}")
        return self.to_int(a) % m

    def is_zero(self, a) -> bool:
        return self.to_int(a) == 0

    def magnitude(self, a) -> int:
        return abs(self.to_int(a))

    def max(self, items, key=None):
        return max(items, key=key or self.to_int)

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class Int64Ring(IntegerRing):
    """
    Signed 64-bit machine integers (numpy.int64).

    Every operation is computed exactly and checked: a result outside the
    int64 range raises OverflowError instead of wrapping.
    """

    name = "int64"
    MIN = int(np.iinfo(np.int64).min)
    MAX = int(np.iinfo(np.int64).max)

    def _check(self, value: int):
        if value < self.MIN or value > self.MAX:
            raise OverflowError(f"{value} does not fit in a signed 64-bit coefficient")
        return np.int64(value)

    def coerce(self, x):
        return self._check(super().coerce(x))

    def add(self, a, b):
        return self._check(int(a) + int(b))

    def sub(self, a, b):
        return self._check(int(a) - int(b))

    def mul(self, a, b):
        return self._check(int(a) * int(b))

    def neg(self, a):
        return self._check(-int(a))


BIGINT = IntegerRing()
INT64 = Int64Ring()
