"""
Integer polynomials with exact NTT-accelerated multiplication.

Coefficients are stored big-endian: index 0 holds the highest-degree term.
"""

import logging
from itertools import zip_longest

from . import transform
from .modulus import Constants, coefficient_bound, working_modulus
from .ring import BIGINT
from .utils import centered, is_power_of_two, next_power_of_two

_logger = logging.getLogger(__name__)


class Polynomial:
    """
    Immutable coefficient sequence over a ring (BIGINT by default).

    Polynomial(coef) keeps the given length; Polynomial.new(coef) left-pads
    with zeros up to a power-of-two length.
    """

    __slots__ = ("coef", "ring")

    def __init__(self, coef, ring=BIGINT):
        coef = tuple(ring.coerce(c) for c in coef)
        if not coef:
            coef = (ring.zero(),)
        object.__setattr__(self, "coef", coef)
        object.__setattr__(self, "ring", ring)

    def __setattr__(self, name, value):
        raise AttributeError(f"Polynomial is immutable, cannot set {name!r}")

    def __delattr__(self, name):
        raise AttributeError(f"Polynomial is immutable, cannot delete {name!r}")

    @classmethod
    def new(cls, coef, ring=BIGINT) -> "Polynomial":
        coef = list(coef)
        size = next_power_of_two(len(coef))
        return cls([ring.zero()] * (size - len(coef)) + coef, ring)

    def _same_ring(self, other: "Polynomial"):
        if not isinstance(other, Polynomial):
            raise TypeError(f"Expected Polynomial, got {type(other).__name__}")
        if self.ring != other.ring:
            raise ValueError(f"Ring mismatch: {self.ring!r} vs {other.ring!r}")

    # -- structure --

    def __len__(self):
        return len(self.coef)

    def __iter__(self):
        return iter(self.coef)

    def __getitem__(self, index):
        return self.coef[index]

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.ring == other.ring and [self.ring.to_int(c) for c in self.coef] == [
            other.ring.to_int(c) for c in other.coef
        ]

    def __hash__(self):
        return hash((self.ring, tuple(self.ring.to_int(c) for c in self.coef)))

    def __repr__(self):
        return f"Polynomial({[self.ring.to_int(c) for c in self.coef]})"

    def _first_nonzero(self):
        for i, c in enumerate(self.coef):
            if not self.ring.is_zero(c):
                return i
        return None

    def is_zero(self) -> bool:
        return self._first_nonzero() is None

    def is_normalized(self) -> bool:
        return is_power_of_two(len(self.coef))

    def degree(self) -> int:
        """Exponent of the highest nonzero term; the zero polynomial has degree 0."""
        first = self._first_nonzero()
        if first is None:
            return 0
        return len(self.coef) - first - 1

    def trim(self) -> "Polynomial":
        """Drop leading zero coefficients, keeping at least one."""
        first = self._first_nonzero()
        if first is None:
            return Polynomial([self.ring.zero()], self.ring)
        return Polynomial(self.coef[first:], self.ring)

    def max_magnitude(self) -> int:
        return self.ring.magnitude(self.ring.max(self.coef, key=self.ring.magnitude))

    # -- ring operations --

    def add(self, other: "Polynomial") -> "Polynomial":
        self._same_ring(other)
        ring = self.ring
        zero = ring.zero()
        summed = [
            ring.add(a, b)
            for a, b in zip_longest(reversed(self.coef), reversed(other.coef), fillvalue=zero)
        ]
        return Polynomial(reversed(summed), ring)

    def neg(self) -> "Polynomial":
        return Polynomial([self.ring.neg(c) for c in self.coef], self.ring)

    def sub(self, other: "Polynomial") -> "Polynomial":
        return self.add(other.neg())

    __add__ = add
    __sub__ = sub
    __neg__ = neg

    def diff(self) -> "Polynomial":
        """Formal derivative, trimmed: [3, 2, 1] -> [6, 2]."""
        ring = self.ring
        size = len(self.coef)
        new_coef = [ring.zero()] * size
        for i in range(size - 1, 0, -1):
            new_coef[i] = ring.mul(self.coef[i - 1], ring.from_int(size - i))
        return Polynomial(new_coef, ring).trim()

    # -- multiplication --

    def mul_brute(self, other: "Polynomial") -> "Polynomial":
        """Schoolbook O(n*m) product, trimmed to degree(a) + degree(b) + 1 terms."""
        self._same_ring(other)
        ring = self.ring
        a = self.coef[::-1]
        b = other.coef[::-1]
        result = [ring.zero()] * (len(a) + len(b) - 1)
        for i in range(len(a)):
            for j in range(len(b)):
                result[i + j] = ring.add(result[i + j], ring.mul(a[i], b[j]))
        size = self.degree() + other.degree() + 1
        return Polynomial(result[:size][::-1], ring)

    def transform_length(self, other: "Polynomial") -> int:
        return next_power_of_two(len(self.coef) + len(other.coef))

    def ntt_constants(self, other: "Polynomial", min_bits=None, verbose: bool = False) -> Constants:
        """Constants large enough to multiply self by other exactly."""
        n = self.transform_length(other)
        bound = coefficient_bound(self.max_magnitude(), other.max_magnitude(), n)
        return working_modulus(n, bound, min_bits=min_bits, verbose=verbose)

    def mul(self, other: "Polynomial", constants: Constants = None, workers: int = None,
            verbose: bool = False) -> "Polynomial":
        """
        Multiply through the NTT.

        Args:
            other: Right operand (same ring)
            constants: Transform constants; derived from the operands when None.
                Caller-supplied constants must have constants.n at least
                transform_length(other) and a modulus larger than every
                coefficient of the exact product times two, otherwise the
                result is silently reduced.
            workers: Threads for the pointwise multiplication step
            verbose: Log the steps at INFO instead of DEBUG level

        Returns:
            Product with exactly degree(a) + degree(b) + 1 coefficients
        """
        self._same_ring(other)
        ring = self.ring
        level = logging.INFO if verbose else logging.DEBUG

        n = self.transform_length(other)
        if constants is None:
            constants = self.ntt_constants(other, verbose=verbose)
        elif constants.n < n:
            raise ValueError(f"Constants are for length {constants.n}, need at least {n}")
        n = constants.n
        p = constants.modulus

        # Index = exponent for the transform, zero-padded on the high-degree side
        a = [ring.to_int(c) for c in reversed(self.coef)]
        b = [ring.to_int(c) for c in reversed(other.coef)]
        a += [0] * (n - len(a))
        b += [0] * (n - len(b))

        a_forward = transform.forward(a, constants)
        b_forward = transform.forward(b, constants)
        product = transform.pointwise_multiply(a_forward, b_forward, p, workers=workers)
        result = transform.inverse(product, constants)
        _logger.log(level, "ntt multiply: lengths %d x %d, n=%d, N=%d", len(self), len(other), n, p)

        size = self.degree() + other.degree() + 1
        coef = [ring.from_int(centered(r, p)) for r in result[:size]]
        return Polynomial(reversed(coef), ring)

    def __mul__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.mul(other)
