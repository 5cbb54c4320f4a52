"""Exact integer polynomial arithmetic with NTT multiplication."""

from .modulus import Constants, coefficient_bound, constants_for_prime, working_modulus
from .polynomial import Polynomial
from .ring import BIGINT, INT64, Int64Ring, IntegerRing
from .transform import forward, inverse, pointwise_multiply

__all__ = [
    "BIGINT",
    "INT64",
    "Constants",
    "Int64Ring",
    "IntegerRing",
    "Polynomial",
    "coefficient_bound",
    "constants_for_prime",
    "forward",
    "inverse",
    "pointwise_multiply",
    "working_modulus",
]
