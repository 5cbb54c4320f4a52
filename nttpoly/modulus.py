"""
Working modulus and root-of-unity selection for the NTT.

A multiplication of two integer polynomials is computed exactly by doing the
convolution modulo a prime N that is larger than any coefficient the exact
product can have. N is chosen of the form k*n + 1 so that Z_N contains a
primitive n-th root of unity for the transform length n.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sympy import isprime

from .utils import is_power_of_two

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constants:
    """Everything a length-n transform over Z_N needs."""
    modulus: int
    n: int
    root: int
    root_inv: int
    n_inv: int


def _check_length(n: int) -> None:
    if not isinstance(n, int) or not is_power_of_two(n):
        raise ValueError(f"Transform length n = {n} must be a power of two")


def find_nth_root(n: int, p: int) -> int:
    """
    Find a primitive n-th root of unity modulo the prime p.

    Candidates are w = x^((p-1)/n) for x = 2, 3, ...; since n is a power of
    two, w has order exactly n iff w^(n/2) != 1. The search is deterministic.
    """
    _check_length(n)
    if (p - 1) % n != 0:
        raise ValueError(f"p = {p} does not satisfy p ≡ 1 (mod {n})")
    if n == 1:
        return 1

    cofactor = (p - 1) // n
    for x in range(2, p):
        w = pow(x, cofactor, p)
        if pow(w, n // 2, p) != 1:
            return w
    raise ValueError(f"No primitive {n}-th root of unity modulo {p}")


def _build_constants(p: int, n: int) -> Constants:
    root = find_nth_root(n, p)
    return Constants(
        modulus=p,
        n=n,
        root=root,
        root_inv=pow(root, p - 2, p),
        n_inv=pow(n, p - 2, p),
    )


def coefficient_bound(max_a: int, max_b: int, n: int) -> int:
    """
    Bound on the magnitude of any coefficient of a product, plus room for sign.

    A product coefficient is a sum of at most n terms each bounded by
    max_a * max_b. Residues are read back in the symmetric range, so the
    modulus must exceed twice that.
    """
    return 2 * max_a * max_b * n + 1


def working_modulus(n: int, bound: int, min_bits: Optional[int] = None, verbose: bool = False) -> Constants:
    """
    Find the smallest prime N = k*n + 1 (k >= 1) with N > bound, and the root data for it.

    Args:
        n: Transform length (must be a power of two)
        bound: Exclusive lower bound for the modulus
        min_bits: Optionally also require N >= 2^min_bits
        verbose: Report the selection at INFO instead of DEBUG level

    Returns:
        Constants for a length-n transform modulo N
    """
    _check_length(n)
    if bound < 0:
        raise ValueError(f"Coefficient bound must be non-negative, got {bound}")

    min_prime = bound + 1
    if min_bits is not None:
        min_prime = max(min_prime, 2 ** min_bits)

    # Start search from the smallest k such that k * n + 1 >= min_prime
    k = max(1, -(-(min_prime - 1) // n))
    while True:
        candidate = k * n + 1
        if candidate >= min_prime and isprime(candidate):
            break
        k += 1

    constants = _build_constants(candidate, n)
    _logger.log(
        logging.INFO if verbose else logging.DEBUG,
        "working modulus for n=%d bound=%d: N=%d (%d bits, k=%d), root=%d",
        n, bound, constants.modulus, constants.modulus.bit_length(), k, constants.root,
    )
    return constants


def constants_for_prime(p: int, n: int) -> Constants:
    """
    Build Constants from a caller-chosen prime.

    Raises:
        ValueError: If p is not prime or p is not ≡ 1 (mod n)
    """
    _check_length(n)
    if not isprime(p):
        raise ValueError(f"Provided p = {p} is not prime")
    if (p - 1) % n != 0:
        raise ValueError(f"Prime p = {p} does not satisfy p ≡ 1 (mod {n}). Got (p - 1) % {n} = {(p - 1) % n}")
    return _build_constants(p, n)
