"""
Radix-2 Number-Theoretic Transform over Z_N.

Both directions take input in natural order and produce output in natural
order: the input is permuted into bit-reversed order, then log2(n)
Cooley-Tukey butterfly stages are applied. Forward output k is the input
polynomial (index = exponent) evaluated at g^k.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from .modulus import Constants
from .utils import is_power_of_two

_logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 1
# Below this many elements per worker a thread pool costs more than it saves
PARALLEL_THRESHOLD = 256


def bit_reverse_order(n: int) -> np.ndarray:
    """Generate bit-reversed indices for size n"""
    if not is_power_of_two(n):
        raise ValueError(f"n = {n} must be a power of two")
    width = n.bit_length() - 1
    indices = np.zeros(n, dtype=np.int64)
    for i in range(1, n):
        indices[i] = (indices[i >> 1] >> 1) | ((i & 1) << (width - 1))
    return indices


def _check_input(values, constants: Constants) -> list:
    n = constants.n
    if not is_power_of_two(len(values)):
        raise ValueError(f"Input length {len(values)} must be a power of two")
    if len(values) != n:
        raise ValueError(f"Input must have length {n}, got {len(values)}")
    return [int(x) % constants.modulus for x in values]


def _butterfly(b: list, root: int, p: int) -> list:
    n = len(b)
    brv = bit_reverse_order(n)
    b = [b[int(j)] for j in brv]

    step = 1
    while step < n:
        # Primitive (2*step)-th root of unity for this stage
        w_stage = pow(root, n // (2 * step), p)
        twiddles = [1] * step
        for j in range(1, step):
            twiddles[j] = (twiddles[j - 1] * w_stage) % p

        for start in range(0, n, 2 * step):
            for j in range(step):
                i = start + j
                t = (twiddles[j] * b[i + step]) % p
                b[i + step] = (b[i] - t) % p
                b[i] = (b[i] + t) % p
        step *= 2
    return b


def _direct(b: list, root: int, p: int) -> list:
    n = len(b)
    result = []
    for k in range(n):
        point = pow(root, k, p)
        # Horner's method, highest exponent first
        value = 0
        for j in range(n - 1, -1, -1):
            value = (value * point + b[j]) % p
        result.append(value)
    return result


_METHODS = {
    "butterfly": _butterfly,
    "direct": _direct,
}


def _method(method: str):
    try:
        return _METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}. Use 'butterfly' or 'direct'") from None


def forward(values, constants: Constants, method: str = "butterfly") -> list:
    """Compute forward NTT.

    Args:
        values: Coefficients, index = exponent, length constants.n
        constants: Modulus and root data from working_modulus
        method: "butterfly" for O(n log n), "direct" for O(n²) evaluation
    """
    transform = _method(method)
    b = _check_input(values, constants)
    return transform(b, constants.root, constants.modulus)


def inverse(values, constants: Constants, method: str = "butterfly") -> list:
    """Compute inverse NTT; the result is in [0, N)."""
    transform = _method(method)
    b = _check_input(values, constants)
    p = constants.modulus
    b = transform(b, constants.root_inv, p)
    return [(x * constants.n_inv) % p for x in b]


def _multiply_range(a, b, p, lo, hi):
    return [(a[i] * b[i]) % p for i in range(lo, hi)]


def pointwise_multiply(a, b, modulus: int, workers: int = None) -> list:
    """
    Elementwise product of two transformed sequences modulo N.

    With more than one worker the index range is cut into contiguous chunks;
    each task computes the products for its own chunk only.
    """
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} != {len(b)}")
    if workers is None:
        workers = DEFAULT_WORKERS
    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")

    n = len(a)
    workers = min(workers, max(1, n // PARALLEL_THRESHOLD))
    if workers == 1:
        return _multiply_range(a, b, modulus, 0, n)

    chunk = -(-n // workers)
    bounds = [(lo, min(lo + chunk, n)) for lo in range(0, n, chunk)]
    _logger.debug("pointwise multiply of %d values across %d workers", n, len(bounds))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_multiply_range, a, b, modulus, lo, hi) for lo, hi in bounds]
        result = []
        for future in futures:
            result.extend(future.result())
    return result
