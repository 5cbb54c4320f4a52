import random

import pytest

from nttpoly.modulus import working_modulus
from nttpoly.transform import bit_reverse_order, forward, inverse, pointwise_multiply


def test_bit_reverse_order():
    assert list(bit_reverse_order(8)) == [0, 4, 2, 6, 1, 5, 3, 7]
    assert list(bit_reverse_order(1)) == [0]
    with pytest.raises(ValueError):
        bit_reverse_order(6)


@pytest.mark.parametrize("n", [1, 2, 4, 8, 32, 128])
def test_round_trip(n):
    random.seed(42)
    c = working_modulus(n, 10 ** 12)
    for _ in range(5):
        x = [random.randrange(c.modulus) for _ in range(n)]
        assert inverse(forward(x, c), c) == x


def test_round_trip_reduces_negative_input():
    c = working_modulus(4, 1000)
    x = [-1, 5, -7, 0]
    assert inverse(forward(x, c), c) == [v % c.modulus for v in x]


@pytest.mark.parametrize("n", [2, 8, 16, 64])
def test_butterfly_matches_direct(n):
    random.seed(7)
    c = working_modulus(n, 10 ** 9)
    x = [random.randrange(c.modulus) for _ in range(n)]
    assert forward(x, c) == forward(x, c, method="direct")
    assert inverse(x, c) == inverse(x, c, method="direct")


def test_forward_evaluates_at_powers_of_root():
    c = working_modulus(8, 1000)
    p = c.modulus
    x = [3, 0, 1, 0, 0, 0, 0, 2]  # 3 + x^2 + 2x^7
    out = forward(x, c)
    for k in range(8):
        g = pow(c.root, k, p)
        assert out[k] == (3 + g ** 2 + 2 * g ** 7) % p


def test_delta_transforms_to_ones():
    c = working_modulus(16, 1000)
    assert forward([1] + [0] * 15, c) == [1] * 16


def test_length_mismatch():
    c = working_modulus(8, 1000)
    with pytest.raises(ValueError):
        forward([1, 2, 3, 4], c)
    with pytest.raises(ValueError):
        inverse([1, 2, 3], c)


def test_unknown_method():
    c = working_modulus(4, 1000)
    with pytest.raises(ValueError):
        forward([1, 2, 3, 4], c, method="fft")


def test_pointwise_parallel_matches_sequential():
    random.seed(3)
    c = working_modulus(1024, 2 ** 64)
    p = c.modulus
    a = [random.randrange(p) for _ in range(1024)]
    b = [random.randrange(p) for _ in range(1024)]
    expected = [(x * y) % p for x, y in zip(a, b)]
    assert pointwise_multiply(a, b, p) == expected
    assert pointwise_multiply(a, b, p, workers=4) == expected
    assert pointwise_multiply(a, b, p, workers=3) == expected


def test_pointwise_rejects_bad_input():
    with pytest.raises(ValueError):
        pointwise_multiply([1, 2], [1], 17)
    with pytest.raises(ValueError):
        pointwise_multiply([1], [1], 17, workers=0)
