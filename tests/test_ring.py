from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from nttpoly.ring import BIGINT, INT64


def test_bigint_arithmetic():
    x = 2 ** 100
    assert BIGINT.add(x, 1) == x + 1
    assert BIGINT.sub(1, x) == 1 - x
    assert BIGINT.mul(x, x) == 2 ** 200
    assert BIGINT.neg(x) == -x
    assert BIGINT.rem(-7, 5) == 3
    assert BIGINT.is_zero(0)
    assert BIGINT.magnitude(-x) == x
    assert BIGINT.max([3, -10, 7]) == 7


def test_rem_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        BIGINT.rem(5, 0)


def test_coerce_rejects_float():
    with pytest.raises(ValueError):
        BIGINT.coerce(1.5)


@pytest.mark.parametrize("value", [Fraction(1, 2), Fraction(4, 2), Decimal("2.7"), np.float32(1.5), "7", None, True])
def test_coerce_rejects_non_integers(value):
    with pytest.raises(ValueError):
        BIGINT.coerce(value)
    with pytest.raises(ValueError):
        INT64.coerce(value)


def test_coerce_accepts_numpy_integers():
    assert BIGINT.coerce(np.int32(-5)) == -5
    assert type(BIGINT.coerce(np.uint8(200))) is int
    assert INT64.coerce(np.int16(9)) == 9


def test_int64_elements():
    x = INT64.from_int(7)
    assert isinstance(x, np.int64)
    assert INT64.mul(x, INT64.from_int(-3)) == -21
    assert INT64.to_int(INT64.neg(x)) == -7


def test_int64_checks_range():
    with pytest.raises(OverflowError):
        INT64.mul(INT64.from_int(2 ** 40), INT64.from_int(2 ** 40))
    with pytest.raises(OverflowError):
        INT64.neg(INT64.from_int(INT64.MIN))


def test_rings_compare_by_type():
    assert BIGINT != INT64
    assert BIGINT == type(BIGINT)()
