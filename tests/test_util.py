import math
import sys

import pytest

from probseq.util import INVALID_SYMBOL, close, log_sum, mod, safe_division


def test_invalid_symbol_is_largest_unsigned_int():
    assert mod(INVALID_SYMBOL, 2 ** 32) == 4294967295
    assert mod(INVALID_SYMBOL + 1, 2 ** 32) == 0


@pytest.mark.parametrize("a,b", [(0.2, 0.8), (0.5, 0.5), (1e-5, 0.3)])
def test_log_sum_matches_direct_sum(a, b):
    assert log_sum(math.log(a), math.log(b)) == pytest.approx(math.log(a + b))


def test_log_sum_is_symmetric():
    assert log_sum(-3.0, -1.0) == pytest.approx(log_sum(-1.0, -3.0))


def test_log_sum_with_negative_infinity():
    assert log_sum(-math.inf, math.log(0.4)) == pytest.approx(math.log(0.4))
    assert log_sum(math.log(0.4), -math.inf) == pytest.approx(math.log(0.4))


def test_log_sum_of_two_negative_infinities():
    assert log_sum(-math.inf, -math.inf) == -math.inf


def test_safe_division_regular():
    assert safe_division(6.0, 3.0) == pytest.approx(2.0)


def test_safe_division_zero_numerator():
    assert safe_division(0.0, 0.0) == 0.0
    assert safe_division(0.0, 5.0) == 0.0


def test_safe_division_overflow_clamps_to_max():
    assert safe_division(1.0, 0.0) == sys.float_info.max
    assert safe_division(1e300, 1e-300) == sys.float_info.max


def test_safe_division_underflow_gives_zero():
    assert safe_division(1e-300, 1e300) == 0.0


def test_close_equal_values():
    assert close(0.0, 0.0, 1e-10)
    assert close(0.25, 0.25, 1e-10)


def test_close_tiny_relative_difference():
    assert close(1.0, 1.0 + 1e-12, 1e-10)


def test_close_rejects_distant_values():
    assert not close(1.0, 2.0, 1e-10)
    assert not close(0.0, 1.0, 1e-10)


@pytest.mark.parametrize(
    "dividend,divisor", [(7, 3), (-7, 3), (7, -3), (-7, -3), (0, 5), (-1, 4)]
)
def test_mod_is_in_range(dividend, divisor):
    result = mod(dividend, divisor)
    assert 0 <= result < abs(divisor)
    assert (dividend - result) % divisor == 0


def test_mod_of_negative_dividend():
    assert mod(-1, 3) == 2


def test_mod_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        mod(4, 0)