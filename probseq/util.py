"""Numeric helpers shared by the models."""

import math
import sys

INVALID_SYMBOL = 2**32 - 1
"""Marker for a symbol that could not be produced."""

_DOUBLE_MAX = sys.float_info.max
_DOUBLE_MIN = sys.float_info.min


def log_sum(log_a: float, log_b: float) -> float:
    """Return log(exp(log_a) + exp(log_b)) without leaving log space."""
    if log_a > log_b:
        diff = log_b - log_a
        if math.isnan(diff):
            return log_a
        return log_a + math.log1p(math.exp(diff))
    diff = log_a - log_b
    if math.isnan(diff):
        return log_b
    return log_b + math.log1p(math.exp(diff))


def safe_division(a: float, b: float) -> float:
    """Divide a by b, clamping results that would overflow or underflow."""
    if b < 1 and a > b * _DOUBLE_MAX:
        return _DOUBLE_MAX
    if (b > 1 and a < b * _DOUBLE_MIN) or a == 0:
        return 0.0
    if b == 0:
        if math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def close(a: float, b: float, tolerance: float) -> bool:
    """Tell whether a and b agree within a relative tolerance."""
    diff = abs(a - b)
    return (
        safe_division(diff, abs(a)) <= tolerance
        and safe_division(diff, abs(b)) <= tolerance
    )


def mod(dividend: int, divisor: int) -> int:
    """Return the remainder of dividend by divisor, always non-negative."""
    if divisor == 0:
        raise ZeroDivisionError("modulo by zero")
    return dividend % abs(divisor)