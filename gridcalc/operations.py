"""Floating-point arithmetic used by the evaluator."""

from __future__ import annotations

import math


def add(a: float, b: float) -> float:
    """Return the sum of ``a`` and ``b``."""
    return a + b


def subtract(a: float, b: float) -> float:
    """Return ``a`` minus ``b``."""
    return a - b


def multiply(a: float, b: float) -> float:
    """Return the product of ``a`` and ``b``."""
    return a * b


def divide(a: float, b: float) -> float:
    """Return ``a / b`` with IEEE semantics: division by zero gives inf or nan."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def power(base: float, exponent: float) -> float:
    """Raise ``base`` to ``exponent`` by repeated multiplication.

    Negative exponents give the reciprocal; the fractional part of the
    exponent is discarded.
    """
    if exponent == 0:
        return 1.0
    if not math.isfinite(exponent):
        raise ValueError(f"exponent must be finite, got {exponent}")
    if exponent < 0:
        return divide(1.0, power(base, -exponent))
    result = 1.0
    for _ in range(int(exponent)):
        result *= base
    return result