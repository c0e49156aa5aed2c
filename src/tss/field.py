"""Arithmetic in GF(2^8).

The field is the one used by AES: polynomials over GF(2) reduced modulo
``x^8 + x^4 + x^3 + x + 1`` (0x11B). Multiplication and division go through
precomputed discrete log and antilog tables built from the generator 0x03.

``EXP`` holds the exponentiation sequence written twice so that neither
``LOG[a] + LOG[b]`` nor ``255 + LOG[a] - LOG[b]`` ever needs a modulo 255
reduction. Both tables are immutable tuples and are safe to share between
threads.
"""

from __future__ import annotations

from typing import Sequence

_REDUCTION_POLY = 0x11B
_GENERATOR = 0x03
_ORDER = 255


def _build_tables() -> tuple[tuple[int, ...], tuple[int, ...]]:
    exp = [0] * (2 * _ORDER + 2)
    log = [0] * 256
    x = 1
    for i in range(_ORDER):
        exp[i] = x
        log[x] = i
        # multiply by the generator: x * 3 == x ^ (x * 2)
        doubled = x << 1
        if doubled & 0x100:
            doubled ^= _REDUCTION_POLY
        x ^= doubled
    for i in range(_ORDER, len(exp)):
        exp[i] = exp[i - _ORDER]
    return tuple(exp), tuple(log)


EXP, LOG = _build_tables()


def add(a: int, b: int) -> int:
    """Field addition. Characteristic two makes it its own inverse (subtraction)."""
    return a ^ b


def mul(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return EXP[LOG[a] + LOG[b]]


def div(a: int, b: int) -> int:
    """Divide ``a`` by ``b``.

    A zero divisor yields 0 instead of raising. Callers that need a meaningful
    quotient must never pass ``b == 0``.
    """

    if a == 0 or b == 0:
        return 0
    return EXP[_ORDER + LOG[a] - LOG[b]]


def evaluate(coefficients: Sequence[int], x: int) -> int:
    """Evaluate ``sum(coefficients[k] * x**k)`` in the field."""
    result = 0
    power = 1
    for coefficient in coefficients:
        result ^= mul(coefficient, power)
        power = mul(power, x)
    return result


__all__ = ["EXP", "LOG", "add", "mul", "div", "evaluate"]
