# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Rounding helpers and inverse-trigonometric domain guard.

Python's built-in ``round`` uses banker's rounding. The published series
reductions round half away from zero, so the helpers here go through
``decimal`` with ``ROUND_HALF_UP`` on the shortest decimal representation
of the float.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from fractions import Fraction

logger = logging.getLogger(__name__)

_DOMAIN_TOLERANCE: float = 1e-9
"""Largest excess over |1| treated as floating-point drift and clamped."""


class NumericDomainError(ValueError):
    """An inverse trigonometric function was given an argument outside [-1, 1]."""


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals, ties away from zero."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_half_up_int(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    return int(Decimal(repr(value)).to_integral_value(rounding=ROUND_HALF_UP))


def round_fraction_half_up(value: Fraction, digits: int) -> Fraction:
    """Round an exact rational to ``digits`` decimals, ties away from zero."""
    scale = 10 ** digits
    scaled = abs(value) * scale
    rounded = math.floor(scaled + Fraction(1, 2))
    return Fraction(rounded if value >= 0 else -rounded, scale)


def checked_unit_interval(value: float) -> float:
    """Return ``value`` confined to [-1, 1] for asin/acos.

    Values that overshoot by no more than the drift tolerance are clamped.
    Anything further out, and NaN, raises NumericDomainError.
    """
    if math.isnan(value):
        raise NumericDomainError("inverse trigonometric argument is NaN")
    if -1.0 <= value <= 1.0:
        return value
    if abs(value) - 1.0 <= _DOMAIN_TOLERANCE:
        logger.debug("Clamping inverse trigonometric argument %r to [-1, 1]", value)
        return math.copysign(1.0, value)
    raise NumericDomainError(
        f"inverse trigonometric argument {value!r} is outside [-1, 1]"
    )
