# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Polynomial evaluation by Horner's scheme."""

from typing import Sequence


def horner(variable: float, coefficients: Sequence[float]) -> float:
    """Evaluate a polynomial in ``variable``.

    ``coefficients`` run from the highest degree down to the constant term
    (the same order as ``numpy.polyval``), so ``[3, 0, 1]`` is 3x² + 1.
    Evaluation nests strictly as ``c[-1] + x·(c[-2] + x·(…))``; a single
    coefficient is returned unchanged and an empty sequence gives 0.0.
    """
    if len(coefficients) == 0:
        return 0.0
    result = coefficients[0]
    for coefficient in coefficients[1:]:
        result = coefficient + variable * result
    return float(result)
