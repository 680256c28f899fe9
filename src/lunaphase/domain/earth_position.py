# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Heliocentric position of the Earth from the abridged VSOP87 series.

Each power series Lᵢ, Bᵢ, Rᵢ is a sum of ``A·cos(B + C·τ)`` terms; the
series are then combined as a polynomial in τ (Julian millennia).

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapter 32 and Appendix III.
    Bretagnon, P. & Francou, G. (1988). VSOP87.
"""

from typing import Mapping

from lunaphase.domain.angle import Angle
from lunaphase.domain.horner import horner
from lunaphase.domain.periodic_series import VSOP87Series, vsop87_sum

_SERIES_SCALE: float = 1e8

_LONGITUDE_SERIES: tuple[str, ...] = ("L5", "L4", "L3", "L2", "L1", "L0")
_LATITUDE_SERIES: tuple[str, ...] = ("B1", "B0")
_RADIUS_SERIES: tuple[str, ...] = ("R4", "R3", "R2", "R1", "R0")


def _combine(series: Mapping[str, VSOP87Series], names: tuple[str, ...],
             tau: float) -> float:
    return horner(tau, [vsop87_sum(series[name], tau) for name in names])


def heliocentric_longitude(series: Mapping[str, VSOP87Series], tau: float) -> Angle:
    """L, reduced into [0, 360)."""
    return Angle.from_radians(_combine(series, _LONGITUDE_SERIES, tau) / _SERIES_SCALE)


def heliocentric_latitude(series: Mapping[str, VSOP87Series], tau: float) -> Angle:
    """B, signed."""
    return Angle.from_radians(_combine(series, _LATITUDE_SERIES, tau) / _SERIES_SCALE,
                              normalize=False)


def radius_vector(series: Mapping[str, VSOP87Series], tau: float) -> float:
    """R in AU, 9 decimals."""
    return round(_combine(series, _RADIUS_SERIES, tau) / _SERIES_SCALE, 9)
