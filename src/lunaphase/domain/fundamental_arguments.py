# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Fundamental arguments of the lunar and nutation theories.

All functions take T, Julian centuries of Dynamical Time from J2000.0.
Polynomial coefficients are listed highest degree first, the order
expected by ``horner``.

Two precision tiers exist for the Delaunay-type arguments:

* ``Precision.LOW``: cubic expressions used with the nutation series
  (Meeus Ch. 22).
* ``Precision.HIGH``: the ELP-2000/82 expressions used with the lunar
  position series (Meeus Ch. 47).

The two tiers differ by up to a few thousandths of a degree.
"""

from enum import Enum

from lunaphase.domain.angle import Angle
from lunaphase.domain.horner import horner


class Precision(Enum):
    LOW = "low"
    HIGH = "high"


_MOON_MEAN_ELONGATION: dict[Precision, tuple[float, ...]] = {
    Precision.LOW: (1 / 189474, -0.0019142, 445267.111480, 297.85036),
    Precision.HIGH: (-1 / 113065000, 1 / 545868, -0.0018819,
                     445267.1114034, 297.8501921),
}

_SUN_MEAN_ANOMALY: dict[Precision, tuple[float, ...]] = {
    Precision.LOW: (-1 / 300000, -0.0001603, 35999.050340, 357.52772),
    Precision.HIGH: (1 / 24490000, -0.0001536, 35999.0502909, 357.5291092),
}

_MOON_MEAN_ANOMALY: dict[Precision, tuple[float, ...]] = {
    Precision.LOW: (1 / 56250, 0.0086972, 477198.867398, 134.96298),
    Precision.HIGH: (-1 / 14712000, 1 / 69699, 0.0087414,
                     477198.8675055, 134.9633964),
}

_MOON_ARGUMENT_OF_LATITUDE: dict[Precision, tuple[float, ...]] = {
    Precision.LOW: (1 / 327270, -0.0036825, 483202.017538, 93.27191),
    Precision.HIGH: (1 / 863310000, -1 / 3526000, -0.0036539,
                     483202.0175233, 93.2720950),
}

_MOON_MEAN_LONGITUDE: tuple[float, ...] = (
    -1 / 65194000, 1 / 538841, -0.0015786, 481267.88123421, 218.3164477,
)

_MOON_ASCENDING_NODE: tuple[float, ...] = (
    1 / 450000, 0.0020708, -1934.136261, 125.04452,
)

_ECCENTRICITY: tuple[float, ...] = (-0.0000074, -0.002516, 1.0)


def moon_mean_elongation(time: float, precision: Precision = Precision.HIGH) -> Angle:
    """D, mean elongation of the Moon from the Sun."""
    return Angle.from_decimal_degrees(horner(time, _MOON_MEAN_ELONGATION[precision]))


def sun_mean_anomaly(time: float, precision: Precision = Precision.HIGH) -> Angle:
    """M, mean anomaly of the Sun (Earth)."""
    return Angle.from_decimal_degrees(horner(time, _SUN_MEAN_ANOMALY[precision]))


def moon_mean_anomaly(time: float, precision: Precision = Precision.HIGH) -> Angle:
    """M′, mean anomaly of the Moon."""
    return Angle.from_decimal_degrees(horner(time, _MOON_MEAN_ANOMALY[precision]))


def moon_argument_of_latitude(time: float,
                              precision: Precision = Precision.HIGH) -> Angle:
    """F, mean distance of the Moon from its ascending node."""
    return Angle.from_decimal_degrees(horner(time, _MOON_ARGUMENT_OF_LATITUDE[precision]))


def moon_mean_longitude(time: float) -> Angle:
    """L′, mean longitude of the Moon referred to the mean equinox of date."""
    return Angle.from_decimal_degrees(horner(time, _MOON_MEAN_LONGITUDE))


def moon_ascending_node_longitude(time: float) -> Angle:
    """Ω, longitude of the ascending node of the Moon's mean orbit."""
    return Angle.from_decimal_degrees(horner(time, _MOON_ASCENDING_NODE))


def venus_correction(time: float) -> Angle:
    """A1, argument of the action of Venus."""
    return Angle.from_decimal_degrees(119.75 + 131.849 * time)


def jupiter_correction(time: float) -> Angle:
    """A2, argument of the action of Jupiter."""
    return Angle.from_decimal_degrees(53.09 + 479264.29 * time)


def flattening_correction(time: float) -> Angle:
    """A3, argument of the flattening of the Earth."""
    return Angle.from_decimal_degrees(313.45 + 481266.484 * time)


def eccentricity_correction(time: float) -> float:
    """E, decrease of the Earth orbit eccentricity, rounded to 6 decimals."""
    return round(horner(time, _ECCENTRICITY), 6)
