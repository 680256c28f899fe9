# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Low-accuracy solar coordinates (Meeus Ch. 25).

Geometric mean longitude and mean anomaly, the equation of the centre,
true and apparent longitude, and the apparent equatorial position.
Accuracy is about 0.01 degree, which is sufficient for the Moon's phase
and illuminated fraction.

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapter 25.
"""

import math

from lunaphase.domain.angle import Angle
from lunaphase.domain.horner import horner

_AU_KM: float = 149597870.0

_MEAN_LONGITUDE: tuple[float, ...] = (0.0003032, 36000.76983, 280.46646)
_MEAN_ANOMALY: tuple[float, ...] = (-0.0001537, 35999.05029, 357.52911)
_ECCENTRICITY: tuple[float, ...] = (-0.0000001267, -0.000042037, 0.016708634)
_CENTRE_FIRST_HARMONIC: tuple[float, ...] = (-0.000014, -0.004817, 1.914602)


def mean_longitude(time: float) -> Angle:
    """L0, geometric mean longitude referred to the mean equinox of date."""
    return Angle.from_decimal_degrees(horner(time, _MEAN_LONGITUDE))


def mean_anomaly(time: float) -> Angle:
    """M, mean anomaly of the Sun (quadratic form of the solar theory)."""
    return Angle.from_decimal_degrees(horner(time, _MEAN_ANOMALY))


def orbit_eccentricity(time: float) -> float:
    """e, eccentricity of the Earth's orbit, 9 decimals."""
    return round(horner(time, _ECCENTRICITY), 9)


def equation_of_centre(time: float, anomaly: Angle) -> Angle:
    """C, signed."""
    m = anomaly.radians
    return Angle.from_decimal_degrees(
        horner(time, _CENTRE_FIRST_HARMONIC) * math.sin(m)
        + (0.019993 - 0.000101 * time) * math.sin(2 * m)
        + 0.000289 * math.sin(3 * m),
        normalize=False,
    )


def true_longitude(longitude: Angle, centre: Angle) -> Angle:
    """☉ = L0 + C."""
    return longitude + centre


def true_anomaly(anomaly: Angle, centre: Angle) -> Angle:
    """v = M + C."""
    return anomaly + centre


def radius_vector(eccentricity: float, anomaly: Angle) -> float:
    """R, Sun-Earth distance in AU, 7 decimals."""
    return round(
        1.000001018 * (1 - eccentricity ** 2) / (1 + eccentricity * anomaly.cos()),
        7,
    )


def distance_km(radius_au: float) -> int:
    return math.floor(radius_au * _AU_KM)


def ascending_node_longitude(time: float) -> Angle:
    """Ω, low-precision longitude of the Moon's ascending node."""
    return Angle.from_decimal_degrees(125.04 - 1934.136 * time)


def apparent_longitude(true_long: Angle, node: Angle) -> Angle:
    """λ, corrected for nutation and aberration."""
    return Angle.from_decimal_degrees(
        true_long.decimal_degrees - 0.00569 - 0.00478 * node.sin()
    )


def corrected_obliquity(mean_obliquity: Angle, node: Angle) -> Angle:
    """ε0 + 0.00256 cos Ω, for the apparent position of the Sun."""
    return Angle.from_decimal_degrees(
        mean_obliquity.decimal_degrees + 0.00256 * node.cos()
    )


def right_ascension(longitude: Angle, obliquity: Angle) -> Angle:
    """α0 = atan2(cos ε sin λ, cos λ)."""
    return Angle.from_atan2(obliquity.cos() * longitude.sin(), longitude.cos())


def declination(longitude: Angle, obliquity: Angle) -> Angle:
    """δ0 = asin(sin ε sin λ), signed."""
    return Angle.from_asin(obliquity.sin() * longitude.sin(), normalize=False)
