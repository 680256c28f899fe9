# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Geocentric position of the Moon from the ELP-2000/82 abridged series.

Accuracy is about 10″ in longitude and 4″ in latitude (Meeus Ch. 47).
The periodic sums Σl, Σb (1e-6 degree) and Σr (1e-3 km) are the series
of Tables 47.A/47.B plus the additive terms for Venus (A1), Jupiter (A2)
and the flattening of the Earth (A3), rounded half away from zero.

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapter 47.
    Chapront-Touzé, M. & Chapront, J. (1988). ELP 2000-85.
"""

from typing import Sequence

from lunaphase.domain.angle import Angle
from lunaphase.domain.numerics import round_half_up_int
from lunaphase.domain.periodic_series import (
    PeriodicTable,
    Trig,
    evaluate_periodic_series,
)

_MICRODEGREES_PER_DEGREE: float = 1_000_000.0
_MEAN_DISTANCE_KM: float = 385000.56
_EARTH_EQUATORIAL_RADIUS_KM: float = 6378.14


def longitude_sum(
    table: PeriodicTable,
    arguments: Sequence[Angle],
    eccentricity: float,
    mean_longitude: Angle,
    argument_of_latitude: Angle,
    venus: Angle,
    jupiter: Angle,
) -> int:
    """Σl in units of 1e-6 degree.

    ``arguments`` are (D, M, M′, F) in the table's column order.
    """
    total = evaluate_periodic_series(table, arguments, Trig.SINE,
                                     eccentricity=eccentricity)
    total += (3958 * venus.sin()
              + 1962 * (mean_longitude - argument_of_latitude).sin()
              + 318 * jupiter.sin())
    return round_half_up_int(total)


def latitude_sum(
    table: PeriodicTable,
    arguments: Sequence[Angle],
    eccentricity: float,
    mean_longitude: Angle,
    mean_anomaly: Angle,
    argument_of_latitude: Angle,
    venus: Angle,
    flattening: Angle,
) -> int:
    """Σb in units of 1e-6 degree."""
    total = evaluate_periodic_series(table, arguments, Trig.SINE,
                                     eccentricity=eccentricity)
    total += (-2235 * mean_longitude.sin()
              + 382 * flattening.sin()
              + 175 * (venus - argument_of_latitude).sin()
              + 175 * (venus + argument_of_latitude).sin()
              + 127 * (mean_longitude - mean_anomaly).sin()
              - 115 * (mean_longitude + mean_anomaly).sin())
    return round_half_up_int(total)


def distance_sum(table: PeriodicTable, arguments: Sequence[Angle],
                 eccentricity: float) -> int:
    """Σr in units of 1e-3 km."""
    return round_half_up_int(
        evaluate_periodic_series(table, arguments, Trig.COSINE,
                                 eccentricity=eccentricity)
    )


def ecliptic_longitude(mean_longitude: Angle, longitude_terms: int) -> Angle:
    """λ, geometric longitude referred to the mean equinox of date."""
    return Angle.from_decimal_degrees(
        mean_longitude.decimal_degrees + longitude_terms / _MICRODEGREES_PER_DEGREE
    )


def ecliptic_latitude(latitude_terms: int) -> Angle:
    """β, signed (not reduced into [0, 360))."""
    return Angle.from_decimal_degrees(latitude_terms / _MICRODEGREES_PER_DEGREE,
                                      normalize=False)


def distance_km(distance_terms: int) -> float:
    """Δ, centre-to-centre Earth-Moon distance in km, 0.1 km."""
    return round(_MEAN_DISTANCE_KM + distance_terms / 1000, 1)


def equatorial_horizontal_parallax(distance: float) -> Angle:
    """π = asin(6378.14 / Δ)."""
    return Angle.from_asin(_EARTH_EQUATORIAL_RADIUS_KM / distance)


def apparent_longitude(longitude: Angle, nutation_longitude: Angle) -> Angle:
    """λ + Δψ."""
    return longitude + nutation_longitude


def right_ascension(longitude: Angle, latitude: Angle, obliquity: Angle) -> Angle:
    """α from ecliptic coordinates (Meeus 13.3)."""
    return Angle.from_atan2(
        longitude.sin() * obliquity.cos() - latitude.tan() * obliquity.sin(),
        longitude.cos(),
    )


def declination(longitude: Angle, latitude: Angle, obliquity: Angle) -> Angle:
    """δ from ecliptic coordinates (Meeus 13.4), signed."""
    return Angle.from_asin(
        latitude.sin() * obliquity.cos()
        + latitude.cos() * obliquity.sin() * longitude.sin(),
        normalize=False,
    )

