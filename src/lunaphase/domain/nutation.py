# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Nutation in longitude and obliquity, mean and true obliquity of the ecliptic.

Nutation uses the 63-term series of Meeus Table 22.A (IAU 1980 theory,
accuracy about 0.0003″ against the full series within a century of J2000).
The mean obliquity is Laskar's polynomial in myriads of Julian years.

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapter 22.
    Laskar, J. (1986). Secular terms of classical planetary theories.
"""

from typing import Sequence

from lunaphase.domain.angle import Angle
from lunaphase.domain.fundamental_arguments import (
    Precision,
    moon_argument_of_latitude,
    moon_ascending_node_longitude,
    moon_mean_anomaly,
    moon_mean_elongation,
    sun_mean_anomaly,
)
from lunaphase.domain.horner import horner
from lunaphase.domain.periodic_series import (
    PeriodicTable,
    Trig,
    evaluate_periodic_series,
)

_TABLE_UNIT_PER_ARCSECOND: float = 10000.0

# Arcseconds of 23°26′ + polynomial in U, highest degree first (Laskar 1986)
_MEAN_OBLIQUITY_ARCSECONDS: tuple[float, ...] = (
    2.45, 5.79, 27.87, 7.12, -39.05, -249.67, -51.38, 1999.25, -1.55,
    -4680.93, 21.448,
)


def nutation_arguments(time: float) -> tuple[Angle, Angle, Angle, Angle, Angle]:
    """(D, M, M′, F, Ω) in the column order of the nutation table."""
    return (
        moon_mean_elongation(time, Precision.LOW),
        sun_mean_anomaly(time, Precision.LOW),
        moon_mean_anomaly(time, Precision.LOW),
        moon_argument_of_latitude(time, Precision.LOW),
        moon_ascending_node_longitude(time),
    )


def nutation_in_longitude(table: PeriodicTable, arguments: Sequence[Angle],
                          time: float) -> Angle:
    """Δψ, signed."""
    total = evaluate_periodic_series(table, arguments, Trig.SINE, time=time)
    return Angle.from_decimal_arcseconds(total / _TABLE_UNIT_PER_ARCSECOND,
                                       normalize=False)


def nutation_in_obliquity(table: PeriodicTable, arguments: Sequence[Angle],
                          time: float) -> Angle:
    """Δε, signed."""
    total = evaluate_periodic_series(table, arguments, Trig.COSINE, time=time)
    return Angle.from_decimal_arcseconds(total / _TABLE_UNIT_PER_ARCSECOND,
                                       normalize=False)


def mean_obliquity(time_myriads: float) -> Angle:
    """ε0, mean obliquity of the ecliptic. Valid within 10000 years of J2000."""
    arcseconds = horner(time_myriads, _MEAN_OBLIQUITY_ARCSECONDS)
    return Angle.from_degrees_arcminutes_arcseconds(23, 26, arcseconds)


def true_obliquity(mean: Angle, nutation_obliquity: Angle) -> Angle:
    """ε = ε0 + Δε."""
    return mean + nutation_obliquity
