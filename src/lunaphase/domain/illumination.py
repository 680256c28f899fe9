# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Illuminated fraction of the Moon's disk and position angle of the bright limb.

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapter 48.
"""

import math

from lunaphase.domain.angle import Angle


def geocentric_elongation(sun_ra: Angle, sun_dec: Angle,
                          moon_ra: Angle, moon_dec: Angle) -> Angle:
    """ψ, angular distance Moon-Sun as seen from the Earth (48.2)."""
    return Angle.from_acos(
        sun_dec.sin() * moon_dec.sin()
        + sun_dec.cos() * moon_dec.cos() * (sun_ra - moon_ra).cos()
    )


def phase_angle(elongation: Angle, sun_distance_km: float,
                moon_distance_km: float) -> Angle:
    """i, selenocentric elongation of the Earth from the Sun (48.3)."""
    return Angle.from_atan2(
        sun_distance_km * elongation.sin(),
        moon_distance_km - sun_distance_km * elongation.cos(),
    )


def illuminated_fraction(phase: Angle) -> float:
    """k = (1 + cos i) / 2, 4 decimals."""
    return round((1 + phase.cos()) / 2, 4)


def bright_limb_position_angle(sun_ra: Angle, sun_dec: Angle,
                               moon_ra: Angle, moon_dec: Angle) -> Angle:
    """χ, position angle of the midpoint of the bright limb (48.5).

    Measured eastward from the north point of the disk; near 270 degrees
    for a waxing Moon.
    """
    delta_ra = (sun_ra - moon_ra).radians
    return Angle.from_atan2(
        sun_dec.cos() * math.sin(delta_ra),
        sun_dec.sin() * moon_dec.cos()
        - sun_dec.cos() * moon_dec.sin() * math.cos(delta_ra),
    )

