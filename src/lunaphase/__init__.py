# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
lunaphase

Apparent positions of the Sun and Moon, nutation, obliquity, the Earth's
heliocentric position and the Moon's illuminated fraction for any instant
between 2000 BCE and 3000 CE, using the series and polynomial expressions
of Meeus' Astronomical Algorithms.
"""

from lunaphase.domain.numerics import (
    NumericDomainError,
    round_half_up,
)
from lunaphase.domain.angle import Angle
from lunaphase.domain.horner import horner
from lunaphase.domain.periodic_series import (
    EccentricityCorrection,
    PeriodicTable,
    PeriodicTerm,
    Trig,
    VSOP87Series,
    VSOP87Term,
    evaluate_periodic_series,
    vsop87_sum,
)
from lunaphase.domain.time_scale import (
    CalendarInstant,
    TimeScale,
    UnsupportedEraError,
    delta_t,
    julian_centuries,
    julian_ephemeris_day,
    julian_millennia,
    julian_myriads,
)
from lunaphase.domain.fundamental_arguments import Precision
from lunaphase.domain.ephemeris import SunMoonEphemeris
from lunaphase.ports import PeriodicTableSource, TimeProvider
from lunaphase.adapters import BundledTableSource

__all__ = [
    "Angle",
    "BundledTableSource",
    "CalendarInstant",
    "EccentricityCorrection",
    "NumericDomainError",
    "PeriodicTable",
    "PeriodicTableSource",
    "PeriodicTerm",
    "Precision",
    "SunMoonEphemeris",
    "TimeProvider",
    "TimeScale",
    "Trig",
    "UnsupportedEraError",
    "VSOP87Series",
    "VSOP87Term",
    "delta_t",
    "evaluate_periodic_series",
    "horner",
    "julian_centuries",
    "julian_ephemeris_day",
    "julian_millennia",
    "julian_myriads",
    "round_half_up",
    "vsop87_sum",
]
