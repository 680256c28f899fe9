# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for time arguments and coefficient tables.

Adapters implement these to supply tables from different storage formats.
"""
from typing import Mapping, Protocol, runtime_checkable

from lunaphase.domain.periodic_series import PeriodicTable, VSOP87Series
from lunaphase.domain.time_scale import CalendarInstant


@runtime_checkable
class TimeProvider(Protocol):
    """Port for the time arguments of one instant."""

    instant: CalendarInstant
    dynamical_time: CalendarInstant
    delta_t: float
    julian_ephemeris_day: float
    time: float
    time_millennia: float
    time_myriads: float


@runtime_checkable
class PeriodicTableSource(Protocol):
    """Port for loading the periodic-term coefficient tables."""

    def nutation_table(self) -> PeriodicTable:
        """Nutation in longitude and obliquity (D, M, M′, F, Ω)."""
        ...

    def moon_longitude_distance_table(self) -> PeriodicTable:
        """Lunar longitude (sine) and distance (cosine) terms (D, M, M′, F)."""
        ...

    def moon_latitude_table(self) -> PeriodicTable:
        """Lunar latitude terms (D, M, M′, F)."""
        ...

    def vsop87_earth_series(self) -> Mapping[str, VSOP87Series]:
        """Earth VSOP87 series keyed L0..L5, B0..B1, R0..R4."""
        ...
