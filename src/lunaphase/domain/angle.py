# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Angle value object with degree, sexagesimal, hour-angle and radian views.

An Angle is canonically stored as radians and decimal degrees. Sexagesimal
(degrees, arcminutes, arcseconds) and hour-angle (hours, minutes, seconds)
components are derived on first access and cached. When an Angle is built
from sexagesimal or hour components, those components are kept verbatim
and returned instead of being re-derived, unless normalization moved the
value into [0, 360); every view is then derived from the reduced degrees.

Component derivation truncates toward zero, so a small negative angle
reports ``degrees == 0`` and negative arcseconds.
"""

import math
from dataclasses import dataclass, field
from functools import cached_property
from typing import Mapping

from lunaphase.domain.numerics import checked_unit_interval

_DEGREES_PER_HOUR: float = 15.0
_FULL_CIRCLE: float = 360.0
_FULL_TURN: float = 2.0 * math.pi
_DEGREE_DIGITS: int = 9
_SECOND_DIGITS: int = 6


@dataclass(frozen=True)
class Angle:
    """Immutable angle.

    Build instances through the ``from_*`` factories. ``normalize=True``
    (the default) reduces the decimal degrees into [0, 360) and the radians
    into [0, 2π).
    """

    radians: float
    decimal_degrees: float
    components: Mapping[str, float] = field(
        default_factory=dict, repr=False, compare=False,
    )

    # ------------------------------------------------------------------ #
    # Factories
    # ------------------------------------------------------------------ #

    @staticmethod
    def from_radians(radians: float, normalize: bool = True) -> "Angle":
        """Angle from radians, stored unrounded (reduced when normalizing)."""
        if normalize:
            radians %= _FULL_TURN
        degrees = radians / math.pi * 180.0
        return Angle(radians=radians,
                     decimal_degrees=_rounded_degrees(degrees, normalize))

    @staticmethod
    def from_decimal_degrees(decimal_degrees: float,
                             normalize: bool = True) -> "Angle":
        """Angle from decimal degrees; radians rounded to 9 decimals."""
        return _from_degrees(decimal_degrees, normalize)

    @staticmethod
    def from_degrees_arcminutes_arcseconds(
        degrees: int,
        arcminutes: int,
        decimal_arcseconds: float,
        normalize: bool = True,
    ) -> "Angle":
        """Angle from sexagesimal components, which are kept as given."""
        value = degrees + arcminutes / 60.0 + decimal_arcseconds / 3600.0
        return _from_degrees(value, normalize, {
            "degrees": degrees,
            "arcminutes": arcminutes,
            "decimal_arcseconds": decimal_arcseconds,
        })

    @staticmethod
    def from_hours_minutes_seconds(
        hours: int,
        minutes: int,
        decimal_seconds: float,
        normalize: bool = True,
    ) -> "Angle":
        """Angle from hour-angle components (1h = 15 degrees)."""
        value = hours * _DEGREES_PER_HOUR + minutes / 4.0 + decimal_seconds / 240.0
        return _from_degrees(value, normalize, {
            "hours": hours,
            "minutes": minutes,
            "decimal_seconds": decimal_seconds,
        })

    @staticmethod
    def from_decimal_arcseconds(decimal_arcseconds: float,
                                normalize: bool = True) -> "Angle":
        """Angle from arcseconds; ``decimal_arcseconds`` reports the input."""
        return _from_degrees(decimal_arcseconds / 3600.0, normalize, {
            "decimal_arcseconds": decimal_arcseconds,
        })

    @staticmethod
    def from_asin(value: float, normalize: bool = True) -> "Angle":
        return Angle.from_radians(math.asin(checked_unit_interval(value)),
                                  normalize)

    @staticmethod
    def from_acos(value: float, normalize: bool = True) -> "Angle":
        return Angle.from_radians(math.acos(checked_unit_interval(value)),
                                  normalize)

    @staticmethod
    def from_atan2(y: float, x: float, normalize: bool = True) -> "Angle":
        return Angle.from_radians(math.atan2(y, x), normalize)

    # ------------------------------------------------------------------ #
    # Sexagesimal view
    # ------------------------------------------------------------------ #

    @cached_property
    def degrees(self) -> int:
        if "degrees" in self.components:
            return self.components["degrees"]
        return int(self.decimal_degrees)

    @cached_property
    def decimal_arcminutes(self) -> float:
        return (self.decimal_degrees - self.degrees) * 60.0

    @cached_property
    def arcminutes(self) -> int:
        if "arcminutes" in self.components:
            return self.components["arcminutes"]
        return int(self.decimal_arcminutes)

    @cached_property
    def decimal_arcseconds(self) -> float:
        if "decimal_arcseconds" in self.components:
            return self.components["decimal_arcseconds"]
        return round((self.decimal_arcminutes - self.arcminutes) * 60.0,
                     _SECOND_DIGITS)

    # ------------------------------------------------------------------ #
    # Hour-angle view
    # ------------------------------------------------------------------ #

    @cached_property
    def decimal_hours(self) -> float:
        return self.decimal_degrees / _DEGREES_PER_HOUR

    @cached_property
    def hours(self) -> int:
        if "hours" in self.components:
            return self.components["hours"]
        return int(self.decimal_hours)

    @cached_property
    def decimal_minutes(self) -> float:
        return (self.decimal_hours - self.hours) * 60.0

    @cached_property
    def minutes(self) -> int:
        if "minutes" in self.components:
            return self.components["minutes"]
        return int(self.decimal_minutes)

    @cached_property
    def decimal_seconds(self) -> float:
        if "decimal_seconds" in self.components:
            return self.components["decimal_seconds"]
        return round((self.decimal_minutes - self.minutes) * 60.0,
                     _SECOND_DIGITS)

    # ------------------------------------------------------------------ #
    # Trigonometry and arithmetic
    # ------------------------------------------------------------------ #

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_decimal_degrees(self.decimal_degrees + other.decimal_degrees)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle.from_decimal_degrees(self.decimal_degrees - other.decimal_degrees)


def _from_degrees(value: float, normalize: bool,
                  components: Mapping[str, float] | None = None) -> Angle:
    given = value
    if normalize:
        value %= _FULL_CIRCLE
    # Components describe the given value; drop them once it has been reduced
    kept = dict(components or {}) if value == given else {}
    return Angle(
        radians=round(value * math.pi / 180.0, _DEGREE_DIGITS),
        decimal_degrees=_rounded_degrees(value, normalize),
        components=kept,
    )


def _rounded_degrees(value: float, normalize: bool) -> float:
    rounded = round(value, _DEGREE_DIGITS)
    # Values just below 360 can round up to the full circle
    if normalize and rounded == _FULL_CIRCLE:
        return 0.0
    return rounded
