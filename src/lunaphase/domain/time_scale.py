# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Calendar instants, ΔT and the Dynamical Time scale.

Implements the chain: civil instant (UT) → ΔT → Dynamical Time (TD) →
Julian Ephemeris Day (JDE) → Julian centuries T → millennia → myriads.

Calendar arithmetic uses exact integer day numbers so that instants well
outside the ``datetime`` range (e.g. 500 BCE) are supported. Dates before
1582-10-15 are on the Julian calendar, later dates on the Gregorian
calendar. Years are astronomical: year 0 is 1 BCE, year -1 is 2 BCE.

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapters 7 and 10.
    Espenak, F. & Meeus, J. Polynomial expressions for Delta T (NASA, 2006).
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from fractions import Fraction
from typing import Callable

from lunaphase.domain.horner import horner
from lunaphase.domain.numerics import (
    round_fraction_half_up,
    round_half_up,
    round_half_up_int,
)

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Constants
# --------------------------------------------------------------------------- #

_J2000_JD: float = 2451545.0
"""Julian Ephemeris Day of the J2000.0 epoch."""

_DAYS_PER_JULIAN_CENTURY: float = 36525.0

_SECONDS_PER_DAY: int = 86400

_GREGORIAN_START: tuple[int, int, int] = (1582, 10, 15)
_JULIAN_END: tuple[int, int, int] = (1582, 10, 4)

_FIRST_GREGORIAN_DAY_NUMBER: int = 2299161

_ORDINAL_TO_DAY_NUMBER: int = 1721425
"""Julian day number minus ``date.toordinal()`` for the same day."""

_JDE_DIGITS: int = 5
_TIME_DIGITS: int = 12


class UnsupportedEraError(ValueError):
    """ΔT has no model for the requested year."""


# --------------------------------------------------------------------------- #
# Calendar
# --------------------------------------------------------------------------- #

def _is_leap_year(year: int) -> bool:
    if year <= _GREGORIAN_START[0]:
        return year % 4 == 0
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if _is_leap_year(year) else 28
    return 30 if month in (4, 6, 9, 11) else 31


def _day_number(year: int, month: int, day: int) -> int:
    """Julian day number (the JD at noon) of a calendar date. Meeus Ch. 7."""
    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12
    if (year, month, day) >= _GREGORIAN_START:
        a = y // 100
        b = 2 - a + a // 4
    else:
        b = 0
    return (math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + day + b - 1524)


def _calendar_date(day_number: int) -> tuple[int, int, int]:
    """Inverse of _day_number. Meeus Ch. 7 inverse."""
    z = day_number
    if z < _FIRST_GREGORIAN_DAY_NUMBER:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4

    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)

    day = b - d - math.floor(30.6001 * e)
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


@dataclass(frozen=True, order=True)
class CalendarInstant:
    """A civil or dynamical instant on the astronomical year count."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: float = 0.0

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")
        last_day = _days_in_month(self.year, self.month)
        if not 1 <= self.day <= last_day:
            raise ValueError(
                f"day must be in 1..{last_day} for {self.year}-{self.month:02d}, "
                f"got {self.day}"
            )
        if _JULIAN_END < (self.year, self.month, self.day) < _GREGORIAN_START:
            raise ValueError(
                f"{self.year}-{self.month:02d}-{self.day:02d} falls in the "
                "Julian to Gregorian calendar gap"
            )
        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {self.minute}")
        if not 0.0 <= self.second < 60.0:
            raise ValueError(f"second must be in [0, 60), got {self.second}")

    @staticmethod
    def from_datetime(dt: datetime) -> "CalendarInstant":
        """Instant for a datetime; naive datetimes are taken as UTC.

        ``datetime`` is proleptic Gregorian, so dates before 1582-10-15 come
        back with their Julian calendar labels for the same day.
        """
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        dt = dt.astimezone(timezone.utc)
        seconds = (dt.hour * 3600 + dt.minute * 60 + dt.second
                   + dt.microsecond / 1_000_000)
        return CalendarInstant.from_day_number(
            dt.toordinal() + _ORDINAL_TO_DAY_NUMBER, seconds,
        )

    @staticmethod
    def from_day_number(day_number: int, seconds_of_day: float = 0.0) -> "CalendarInstant":
        year, month, day = _calendar_date(day_number)
        hour = int(seconds_of_day // 3600)
        minute = int(seconds_of_day % 3600 // 60)
        second = seconds_of_day - hour * 3600 - minute * 60
        return CalendarInstant(year, month, day, hour, minute, second)

    def to_datetime(self) -> datetime:
        """UTC datetime for the same instant (years 1..9999 only)."""
        ordinal = self.day_number - _ORDINAL_TO_DAY_NUMBER
        if ordinal < 1 or ordinal > datetime.max.toordinal():
            raise ValueError(f"{self.isoformat()} is outside the datetime range")
        midnight = datetime.fromordinal(ordinal).replace(tzinfo=timezone.utc)
        return midnight + timedelta(seconds=self.seconds_of_day)

    @property
    def day_number(self) -> int:
        return _day_number(self.year, self.month, self.day)

    @property
    def seconds_of_day(self) -> float:
        return self.hour * 3600 + self.minute * 60 + self.second

    @property
    def decimal_year(self) -> float:
        """Year plus mid-month fraction, as used by the ΔT polynomials."""
        return self.year + (self.month - 0.5) / 12.0

    def julian_day_exact(self) -> Fraction:
        return (Fraction(self.day_number) - Fraction(1, 2)
                + Fraction(self.seconds_of_day) / _SECONDS_PER_DAY)

    @property
    def julian_day(self) -> float:
        return float(self.julian_day_exact())

    def shifted(self, seconds: float) -> "CalendarInstant":
        """Instant ``seconds`` later (earlier when negative)."""
        days, remainder = divmod(self.seconds_of_day + seconds, _SECONDS_PER_DAY)
        if remainder >= _SECONDS_PER_DAY:
            days, remainder = days + 1, remainder - _SECONDS_PER_DAY
        return CalendarInstant.from_day_number(self.day_number + int(days), remainder)

    def isoformat(self) -> str:
        return (f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
                f"T{self.hour:02d}:{self.minute:02d}:{self.second:06.3f}")


# --------------------------------------------------------------------------- #
# ΔT = TD - UT
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class _DeltaTEra:
    first_year: int
    end_year: int
    formula: Callable[[float], float]
    inclusive_end: bool = False

    def covers(self, year: int) -> bool:
        if self.inclusive_end:
            return self.first_year <= year <= self.end_year
        return self.first_year <= year < self.end_year


def _polynomial(origin: float, scale: float,
                coefficients: tuple[float, ...]) -> Callable[[float], float]:
    return lambda y: horner((y - origin) / scale, coefficients)


def _long_term_parabola(y: float) -> float:
    u = (y - 1820) / 100
    return -20 + 32 * u ** 2


def _future_bridge(y: float) -> float:
    return -20 + 32 * ((y - 1820) / 100) ** 2 - 0.5628 * (2150 - y)


_DELTA_T_ERAS: tuple[_DeltaTEra, ...] = (
    _DeltaTEra(-1999, -500, _long_term_parabola),
    _DeltaTEra(-500, 500, _polynomial(0, 100, (
        0.0090316521, 0.022174192, -0.1798452, -5.952053,
        33.78311, -1014.41, 10583.6))),
    _DeltaTEra(500, 1600, _polynomial(1000, 100, (
        0.0083572073, -0.005050998, -0.8503463, 0.319781,
        71.23472, -556.01, 1574.2))),
    _DeltaTEra(1600, 1700, _polynomial(1600, 1, (
        1 / 7129, -0.01532, -0.9808, 120))),
    _DeltaTEra(1700, 1800, _polynomial(1700, 1, (
        -1 / 1174000, 0.00013336, -0.0059285, 0.1603, 8.83))),
    _DeltaTEra(1800, 1860, _polynomial(1800, 1, (
        0.000000000875, -0.0000001699, 0.0000121272, -0.00037436,
        0.0041116, 0.0068612, -0.332447, 13.72))),
    _DeltaTEra(1860, 1900, _polynomial(1860, 1, (
        1 / 233174, -0.0004473624, 0.01680668, -0.251754, 0.5737, 7.62))),
    _DeltaTEra(1900, 1920, _polynomial(1900, 1, (
        -0.000197, 0.0061966, -0.0598939, 1.494119, -2.79))),
    _DeltaTEra(1920, 1941, _polynomial(1920, 1, (
        0.0020936, -0.076100, 0.84493, 21.20))),
    _DeltaTEra(1941, 1961, _polynomial(1950, 1, (
        1 / 2547, -1 / 233, 0.407, 29.07))),
    _DeltaTEra(1961, 1986, _polynomial(1975, 1, (
        -1 / 718, -1 / 260, 1.067, 45.45))),
    _DeltaTEra(1986, 2005, _polynomial(2000, 1, (
        0.00002373599, 0.000651814, 0.0017275, -0.060374, 0.3345, 63.86))),
    _DeltaTEra(2005, 2050, _polynomial(2000, 1, (
        0.005589, 0.32217, 62.92))),
    _DeltaTEra(2050, 2150, _future_bridge),
    _DeltaTEra(2150, 3000, _long_term_parabola, inclusive_end=True),
)


def delta_t(instant: CalendarInstant) -> float:
    """ΔT in seconds, rounded to 0.1 s.

    The era is chosen by the integer calendar year; the polynomial is
    evaluated at ``year + (month - 0.5)/12``.

    Raises:
        UnsupportedEraError: year outside -1999..3000.
    """
    for era in _DELTA_T_ERAS:
        if era.covers(instant.year):
            if instant.year < -500 or instant.year >= 2050:
                logger.debug("ΔT for year %d is a long-term extrapolation",
                             instant.year)
            return round_half_up(era.formula(instant.decimal_year), 1)
    raise UnsupportedEraError(
        f"ΔT is not modelled for year {instant.year}; "
        "supported years are -1999 to 3000"
    )


# --------------------------------------------------------------------------- #
# Julian time arguments
# --------------------------------------------------------------------------- #

def julian_ephemeris_day(dynamical_time: CalendarInstant) -> float:
    """JDE of a Dynamical Time instant, rounded half-up to 5 decimals."""
    return float(round_fraction_half_up(dynamical_time.julian_day_exact(), _JDE_DIGITS))


def julian_centuries(jde: float) -> float:
    """T: Julian centuries of 36525 days from J2000.0, 12 decimals."""
    return round((jde - _J2000_JD) / _DAYS_PER_JULIAN_CENTURY, _TIME_DIGITS)


def julian_millennia(time: float) -> float:
    """τ = T/10, 12 decimals (the VSOP87 time argument)."""
    return round(time / 10, _TIME_DIGITS)


def julian_myriads(time: float) -> float:
    """U = T/100 (the mean obliquity time argument)."""
    return time / 100


@dataclass(frozen=True)
class TimeScale:
    """Every time argument of one instant, resolved in dependency order."""

    instant: CalendarInstant
    delta_t: float
    dynamical_time: CalendarInstant
    julian_ephemeris_day: float
    time: float
    time_millennia: float
    time_myriads: float

    @staticmethod
    def from_instant(instant: CalendarInstant) -> "TimeScale":
        """Resolve a civil (UT) instant."""
        seconds = delta_t(instant)
        dynamical = instant.shifted(round_half_up_int(seconds))
        return TimeScale._resolve(instant, seconds, dynamical)

    @staticmethod
    def from_datetime(dt: datetime) -> "TimeScale":
        return TimeScale.from_instant(CalendarInstant.from_datetime(dt))

    @staticmethod
    def from_dynamical_time(dynamical_time: CalendarInstant) -> "TimeScale":
        """Resolve an instant that is already on Dynamical Time.

        ΔT is evaluated at the given instant and the civil instant is
        recovered by subtracting it.
        """
        seconds = delta_t(dynamical_time)
        instant = dynamical_time.shifted(-round_half_up_int(seconds))
        return TimeScale._resolve(instant, seconds, dynamical_time)

    @staticmethod
    def _resolve(instant: CalendarInstant, seconds: float,
                 dynamical: CalendarInstant) -> "TimeScale":
        jde = julian_ephemeris_day(dynamical)
        time = julian_centuries(jde)
        return TimeScale(
            instant=instant,
            delta_t=seconds,
            dynamical_time=dynamical,
            julian_ephemeris_day=jde,
            time=time,
            time_millennia=julian_millennia(time),
            time_myriads=julian_myriads(time),
        )
