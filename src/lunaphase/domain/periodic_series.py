# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Table-driven periodic series evaluation.

Two series shapes are supported:

* Argument tables (nutation, lunar longitude/latitude/distance): each row
  holds integer multipliers of the fundamental arguments and a sine and/or
  cosine amplitude. The row contributes ``amplitude · E^p · trig(Σ kᵢ·argᵢ)``
  where ``E^p`` is an optional eccentricity correction selected per table.
* VSOP87 series: each row contributes ``A · cos(B + C·τ)``.

NumPy vectorized: a table is turned into coefficient arrays once and every
evaluation runs over all rows in a single pass.

References:
    Meeus, J. Astronomical Algorithms, 2nd ed., Chapters 22, 32 and 47.
"""

from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import NamedTuple, Optional, Sequence

import numpy as np

from lunaphase.domain.angle import Angle


class Trig(Enum):
    """Amplitude column and trigonometric function of a series."""
    SINE = "sine"
    COSINE = "cosine"


class EccentricityCorrection(Enum):
    """Rule giving the power of E applied to a row.

    SUN_MEAN_ANOMALY compensates the decreasing eccentricity of the Earth's
    orbit in the lunar tables: rows with |M| = 1 are multiplied by E and
    rows with |M| = 2 by E².
    """
    NONE = "none"
    SUN_MEAN_ANOMALY = "sun_mean_anomaly"

    def power(self, multiplier: int) -> int:
        if self is EccentricityCorrection.NONE:
            return 0
        magnitude = abs(int(multiplier))
        return magnitude if magnitude in (1, 2) else 0


@dataclass(frozen=True)
class PeriodicTerm:
    """One row of an argument table. Missing amplitudes are None."""
    multipliers: tuple[int, ...]
    sine: Optional[float] = None
    cosine: Optional[float] = None
    sine_rate: float = 0.0
    cosine_rate: float = 0.0


class _Column(NamedTuple):
    base: np.ndarray
    rate: np.ndarray
    present: np.ndarray


@dataclass(frozen=True)
class PeriodicTable:
    """An ordered argument table with its eccentricity-correction rule.

    ``correction_argument`` names the argument column whose multiplier
    drives the correction (``"M"`` for the lunar tables).
    """
    name: str
    arguments: tuple[str, ...]
    terms: tuple[PeriodicTerm, ...]
    correction: EccentricityCorrection = EccentricityCorrection.NONE
    correction_argument: Optional[str] = None
    unit: str = ""

    def __post_init__(self) -> None:
        width = len(self.arguments)
        for index, term in enumerate(self.terms):
            if len(term.multipliers) != width:
                raise ValueError(
                    f"{self.name}: row {index} has {len(term.multipliers)} "
                    f"multipliers, expected {width}"
                )
        if (self.correction_argument is not None
                and self.correction_argument not in self.arguments):
            raise ValueError(
                f"{self.name}: correction argument {self.correction_argument!r} "
                f"is not one of {self.arguments}"
            )
        if (self.correction is not EccentricityCorrection.NONE
                and self.correction_argument is None):
            raise ValueError(f"{self.name}: correction rule needs an argument column")

    @cached_property
    def multipliers(self) -> np.ndarray:
        """(N, K) float array of argument multipliers."""
        return np.array(
            [term.multipliers for term in self.terms], dtype=float,
        ).reshape(len(self.terms), len(self.arguments))

    @cached_property
    def _columns(self) -> dict[Trig, _Column]:
        columns = {}
        for trig in Trig:
            base = [getattr(term, trig.value) for term in self.terms]
            rate = [getattr(term, f"{trig.value}_rate") for term in self.terms]
            columns[trig] = _Column(
                base=np.array([0.0 if b is None else b for b in base], dtype=float),
                rate=np.array(rate, dtype=float),
                present=np.array([b is not None for b in base], dtype=bool),
            )
        return columns

    def column(self, trig: Trig) -> _Column:
        return self._columns[trig]

    def correction_powers(self, rule: EccentricityCorrection) -> np.ndarray:
        """(N,) array of the power of E applied to each row under ``rule``."""
        if rule is EccentricityCorrection.NONE:
            return np.zeros(len(self.terms))
        if self.correction_argument is None:
            raise ValueError(f"{self.name}: no argument column for correction {rule.value}")
        index = self.arguments.index(self.correction_argument)
        return np.array(
            [rule.power(term.multipliers[index]) for term in self.terms],
            dtype=float,
        )


def evaluate_periodic_series(
    table: PeriodicTable,
    arguments: Sequence[Angle],
    trig: Trig,
    *,
    time: float = 0.0,
    eccentricity: float = 1.0,
    correction: Optional[EccentricityCorrection] = None,
) -> float:
    """Sum a periodic series over all rows of ``table``.

    Args:
        table: Argument table; rows are evaluated in file order.
        arguments: Fundamental arguments in the table's column order.
        trig: Which amplitude column to use, and sin or cos accordingly.
        time: Julian centuries T, for tables whose amplitudes drift with time.
        eccentricity: E(T), used by the correction rule.
        correction: Overrides the table's own correction rule.

    Returns:
        The raw sum in the table's amplitude unit, unrounded.
    """
    if len(arguments) != len(table.arguments):
        raise ValueError(
            f"{table.name} expects {len(table.arguments)} arguments "
            f"({', '.join(table.arguments)}), got {len(arguments)}"
        )

    multipliers = table.multipliers
    phase = np.zeros(len(table.terms))
    for index, argument in enumerate(arguments):
        phase = phase + multipliers[:, index] * argument.decimal_degrees

    # Same reduction as Angle.from_decimal_degrees
    phase_rad = np.round(np.mod(phase, 360.0) * np.pi / 180.0, 9)

    column = table.column(trig)
    amplitude = column.base + column.rate * time
    rule = table.correction if correction is None else correction
    factor = np.power(eccentricity, table.correction_powers(rule))
    wave = np.sin(phase_rad) if trig is Trig.SINE else np.cos(phase_rad)

    contributions = np.where(column.present, amplitude * factor * wave, 0.0)
    return float(np.sum(contributions))


# --------------------------------------------------------------------------- #
# VSOP87
# --------------------------------------------------------------------------- #

@dataclass(frozen=True)
class VSOP87Term:
    amplitude: float
    phase: float
    frequency: float


@dataclass(frozen=True)
class VSOP87Series:
    """One VSOP87 power series (e.g. Earth L0) in file order."""
    name: str
    terms: tuple[VSOP87Term, ...]

    @cached_property
    def coefficients(self) -> np.ndarray:
        """(N, 3) array of amplitude, phase, frequency."""
        return np.array(
            [(t.amplitude, t.phase, t.frequency) for t in self.terms], dtype=float,
        ).reshape(len(self.terms), 3)


def vsop87_sum(series: VSOP87Series, tau: float) -> float:
    """Σ A·cos(B + C·τ) over the series, τ in Julian millennia."""
    coefficients = series.coefficients
    amplitude = coefficients[:, 0]
    phase = coefficients[:, 1]
    frequency = coefficients[:, 2]
    return float(np.sum(amplitude * np.cos(phase + frequency * tau)))
