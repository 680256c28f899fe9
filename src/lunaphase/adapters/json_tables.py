# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON coefficient-table adapter.

Implements the PeriodicTableSource port by reading the bundled tables in
``lunaphase/data`` (or any directory holding files of the same names).
Each file is parsed once per process and cached by path.
"""
import json
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from lunaphase.domain.periodic_series import (
    EccentricityCorrection,
    PeriodicTable,
    PeriodicTerm,
    VSOP87Series,
    VSOP87Term,
)

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent.parent / "data"

NUTATION_FILE = "nutation_terms.json"
MOON_LONGITUDE_DISTANCE_FILE = "moon_longitude_distance_terms.json"
MOON_LATITUDE_FILE = "moon_latitude_terms.json"
VSOP87_EARTH_FILE = "vsop87_earth.json"

VSOP87_EARTH_SERIES: tuple[str, ...] = (
    "L0", "L1", "L2", "L3", "L4", "L5", "B0", "B1", "R0", "R1", "R2", "R3", "R4",
)

_TABLE_CACHE: dict[Path, Any] = {}


def _read_json(path: Path) -> dict:
    with open(path, encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path.name}: invalid JSON: {exc}") from exc


def _optional_float(value: Any) -> Optional[float]:
    return None if value is None else float(value)


def parse_periodic_table(
    data: dict,
    source: str,
    correction: EccentricityCorrection = EccentricityCorrection.NONE,
    correction_argument: Optional[str] = None,
) -> PeriodicTable:
    """Build a PeriodicTable from its JSON document.

    Rows are objects keyed by argument name plus ``S``/``C`` amplitudes and
    optional ``St``/``Ct`` rates per Julian century. A null amplitude marks
    a blank table cell.
    """
    try:
        arguments = tuple(data["arguments"])
        terms = tuple(
            PeriodicTerm(
                multipliers=tuple(int(row[name]) for name in arguments),
                sine=_optional_float(row.get("S")),
                cosine=_optional_float(row.get("C")),
                sine_rate=float(row.get("St", 0.0)),
                cosine_rate=float(row.get("Ct", 0.0)),
            )
            for row in data["terms"]
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"{source}: malformed periodic table: {exc!r}") from exc

    return PeriodicTable(
        name=data.get("name", source),
        arguments=arguments,
        terms=terms,
        correction=correction,
        correction_argument=correction_argument,
        unit=data.get("unit", ""),
    )


def parse_vsop87_series(data: dict, source: str) -> dict[str, VSOP87Series]:
    """Build the VSOP87 series from ``{"series": {"L0": [[A, B, C], ...]}}``."""
    try:
        raw = data["series"]
        series = {
            name: VSOP87Series(
                name=name,
                terms=tuple(VSOP87Term(float(a), float(b), float(c))
                            for a, b, c in rows),
            )
            for name, rows in raw.items()
        }
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"{source}: malformed VSOP87 series: {exc!r}") from exc

    missing = [name for name in VSOP87_EARTH_SERIES if name not in series]
    if missing:
        raise ValueError(f"{source}: missing VSOP87 series {', '.join(missing)}")
    return series


class BundledTableSource:
    """PeriodicTableSource backed by JSON files.

    Args:
        data_dir: Directory holding the table files. Defaults to the tables
            shipped with the package.
    """

    def __init__(self, data_dir: Optional[Path | str] = None) -> None:
        self._data_dir = Path(data_dir) if data_dir is not None else _DATA_DIR

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def nutation_table(self) -> PeriodicTable:
        return self._load(NUTATION_FILE, parse_periodic_table)

    def moon_longitude_distance_table(self) -> PeriodicTable:
        return self._load(MOON_LONGITUDE_DISTANCE_FILE, _lunar_table)

    def moon_latitude_table(self) -> PeriodicTable:
        return self._load(MOON_LATITUDE_FILE, _lunar_table)

    def vsop87_earth_series(self) -> dict[str, VSOP87Series]:
        return self._load(VSOP87_EARTH_FILE, parse_vsop87_series)

    def _load(self, filename: str, parse: Callable[[dict, str], Any]) -> Any:
        path = (self._data_dir / filename).resolve()
        cached = _TABLE_CACHE.get(path)
        if cached is not None:
            return cached

        table = parse(_read_json(path), path.name)
        _TABLE_CACHE[path] = table
        logger.debug("Loaded coefficient table %s from %s", path.name, path.parent)
        return table


def _lunar_table(data: dict, source: str) -> PeriodicTable:
    return parse_periodic_table(
        data, source,
        correction=EccentricityCorrection.SUN_MEAN_ANOMALY,
        correction_argument="M",
    )
