# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Sun and Moon ephemeris for one instant.

SunMoonEphemeris composes a TimeProvider with a PeriodicTableSource and
exposes every intermediate and final quantity of the Meeus pipeline as a
cached property. Each property delegates to a pure function, so any step
can be reproduced in isolation from its inputs.
"""

from functools import cached_property
from typing import TYPE_CHECKING

from lunaphase.domain import (
    earth_position,
    fundamental_arguments,
    illumination,
    moon_position,
    nutation,
    sun_position,
)
from lunaphase.domain.angle import Angle
from lunaphase.domain.fundamental_arguments import Precision
from lunaphase.domain.time_scale import CalendarInstant, TimeScale

if TYPE_CHECKING:
    from lunaphase.ports import PeriodicTableSource, TimeProvider


class SunMoonEphemeris:
    """Apparent Sun and Moon positions and lunar phase at one instant.

    Args:
        time_scale: Time arguments of the instant (a TimeScale or any
            object satisfying the TimeProvider port).
        tables: Source of the periodic coefficient tables.
    """

    def __init__(self, time_scale: "TimeProvider",
                 tables: "PeriodicTableSource") -> None:
        self.time_scale = time_scale
        self.tables = tables

    @staticmethod
    def at(instant: CalendarInstant, tables: "PeriodicTableSource") -> "SunMoonEphemeris":
        """Ephemeris for a civil (UT) instant."""
        return SunMoonEphemeris(TimeScale.from_instant(instant), tables)

    @staticmethod
    def at_dynamical_time(instant: CalendarInstant,
                          tables: "PeriodicTableSource") -> "SunMoonEphemeris":
        """Ephemeris for an instant given on Dynamical Time."""
        return SunMoonEphemeris(TimeScale.from_dynamical_time(instant), tables)

    # ------------------------------------------------------------------ #
    # Time
    # ------------------------------------------------------------------ #

    @property
    def time(self) -> float:
        return self.time_scale.time

    # ------------------------------------------------------------------ #
    # Lunar fundamental arguments
    # ------------------------------------------------------------------ #

    @cached_property
    def moon_mean_elongation(self) -> Angle:
        return fundamental_arguments.moon_mean_elongation(self.time, Precision.HIGH)

    @cached_property
    def sun_mean_anomaly(self) -> Angle:
        return fundamental_arguments.sun_mean_anomaly(self.time, Precision.HIGH)

    @cached_property
    def moon_mean_anomaly(self) -> Angle:
        return fundamental_arguments.moon_mean_anomaly(self.time, Precision.HIGH)

    @cached_property
    def moon_argument_of_latitude(self) -> Angle:
        return fundamental_arguments.moon_argument_of_latitude(self.time, Precision.HIGH)

    @cached_property
    def moon_mean_longitude(self) -> Angle:
        return fundamental_arguments.moon_mean_longitude(self.time)

    @cached_property
    def venus_correction(self) -> Angle:
        return fundamental_arguments.venus_correction(self.time)

    @cached_property
    def jupiter_correction(self) -> Angle:
        return fundamental_arguments.jupiter_correction(self.time)

    @cached_property
    def flattening_correction(self) -> Angle:
        return fundamental_arguments.flattening_correction(self.time)

    @cached_property
    def eccentricity_correction(self) -> float:
        return fundamental_arguments.eccentricity_correction(self.time)

    @cached_property
    def _lunar_arguments(self) -> tuple[Angle, Angle, Angle, Angle]:
        return (self.moon_mean_elongation, self.sun_mean_anomaly,
                self.moon_mean_anomaly, self.moon_argument_of_latitude)

    # ------------------------------------------------------------------ #
    # Nutation and obliquity
    # ------------------------------------------------------------------ #

    @cached_property
    def _nutation_arguments(self) -> tuple[Angle, ...]:
        return nutation.nutation_arguments(self.time)

    @cached_property
    def nutation_in_longitude(self) -> Angle:
        return nutation.nutation_in_longitude(
            self.tables.nutation_table(), self._nutation_arguments, self.time)

    @cached_property
    def nutation_in_obliquity(self) -> Angle:
        return nutation.nutation_in_obliquity(
            self.tables.nutation_table(), self._nutation_arguments, self.time)

    @cached_property
    def mean_obliquity(self) -> Angle:
        return nutation.mean_obliquity(self.time_scale.time_myriads)

    @cached_property
    def true_obliquity(self) -> Angle:
        return nutation.true_obliquity(self.mean_obliquity, self.nutation_in_obliquity)

    # ------------------------------------------------------------------ #
    # Moon
    # ------------------------------------------------------------------ #

    @cached_property
    def moon_longitude_terms(self) -> int:
        return moon_position.longitude_sum(
            self.tables.moon_longitude_distance_table(),
            self._lunar_arguments,
            self.eccentricity_correction,
            self.moon_mean_longitude,
            self.moon_argument_of_latitude,
            self.venus_correction,
            self.jupiter_correction,
        )

    @cached_property
    def moon_latitude_terms(self) -> int:
        return moon_position.latitude_sum(
            self.tables.moon_latitude_table(),
            self._lunar_arguments,
            self.eccentricity_correction,
            self.moon_mean_longitude,
            self.moon_mean_anomaly,
            self.moon_argument_of_latitude,
            self.venus_correction,
            self.flattening_correction,
        )

    @cached_property
    def moon_distance_terms(self) -> int:
        return moon_position.distance_sum(
            self.tables.moon_longitude_distance_table(),
            self._lunar_arguments,
            self.eccentricity_correction,
        )

    @cached_property
    def moon_ecliptic_longitude(self) -> Angle:
        return moon_position.ecliptic_longitude(self.moon_mean_longitude,
                                                self.moon_longitude_terms)

    @cached_property
    def moon_ecliptic_latitude(self) -> Angle:
        return moon_position.ecliptic_latitude(self.moon_latitude_terms)

    @cached_property
    def moon_distance(self) -> float:
        """Earth-Moon distance in km."""
        return moon_position.distance_km(self.moon_distance_terms)

    @cached_property
    def moon_parallax(self) -> Angle:
        return moon_position.equatorial_horizontal_parallax(self.moon_distance)

    @cached_property
    def moon_apparent_longitude(self) -> Angle:
        return moon_position.apparent_longitude(self.moon_ecliptic_longitude,
                                                self.nutation_in_longitude)

    @cached_property
    def moon_right_ascension(self) -> Angle:
        return moon_position.right_ascension(self.moon_apparent_longitude,
                                             self.moon_ecliptic_latitude,
                                             self.true_obliquity)

    @cached_property
    def moon_declination(self) -> Angle:
        return moon_position.declination(self.moon_apparent_longitude,
                                         self.moon_ecliptic_latitude,
                                         self.true_obliquity)

    # ------------------------------------------------------------------ #
    # Sun
    # ------------------------------------------------------------------ #

    @cached_property
    def solar_mean_longitude(self) -> Angle:
        return sun_position.mean_longitude(self.time)

    @cached_property
    def solar_mean_anomaly(self) -> Angle:
        return sun_position.mean_anomaly(self.time)

    @cached_property
    def earth_orbit_eccentricity(self) -> float:
        return sun_position.orbit_eccentricity(self.time)

    @cached_property
    def sun_equation_of_centre(self) -> Angle:
        return sun_position.equation_of_centre(self.time, self.solar_mean_anomaly)

    @cached_property
    def sun_true_longitude(self) -> Angle:
        return sun_position.true_longitude(self.solar_mean_longitude,
                                           self.sun_equation_of_centre)

    @cached_property
    def sun_true_anomaly(self) -> Angle:
        return sun_position.true_anomaly(self.solar_mean_anomaly,
                                         self.sun_equation_of_centre)

    @cached_property
    def sun_radius_vector(self) -> float:
        """Earth-Sun distance in AU."""
        return sun_position.radius_vector(self.earth_orbit_eccentricity,
                                          self.sun_true_anomaly)

    @cached_property
    def sun_distance(self) -> int:
        """Earth-Sun distance in km."""
        return sun_position.distance_km(self.sun_radius_vector)

    @cached_property
    def sun_node_longitude(self) -> Angle:
        return sun_position.ascending_node_longitude(self.time)

    @cached_property
    def sun_apparent_longitude(self) -> Angle:
        return sun_position.apparent_longitude(self.sun_true_longitude,
                                               self.sun_node_longitude)

    @cached_property
    def sun_apparent_obliquity(self) -> Angle:
        return sun_position.corrected_obliquity(self.mean_obliquity,
                                                self.sun_node_longitude)

    @cached_property
    def sun_right_ascension(self) -> Angle:
        return sun_position.right_ascension(self.sun_apparent_longitude,
                                            self.sun_apparent_obliquity)

    @cached_property
    def sun_declination(self) -> Angle:
        return sun_position.declination(self.sun_apparent_longitude,
                                        self.sun_apparent_obliquity)

    # ------------------------------------------------------------------ #
    # Earth (VSOP87)
    # ------------------------------------------------------------------ #

    @cached_property
    def earth_heliocentric_longitude(self) -> Angle:
        return earth_position.heliocentric_longitude(
            self.tables.vsop87_earth_series(), self.time_scale.time_millennia)

    @cached_property
    def earth_heliocentric_latitude(self) -> Angle:
        return earth_position.heliocentric_latitude(
            self.tables.vsop87_earth_series(), self.time_scale.time_millennia)

    @cached_property
    def earth_radius_vector(self) -> float:
        return earth_position.radius_vector(
            self.tables.vsop87_earth_series(), self.time_scale.time_millennia)

    # ------------------------------------------------------------------ #
    # Illumination
    # ------------------------------------------------------------------ #

    @cached_property
    def moon_elongation(self) -> Angle:
        return illumination.geocentric_elongation(
            self.sun_right_ascension, self.sun_declination,
            self.moon_right_ascension, self.moon_declination)

    @cached_property
    def moon_phase_angle(self) -> Angle:
        return illumination.phase_angle(self.moon_elongation, self.sun_distance,
                                        self.moon_distance)

    @cached_property
    def moon_illuminated_fraction(self) -> float:
        return illumination.illuminated_fraction(self.moon_phase_angle)

    @cached_property
    def moon_bright_limb_angle(self) -> Angle:
        return illumination.bright_limb_position_angle(
            self.sun_right_ascension, self.sun_declination,
            self.moon_right_ascension, self.moon_declination)

    def summary(self) -> dict[str, float]:
        """Headline values, angles in decimal degrees."""
        return {
            "delta_t": self.time_scale.delta_t,
            "julian_ephemeris_day": self.time_scale.julian_ephemeris_day,
            "time": self.time,
            "nutation_in_longitude_arcsec": self.nutation_in_longitude.decimal_arcseconds,
            "nutation_in_obliquity_arcsec": self.nutation_in_obliquity.decimal_arcseconds,
            "true_obliquity": self.true_obliquity.decimal_degrees,
            "sun_apparent_longitude": self.sun_apparent_longitude.decimal_degrees,
            "sun_right_ascension": self.sun_right_ascension.decimal_degrees,
            "sun_declination": self.sun_declination.decimal_degrees,
            "sun_distance_km": float(self.sun_distance),
            "moon_apparent_longitude": self.moon_apparent_longitude.decimal_degrees,
            "moon_ecliptic_latitude": self.moon_ecliptic_latitude.decimal_degrees,
            "moon_right_ascension": self.moon_right_ascension.decimal_degrees,
            "moon_declination": self.moon_declination.decimal_degrees,
            "moon_distance_km": self.moon_distance,
            "moon_parallax": self.moon_parallax.decimal_degrees,
            "moon_elongation": self.moon_elongation.decimal_degrees,
            "moon_phase_angle": self.moon_phase_angle.decimal_degrees,
            "moon_illuminated_fraction": self.moon_illuminated_fraction,
            "moon_bright_limb_angle": self.moon_bright_limb_angle.decimal_degrees,
        }
