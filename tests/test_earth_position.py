# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the VSOP87 heliocentric Earth position (Meeus example 25.b)."""

import math

import pytest

from lunaphase.domain import earth_position

_TAU = -0.0072183436


@pytest.fixture(scope="module")
def series(tables):
    return tables.vsop87_earth_series()


class TestHeliocentricPosition:

    def test_longitude(self, series):
        longitude = earth_position.heliocentric_longitude(series, _TAU)
        assert longitude.decimal_degrees == pytest.approx(19.907372, abs=1e-6)
        assert longitude.radians == pytest.approx(math.radians(19.907372), abs=1e-7)

    def test_latitude_is_signed(self, series):
        latitude = earth_position.heliocentric_latitude(series, _TAU)
        assert latitude.decimal_degrees == pytest.approx(-0.000179, abs=1e-6)
        assert latitude.radians == pytest.approx(-0.00000312, abs=2e-8)

    def test_radius_vector(self, series):
        assert earth_position.radius_vector(series, _TAU) == pytest.approx(0.99760775, abs=2e-8)

    def test_radius_vector_at_j2000(self, series):
        # Perihelion is in early January; R < 1 AU
        assert 0.983 < earth_position.radius_vector(series, 0.0) < 0.984
