# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the lunar and nutation fundamental arguments."""

import pytest

from lunaphase.domain.fundamental_arguments import (
    Precision,
    eccentricity_correction,
    flattening_correction,
    jupiter_correction,
    moon_argument_of_latitude,
    moon_ascending_node_longitude,
    moon_mean_anomaly,
    moon_mean_elongation,
    moon_mean_longitude,
    sun_mean_anomaly,
    venus_correction,
)

# 1992 April 12, 0h TD (Meeus example 47.a)
_LUNAR_T = -0.077221081451
# 1987 April 10, 0h TD (Meeus example 22.a)
_NUTATION_T = -0.127296372348


class TestHighPrecisionArguments:

    def test_mean_longitude(self):
        assert moon_mean_longitude(_LUNAR_T).decimal_degrees == pytest.approx(134.290182, abs=1e-6)

    def test_mean_elongation(self):
        assert moon_mean_elongation(_LUNAR_T).decimal_degrees == pytest.approx(113.842304, abs=1e-6)

    def test_sun_mean_anomaly(self):
        assert sun_mean_anomaly(_LUNAR_T).decimal_degrees == pytest.approx(97.643514, abs=1e-6)

    def test_moon_mean_anomaly(self):
        assert moon_mean_anomaly(_LUNAR_T).decimal_degrees == pytest.approx(5.150833, abs=1e-6)

    def test_argument_of_latitude(self):
        assert moon_argument_of_latitude(_LUNAR_T).decimal_degrees == pytest.approx(219.889721, abs=1e-6)

    def test_planetary_arguments(self):
        assert venus_correction(_LUNAR_T).decimal_degrees == pytest.approx(109.57, abs=0.005)
        assert jupiter_correction(_LUNAR_T).decimal_degrees == pytest.approx(123.78, abs=0.005)
        assert flattening_correction(_LUNAR_T).decimal_degrees == pytest.approx(229.53, abs=0.005)

    def test_eccentricity(self):
        assert eccentricity_correction(_LUNAR_T) == 1.000194


class TestLowPrecisionArguments:

    def test_nutation_arguments(self):
        assert moon_mean_elongation(_NUTATION_T, Precision.LOW).decimal_degrees == pytest.approx(136.9623, abs=1e-4)
        assert sun_mean_anomaly(_NUTATION_T, Precision.LOW).decimal_degrees == pytest.approx(94.9792, abs=1e-4)
        assert moon_mean_anomaly(_NUTATION_T, Precision.LOW).decimal_degrees == pytest.approx(229.2784, abs=1e-4)
        assert moon_argument_of_latitude(_NUTATION_T, Precision.LOW).decimal_degrees == pytest.approx(143.4079, abs=1e-4)
        assert moon_ascending_node_longitude(_NUTATION_T).decimal_degrees == pytest.approx(11.2531, abs=1e-4)

    @pytest.mark.parametrize("function", [
        moon_mean_elongation, sun_mean_anomaly, moon_mean_anomaly,
        moon_argument_of_latitude,
    ])
    def test_tiers_agree_closely(self, function):
        low = function(_LUNAR_T, Precision.LOW).decimal_degrees
        high = function(_LUNAR_T, Precision.HIGH).decimal_degrees
        assert low == pytest.approx(high, abs=0.005)

    def test_at_j2000_the_constant_terms(self):
        assert moon_mean_longitude(0.0).decimal_degrees == pytest.approx(218.3164477)
        assert moon_ascending_node_longitude(0.0).decimal_degrees == pytest.approx(125.04452)
        assert eccentricity_correction(0.0) == 1.0
