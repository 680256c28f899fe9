# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the Angle value object."""

import math

import pytest
from hypothesis import given, strategies as st

from lunaphase.domain.angle import Angle
from lunaphase.domain.numerics import NumericDomainError


class TestFromRadians:

    def test_unnormalized_keeps_sign_and_magnitude(self):
        angle = Angle.from_radians(-43.63484796, normalize=False)
        assert angle.decimal_degrees == pytest.approx(-2500.092628, abs=1e-6)

    def test_normalized_into_full_circle(self):
        angle = Angle.from_radians(-43.63484796)
        assert angle.decimal_degrees == pytest.approx(19.907372, abs=1e-6)

    def test_normalized_radians_are_reduced(self):
        angle = Angle.from_radians(-1.0)
        assert angle.radians == pytest.approx(2 * math.pi - 1.0)
        assert angle.decimal_degrees == pytest.approx(math.degrees(angle.radians), abs=1e-9)
        assert Angle.from_radians(-43.63484796).radians == pytest.approx(
            math.radians(19.907372), abs=1e-7)

    def test_radians_are_stored_as_given(self):
        angle = Angle.from_radians(0.000145252)
        assert angle.radians == 0.000145252
        assert angle.decimal_degrees == pytest.approx(0.0083223, abs=1e-7)

    def test_small_negative_angle_components_truncate_toward_zero(self):
        angle = Angle.from_radians(-0.00000312, normalize=False)
        assert angle.decimal_degrees == pytest.approx(-0.000179, abs=1e-6)
        assert angle.degrees == 0
        assert angle.arcminutes == 0
        assert round(angle.decimal_arcseconds, 3) == pytest.approx(-0.644)


class TestFromDecimalDegrees:

    def test_sexagesimal_components(self):
        angle = Angle.from_decimal_degrees(199.907347)
        assert angle.degrees == 199
        assert angle.arcminutes == 54
        assert round(angle.decimal_arcseconds, 3) == pytest.approx(26.449)

    def test_hour_components(self):
        angle = Angle.from_decimal_degrees(198.378178)
        assert angle.hours == 13
        assert angle.minutes == 13
        assert round(angle.decimal_seconds, 3) == pytest.approx(30.763)

    def test_large_value_wraps(self):
        angle = Angle.from_decimal_degrees(13774269.8622)
        assert angle.decimal_degrees == pytest.approx(309.8622, abs=1e-6)

    def test_radians_rounded_to_nine_decimals(self):
        angle = Angle.from_decimal_degrees(27.724274)
        assert round(angle.radians, 8) == pytest.approx(0.48387986)
        assert angle.radians == round(angle.radians, 9)

    def test_negative_value_normalized(self):
        assert Angle.from_decimal_degrees(-90.0).decimal_degrees == 270.0

    def test_normalize_false_keeps_negative(self):
        assert Angle.from_decimal_degrees(-90.0, normalize=False).decimal_degrees == -90.0

    def test_value_just_below_full_circle_wraps_to_zero(self):
        assert Angle.from_decimal_degrees(359.9999999999).decimal_degrees == 0.0


class TestSexagesimalFactories:

    def test_degrees_arcminutes_arcseconds(self):
        assert Angle.from_degrees_arcminutes_arcseconds(
            23, 26, 26.29).decimal_degrees == pytest.approx(23.440636, abs=1e-6)
        assert Angle.from_degrees_arcminutes_arcseconds(
            49, 13, 39.896).decimal_degrees == pytest.approx(49.2277489, abs=1e-7)

    def test_given_components_are_kept(self):
        angle = Angle.from_degrees_arcminutes_arcseconds(23, 26, 21.448)
        assert angle.degrees == 23
        assert angle.arcminutes == 26
        assert angle.decimal_arcseconds == 21.448

    def test_hours_minutes_seconds(self):
        angle = Angle.from_hours_minutes_seconds(2, 44, 12.9747)
        assert angle.decimal_degrees == pytest.approx(41.0540613, abs=1e-7)
        assert angle.hours == 2
        assert angle.minutes == 44
        assert angle.decimal_seconds == 12.9747

    @pytest.mark.parametrize("arcseconds, degrees", [
        (15.844, 0.0044011),
        (6.217, 0.0017269),
        (1014.7959, 0.2818878),
        (1014.9494, 0.2819304),
        (881.8106, 0.2449474),
    ])
    def test_decimal_arcseconds(self, arcseconds, degrees):
        angle = Angle.from_decimal_arcseconds(arcseconds)
        assert angle.decimal_degrees == pytest.approx(degrees, abs=1e-7)

    def test_negative_arcseconds_without_normalization(self):
        angle = Angle.from_decimal_arcseconds(-0.09033, normalize=False)
        assert angle.decimal_degrees == pytest.approx(-0.000025, abs=1e-6)

    def test_unnormalized_arcseconds_report_signed_input(self):
        angle = Angle.from_decimal_arcseconds(-3.788, normalize=False)
        assert angle.decimal_degrees == pytest.approx(-3.788 / 3600, abs=1e-9)
        assert angle.decimal_arcseconds == -3.788


class TestNormalizedComponents:

    @staticmethod
    def _recomposed(angle):
        return angle.degrees + angle.arcminutes / 60 + angle.decimal_arcseconds / 3600

    def test_wrapped_arcseconds_are_rederived(self):
        angle = Angle.from_decimal_arcseconds(-3.788)
        assert angle.decimal_degrees == pytest.approx(360 - 3.788 / 3600, abs=1e-9)
        assert angle.degrees == 359
        assert angle.arcminutes == 59
        assert angle.decimal_arcseconds == pytest.approx(56.212, abs=1e-3)
        assert self._recomposed(angle) == pytest.approx(angle.decimal_degrees, abs=1e-6)

    def test_wrapped_degrees_are_rederived(self):
        angle = Angle.from_degrees_arcminutes_arcseconds(-10, 0, 0)
        assert angle.decimal_degrees == 350.0
        assert angle.degrees == 350
        assert angle.arcminutes == 0

    def test_wrapped_hours_are_rederived(self):
        angle = Angle.from_hours_minutes_seconds(25, 0, 0)
        assert angle.decimal_degrees == 15.0
        assert angle.hours == 1
        assert angle.minutes == 0

    def test_in_range_components_are_kept(self):
        angle = Angle.from_degrees_arcminutes_arcseconds(359, 59, 59.5)
        assert angle.components == {"degrees": 359, "arcminutes": 59, "decimal_arcseconds": 59.5}
        assert self._recomposed(angle) == pytest.approx(angle.decimal_degrees, abs=1e-6)

    def test_unnormalized_components_are_kept(self):
        angle = Angle.from_degrees_arcminutes_arcseconds(-10, 0, 0, normalize=False)
        assert angle.decimal_degrees == -10.0
        assert angle.degrees == -10

    @given(st.integers(-720, 720), st.integers(0, 59), st.floats(0.0, 59.999))
    def test_normalized_views_agree(self, degrees, arcminutes, arcseconds):
        angle = Angle.from_degrees_arcminutes_arcseconds(degrees, arcminutes, arcseconds)
        assert 0 <= angle.degrees < 360
        assert self._recomposed(angle) == pytest.approx(angle.decimal_degrees, abs=1e-6)


class TestArithmetic:

    def test_addition_normalizes(self):
        total = Angle.from_decimal_degrees(350.0) + Angle.from_decimal_degrees(20.0)
        assert total.decimal_degrees == pytest.approx(10.0)

    def test_subtraction_normalizes(self):
        difference = Angle.from_decimal_degrees(10.0) - Angle.from_decimal_degrees(20.0)
        assert difference.decimal_degrees == pytest.approx(350.0)

    def test_addition_recomputes_radians(self):
        total = Angle.from_decimal_degrees(45.0) + Angle.from_decimal_degrees(45.0)
        assert total.radians == pytest.approx(math.pi / 2, abs=1e-9)

    def test_add_non_angle_is_unsupported(self):
        with pytest.raises(TypeError):
            Angle.from_decimal_degrees(1.0) + 1.0

    def test_trigonometry(self):
        angle = Angle.from_decimal_degrees(30.0)
        assert angle.sin() == pytest.approx(0.5, abs=1e-9)
        assert angle.cos() == pytest.approx(math.sqrt(3) / 2, abs=1e-9)
        assert angle.tan() == pytest.approx(1 / math.sqrt(3), abs=1e-9)


class TestInverseTrigonometry:

    def test_asin(self):
        assert Angle.from_asin(0.5).decimal_degrees == pytest.approx(30.0, abs=1e-9)

    def test_asin_negative_without_normalization(self):
        assert Angle.from_asin(-0.5, normalize=False).decimal_degrees == pytest.approx(-30.0)

    def test_drift_beyond_one_is_clamped(self):
        assert Angle.from_acos(1.0 + 1e-12).decimal_degrees == 0.0

    def test_out_of_domain_raises(self):
        with pytest.raises(NumericDomainError):
            Angle.from_asin(1.01)

    def test_nan_raises(self):
        with pytest.raises(NumericDomainError):
            Angle.from_acos(float("nan"))

    def test_domain_error_is_value_error(self):
        with pytest.raises(ValueError):
            Angle.from_acos(-2.0)


class TestImmutability:

    def test_frozen(self):
        angle = Angle.from_decimal_degrees(10.0)
        with pytest.raises(AttributeError):
            angle.decimal_degrees = 20.0

    def test_equality_and_hash(self):
        a = Angle.from_decimal_degrees(10.0)
        b = Angle.from_decimal_degrees(370.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_repeated_access_is_stable(self):
        angle = Angle.from_decimal_degrees(123.456789)
        assert angle.decimal_arcseconds == angle.decimal_arcseconds
        assert angle.decimal_seconds == angle.decimal_seconds


class TestAngleProperties:

    @given(st.floats(min_value=0.0, max_value=359.999, allow_nan=False))
    def test_sexagesimal_recomposes(self, degrees):
        angle = Angle.from_decimal_degrees(degrees)
        recomposed = (angle.degrees + angle.arcminutes / 60
                      + angle.decimal_arcseconds / 3600)
        assert recomposed == pytest.approx(angle.decimal_degrees, abs=1e-6)

    @given(st.floats(min_value=0.0, max_value=359.999, allow_nan=False))
    def test_radians_round_trip(self, degrees):
        angle = Angle.from_decimal_degrees(degrees)
        assert Angle.from_radians(angle.radians).decimal_degrees == pytest.approx(
            angle.decimal_degrees, abs=1e-6)

    @given(st.floats(min_value=-1e6, max_value=1e6, allow_nan=False))
    def test_normalized_range(self, degrees):
        angle = Angle.from_decimal_degrees(degrees)
        assert 0.0 <= angle.decimal_degrees < 360.0
