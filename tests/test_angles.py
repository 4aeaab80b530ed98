# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for angle helpers and degrees/minutes/seconds conversion."""
import math

import pytest

from terrasol.domain.angles import (
    DegreesMinutesSeconds,
    acos_deg,
    asin_deg,
    atan_deg,
    combine_arc_lengths,
    cos_deg,
    degrees_to_radians,
    normalize_degrees,
    normalize_longitude,
    radians_to_degrees,
    sin_deg,
    tan_deg,
    to_decimal,
    to_dms,
)


class TestConversions:

    def test_degrees_to_radians(self):
        assert degrees_to_radians(180.0) == pytest.approx(math.pi)

    def test_radians_to_degrees(self):
        assert radians_to_degrees(math.pi / 2) == pytest.approx(90.0)

    def test_combine_arc_lengths(self):
        assert combine_arc_lengths(3.0, 4.0) == 5.0


class TestDegreeTrig:

    def test_sin_cos_tan(self):
        assert sin_deg(30.0) == pytest.approx(0.5)
        assert cos_deg(60.0) == pytest.approx(0.5)
        assert tan_deg(45.0) == pytest.approx(1.0)

    def test_reduces_large_angles(self):
        assert sin_deg(390.0) == pytest.approx(0.5)
        assert cos_deg(-300.0) == pytest.approx(0.5)

    def test_inverse_functions(self):
        assert atan_deg(1.0) == pytest.approx(45.0)
        assert acos_deg(0.5) == pytest.approx(60.0)
        assert asin_deg(-0.5) == pytest.approx(-30.0)

    def test_acos_outside_domain_raises(self):
        with pytest.raises(ValueError):
            acos_deg(1.5)


class TestNormalization:

    @pytest.mark.parametrize("angle,expected", [
        (0.0, 0.0), (359.5, 359.5), (360.0, 0.0), (720.0, 0.0),
        (-90.0, 270.0), (450.0, 90.0),
    ])
    def test_normalize_degrees(self, angle, expected):
        assert normalize_degrees(angle) == pytest.approx(expected)

    def test_tiny_negative_is_zero_not_360(self):
        assert normalize_degrees(-1e-20) == 0.0

    @pytest.mark.parametrize("lon,expected", [
        (0.0, 0.0), (190.0, -170.0), (-190.0, 170.0), (180.0, 180.0),
        (-180.0, 180.0), (540.0, 180.0), (-45.0, -45.0),
    ])
    def test_normalize_longitude(self, lon, expected):
        assert normalize_longitude(lon) == pytest.approx(expected)


class TestDegreesMinutesSeconds:

    def test_new_york_latitude(self):
        dms = to_dms(40.7128)
        assert dms.degrees == 40.0
        assert dms.minutes == 42.0
        assert dms.seconds == pytest.approx(46.08, abs=1e-6)

    def test_whole_degrees(self):
        assert to_dms(12.0) == DegreesMinutesSeconds(12.0, 0.0, 0.0)

    def test_unpacks_as_triple(self):
        d, m, s = to_dms(10.5)
        assert (d, m, s) == (10.0, 30.0, pytest.approx(0.0, abs=1e-9))

    def test_frozen(self):
        dms = to_dms(1.0)
        with pytest.raises(AttributeError):
            dms.degrees = 2.0

    def test_to_decimal(self):
        assert to_decimal(10.0, 30.0, 0.0) == 10.5
        assert to_decimal(0.0, 0.0, 36.0) == pytest.approx(0.01)

    @pytest.mark.parametrize("x", [0.0, 0.0001, 1.5, 40.7128, 89.999999, 151.2093, 179.99])
    def test_round_trip_non_negative(self, x):
        assert to_decimal(*to_dms(x)) == pytest.approx(x, abs=1e-9)

    def test_negative_carries_sign_on_degrees(self):
        dms = to_dms(-74.006)
        assert dms.degrees == -74.0
        assert dms.minutes == 0.0
        assert dms.seconds == pytest.approx(21.6, abs=1e-6)
        assert dms.is_negative

    def test_negative_under_one_degree_keeps_sign(self):
        dms = to_dms(-0.5)
        assert dms.degrees == 0.0
        assert dms.is_negative
        assert dms.minutes == 30.0
        assert to_decimal(*dms) == pytest.approx(-0.5)

    @pytest.mark.parametrize("x", [-0.25, -33.8688, -74.006, -179.5])
    def test_round_trip_negative(self, x):
        assert to_decimal(*to_dms(x)) == pytest.approx(x, abs=1e-9)

    def test_minutes_and_seconds_never_negative(self):
        for x in (-12.345, -0.001, -89.9):
            dms = to_dms(x)
            assert dms.minutes >= 0.0
            assert dms.seconds >= 0.0
