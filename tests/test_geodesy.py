# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for spherical distance, bearing, and point formulas."""
import math

import pytest

from terrasol.domain.coordinate import Coordinate
from terrasol.domain.geodesy import (
    antipode,
    central_angle_rad,
    destination_point,
    distance_to_horizon,
    distance_to_horizon_metric,
    equirectangular_distance,
    great_circle_bearing,
    haversine_distance,
    midpoint,
    rhumb_bearing,
    rhumb_distance,
    validate_coordinate,
)
from terrasol.domain.planet import (
    EARTH_RADIUS,
    EARTH_RADIUS_METRIC,
    MOON_RADIUS,
    get_planet_radius,
    planet_radius,
    reset_planet_radius,
    set_planet_radius,
)


NEW_YORK = Coordinate(40.7128, -74.0060)
LONDON = Coordinate(51.5074, -0.1278)
SYDNEY = Coordinate(-33.8688, 151.2093)

_SAMPLE_POINTS = [
    Coordinate(0.0, 0.0),
    NEW_YORK,
    LONDON,
    SYDNEY,
    Coordinate(89.5, 45.0),
    Coordinate(-60.0, -179.9),
    Coordinate(12.34, 179.5),
]

_ONE_DEGREE_MI = EARTH_RADIUS * math.pi / 180.0


@pytest.fixture(autouse=True)
def _default_radius():
    reset_planet_radius()
    yield
    reset_planet_radius()


# ── Haversine ────────────────────────────────────────────────────────

class TestHaversineDistance:

    def test_same_point_is_zero(self):
        for p in _SAMPLE_POINTS:
            assert haversine_distance(p, p) == 0.0

    @pytest.mark.parametrize("f", _SAMPLE_POINTS)
    def test_symmetric(self, f):
        for s in _SAMPLE_POINTS:
            assert haversine_distance(f, s) == pytest.approx(haversine_distance(s, f), abs=1e-9)

    def test_one_degree_on_equator(self):
        d = haversine_distance(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0))
        assert d == pytest.approx(_ONE_DEGREE_MI, rel=1e-12)

    def test_new_york_to_london_miles(self):
        """Known great-circle distance ≈ 3461 mi."""
        assert haversine_distance(NEW_YORK, LONDON) == pytest.approx(3461.0, rel=0.005)

    def test_new_york_to_london_km_with_explicit_radius(self):
        d = haversine_distance(NEW_YORK, LONDON, radius=EARTH_RADIUS_METRIC)
        assert d == pytest.approx(5570.0, rel=0.005)

    def test_pole_to_pole_is_half_circumference(self):
        d = haversine_distance(Coordinate(90.0, 0.0), Coordinate(-90.0, 0.0))
        assert d == pytest.approx(math.pi * EARTH_RADIUS, rel=1e-12)

    def test_true_antipodes_do_not_fail(self):
        """Rounding can push the haversine term past 1; result stays finite."""
        c = central_angle_rad(Coordinate(10.0, 20.0), Coordinate(-10.0, -160.0))
        assert c == pytest.approx(math.pi, abs=1e-7)


class TestRadiusSelection:

    def test_result_follows_selected_radius(self):
        earth = haversine_distance(NEW_YORK, LONDON)
        set_planet_radius(MOON_RADIUS)
        moon = haversine_distance(NEW_YORK, LONDON)
        assert moon == pytest.approx(earth * MOON_RADIUS / EARTH_RADIUS, rel=1e-12)

    def test_change_is_visible_immediately(self):
        before = equirectangular_distance(NEW_YORK, LONDON)
        set_planet_radius(2 * EARTH_RADIUS)
        assert equirectangular_distance(NEW_YORK, LONDON) == pytest.approx(2 * before)

    def test_explicit_radius_ignores_selection(self):
        set_planet_radius(MOON_RADIUS)
        d = haversine_distance(NEW_YORK, LONDON, radius=EARTH_RADIUS)
        assert d == pytest.approx(3461.0, rel=0.005)

    def test_context_manager_restores(self):
        with planet_radius(MOON_RADIUS):
            assert get_planet_radius() == MOON_RADIUS
        assert get_planet_radius() == EARTH_RADIUS

    def test_context_manager_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with planet_radius(MOON_RADIUS):
                raise RuntimeError("boom")
        assert get_planet_radius() == EARTH_RADIUS

    @pytest.mark.parametrize("bad", [0.0, -1.0, math.inf, math.nan])
    def test_rejects_invalid_radius(self, bad):
        with pytest.raises(ValueError):
            set_planet_radius(bad)
        assert get_planet_radius() == EARTH_RADIUS


# ── Equirectangular ──────────────────────────────────────────────────

class TestEquirectangularDistance:

    def test_same_point_is_zero(self):
        assert equirectangular_distance(LONDON, LONDON) == 0.0

    def test_one_degree_on_equator_matches_haversine(self):
        f, s = Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)
        assert equirectangular_distance(f, s) == pytest.approx(haversine_distance(f, s), rel=1e-12)

    def test_meridian_separation_matches_haversine(self):
        f, s = Coordinate(10.0, 5.0), Coordinate(10.8, 5.0)
        assert equirectangular_distance(f, s) == pytest.approx(haversine_distance(f, s), rel=1e-9)

    def test_close_to_haversine_near_equator(self):
        """Under 1° apart near the equator the two agree to 0.1%."""
        f, s = Coordinate(0.3, 0.2), Coordinate(0.8, 0.9)
        assert equirectangular_distance(f, s) == pytest.approx(haversine_distance(f, s), rel=1e-3)

    def test_both_converge_to_zero(self):
        base = Coordinate(45.0, 7.0)
        previous_h = previous_e = math.inf
        for delta in (1.0, 0.1, 0.01, 0.001):
            other = Coordinate(45.0 + delta, 7.0 + delta)
            h = haversine_distance(base, other)
            e = equirectangular_distance(base, other)
            assert h < previous_h and e < previous_e
            previous_h, previous_e = h, e
        assert previous_h < 0.2 and previous_e < 0.2

    def test_overstates_longitude_span_at_high_latitude(self):
        """No cos(latitude) factor: east-west spans are overstated by 1/cos φ."""
        f, s = Coordinate(60.0, 0.0), Coordinate(60.0, 0.5)
        ratio = equirectangular_distance(f, s) / haversine_distance(f, s)
        assert ratio == pytest.approx(2.0, rel=1e-3)


# ── Rhumb distance ───────────────────────────────────────────────────

class TestRhumbDistance:

    def test_along_equator_equals_great_circle(self):
        f, s = Coordinate(0.0, 0.0), Coordinate(0.0, 10.0)
        assert rhumb_distance(f, s) == pytest.approx(haversine_distance(f, s), rel=1e-9)

    def test_along_meridian_equals_great_circle(self):
        f, s = Coordinate(-20.0, 30.0), Coordinate(35.0, 30.0)
        assert rhumb_distance(f, s) == pytest.approx(haversine_distance(f, s), rel=1e-9)

    def test_longer_than_great_circle(self):
        assert rhumb_distance(NEW_YORK, LONDON) > haversine_distance(NEW_YORK, LONDON)

    def test_east_west_uses_parallel_length(self):
        f, s = Coordinate(60.0, 0.0), Coordinate(60.0, 10.0)
        expected = math.radians(10.0) * math.cos(math.radians(60.0)) * EARTH_RADIUS
        assert rhumb_distance(f, s) == pytest.approx(expected, rel=1e-9)


# ── Bearings ─────────────────────────────────────────────────────────

class TestGreatCircleBearing:

    @pytest.mark.parametrize("target,expected", [
        (Coordinate(10.0, 0.0), 0.0),
        (Coordinate(0.0, 10.0), 90.0),
        (Coordinate(-10.0, 0.0), 180.0),
        (Coordinate(0.0, -10.0), 270.0),
    ])
    def test_cardinal_directions(self, target, expected):
        assert great_circle_bearing(Coordinate(0.0, 0.0), target) == pytest.approx(expected, abs=1e-9)

    def test_new_york_to_london(self):
        assert great_circle_bearing(NEW_YORK, LONDON) == pytest.approx(51.2, abs=0.5)

    def test_identical_points_return_zero(self):
        assert great_circle_bearing(SYDNEY, SYDNEY) == 0.0

    def test_range(self):
        for f in _SAMPLE_POINTS:
            for s in _SAMPLE_POINTS:
                b = great_circle_bearing(f, s)
                assert not math.isnan(b)
                assert 0.0 <= b < 360.0

    def test_across_antimeridian_goes_east(self):
        b = great_circle_bearing(Coordinate(0.0, 170.0), Coordinate(0.0, -170.0))
        assert b == pytest.approx(90.0, abs=1e-9)


class TestRhumbBearing:

    @pytest.mark.parametrize("target,expected", [
        (Coordinate(10.0, 0.0), 0.0),
        (Coordinate(0.0, 10.0), 90.0),
        (Coordinate(-10.0, 0.0), 180.0),
        (Coordinate(0.0, -10.0), 270.0),
    ])
    def test_cardinal_directions(self, target, expected):
        assert rhumb_bearing(Coordinate(0.0, 0.0), target) == pytest.approx(expected, abs=1e-9)

    def test_new_york_to_london(self):
        assert rhumb_bearing(NEW_YORK, LONDON) == pytest.approx(78.0, abs=0.5)

    def test_constant_along_parallel(self):
        """A parallel is a rhumb line: bearing due east at any latitude."""
        b = rhumb_bearing(Coordinate(55.0, -10.0), Coordinate(55.0, 20.0))
        assert b == pytest.approx(90.0, abs=1e-9)

    def test_across_antimeridian_goes_short_way(self):
        b = rhumb_bearing(Coordinate(0.0, 170.0), Coordinate(0.0, -170.0))
        assert b == pytest.approx(90.0, abs=1e-9)

    def test_identical_points_return_zero(self):
        assert rhumb_bearing(LONDON, LONDON) == 0.0

    def test_poles_stay_finite(self):
        b = rhumb_bearing(Coordinate(-90.0, 0.0), Coordinate(90.0, 0.0))
        assert b == pytest.approx(0.0, abs=1e-9)

    def test_range(self):
        for f in _SAMPLE_POINTS:
            for s in _SAMPLE_POINTS:
                b = rhumb_bearing(f, s)
                assert 0.0 <= b < 360.0


# ── Midpoint / antipode / destination ────────────────────────────────

class TestMidpoint:

    def test_on_equator(self):
        m = midpoint(Coordinate(0.0, 0.0), Coordinate(0.0, 90.0))
        assert m.latitude == pytest.approx(0.0, abs=1e-9)
        assert m.longitude == pytest.approx(45.0, abs=1e-9)

    def test_on_meridian(self):
        m = midpoint(Coordinate(10.0, 0.0), Coordinate(-10.0, 0.0))
        assert m.latitude == pytest.approx(0.0, abs=1e-9)
        assert m.longitude == pytest.approx(0.0, abs=1e-9)

    def test_equidistant_from_both_ends(self):
        m = midpoint(NEW_YORK, LONDON)
        assert haversine_distance(NEW_YORK, m) == pytest.approx(haversine_distance(m, LONDON), rel=1e-9)

    def test_longitude_normalized_at_antimeridian(self):
        m = midpoint(Coordinate(0.0, 170.0), Coordinate(0.0, -170.0))
        assert abs(abs(m.longitude) - 180.0) < 1e-9
        assert -180.0 < m.longitude <= 180.0

    def test_antipodal_points_give_deterministic_point(self):
        f = Coordinate(30.0, 10.0)
        s = Coordinate(-30.0, -170.0)
        m = midpoint(f, s)
        assert m == midpoint(f, s)
        assert m.latitude == pytest.approx(60.0, abs=1e-9)
        assert m.longitude == pytest.approx(-170.0, abs=1e-9)
        quarter = math.pi / 2 * EARTH_RADIUS
        assert haversine_distance(f, m) == pytest.approx(quarter, rel=1e-9)
        assert haversine_distance(s, m) == pytest.approx(quarter, rel=1e-9)

    def test_antipodal_on_equator_is_north_pole(self):
        m = midpoint(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
        assert m.latitude == pytest.approx(90.0, abs=1e-9)
        assert not math.isnan(m.longitude)


class TestAntipode:

    def test_negates_both_fields(self):
        assert antipode(NEW_YORK) == Coordinate(-40.7128, 74.0060)

    def test_involution(self):
        for c in _SAMPLE_POINTS:
            assert antipode(antipode(c)) == c


class TestDestinationPoint:

    def test_quarter_circle_east_from_origin(self):
        d = destination_point(Coordinate(0.0, 0.0), 90.0, math.pi / 2 * EARTH_RADIUS)
        assert d.latitude == pytest.approx(0.0, abs=1e-9)
        assert d.longitude == pytest.approx(90.0, abs=1e-9)

    def test_reaches_target_along_initial_bearing(self):
        bearing = great_circle_bearing(NEW_YORK, LONDON)
        distance = haversine_distance(NEW_YORK, LONDON)
        d = destination_point(NEW_YORK, bearing, distance)
        assert d.latitude == pytest.approx(LONDON.latitude, abs=1e-6)
        assert d.longitude == pytest.approx(LONDON.longitude, abs=1e-6)

    def test_zero_distance_is_start(self):
        d = destination_point(SYDNEY, 123.0, 0.0)
        assert d.latitude == pytest.approx(SYDNEY.latitude, abs=1e-12)
        assert d.longitude == pytest.approx(SYDNEY.longitude, abs=1e-12)

    def test_explicit_radius(self):
        d = destination_point(Coordinate(0.0, 0.0), 0.0, math.pi / 4 * MOON_RADIUS, radius=MOON_RADIUS)
        assert d.latitude == pytest.approx(45.0, abs=1e-9)


# ── Horizon ──────────────────────────────────────────────────────────

class TestDistanceToHorizon:

    def test_six_feet_is_about_three_miles(self):
        assert distance_to_horizon(6.0) == pytest.approx(3.0, abs=0.01)

    def test_metric_observer(self):
        d = distance_to_horizon_metric(1.7, radius=EARTH_RADIUS_METRIC)
        assert d == pytest.approx(4.654, abs=0.01)

    def test_zero_height(self):
        assert distance_to_horizon(0.0) == 0.0

    def test_formula(self):
        h = 1000.0 / 5280.0
        expected = math.sqrt(2 * EARTH_RADIUS * h + h**2)
        assert distance_to_horizon(1000.0) == pytest.approx(expected, rel=1e-12)

    def test_follows_selected_radius(self):
        earth = distance_to_horizon(100.0)
        set_planet_radius(MOON_RADIUS)
        assert distance_to_horizon(100.0) < earth

    def test_negative_height_raises(self):
        with pytest.raises(ValueError, match="non-negative"):
            distance_to_horizon(-1.0)


# ── Validation ───────────────────────────────────────────────────────

class TestValidateCoordinate:

    def test_accepts_bounds(self):
        for c in (Coordinate(90.0, 180.0), Coordinate(-90.0, -180.0), NEW_YORK):
            assert validate_coordinate(c) is c

    @pytest.mark.parametrize("lat,lon", [
        (90.1, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0),
        (math.nan, 0.0), (0.0, math.inf),
    ])
    def test_rejects_out_of_range(self, lat, lon):
        with pytest.raises(ValueError):
            validate_coordinate(Coordinate(lat, lon))
