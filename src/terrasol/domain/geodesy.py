# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Spherical distance, bearing, and point formulas.

All functions work on a sphere. Distances are central angles multiplied
by a planet radius: pass ``radius=`` explicitly, or leave it out to use
the radius selected in terrasol.domain.planet at the time of the call.
Results are in the units of that radius.

Inputs are not range-checked; call validate_coordinate() first when the
data comes from outside.
"""
import logging
import math

import numpy as np

from terrasol.domain.angles import (
    combine_arc_lengths,
    degrees_to_radians,
    normalize_degrees,
    normalize_longitude,
    radians_to_degrees,
)
from terrasol.domain.coordinate import Coordinate
from terrasol.domain.planet import (
    FEET_PER_MILE,
    METERS_PER_KM,
    PlanetConstants,
    resolve_radius,
)

_log = logging.getLogger(__name__)

# Latitudes are clamped this far inside the poles before Mercator projection.
_POLE_LIMIT_RAD = math.pi / 2 - 1e-9

# dot(u1, u2) at or below this counts as antipodal for midpoint().
_ANTIPODAL_DOT = -1.0 + 1e-12


def validate_coordinate(coordinate: Coordinate) -> Coordinate:
    """
    Check that a coordinate lies within latitude/longitude bounds.

    Raises:
        ValueError: If either field is non-finite or out of range.

    Returns:
        The same coordinate, for chaining.
    """
    lat, lon = coordinate.latitude, coordinate.longitude
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise ValueError(f"coordinate must be finite, got ({lat}, {lon})")
    if not PlanetConstants.MIN_LATITUDE <= lat <= PlanetConstants.MAX_LATITUDE:
        raise ValueError(f"latitude must be in [-90, 90], got {lat}")
    if not PlanetConstants.MIN_LONGITUDE <= lon <= PlanetConstants.MAX_LONGITUDE:
        raise ValueError(f"longitude must be in [-180, 180], got {lon}")
    return coordinate


# ── Distances ────────────────────────────────────────────────────────

def central_angle_rad(f: Coordinate, s: Coordinate) -> float:
    """Haversine central angle between two points, in radians."""
    lat1 = degrees_to_radians(f.latitude)
    lat2 = degrees_to_radians(s.latitude)
    d_lat = abs(lat1 - lat2)
    d_lon = abs(degrees_to_radians(f.longitude) - degrees_to_radians(s.longitude))

    a = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    a = min(a, 1.0)
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_distance(f: Coordinate, s: Coordinate, *, radius: float | None = None) -> float:
    """
    Great-circle distance using the haversine formula.

    Args:
        f: First point.
        s: Second point.
        radius: Sphere radius; defaults to the selected planet radius.

    Returns:
        Distance in the units of the radius. 0 when f == s.
    """
    return central_angle_rad(f, s) * resolve_radius(radius)


def equirectangular_distance(f: Coordinate, s: Coordinate, *, radius: float | None = None) -> float:
    """
    Distance using the equirectangular approximation.

    Treats the latitude and longitude differences (degrees) as the legs of
    a flat right triangle. Cheaper than haversine and much less accurate
    except over short distances.
    """
    d_lon = abs(f.longitude - s.longitude)
    d_lat = abs(f.latitude - s.latitude)
    combined_arc = combine_arc_lengths(d_lon, d_lat)
    return resolve_radius(radius) * degrees_to_radians(combined_arc)


def _mercator_latitude(lat_rad: float) -> float:
    """Isometric latitude ψ = ln(tan(π/4 + φ/2))."""
    lat_rad = max(-_POLE_LIMIT_RAD, min(_POLE_LIMIT_RAD, lat_rad))
    return math.log(math.tan(math.pi / 4 + lat_rad / 2))


def _short_way_lon_delta(d_lon_rad: float) -> float:
    if d_lon_rad > math.pi:
        return d_lon_rad - 2 * math.pi
    if d_lon_rad < -math.pi:
        return d_lon_rad + 2 * math.pi
    return d_lon_rad


def rhumb_distance(f: Coordinate, s: Coordinate, *, radius: float | None = None) -> float:
    """Length of the constant-bearing path from f to s."""
    lat1 = degrees_to_radians(f.latitude)
    lat2 = degrees_to_radians(s.latitude)
    d_lat = lat2 - lat1
    d_lon = _short_way_lon_delta(degrees_to_radians(s.longitude - f.longitude))
    d_psi = _mercator_latitude(lat2) - _mercator_latitude(lat1)

    # East-west lines have d_psi -> 0; the limit of d_lat / d_psi is cos(lat).
    q = d_lat / d_psi if abs(d_psi) > 1e-12 else math.cos(lat1)

    return math.sqrt(d_lat**2 + q**2 * d_lon**2) * resolve_radius(radius)


# ── Bearings ─────────────────────────────────────────────────────────

def great_circle_bearing(f: Coordinate, s: Coordinate) -> float:
    """
    Initial great-circle bearing (forward azimuth) from f to s.

    Returns:
        Degrees clockwise from north in [0, 360). Coincident points have
        no defined bearing and return 0.0.
    """
    if f.latitude == s.latitude and f.longitude == s.longitude:
        return 0.0

    lat_f = degrees_to_radians(f.latitude)
    lat_s = degrees_to_radians(s.latitude)
    d_lon = degrees_to_radians(s.longitude - f.longitude)

    y = math.sin(d_lon) * math.cos(lat_s)
    x = math.cos(lat_f) * math.sin(lat_s) - math.sin(lat_f) * math.cos(lat_s) * math.cos(d_lon)
    return normalize_degrees(radians_to_degrees(math.atan2(y, x)) + 360.0)


def rhumb_bearing(f: Coordinate, s: Coordinate) -> float:
    """
    Constant bearing of the rhumb line (loxodrome) from f to s.

    θ = atan2(Δλ, Δψ) with Δψ the difference of Mercator-projected
    latitudes and Δλ taken the short way round the antimeridian.

    Returns:
        Degrees clockwise from north in [0, 360). Coincident points
        return 0.0.
    """
    if f.latitude == s.latitude and f.longitude == s.longitude:
        return 0.0

    d_psi = (
        _mercator_latitude(degrees_to_radians(s.latitude))
        - _mercator_latitude(degrees_to_radians(f.latitude))
    )
    d_lon = _short_way_lon_delta(degrees_to_radians(s.longitude - f.longitude))
    return normalize_degrees(radians_to_degrees(math.atan2(d_lon, d_psi)) + 360.0)


# ── Derived points ───────────────────────────────────────────────────

def antipode(coordinate: Coordinate) -> Coordinate:
    """
    The "opposite" coordinate (-latitude, -longitude).

    This reflects through the equator and the prime meridian. It is exact
    and its own inverse. It is not the point diametrically through the
    sphere, which is (-latitude, longitude ± 180); midpoint() treats that
    point as antipodal.
    """
    return Coordinate(latitude=-coordinate.latitude, longitude=-coordinate.longitude)


def _unit_vector(coordinate: Coordinate) -> np.ndarray:
    lat = degrees_to_radians(coordinate.latitude)
    lon = degrees_to_radians(coordinate.longitude)
    return np.array([
        math.cos(lat) * math.cos(lon),
        math.cos(lat) * math.sin(lon),
        math.sin(lat),
    ])


def _destination_angular(start: Coordinate, bearing_rad: float, delta: float) -> Coordinate:
    lat1 = degrees_to_radians(start.latitude)
    lon1 = degrees_to_radians(start.longitude)

    sin_lat2 = (
        math.sin(lat1) * math.cos(delta)
        + math.cos(lat1) * math.sin(delta) * math.cos(bearing_rad)
    )
    sin_lat2 = max(-1.0, min(1.0, sin_lat2))
    lat2 = math.asin(sin_lat2)
    lon2 = lon1 + math.atan2(
        math.sin(bearing_rad) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * sin_lat2,
    )
    return Coordinate(
        latitude=radians_to_degrees(lat2),
        longitude=normalize_longitude(radians_to_degrees(lon2)),
    )


def midpoint(f: Coordinate, s: Coordinate) -> Coordinate:
    """
    Halfway point along the great circle from f to s.

    Antipodal points are joined by infinitely many great circles, so the
    midpoint is not unique. For those inputs the result is the point a
    quarter circle due north of f, which lies on the meridian great
    circle through both points.

    Returns:
        Coordinate with longitude in (-180, 180].
    """
    if float(np.dot(_unit_vector(f), _unit_vector(s))) <= _ANTIPODAL_DOT:
        _log.debug("Antipodal midpoint requested for %s and %s", f, s)
        return _destination_angular(f, 0.0, math.pi / 2)

    lat1 = degrees_to_radians(f.latitude)
    lat2 = degrees_to_radians(s.latitude)
    lon1 = degrees_to_radians(f.longitude)
    d_lon = degrees_to_radians(s.longitude - f.longitude)

    bx = math.cos(lat2) * math.cos(d_lon)
    by = math.cos(lat2) * math.sin(d_lon)

    lat_m = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by**2),
    )
    lon_m = lon1 + math.atan2(by, math.cos(lat1) + bx)

    return Coordinate(
        latitude=radians_to_degrees(lat_m),
        longitude=normalize_longitude(radians_to_degrees(lon_m)),
    )


def destination_point(
    start: Coordinate,
    bearing_deg: float,
    distance: float,
    *,
    radius: float | None = None,
) -> Coordinate:
    """
    Point reached by travelling ``distance`` along a great circle.

    Args:
        start: Starting point.
        bearing_deg: Initial bearing, degrees clockwise from north.
        distance: Distance in the units of the radius.
        radius: Sphere radius; defaults to the selected planet radius.

    Returns:
        Coordinate with longitude in (-180, 180].
    """
    delta = distance / resolve_radius(radius)
    return _destination_angular(start, degrees_to_radians(bearing_deg), delta)


# ── Horizon ──────────────────────────────────────────────────────────

def distance_to_horizon(
    height: float,
    *,
    unit_divisor: float = FEET_PER_MILE,
    radius: float | None = None,
) -> float:
    """
    Geometric distance to the horizon, ignoring refraction.

    sqrt(2·R·h/u + (h/u)²), with u converting ``height`` into radius
    units. The default pairs feet with a radius in miles; the height and
    radius units are not checked against each other.

    Raises:
        ValueError: If height is negative.
    """
    if height < 0:
        raise ValueError(f"height must be non-negative, got {height}")
    h = height / unit_divisor
    return math.sqrt(2 * resolve_radius(radius) * h + h**2)


def distance_to_horizon_metric(height: float, *, radius: float | None = None) -> float:
    """Horizon distance in km for a height in meters (radius in km)."""
    return distance_to_horizon(height, unit_divisor=METERS_PER_KM, radius=radius)
