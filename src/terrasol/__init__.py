# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
terrasol

Spherical geodesy and sunrise/sunset times for any point on a planet.
Includes haversine, equirectangular and rhumb-line distances, great-circle
and rhumb bearings, midpoints, destination points, horizon distance,
degrees/minutes/seconds conversion, and the Almanac for Computers
sunrise/sunset algorithm with official, civil, nautical and astronomical
zeniths.
"""

from terrasol.domain.planet import (
    PlanetConstants,
    EARTH_RADIUS,
    EARTH_RADIUS_METRIC,
    MOON_RADIUS,
    MOON_RADIUS_METRIC,
    MARS_RADIUS,
    MARS_RADIUS_METRIC,
    get_planet_radius,
    set_planet_radius,
    reset_planet_radius,
    planet_radius,
)
from terrasol.domain.angles import (
    DegreesMinutesSeconds,
    to_dms,
    to_decimal,
)
from terrasol.domain.coordinate import Coordinate
from terrasol.domain.geodesy import (
    validate_coordinate,
    haversine_distance,
    equirectangular_distance,
    rhumb_distance,
    great_circle_bearing,
    rhumb_bearing,
    midpoint,
    antipode,
    destination_point,
    distance_to_horizon,
    distance_to_horizon_metric,
)
from terrasol.domain.sun_times import (
    SunZenith,
    SunPhase,
    SolarDay,
    sunrise_time,
    sunset_time,
    sun_event_time,
    solar_day,
    day_duration,
)
from terrasol.domain.calendar import UtcCalendar

__version__ = "1.0.0"

__all__ = [
    "PlanetConstants",
    "EARTH_RADIUS",
    "EARTH_RADIUS_METRIC",
    "MOON_RADIUS",
    "MOON_RADIUS_METRIC",
    "MARS_RADIUS",
    "MARS_RADIUS_METRIC",
    "get_planet_radius",
    "set_planet_radius",
    "reset_planet_radius",
    "planet_radius",
    "DegreesMinutesSeconds",
    "to_dms",
    "to_decimal",
    "Coordinate",
    "validate_coordinate",
    "haversine_distance",
    "equirectangular_distance",
    "rhumb_distance",
    "great_circle_bearing",
    "rhumb_bearing",
    "midpoint",
    "antipode",
    "destination_point",
    "distance_to_horizon",
    "distance_to_horizon_metric",
    "SunZenith",
    "SunPhase",
    "SolarDay",
    "sunrise_time",
    "sunset_time",
    "sun_event_time",
    "solar_day",
    "day_duration",
    "UtcCalendar",
]
