# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geographic coordinate value type.

A Coordinate is a latitude/longitude pair in decimal degrees. Its methods
are thin forwarders to the functions in terrasol.domain.geodesy and
terrasol.domain.sun_times; those modules import this one, so the
forwarders import them at call time.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import TYPE_CHECKING

from terrasol.domain.angles import DegreesMinutesSeconds, to_decimal, to_dms

if TYPE_CHECKING:
    from terrasol.domain.sun_times import SolarDay, SunZenith


@dataclass(frozen=True)
class Coordinate:
    """A point on a sphere: latitude in [-90, 90], longitude in [-180, 180]."""
    latitude: float
    longitude: float

    @classmethod
    def from_dms(
        cls,
        latitude: tuple[float, float, float],
        longitude: tuple[float, float, float],
    ) -> Coordinate:
        """Build from (degrees, minutes, seconds) triples."""
        return cls(latitude=to_decimal(*latitude), longitude=to_decimal(*longitude))

    def to_dms(self) -> tuple[DegreesMinutesSeconds, DegreesMinutesSeconds]:
        """(latitude, longitude) as degrees/minutes/seconds."""
        return to_dms(self.latitude), to_dms(self.longitude)

    # ── Distances ────────────────────────────────────────────────────

    def distance_to_haversine(self, other: Coordinate, *, radius: float | None = None) -> float:
        """Great-circle distance. Units match the planet radius units."""
        from terrasol.domain import geodesy
        return geodesy.haversine_distance(self, other, radius=radius)

    def distance_to_equirectangular(self, other: Coordinate, *, radius: float | None = None) -> float:
        """Equirectangular approximation. Units match the planet radius units."""
        from terrasol.domain import geodesy
        return geodesy.equirectangular_distance(self, other, radius=radius)

    def distance_to_rhumb(self, other: Coordinate, *, radius: float | None = None) -> float:
        from terrasol.domain import geodesy
        return geodesy.rhumb_distance(self, other, radius=radius)

    # ── Bearings and derived points ──────────────────────────────────

    def heading_to(self, other: Coordinate) -> float:
        """Initial great-circle bearing to ``other`` in degrees [0, 360)."""
        from terrasol.domain import geodesy
        return geodesy.great_circle_bearing(self, other)

    def rhumb_heading_to(self, other: Coordinate) -> float:
        from terrasol.domain import geodesy
        return geodesy.rhumb_bearing(self, other)

    def midpoint_to(self, other: Coordinate) -> Coordinate:
        from terrasol.domain import geodesy
        return geodesy.midpoint(self, other)

    def antipode(self) -> Coordinate:
        """The point on the other side of the planet."""
        from terrasol.domain import geodesy
        return geodesy.antipode(self)

    def destination(
        self, bearing_deg: float, distance: float, *, radius: float | None = None,
    ) -> Coordinate:
        from terrasol.domain import geodesy
        return geodesy.destination_point(self, bearing_deg, distance, radius=radius)

    # ── Sun ──────────────────────────────────────────────────────────

    def sunrise_time(self, on: date | datetime, zenith: SunZenith | None = None) -> datetime | None:
        """UTC sunrise on the given UTC date, or None if the sun does not rise."""
        from terrasol.domain import sun_times
        return sun_times.sunrise_time(self, on, zenith or sun_times.SunZenith.OFFICIAL)

    def sunset_time(self, on: date | datetime, zenith: SunZenith | None = None) -> datetime | None:
        """UTC sunset on the given UTC date, or None if the sun does not set."""
        from terrasol.domain import sun_times
        return sun_times.sunset_time(self, on, zenith or sun_times.SunZenith.OFFICIAL)

    def day_duration(self, on: date | datetime, zenith: SunZenith | None = None) -> float:
        """Seconds between sunrise and sunset; 0 during polar day or night."""
        from terrasol.domain import sun_times
        return sun_times.day_duration(self, on, zenith or sun_times.SunZenith.OFFICIAL)

    def solar_day(self, on: date | datetime, zenith: SunZenith | None = None) -> SolarDay:
        from terrasol.domain import sun_times
        return sun_times.solar_day(self, on, zenith or sun_times.SunZenith.OFFICIAL)
