# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Conversions between Coordinate and host-platform position types.

Pure field copies, no validation. GeoJSON positions are [lon, lat] per
RFC 7946; any altitude element is ignored.
"""
from typing import Any, Callable, TypeVar

from terrasol.domain.coordinate import Coordinate
from terrasol.ports import PlatformPosition

P = TypeVar('P')


def from_platform(position: PlatformPosition) -> Coordinate:
    """Coordinate from any object with ``latitude`` and ``longitude``."""
    return Coordinate(latitude=float(position.latitude), longitude=float(position.longitude))


def to_platform(coordinate: Coordinate, factory: Callable[..., P]) -> P:
    """Build a platform position with ``factory(latitude=..., longitude=...)``."""
    return factory(latitude=coordinate.latitude, longitude=coordinate.longitude)


def from_latlon_tuple(pair: tuple[float, float]) -> Coordinate:
    lat, lon = pair
    return Coordinate(latitude=float(lat), longitude=float(lon))


def to_latlon_tuple(coordinate: Coordinate) -> tuple[float, float]:
    return (coordinate.latitude, coordinate.longitude)


def from_geojson_point(geometry: dict[str, Any]) -> Coordinate:
    """
    Coordinate from a GeoJSON Point geometry.

    Raises:
        ValueError: If the geometry is not a Point with at least two
            coordinates.
    """
    if geometry.get('type') != 'Point':
        raise ValueError(f"expected a GeoJSON Point, got {geometry.get('type')!r}")
    position = geometry.get('coordinates') or []
    if len(position) < 2:
        raise ValueError(f"GeoJSON Point needs [lon, lat], got {position!r}")
    return Coordinate(latitude=float(position[1]), longitude=float(position[0]))


def to_geojson_point(coordinate: Coordinate) -> dict[str, Any]:
    return {
        'type': 'Point',
        'coordinates': [coordinate.longitude, coordinate.latitude],
    }
