# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planet radius constants and the process-wide radius selector.

Every distance in terrasol is an angle times a radius, so the unit of a
result is the unit of the radius that produced it. Imperial radii are in
miles, metric radii in kilometers.

Functions that need a radius accept an explicit ``radius`` keyword. When
it is omitted they call get_planet_radius() at call time, so a change made
with set_planet_radius() is visible to the very next call.
"""
import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

MILES_TO_KM: float = 1.60934
FEET_PER_MILE: float = 5280.0
METERS_PER_KM: float = 1000.0


@dataclass(frozen=True)
class _PlanetConstants:
    """Mean planetary radii and coordinate bounds."""
    EARTH_RADIUS: float = 3959.0                          # mi
    EARTH_RADIUS_METRIC: float = 3959.0 * MILES_TO_KM     # km
    MOON_RADIUS: float = 1079.0                           # mi
    MOON_RADIUS_METRIC: float = 1079.0 * MILES_TO_KM      # km
    MARS_RADIUS: float = 2106.0                           # mi
    MARS_RADIUS_METRIC: float = 2106.0 * MILES_TO_KM      # km
    MIN_LATITUDE: float = -90.0
    MAX_LATITUDE: float = 90.0
    MIN_LONGITUDE: float = -180.0
    MAX_LONGITUDE: float = 180.0


PlanetConstants: _PlanetConstants = _PlanetConstants()

EARTH_RADIUS = PlanetConstants.EARTH_RADIUS
EARTH_RADIUS_METRIC = PlanetConstants.EARTH_RADIUS_METRIC
MOON_RADIUS = PlanetConstants.MOON_RADIUS
MOON_RADIUS_METRIC = PlanetConstants.MOON_RADIUS_METRIC
MARS_RADIUS = PlanetConstants.MARS_RADIUS
MARS_RADIUS_METRIC = PlanetConstants.MARS_RADIUS_METRIC

# (imperial, metric) by body name, used by the CLI.
PLANET_RADII: dict[str, tuple[float, float]] = {
    'earth': (EARTH_RADIUS, EARTH_RADIUS_METRIC),
    'moon': (MOON_RADIUS, MOON_RADIUS_METRIC),
    'mars': (MARS_RADIUS, MARS_RADIUS_METRIC),
}

_planet_radius: float = EARTH_RADIUS


def get_planet_radius() -> float:
    """Radius currently selected for distance calculations."""
    return _planet_radius


def set_planet_radius(radius: float) -> None:
    """
    Select the radius used by distance functions called without ``radius``.

    Raises:
        ValueError: If radius is not a positive finite number.
    """
    global _planet_radius
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"radius must be positive and finite, got {radius}")
    _planet_radius = float(radius)


def reset_planet_radius() -> None:
    """Restore the default selection (Earth, miles)."""
    set_planet_radius(EARTH_RADIUS)


@contextmanager
def planet_radius(radius: float) -> Iterator[float]:
    """Temporarily select a radius; the previous one is restored on exit."""
    previous = get_planet_radius()
    set_planet_radius(radius)
    try:
        yield radius
    finally:
        set_planet_radius(previous)


def resolve_radius(radius: float | None) -> float:
    """Explicit radius if given, else the current selection."""
    if radius is None:
        return get_planet_radius()
    return radius
