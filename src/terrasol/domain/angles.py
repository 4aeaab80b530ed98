# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Angle helpers shared by the geodesy and solar modules.

Degree-valued trigonometry, angle normalization, and conversion between
decimal degrees and degrees/minutes/seconds.

Only stdlib math and dataclasses.
"""
import math
from dataclasses import dataclass


def degrees_to_radians(degrees: float) -> float:
    return degrees * (math.pi / 180.0)


def radians_to_degrees(radians: float) -> float:
    return (180.0 / math.pi) * radians


# ── Degree-valued trigonometry ───────────────────────────────────────

def sin_deg(degrees: float) -> float:
    return math.sin(degrees_to_radians(degrees % 360.0))


def cos_deg(degrees: float) -> float:
    return math.cos(degrees_to_radians(degrees % 360.0))


def tan_deg(degrees: float) -> float:
    return math.tan(degrees_to_radians(degrees % 360.0))


def atan_deg(value: float) -> float:
    """Arctangent in degrees, range (-90, 90)."""
    return radians_to_degrees(math.atan(value))


def acos_deg(value: float) -> float:
    """Arccosine in degrees, range [0, 180]. Value must lie in [-1, 1]."""
    return radians_to_degrees(math.acos(value))


def asin_deg(value: float) -> float:
    """Arcsine in degrees, range [-90, 90]. Value must lie in [-1, 1]."""
    return radians_to_degrees(math.asin(value))


# ── Normalization ────────────────────────────────────────────────────

def normalize_degrees(angle_deg: float) -> float:
    """Reduce an angle into [0, 360)."""
    result = angle_deg % 360.0
    # -1e-20 % 360.0 rounds to 360.0
    if result >= 360.0:
        result = 0.0
    return result


def normalize_longitude(lon_deg: float) -> float:
    """Reduce a longitude into (-180, 180]."""
    result = (lon_deg + 180.0) % 360.0 - 180.0
    if result <= -180.0:
        result += 360.0
    return result


def combine_arc_lengths(arc_one: float, arc_two: float) -> float:
    """Euclidean norm of two arc lengths treated as right-triangle legs."""
    return math.sqrt(arc_one**2 + arc_two**2)


# ── Degrees / minutes / seconds ──────────────────────────────────────

@dataclass(frozen=True)
class DegreesMinutesSeconds:
    """Sexagesimal angle.

    The sign of the angle is carried on ``degrees``; minutes and seconds
    are always non-negative. An angle in (-1, 0) has ``degrees == -0.0``,
    so the sign survives even when the whole-degree part is zero.
    """
    degrees: float
    minutes: float
    seconds: float

    @property
    def is_negative(self) -> bool:
        return math.copysign(1.0, self.degrees) < 0

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.degrees, self.minutes, self.seconds)

    def __iter__(self):
        return iter(self.as_tuple())


def to_dms(decimal_degrees: float) -> DegreesMinutesSeconds:
    """
    Convert decimal degrees to degrees, minutes, seconds by truncation.

    The magnitude is split as floor(|x|), floor(frac * 60) and the
    remaining fraction * 60; the sign of x is then applied to degrees.

    Args:
        decimal_degrees: Angle in decimal degrees.

    Returns:
        DegreesMinutesSeconds with non-negative minutes and seconds.
    """
    magnitude = abs(decimal_degrees)
    degrees = math.floor(magnitude)
    fractional_minutes = (magnitude - degrees) * 60.0
    minutes = math.floor(fractional_minutes)
    seconds = (fractional_minutes - minutes) * 60.0
    return DegreesMinutesSeconds(
        degrees=math.copysign(float(degrees), decimal_degrees),
        minutes=float(minutes),
        seconds=seconds,
    )


def to_decimal(degrees: float, minutes: float, seconds: float) -> float:
    """
    Convert degrees, minutes, seconds to decimal degrees.

    degrees + minutes/60 + seconds/3600 for a non-negative angle. A
    negative (or negative-zero) ``degrees`` negates the whole angle, the
    inverse of to_dms().
    """
    magnitude = abs(degrees) + minutes / 60.0 + seconds / 3600.0
    return math.copysign(magnitude, degrees)
