# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunrise, sunset, and day length.

Implements the sunrise/sunset algorithm of the Almanac for Computers
(Nautical Almanac Office, 1990). For a point, a UTC calendar date and a
sun zenith it gives the UTC time at which the centre of the Sun crosses
that zenith. Accuracy is about two minutes between the polar circles.

When the Sun never reaches the zenith on that date (polar night) or
never drops below it (polar day) the event does not exist and the
functions return None. Day duration is 0 in that case.

Dates are read and timestamps built through a CalendarPort; the default
is UtcCalendar (datetime.date / datetime.datetime in, aware UTC
datetime out).
"""
import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any

from terrasol.domain.angles import (
    acos_deg,
    asin_deg,
    atan_deg,
    cos_deg,
    normalize_degrees,
    sin_deg,
    tan_deg,
)
from terrasol.domain.calendar import UTC_CALENDAR
from terrasol.domain.coordinate import Coordinate
from terrasol.ports import CalendarPort

_log = logging.getLogger(__name__)


class SunZenith(Enum):
    """Angle of the Sun's centre from the zenith that defines an event."""
    # Upper limb on the horizon, with refraction.
    OFFICIAL = 90.888888
    # 6° below the horizon: enough light for outdoor activity.
    CIVIL = 96.0
    # 12° below: horizon still visible alongside the bright stars.
    NAUTICAL = 102.0
    # 18° below: sky dark enough for faint stars.
    ASTRONOMICAL = 108.0


class SunPhase(Enum):
    SUNRISE = "sunrise"
    SUNSET = "sunset"


@dataclass(frozen=True)
class SolarDay:
    """Sunrise, sunset and day length for one point and date.

    ``sunset`` is the sunset paired with ``sunrise`` for the duration: if
    the sunset computed for the date falls before sunrise (this happens
    when local day straddles UTC midnight), it is the next date's sunset.
    """
    sunrise: datetime | None
    sunset: datetime | None
    duration_s: float

    @property
    def is_polar(self) -> bool:
        """True when the Sun does not rise or does not set."""
        return self.sunrise is None or self.sunset is None

    @property
    def duration(self) -> timedelta:
        return timedelta(seconds=self.duration_s)


# ── Algorithm steps ──────────────────────────────────────────────────

def day_of_year_terms(year: int, month: int, day: int) -> tuple[float, float, float, float]:
    """
    Day-of-year terms (n1, n2, n3, n) of the almanac method.

    n is the day of the year (1 on January 1st), leap years included.
    """
    n1 = math.floor(275.0 * month / 9.0)
    n2 = math.floor((month + 9.0) / 12.0)
    n3 = 1 + math.floor((year - 4 * math.floor(year / 4.0) + 2) / 3.0)
    n = n1 - (n2 * n3) + day - 30
    return float(n1), float(n2), float(n3), float(n)


def approximate_time(n: float, longitude_hour: float, phase: SunPhase) -> float:
    """Approximate event time t in days, from a 06:00 or 18:00 local guess."""
    if phase is SunPhase.SUNRISE:
        return n + (6.0 - longitude_hour) / 24.0
    return n + (18.0 - longitude_hour) / 24.0


def solar_mean_anomaly(t: float) -> float:
    """Sun's mean anomaly M in degrees."""
    return 0.9856 * t - 3.289


def true_longitude_deg(mean_anomaly: float) -> float:
    """Sun's true ecliptic longitude L in degrees, in [0, 360)."""
    m = mean_anomaly
    lon = m + 1.916 * sin_deg(m) + 0.020 * sin_deg(2 * m) + 282.634
    return normalize_degrees(lon)


def right_ascension_hours(true_longitude: float) -> float:
    """
    Sun's right ascension in hours.

    atan() only returns (-90°, 90°), so RA is moved into the same 90°
    quadrant as L before conversion to hours.
    """
    ra = normalize_degrees(atan_deg(0.91764 * tan_deg(true_longitude)))

    l_quadrant = math.floor(true_longitude / 90.0) * 90.0
    ra_quadrant = math.floor(ra / 90.0) * 90.0
    ra += l_quadrant - ra_quadrant
    return ra / 15.0


def cos_local_hour_angle(true_longitude: float, latitude: float, zenith: SunZenith) -> float:
    """
    Cosine of the Sun's local hour angle at the given zenith.

    Values above 1 mean the Sun never reaches the zenith on that date
    (no sunrise); values below -1 mean it never drops to it (no sunset).
    """
    sin_dec = 0.39782 * sin_deg(true_longitude)
    cos_dec = cos_deg(asin_deg(sin_dec))
    return (cos_deg(zenith.value) - sin_dec * sin_deg(latitude)) / (cos_dec * cos_deg(latitude))


def _wrap_hours(ut: float) -> float:
    if ut >= 24.0:
        ut -= 24.0
    elif ut < 0.0:
        ut += 24.0
    if not 0.0 <= ut < 24.0:
        # Only reachable with longitudes outside [-180, 180].
        _log.debug("UT %.4f h still outside [0, 24) after one wrap", ut)
        ut %= 24.0
    return ut


def utc_event_hours(
    coordinate: Coordinate,
    year: int,
    month: int,
    day: int,
    zenith: SunZenith,
    phase: SunPhase,
) -> float | None:
    """
    UTC hour of a sunrise or sunset, as a fraction in [0, 24).

    Args:
        coordinate: Observer position.
        year, month, day: UTC calendar date.
        zenith: Sun zenith defining the event.
        phase: SUNRISE or SUNSET.

    Returns:
        Decimal UTC hours, or None if the event does not occur.
    """
    _, _, _, n = day_of_year_terms(year, month, day)
    longitude_hour = coordinate.longitude / 15.0

    t = approximate_time(n, longitude_hour, phase)
    true_lon = true_longitude_deg(solar_mean_anomaly(t))
    ra = right_ascension_hours(true_lon)

    cos_h = cos_local_hour_angle(true_lon, coordinate.latitude, zenith)
    if cos_h > 1.0 or cos_h < -1.0:
        _log.debug(
            "No %s at %s on %04d-%02d-%02d (%s zenith): cosH=%.6f",
            phase.value, coordinate, year, month, day, zenith.name.lower(), cos_h,
        )
        return None

    if phase is SunPhase.SUNSET:
        hour_angle = acos_deg(cos_h)
    else:
        hour_angle = 360.0 - acos_deg(cos_h)
    hour_angle /= 15.0

    local_mean_time = hour_angle + ra - 0.06571 * t - 6.622
    return _wrap_hours(local_mean_time - longitude_hour)


# ── Public API ───────────────────────────────────────────────────────

def sun_event_time(
    coordinate: Coordinate,
    on: date | datetime,
    zenith: SunZenith,
    phase: SunPhase,
    *,
    calendar: CalendarPort | None = None,
) -> Any:
    """
    UTC time of sunrise or sunset on a UTC calendar date.

    The result is built from the date of ``on`` with the hour and minute
    of the event; minutes are truncated, not rounded.

    Returns:
        A UTC date value from ``calendar`` (an aware datetime by default),
        or None if the Sun does not cross the zenith on that date.
    """
    cal = calendar or UTC_CALENDAR
    year, month, day = cal.date_parts(on)
    ut = utc_event_hours(coordinate, year, month, day, zenith, phase)
    if ut is None:
        return None

    hour = math.floor(ut)
    minute = int((ut - hour) * 60)
    return cal.timestamp(year, month, day, hour, minute)


def sunrise_time(
    coordinate: Coordinate,
    on: date | datetime,
    zenith: SunZenith = SunZenith.OFFICIAL,
    *,
    calendar: CalendarPort | None = None,
) -> Any:
    """UTC sunrise on a UTC date, or None if the Sun does not rise."""
    return sun_event_time(coordinate, on, zenith, SunPhase.SUNRISE, calendar=calendar)


def sunset_time(
    coordinate: Coordinate,
    on: date | datetime,
    zenith: SunZenith = SunZenith.OFFICIAL,
    *,
    calendar: CalendarPort | None = None,
) -> Any:
    """UTC sunset on a UTC date, or None if the Sun does not set."""
    return sun_event_time(coordinate, on, zenith, SunPhase.SUNSET, calendar=calendar)


def solar_day(
    coordinate: Coordinate,
    on: date | datetime,
    zenith: SunZenith = SunZenith.OFFICIAL,
    *,
    calendar: CalendarPort | None = None,
) -> SolarDay:
    """
    Sunrise, sunset and day length for one date.

    If the sunset computed for ``on`` is earlier than its sunrise, the
    sunset of the following date is used instead. If either event is
    missing the duration is 0.
    """
    cal = calendar or UTC_CALENDAR
    sunrise = sunrise_time(coordinate, on, zenith, calendar=cal)
    sunset = sunset_time(coordinate, on, zenith, calendar=cal)

    if sunrise is not None and sunset is not None and sunrise > sunset:
        sunset = sunset_time(coordinate, cal.next_day(on), zenith, calendar=cal)

    if sunrise is None or sunset is None:
        return SolarDay(sunrise=sunrise, sunset=sunset, duration_s=0.0)

    return SolarDay(
        sunrise=sunrise,
        sunset=sunset,
        duration_s=cal.seconds_between(sunrise, sunset),
    )


def day_duration(
    coordinate: Coordinate,
    on: date | datetime,
    zenith: SunZenith = SunZenith.OFFICIAL,
    *,
    calendar: CalendarPort | None = None,
) -> float:
    """Seconds from sunrise to sunset; 0 during polar day or polar night."""
    return solar_day(coordinate, on, zenith, calendar=calendar).duration_s
