# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Default UTC calendar for the solar algorithm.

Reads (year, month, day) from ``datetime.date``/``datetime.datetime``
values and builds timezone-aware UTC datetimes. Naive datetimes are
taken to be UTC, aware ones are converted to UTC first.
"""
from datetime import date, datetime, timedelta, timezone

from terrasol.ports import CalendarPort


class UtcCalendar(CalendarPort):
    """CalendarPort implementation over the standard datetime types."""

    def date_parts(self, value: date) -> tuple[int, int, int]:
        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            else:
                value = value.astimezone(timezone.utc)
        return value.year, value.month, value.day

    def timestamp(
        self, year: int, month: int, day: int, hour: int, minute: int,
    ) -> datetime:
        return datetime(year, month, day, hour, minute, tzinfo=timezone.utc)

    def next_day(self, value: date) -> date:
        return value + timedelta(days=1)

    def seconds_between(self, start: datetime, end: datetime) -> float:
        return (end - start).total_seconds()


UTC_CALENDAR = UtcCalendar()
