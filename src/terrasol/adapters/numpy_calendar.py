# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
numpy.datetime64 calendar adapter.

Lets the solar functions take and return ``numpy.datetime64`` values
(interpreted as UTC, as numpy has no time zones), e.g. when dates come
from a pandas or numpy time axis.
"""
import numpy as np

from terrasol.ports import CalendarPort


class Datetime64Calendar(CalendarPort):
    """CalendarPort over numpy.datetime64 with second resolution."""

    def date_parts(self, value: np.datetime64) -> tuple[int, int, int]:
        day = np.datetime64(value, 'D')
        month_start = day.astype('datetime64[M]')
        year = int(day.astype('datetime64[Y]').astype(int)) + 1970
        month = int(month_start.astype(int)) % 12 + 1
        day_of_month = int((day - month_start).astype(int)) + 1
        return year, month, day_of_month

    def timestamp(
        self, year: int, month: int, day: int, hour: int, minute: int,
    ) -> np.datetime64:
        return np.datetime64(
            f'{year:04d}-{month:02d}-{day:02d}T{hour:02d}:{minute:02d}:00', 's',
        )

    def next_day(self, value: np.datetime64) -> np.datetime64:
        return np.datetime64(value) + np.timedelta64(1, 'D')

    def seconds_between(self, start: np.datetime64, end: np.datetime64) -> float:
        return float((end - start) / np.timedelta64(1, 's'))
