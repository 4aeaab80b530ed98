# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
CSV solar table exporter.

Writes one row per date with UTC sunrise, sunset and day length.
External dependencies (csv, file I/O) are confined to this adapter.
"""
import csv
import logging
from datetime import date, datetime, timedelta

from terrasol.domain.coordinate import Coordinate
from terrasol.domain.sun_times import SolarDay, SunZenith, solar_day
from terrasol.ports.export import SolarTableExporter

logger = logging.getLogger(__name__)

_HEADER = ['date', 'sunrise_utc', 'sunset_utc', 'day_length_h']


def build_solar_table(
    coordinate: Coordinate,
    start: date,
    days: int,
    zenith: SunZenith = SunZenith.OFFICIAL,
) -> list[tuple[date, SolarDay]]:
    """SolarDay for ``days`` consecutive UTC dates from ``start``."""
    if days < 1:
        raise ValueError(f"days must be >= 1, got {days}")
    return [
        (start + timedelta(days=i), solar_day(coordinate, start + timedelta(days=i), zenith))
        for i in range(days)
    ]


def _format_time(value: datetime | None) -> str:
    return value.strftime('%Y-%m-%dT%H:%MZ') if value is not None else ''


class CsvSolarTableExporter(SolarTableExporter):
    """Exports a solar table to CSV. Missing events are empty cells."""

    def export(
        self,
        rows: list[tuple[date, SolarDay]],
        path: str,
    ) -> int:
        with open(path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(_HEADER)

            polar_rows = 0
            for day, result in rows:
                if result.is_polar:
                    polar_rows += 1
                writer.writerow([
                    day.isoformat(),
                    _format_time(result.sunrise),
                    _format_time(result.sunset),
                    f'{result.duration_s / 3600.0:.4f}',
                ])

        if polar_rows:
            logger.info("%d of %d dates have no sunrise or sunset", polar_rows, len(rows))
        return len(rows)
