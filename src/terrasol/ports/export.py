# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for solar table export.

Adapters implement this to write a run of SolarDay results in various
formats.
"""
from datetime import date
from typing import Protocol, runtime_checkable

from terrasol.domain.sun_times import SolarDay


@runtime_checkable
class SolarTableExporter(Protocol):
    """Port for exporting per-date sunrise/sunset results to file."""

    def export(
        self,
        rows: list[tuple[date, SolarDay]],
        path: str,
    ) -> int:
        """
        Export one row per date.

        Args:
            rows: (UTC date, SolarDay) pairs in output order.
            path: Output file path.

        Returns:
            Number of rows written.
        """
        ...
