# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interfaces for platform coordinate and calendar types.

Adapters implement these so the domain never depends on how a host
application represents a position or a date.
"""
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class PlatformPosition(Protocol):
    """Any two-field geographic position in decimal degrees."""

    latitude: float
    longitude: float


@runtime_checkable
class CalendarPort(Protocol):
    """Port for reading calendar dates and building UTC timestamps."""

    def date_parts(self, value: Any) -> tuple[int, int, int]:
        """(year, month, day) of ``value`` in UTC."""
        ...

    def timestamp(
        self, year: int, month: int, day: int, hour: int, minute: int,
    ) -> Any:
        """A UTC date value for the given components."""
        ...

    def next_day(self, value: Any) -> Any:
        """The date value 24 hours after ``value``."""
        ...

    def seconds_between(self, start: Any, end: Any) -> float:
        """Signed seconds from ``start`` to ``end``."""
        ...
