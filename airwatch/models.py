"""Zone and daily-record data structures for air quality monitoring."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterator

HISTORY_DAYS = 30
POLLUTANT_COUNT = 4
ZONE_NAMES = ("Norte", "Centro Norte", "Sur", "Centro Sur", "Valles")
POLLUTANT_NAMES = ("CO(ppb)", "SO2(ppb)", "NO2(ppb)", "PM2.5(µg/m³)")
POLLUTANT_SYMBOLS = ("CO", "SO2", "NO2", "PM2.5")
WHO_LIMITS = (3490.0, 15.0, 13.3, 15.0)


def _zeros() -> list[float]:
    return [0.0] * POLLUTANT_COUNT


@dataclass
class DailyRecord:
    """One day's pollutant levels and weather conditions for a zone."""

    date: str = ""
    pollutants: list[float] = field(default_factory=_zeros)
    temperature: float = 0.0
    humidity: float = 0.0
    wind: float = 0.0

    def is_empty(self) -> bool:
        """Return True when no date has been recorded."""
        return not self.date


def _empty_history() -> list[DailyRecord]:
    return [DailyRecord() for _ in range(HISTORY_DAYS)]


@dataclass
class Zone:
    """A monitored zone with a fixed-size history and its latest reading."""

    name: str
    history: list[DailyRecord] = field(default_factory=_empty_history)
    current: DailyRecord = field(default_factory=DailyRecord)

    def reset(self) -> None:
        """Clear the current reading and the whole history."""
        self.history = _empty_history()
        self.current = DailyRecord()

    def record(self, reading: DailyRecord) -> int | None:
        """Make ``reading`` current and store it in the first free history slot.

        Returns the slot index used, or None when the history is full.
        """
        self.current = copy.deepcopy(reading)
        for index, entry in enumerate(self.history):
            if entry.is_empty():
                self.history[index] = copy.deepcopy(reading)
                return index
        return None

    def filled_history(self) -> Iterator[DailyRecord]:
        """Yield the history records that hold data, in slot order."""
        return (entry for entry in self.history if not entry.is_empty())


def new_zones() -> list[Zone]:
    """Create the standard set of empty zones."""
    return [Zone(name) for name in ZONE_NAMES]


def reset_zones(zones: list[Zone]) -> None:
    """Reset every zone and restore its standard name."""
    for zone, name in zip(zones, ZONE_NAMES):
        zone.name = name
        zone.reset()


def validate_date(text: str) -> str:
    """Check that ``text`` is a DDMMYYYY date of exactly eight digits."""
    if len(text) != 8:
        raise ValueError("date must have exactly 8 digits (DDMMAAAA)")
    if any(char not in "0123456789" for char in text):
        raise ValueError("date must contain only digits")
    return text