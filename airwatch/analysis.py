"""Averages, weighted predictions and WHO limit checks."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Sequence

from airwatch.models import (
    HISTORY_DAYS,
    POLLUTANT_COUNT,
    POLLUTANT_SYMBOLS,
    WHO_LIMITS,
    ZONE_NAMES,
    DailyRecord,
    Zone,
)

HISTORY_FILE = "datoshistoricos.txt"

_NUMBER = r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_ROW = re.compile(r"([^,]+),([^,]+)," + ",".join([_NUMBER] * POLLUTANT_COUNT))

_WEIGHTS = [HISTORY_DAYS - day for day in range(HISTORY_DAYS)]
_WEIGHT_TOTAL = float(sum(_WEIGHTS))


def adjustment_factor(reading: DailyRecord) -> float:
    """Return the weather multiplier: +5% each for heat, dryness and calm air."""
    factor = 1.0
    if reading.temperature > 30:
        factor += 0.05
    if reading.humidity < 40:
        factor += 0.05
    if reading.wind < 5:
        factor += 0.05
    return factor


def stored_averages(zones: Sequence[Zone]) -> list[list[float]]:
    """Average each pollutant over the full history length for every zone."""
    return [
        [
            sum(record.pollutants[j] for record in zone.history) / HISTORY_DAYS
            for j in range(POLLUTANT_COUNT)
        ]
        for zone in zones
    ]


def _weighted(rows: Sequence[Sequence[float]]) -> list[float]:
    return [
        sum(row[j] * weight for row, weight in zip(rows, _WEIGHTS)) / _WEIGHT_TOTAL
        for j in range(POLLUTANT_COUNT)
    ]


def predict_zones(zones: Sequence[Zone]) -> list[list[float]]:
    """Predict next-day levels for each zone from its stored history."""
    predictions = []
    for zone in zones:
        factor = adjustment_factor(zone.current)
        weighted = _weighted([record.pollutants for record in zone.history])
        predictions.append([value * factor for value in weighted])
    return predictions


def read_zone_history(
    path: str | Path, zone_name: str
) -> list[tuple[float, float, float, float]]:
    """Read the pollutant rows listed under ``zone_name`` in a history file.

    Rows follow the zone's header line until another zone's header appears.
    Comment lines (``#``), blank lines and malformed rows are skipped.
    Raises FileNotFoundError when the file does not exist.
    """
    rows: list[tuple[float, float, float, float]] = []
    found = False
    others = {name for name in ZONE_NAMES if name != zone_name}
    with open(path, encoding="utf-8", errors="replace") as handle:
        for raw in handle:
            if raw.startswith(("#", "\n")):
                continue
            line = raw.removesuffix("\n")
            if not found:
                found = line == zone_name
                continue
            if line in others:
                break
            match = _ROW.match(line)
            if match:
                c1, c2, c3, c4 = (float(value) for value in match.groups()[2:])
                rows.append((c1, c2, c3, c4))
    return rows


def average_rows(rows: Sequence[Sequence[float]]) -> list[float]:
    """Average each pollutant column; all zeros when there are no rows."""
    if not rows:
        return [0.0] * POLLUTANT_COUNT
    return [sum(row[j] for row in rows) / len(rows) for j in range(POLLUTANT_COUNT)]


def predict_from_rows(
    rows: Sequence[Sequence[float]], current: DailyRecord
) -> list[float]:
    """Weighted prediction over the first 30 rows, adjusted for weather.

    Missing days count as zero; the most recent row carries the most weight.
    """
    factor = adjustment_factor(current)
    return [value * factor for value in _weighted(list(rows)[:HISTORY_DAYS])]


def exceeded_limits(values: Sequence[float]) -> list[tuple[str, float, float]]:
    """Return (symbol, value, limit) for each value above its WHO limit."""
    return [
        (symbol, value, limit)
        for symbol, value, limit in zip(POLLUTANT_SYMBOLS, values, WHO_LIMITS)
        if value > limit
    ]