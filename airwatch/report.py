"""Text reports of current levels and predictions per zone."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from airwatch.models import POLLUTANT_NAMES, Zone


def report_filename(zone: Zone) -> str:
    """Return the report file name for a zone's current reading."""
    name = zone.name.replace(" ", "_")
    return f"reporte_{name}_{zone.current.date}.txt"


def render_report(zone: Zone, prediction: Sequence[float]) -> str:
    """Render the report text for one zone."""
    current = zone.current
    lines = [
        "Reporte de Contaminacion y Prediccion",
        f"Zona: {zone.name}",
        f"Fecha de ingreso: {current.date}",
        "",
        "Niveles Actuales:",
    ]
    lines += [f"{name}: {value:.2f}" for name, value in zip(POLLUTANT_NAMES, current.pollutants)]
    lines += [
        "",
        "Condiciones ambientales:",
        f"Temperatura: {current.temperature:.2f} °C",
        f"Humedad: {current.humidity:.2f} %",
        f"Viento: {current.wind:.2f} km/h",
        "",
        "Prediccion para las proximas 24h:",
    ]
    lines += [f"{name}: {value:.2f}" for name, value in zip(POLLUTANT_NAMES, prediction)]
    return "\n".join(lines) + "\n"


def export_reports(
    zones: Sequence[Zone],
    predictions: Sequence[Sequence[float]],
    directory: str | Path = ".",
) -> list[tuple[Zone, Path, OSError | None]]:
    """Write a report for every zone with a current reading.

    Returns (zone, path, error) for each attempt; error is None on success.
    A failure for one zone does not stop the others.
    """
    outcomes: list[tuple[Zone, Path, OSError | None]] = []
    for zone, prediction in zip(zones, predictions):
        if zone.current.is_empty():
            continue
        path = Path(directory) / report_filename(zone)
        try:
            path.write_text(render_report(zone, prediction), encoding="utf-8")
        except OSError as error:
            outcomes.append((zone, path, error))
        else:
            outcomes.append((zone, path, None))
    return outcomes