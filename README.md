# airwatch

A small library for recording and analysing air quality in five city zones:
Norte, Centro Norte, Sur, Centro Sur and Valles.

For every zone it tracks four pollutants (CO, SO2, NO2 and PM2.5) together
with temperature, humidity and wind speed. It can:

- keep a 30-slot history and a current reading per zone,
- average stored readings and rows read from a history text file,
- predict the next 24 hours with a weighted average, adjusted for heat, dry
  air and calm wind,
- list the predicted values that exceed the WHO 24-hour limits,
- write a plain-text report for each zone.

## Installation

```
pip install .
```

## Modules

### `airwatch.models`

- `DailyRecord`: a date (`DDMMAAAA` text), four pollutant levels,
  `temperature`, `humidity` and `wind`. `is_empty()` is true when no date is
  set.
- `Zone`: a name, a `history` of 30 `DailyRecord`s and a `current` reading.
  `record(reading)` makes the reading current and copies it into the first
  free history slot, returning that slot's index, or `None` when the history
  is full. `filled_history()` yields the slots that hold data. `reset()`
  clears everything.
- `new_zones()` creates the five standard zones; `reset_zones(zones)` clears
  them and restores their standard names.
- `validate_date(text)` returns the text if it is exactly eight digits and
  raises `ValueError` otherwise.

### `airwatch.analysis`

- `adjustment_factor(reading)`: 1.0, plus 0.05 each when the temperature is
  above 30, the humidity below 40 and the wind below 5.
- `stored_averages(zones)`: per zone, each pollutant summed over the 30
  history slots and divided by 30.
- `predict_zones(zones)`: per zone, a weighted average of the history (slot 0
  has weight 30, slot 1 weight 29, and so on) times the adjustment factor of
  the zone's current reading.
- `read_zone_history(path, zone_name)`: reads the rows listed under a zone in
  a history text file (see below). Raises `FileNotFoundError` if the file is
  missing.
- `average_rows(rows)`: the column averages of those rows, or zeros when there
  are none.
- `predict_from_rows(rows, current)`: the same weighted prediction over the
  first 30 rows, missing days counting as zero.
- `exceeded_limits(values)`: `(symbol, value, limit)` for each value above its
  WHO limit (CO 3490, SO2 15, NO2 13.3, PM2.5 15).

### `airwatch.report`

- `report_filename(zone)`: `reporte_<Zona>_<Fecha>.txt`, spaces in the zone
  name turned into underscores, e.g. `reporte_Centro_Norte_01012024.txt`.
- `render_report(zone, prediction)`: the report text with current levels,
  weather conditions and the prediction.
- `export_reports(zones, predictions, directory=".")`: writes a report for
  every zone that has a current reading and returns `(zone, path, error)` for
  each, `error` being `None` on success.

## History file format

Each zone name stands on a line of its own and is followed by lines of the
form:

```
fecha,hora,CO,SO2,NO2,PM2.5
```

Lines that start with `#`, blank lines and malformed rows are ignored. A zone's
rows end where another zone's name appears.

## Example

```python
from airwatch.models import DailyRecord, new_zones, validate_date
from airwatch.analysis import exceeded_limits, predict_zones
from airwatch.report import export_reports

zones = new_zones()
zones[0].record(
    DailyRecord(
        date=validate_date("01012024"),
        pollutants=[400.0, 5.0, 10.0, 20.0],
        temperature=32.0,
        humidity=35.0,
        wind=3.0,
    )
)
predictions = predict_zones(zones)
print(exceeded_limits(predictions[0]))
export_reports(zones, predictions, ".")
```

## What this package does not do

It has no command and no interactive menu: readings are entered and results
shown by calling the functions above from your own code. It also does not save
zones to disk or load them back; only the text reports are written to files.

## Running the tests

```
pip install .[test]
pytest
```