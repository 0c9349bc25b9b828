import pytest

from airwatch.analysis import (
    adjustment_factor,
    average_rows,
    exceeded_limits,
    predict_from_rows,
    predict_zones,
    read_zone_history,
    stored_averages,
)
from airwatch.models import HISTORY_DAYS, WHO_LIMITS, DailyRecord, new_zones

NEUTRAL = DailyRecord("01012024", [0.0] * 4, 20.0, 50.0, 10.0)
HARSH = DailyRecord("01012024", [0.0] * 4, 35.0, 30.0, 2.0)


def _fill(zone, values, weather=NEUTRAL):
    for day in range(HISTORY_DAYS):
        zone.record(
            DailyRecord(
                f"{day + 1:02d}012024",
                list(values),
                weather.temperature,
                weather.humidity,
                weather.wind,
            )
        )


def test_adjustment_neutral_is_one():
    assert adjustment_factor(NEUTRAL) == 1.0


def test_adjustment_all_conditions():
    assert adjustment_factor(HARSH) == pytest.approx(1.15)


def test_adjustment_thresholds_are_strict():
    edge = DailyRecord("x", [0.0] * 4, 30.0, 40.0, 5.0)
    assert adjustment_factor(edge) == adjustment_factor(NEUTRAL)


def test_stored_averages_constant_history():
    zones = new_zones()
    _fill(zones[0], [30.0, 6.0, 12.0, 3.0])
    averages = stored_averages(zones)
    assert averages[0] == pytest.approx([30.0, 6.0, 12.0, 3.0])
    assert averages[1] == [0.0, 0.0, 0.0, 0.0]


def test_predict_zones_constant_history_neutral():
    zones = new_zones()
    _fill(zones[2], [8.0, 4.0, 2.0, 1.0])
    assert predict_zones(zones)[2] == pytest.approx([8.0, 4.0, 2.0, 1.0])


def test_predict_zones_applies_adjustment():
    zones = new_zones()
    _fill(zones[3], [8.0, 4.0, 2.0, 1.0], HARSH)
    factor = adjustment_factor(zones[3].current)
    expected = [v * factor for v in [8.0, 4.0, 2.0, 1.0]]
    assert predict_zones(zones)[3] == pytest.approx(expected)


def test_read_zone_history(tmp_path):
    path = tmp_path / "hist.txt"
    path.write_text(
        "# comment\n"
        "Norte\n"
        "01012024,08:00,1.5,2.0,3.0,4.0\n"
        "\n"
        "bad line\n"
        "02012024,09:00, 5,6,7,8abc\n"
        "Sur\n"
        "01012024,08:00,9,9,9,9\n",
        encoding="utf-8",
    )
    assert read_zone_history(path, "Norte") == [(1.5, 2.0, 3.0, 4.0), (5.0, 6.0, 7.0, 8.0)]
    assert read_zone_history(path, "Sur") == [(9.0, 9.0, 9.0, 9.0)]
    assert read_zone_history(path, "Valles") == []


def test_read_zone_history_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_zone_history(tmp_path / "missing.txt", "Norte")


def test_average_rows():
    assert average_rows([]) == [0.0, 0.0, 0.0, 0.0]
    assert average_rows([(1.0, 2.0, 3.0, 4.0), (3.0, 4.0, 5.0, 6.0)]) == [2.0, 3.0, 4.0, 5.0]


def test_predict_from_rows_full_constant():
    rows = [(10.0, 5.0, 2.5, 1.0)] * HISTORY_DAYS
    assert predict_from_rows(rows, NEUTRAL) == pytest.approx([10.0, 5.0, 2.5, 1.0])


def test_predict_from_rows_ignores_extra_rows():
    rows = [(10.0, 5.0, 2.5, 1.0)] * HISTORY_DAYS
    extended = rows + [(1000.0, 1000.0, 1000.0, 1000.0)]
    assert predict_from_rows(extended, NEUTRAL) == predict_from_rows(rows, NEUTRAL)


def test_predict_from_rows_missing_days_lower_prediction():
    partial = predict_from_rows([(10.0, 10.0, 10.0, 10.0)], NEUTRAL)
    assert all(0.0 < value < 10.0 for value in partial)
    assert predict_from_rows([], NEUTRAL) == [0.0, 0.0, 0.0, 0.0]


def test_exceeded_limits():
    assert exceeded_limits(list(WHO_LIMITS)) == []
    values = [0.0, 15.5, 0.0, 0.0]
    assert exceeded_limits(values) == [("SO2", 15.5, 15.0)]