from services.series import (
    GraphMode, axis_bounds, build_window, points_axis_bounds,
    series_values, weight_axis_bounds
)

from conftest import FULL, PARTIAL, TODAY


class TestBuildWindow:
    def test_exactly_thirty_entries_ending_today(self):
        entries = build_window({}, {}, TODAY, today=TODAY)
        assert len(entries) == 30
        assert entries[-1].date_key == TODAY
        assert entries[0].date_key == "2023-12-12"

    def test_chronological_order(self):
        keys = [e.date_key for e in build_window({}, {}, TODAY, today=TODAY)]
        assert keys == sorted(keys)
        assert len(set(keys)) == 30

    def test_day_of_month(self):
        entries = build_window({}, {}, TODAY, today=TODAY)
        assert entries[-1].day_of_month == 10
        assert entries[0].day_of_month == 12

    def test_points_and_weight_lookup(self):
        daily = {"2024-01-09": FULL, "2024-01-08": PARTIAL, "2023-01-01": FULL}
        weight = {"2024-01-09": 71.5, "2023-01-01": 90.0}
        entries = {e.date_key: e for e in build_window(daily, weight, TODAY, today=TODAY)}
        assert entries["2024-01-09"].points == 40
        assert entries["2024-01-09"].weight == 71.5
        assert entries["2024-01-08"].points == 10
        assert entries["2024-01-08"].weight is None
        assert entries[TODAY].points == 0

    def test_single_selected_entry_inside_window(self):
        entries = build_window({}, {}, "2024-01-01", today=TODAY)
        selected = [e for e in entries if e.is_selected]
        assert [e.date_key for e in selected] == ["2024-01-01"]

    def test_selection_does_not_shift_window(self):
        entries = build_window({}, {}, "2023-06-01", today=TODAY)
        assert entries[-1].date_key == TODAY
        assert not any(e.is_selected for e in entries)

    def test_custom_window_size(self):
        entries = build_window({}, {}, TODAY, window_size=7, today=TODAY)
        assert len(entries) == 7
        assert entries[0].date_key == "2024-01-04"


class TestAxisBounds:
    def test_points_axis_is_fixed(self):
        assert points_axis_bounds() == (0.0, 40.0)
        assert axis_bounds(GraphMode.PROGRESS, {"2024-01-01": 250.0}) == (0.0, 40.0)

    def test_empty_weight_log(self):
        assert weight_axis_bounds({}) == (0.0, 100.0)

    def test_samples_within_seeds(self):
        assert weight_axis_bounds({"2024-01-01": 70.0, "2024-01-02": 80.0}) == (0.0, 100.0)

    def test_heavy_sample_raises_max(self):
        assert weight_axis_bounds({"2024-01-01": 70.0, "2024-01-02": 120.5}) == (0.0, 120.5)

    def test_uses_whole_log_not_window(self):
        weight = {"2020-01-01": 150.0, TODAY: 70.0}
        assert axis_bounds(GraphMode.WEIGHT, weight) == (0.0, 150.0)


def test_series_values():
    entries = build_window({TODAY: FULL}, {TODAY: 70.0}, TODAY, window_size=2, today=TODAY)
    assert series_values(entries, GraphMode.PROGRESS) == [0.0, 40.0]
    assert series_values(entries, GraphMode.WEIGHT) == [None, 70.0]
