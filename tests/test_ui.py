import pytest

from core.models import HeroRank, Stats
from services.series import GraphMode, SeriesEntry
from ui.messages import (
    day_points_message, export_failure_notice, export_success_notice,
    import_failure_notice, import_success_notice, stats_message, weight_button_label
)
from ui.progress import bar_color, bar_height, progress_bar, streak_emoji
from ui.themes import EXERCISES, THEMES, exercise_rows, get_theme

LIGHT = THEMES["light"]


def entry(points=0, weight=None, selected=False):
    return SeriesEntry(day_of_month=1, date_key="2024-01-01", points=points,
                       weight=weight, is_selected=selected)


class TestBarHeight:
    def test_scales_to_bounds(self):
        assert bar_height(40, (0, 40)) == 150
        assert bar_height(20, (0, 40)) == 75

    def test_minimum_heights(self):
        assert bar_height(0, (0, 40)) == 10
        assert bar_height(None, (0, 100)) == 2

    def test_weight_axis(self):
        assert bar_height(50.0, (0.0, 100.0)) == pytest.approx(75.0)

    def test_degenerate_bounds(self):
        assert bar_height(5, (5, 5)) == 10


class TestBarColor:
    def test_selected_wins(self):
        assert bar_color(entry(points=40, selected=True), GraphMode.PROGRESS, LIGHT) == LIGHT["accent"]

    def test_progress_colors(self):
        assert bar_color(entry(points=40), GraphMode.PROGRESS, LIGHT) == LIGHT["orange"]
        assert bar_color(entry(points=20), GraphMode.PROGRESS, LIGHT) == LIGHT["blue"]
        assert bar_color(entry(points=0), GraphMode.PROGRESS, LIGHT) == LIGHT["border"]

    def test_weight_colors(self):
        assert bar_color(entry(weight=70.0), GraphMode.WEIGHT, LIGHT) == LIGHT["accent"]
        assert bar_color(entry(), GraphMode.WEIGHT, LIGHT) == LIGHT["border"]


def test_progress_bar():
    assert progress_bar(0) == "⬛️⬛️⬛️⬛️ 0/40"
    assert progress_bar(20) == "🟧🟧⬛️⬛️ 20/40"
    assert progress_bar(40) == "🟧🟧🟧🟧 40/40"


def test_streak_emoji():
    assert streak_emoji(0) == "😴"
    assert streak_emoji(1) == "💪"
    assert streak_emoji(7) == "🔥"
    assert streak_emoji(30) == "👊"
    assert streak_emoji(365) == "👑"


class TestThemes:
    def test_get_theme(self):
        assert get_theme(True) is THEMES["dark"]
        assert get_theme(False) is THEMES["light"]

    def test_exercise_rows_use_palette(self):
        rows = exercise_rows(True)
        assert [r["key"] for r in rows] == ["pushups", "situps", "squats", "running"]
        assert rows[3]["color"] == THEMES["dark"]["accent"]
        assert EXERCISES[3]["color"] == "accent"


class TestMessages:
    def test_notices(self):
        assert import_success_notice().success
        assert import_failure_notice().message == "Неверный формат файла"
        assert "disk" in import_failure_notice(OSError("disk")).message
        assert export_success_notice("/tmp/x.json").message.endswith("/tmp/x.json")
        assert not export_failure_notice(RuntimeError("nope")).success

    def test_day_points_message(self):
        assert day_points_message("2024-01-05", 30) == "5 января 2024 г.\n30 / 40 очков"

    def test_weight_button_label(self):
        assert weight_button_label(None) == "Добавить вес"
        assert weight_button_label(70.5) == "Вес: 70.5 кг"
        assert weight_button_label(70.0) == "Вес: 70 кг"

    def test_stats_message(self):
        text = stats_message(Stats(total_points=5000, streak=7), HeroRank("B", "#4169E1"))
        assert "Очки: 5000" in text
        assert "Ранг героя: B" in text
        assert "7 🔥" in text
