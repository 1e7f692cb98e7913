# ui/progress.py

from typing import Dict, Optional, Tuple

from core.models import EXERCISE_KEYS
from services.gamification import DAY_FULL, DAY_PARTIAL, day_status
from services.series import GraphMode, SeriesEntry
from services.tracking import FULL_DAY_POINTS, POINTS_PER_EXERCISE

GRAPH_HEIGHT = 150
MIN_BAR_WITH_VALUE = 10
MIN_BAR_EMPTY = 2

def bar_height(value: Optional[float], bounds: Tuple[float, float], max_height: int = GRAPH_HEIGHT) -> float:
    """Высота столбца графика в пикселях"""
    if value is None:
        return MIN_BAR_EMPTY
    low, high = bounds
    span = high - low
    height = (value - low) / span * max_height if span else 0
    return max(height, MIN_BAR_WITH_VALUE)

def bar_color(entry: SeriesEntry, mode: GraphMode, theme: Dict[str, str]) -> str:
    if entry.is_selected:
        return theme["accent"]
    if mode == GraphMode.WEIGHT:
        return theme["accent"] if entry.weight is not None else theme["border"]
    status = day_status(entry.points)
    if status == DAY_FULL:
        return theme["orange"]
    if status == DAY_PARTIAL:
        return theme["blue"]
    return theme["border"]

def progress_bar(points: int):
    """Текстовая полоса дня: одна клетка на упражнение"""
    slots = len(EXERCISE_KEYS)
    done = min(max(points, 0) // POINTS_PER_EXERCISE, slots)
    return "🟧" * done + "⬛️" * (slots - done) + f" {points}/{FULL_DAY_POINTS}"

def streak_emoji(streak: int):
    # 365 полных дней подряд = 14600 очков, порог ранга S
    if streak >= 365:
        return "👑"
    if streak >= 30:
        return "👊"
    if streak >= 7:
        return "🔥"
    if streak > 0:
        return "💪"
    return "😴"
