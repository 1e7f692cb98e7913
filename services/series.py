# services/series.py

"""
Ряд данных для графика «Последние 30 дней».

Окно всегда заканчивается сегодняшним днём; выбранная дата только
помечается и окно не сдвигает. Ось очков фиксирована [0, 40],
ось веса строится по всему журналу веса, а не только по окну.
"""

from dataclasses import dataclass
from enum import Enum
from functools import reduce
from typing import List, Optional, Tuple

from core.models import DailyLog, WeightLog
from services.tracking import FULL_DAY_POINTS, points_for
from utils.datetime_utils import offset, parse_date_key, today_key

DEFAULT_WINDOW_DAYS = 30
WEIGHT_AXIS_MIN_SEED = 0.0
WEIGHT_AXIS_MAX_SEED = 100.0

class GraphMode(Enum):
    """Режим графика"""
    PROGRESS = "progress"
    WEIGHT = "weight"

@dataclass(frozen=True)
class SeriesEntry:
    """Один столбец графика"""
    day_of_month: int
    date_key: str
    points: int
    weight: Optional[float]
    is_selected: bool

def build_window(daily_log: DailyLog, weight_log: WeightLog, selected_date: Optional[str],
                 window_size: int = DEFAULT_WINDOW_DAYS, today: Optional[str] = None) -> List[SeriesEntry]:
    today = today or today_key()
    entries = []
    for back in range(window_size - 1, -1, -1):
        date_key = offset(today, -back)
        entries.append(SeriesEntry(
            day_of_month=parse_date_key(date_key).day,
            date_key=date_key,
            points=points_for(daily_log, date_key),
            weight=weight_log.get(date_key),
            is_selected=date_key == selected_date
        ))
    return entries

def points_axis_bounds() -> Tuple[float, float]:
    return (0.0, float(FULL_DAY_POINTS))

def weight_axis_bounds(weight_log: WeightLog) -> Tuple[float, float]:
    """Границы оси веса; пустой журнал даёт (0, 100)"""
    samples = weight_log.values()
    low = reduce(min, samples, WEIGHT_AXIS_MIN_SEED)
    high = reduce(max, samples, WEIGHT_AXIS_MAX_SEED)
    return (low, high)

def axis_bounds(mode: GraphMode, weight_log: WeightLog) -> Tuple[float, float]:
    if mode == GraphMode.WEIGHT:
        return weight_axis_bounds(weight_log)
    return points_axis_bounds()

def series_values(entries: List[SeriesEntry], mode: GraphMode) -> List[Optional[float]]:
    if mode == GraphMode.WEIGHT:
        return [entry.weight for entry in entries]
    return [float(entry.points) for entry in entries]
