# services/tracking.py

"""
Журналы тренировок и веса.

Все операции возвращают новый словарь и не меняют переданный:
состояние приложения заменяется целиком на каждое действие.
"""

import logging
from typing import Union

from core.models import DailyLog, DailyRecord, Exercise, WeightLog, validate_exercise
from utils.validators import is_valid_weight, parse_weight_input

logger = logging.getLogger(__name__)

POINTS_PER_EXERCISE = 10
FULL_DAY_POINTS = POINTS_PER_EXERCISE * len(Exercise)
DEFAULT_WEIGHT = 70.0

# ===== DAILY LOG =====

def toggle_exercise(log: DailyLog, date: str, exercise: Union[Exercise, str]) -> DailyLog:
    """Переключить отметку упражнения за день"""
    exercise = validate_exercise(exercise)
    record = log.get(date, DailyRecord())
    updated = dict(log)
    updated[date] = record.toggled(exercise)
    return updated

def record_points(record: DailyRecord) -> int:
    return POINTS_PER_EXERCISE * record.completed_count

def points_for(log: DailyLog, date: str) -> int:
    return record_points(log.get(date, DailyRecord()))

# ===== WEIGHT LOG =====

def set_weight(log: WeightLog, date: str, value) -> WeightLog:
    """Сохранить вес за день; некорректное значение игнорируется"""
    if not is_valid_weight(value):
        logger.debug(f"Rejected weight {value!r} for {date}")
        return log
    updated = dict(log)
    updated[date] = float(value)
    return updated

def latest_known_weight(log: WeightLog, before_or_on: str, default: float = DEFAULT_WEIGHT) -> float:
    """Вес для предзаполнения формы: за день, иначе последний известный до него"""
    if before_or_on in log:
        return log[before_or_on]
    for date in sorted(log, reverse=True):
        if date < before_or_on:
            return log[date]
    return default

def adjust_weight(text: str, amount: float) -> str:
    """Кнопки +/- в форме веса: не ниже нуля, один знак после запятой"""
    current = parse_weight_input(text) or 0.0
    return f"{max(0.0, current + amount):.1f}"
