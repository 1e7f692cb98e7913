#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
One Punch Tracker v1.0 - Core Data Models
Модели данных трекера тренировок

Версия: 1.0.0
Дата: 2026-10-19
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Any, Optional, Tuple, Union

# ===== ENUMS =====

class Exercise(Enum):
    """Фиксированный набор ежедневных упражнений"""
    PUSHUPS = "pushups"
    SITUPS = "situps"
    SQUATS = "squats"
    RUNNING = "running"

EXERCISE_KEYS: Tuple[str, ...] = tuple(e.value for e in Exercise)

# ===== VALIDATION HELPERS =====

class ValidationError(Exception):
    """Ошибка валидации данных"""
    pass

def validate_exercise(exercise: Union[Exercise, str]) -> Exercise:
    """Приведение имени упражнения к Exercise"""
    if isinstance(exercise, Exercise):
        return exercise
    try:
        return Exercise(exercise)
    except ValueError:
        raise ValidationError(f"exercise must be one of: {list(EXERCISE_KEYS)}, got {exercise!r}")

# ===== CORE MODELS =====

@dataclass(frozen=True)
class DailyRecord:
    """
    Отметки упражнений за один день.

    Флаг может отсутствовать (None), быть True или явно False:
    повторное нажатие оставляет явный False, и он сохраняется
    при экспорте. Для подсчёта очков None и False равнозначны.
    """
    pushups: Optional[bool] = None
    situps: Optional[bool] = None
    squats: Optional[bool] = None
    running: Optional[bool] = None

    def is_done(self, exercise: Union[Exercise, str]) -> bool:
        return bool(getattr(self, validate_exercise(exercise).value))

    @property
    def completed_count(self) -> int:
        return sum(1 for key in EXERCISE_KEYS if getattr(self, key))

    def toggled(self, exercise: Union[Exercise, str]) -> "DailyRecord":
        """Новая запись с инвертированным флагом"""
        key = validate_exercise(exercise).value
        return replace(self, **{key: not getattr(self, key)})

    def to_dict(self) -> Dict[str, bool]:
        return {
            key: getattr(self, key)
            for key in EXERCISE_KEYS
            if getattr(self, key) is not None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DailyRecord":
        # Неизвестные ключи игнорируются
        return cls(**{
            key: bool(data[key])
            for key in EXERCISE_KEYS
            if key in data and data[key] is not None
        })

DailyLog = Dict[str, DailyRecord]
WeightLog = Dict[str, float]

@dataclass(frozen=True)
class HeroRank:
    """Ранг героя и цвет значка"""
    rank: str
    color: str

@dataclass(frozen=True)
class Stats:
    """Производные показатели прогресса"""
    total_points: int = 0
    streak: int = 0

@dataclass(frozen=True)
class AppState:
    """
    Полное состояние приложения, единица сохранения.

    start_date носит информационный характер и не сверяется
    с содержимым журналов.
    """
    start_date: str
    daily_data: DailyLog = field(default_factory=dict)
    weight_data: WeightLog = field(default_factory=dict)
    dark_mode: bool = False

    @classmethod
    def empty(cls, today: str) -> "AppState":
        return cls(start_date=today)

    def to_dict(self) -> Dict[str, Any]:
        """Формат хранилища (ключи как в исходном JSON-документе)"""
        return {
            "dailyData": {d: record.to_dict() for d, record in self.daily_data.items()},
            "weightData": dict(self.weight_data),
            "startDate": self.start_date,
            "darkMode": self.dark_mode,
        }

# ===== EXPORT =====

__all__ = [
    'Exercise',
    'EXERCISE_KEYS',
    'ValidationError',
    'validate_exercise',
    'DailyRecord',
    'DailyLog',
    'WeightLog',
    'HeroRank',
    'Stats',
    'AppState'
]
