#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
One Punch Tracker v1.0 - State Container
Единственный владелец состояния приложения

Все изменения идут через методы TrackerStore: каждое действие строит
новый снимок AppState и публикует его подписчикам (автосохранение,
представления). Прямой записи в поля нет.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict, List, Optional, Union

from core.models import AppState, Exercise, HeroRank, Stats
from services import gamification, series, tracking
from ui.themes import get_theme
from utils.datetime_utils import compare_to_today, offset, today_key
from utils.validators import is_valid_date

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]

class TrackerStore:
    """Контейнер состояния, создаётся корнем приложения и передаётся представлениям"""

    def __init__(self, state: AppState, clock: Callable[[], str] = today_key,
                 window_days: int = series.DEFAULT_WINDOW_DAYS,
                 default_weight: float = tracking.DEFAULT_WEIGHT):
        self._state = state
        self._clock = clock
        self.window_days = window_days
        self.default_weight = default_weight
        self._selected_date = clock()
        self._listeners: List[Listener] = []

    # ===== PROPERTIES =====

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def selected_date(self) -> str:
        return self._selected_date

    @property
    def today(self) -> str:
        return self._clock()

    # ===== SUBSCRIPTIONS =====

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Подписка на новые снимки состояния; возвращает функцию отписки"""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, new_state: AppState) -> None:
        self._state = new_state
        for listener in list(self._listeners):
            try:
                listener(new_state)
            except Exception as e:
                logger.warning(f"State listener failed: {e}")

    # ===== MUTATIONS =====

    def toggle_exercise(self, exercise: Union[Exercise, str], date: Optional[str] = None) -> None:
        date = date or self._selected_date
        daily_data = tracking.toggle_exercise(self._state.daily_data, date, exercise)
        self._commit(replace(self._state, daily_data=daily_data))

    def set_weight(self, value, date: Optional[str] = None) -> bool:
        date = date or self._selected_date
        weight_data = tracking.set_weight(self._state.weight_data, date, value)
        if weight_data is self._state.weight_data:
            return False
        self._commit(replace(self._state, weight_data=weight_data))
        return True

    def toggle_dark_mode(self) -> bool:
        self._commit(replace(self._state, dark_mode=not self._state.dark_mode))
        return self._state.dark_mode

    def set_start_date(self, date: str) -> None:
        self._commit(replace(self._state, start_date=date))

    def apply_import(self, imported: AppState) -> None:
        """Атомарная замена журналов и даты начала; тема не меняется"""
        self._commit(replace(
            self._state,
            daily_data=imported.daily_data,
            weight_data=imported.weight_data,
            start_date=imported.start_date
        ))
        logger.info(f"Imported {len(imported.daily_data)} training days "
                    f"and {len(imported.weight_data)} weight samples")

    def reset(self) -> None:
        self._commit(AppState.empty(self.today))

    # ===== NAVIGATION =====

    def change_date(self, delta_days: int) -> str:
        """Сдвиг выбранной даты; будущее недоступно"""
        candidate = offset(self._selected_date, delta_days)
        if compare_to_today(candidate, self.today) <= 0:
            self._selected_date = candidate
        return self._selected_date

    def select_date(self, date: str) -> bool:
        if not is_valid_date(date) or compare_to_today(date, self.today) > 0:
            return False
        self._selected_date = date
        return True

    def can_go_forward(self) -> bool:
        return compare_to_today(self._selected_date, self.today) < 0

    # ===== DERIVED VIEWS =====

    def stats(self) -> Stats:
        return gamification.compute_stats(self._state.daily_data)

    def rank(self) -> HeroRank:
        return gamification.hero_rank(self.stats().total_points)

    def day_points(self, date: Optional[str] = None) -> int:
        return tracking.points_for(self._state.daily_data, date or self._selected_date)

    def window(self) -> List[series.SeriesEntry]:
        return series.build_window(
            self._state.daily_data,
            self._state.weight_data,
            self._selected_date,
            window_size=self.window_days,
            today=self.today
        )

    def weight_prefill(self) -> float:
        return tracking.latest_known_weight(self._state.weight_data, self._selected_date,
                                            self.default_weight)

    def theme(self) -> Dict[str, str]:
        return get_theme(self._state.dark_mode)
