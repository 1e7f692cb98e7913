# ui/messages.py

from dataclasses import dataclass
from typing import Optional

from core.models import HeroRank, Stats
from services.tracking import FULL_DAY_POINTS
from ui.progress import streak_emoji
from utils.datetime_utils import format_date_ru

@dataclass(frozen=True)
class Notice:
    """Уведомление пользователю об итоге импорта или экспорта"""
    success: bool
    title: str
    message: str

def export_success_notice(destination: Optional[str] = None) -> Notice:
    message = "Файл сохранён!"
    if destination:
        message += f"\n{destination}"
    return Notice(True, "Успех", message)

def export_failure_notice(error: Exception) -> Notice:
    return Notice(False, "Ошибка", f"Не удалось экспортировать данные: {error}")

def import_success_notice() -> Notice:
    return Notice(True, "Успех", "Данные успешно импортированы!")

def import_failure_notice(error: Optional[Exception] = None) -> Notice:
    if error is None:
        return Notice(False, "Ошибка", "Неверный формат файла")
    return Notice(False, "Ошибка", f"Не удалось импортировать данные: {error}")

def day_points_message(date_key: str, points: int):
    return f"{format_date_ru(date_key)}\n{points} / {FULL_DAY_POINTS} очков"

def weight_button_label(weight: Optional[float]):
    if weight is None:
        return "Добавить вес"
    return f"Вес: {weight:g} кг"

def stats_message(stats: Stats, rank: HeroRank):
    return (
        f"Очки: {stats.total_points}\n"
        f"Ранг героя: {rank.rank}\n"
        f"Дней подряд: {stats.streak} {streak_emoji(stats.streak)}"
    )
