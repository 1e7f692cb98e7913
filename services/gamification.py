# services/gamification.py

from typing import List, Optional, Tuple

from core.models import DailyLog, HeroRank, Stats
from services.tracking import FULL_DAY_POINTS, points_for
from utils.datetime_utils import is_consecutive

# Пороги рангов, от старшего к младшему (нижние границы включительно)
HERO_RANKS: List[Tuple[int, HeroRank]] = [
    (14600, HeroRank(rank="S", color="#FFD700")),
    (10000, HeroRank(rank="A", color="#FF6B35")),
    (5000, HeroRank(rank="B", color="#4169E1")),
]
DEFAULT_RANK = HeroRank(rank="C", color="#808080")

DAY_FULL = "full"
DAY_PARTIAL = "partial"
DAY_EMPTY = "empty"

def day_status(points: int) -> str:
    if points >= FULL_DAY_POINTS:
        return DAY_FULL
    if points > 0:
        return DAY_PARTIAL
    return DAY_EMPTY

def compute_stats(log: DailyLog) -> Stats:
    """
    Общие очки и текущая серия полных дней.

    Серия считается одним проходом по датам в порядке возрастания.
    Неполный день обнуляет серию, пустой день пропускается.
    Возвращается значение после последней даты, а не лучшая серия:
    неполный день после последнего полного оставляет 0.
    """
    total_points = 0
    current_streak = 0
    last_full_day: Optional[str] = None

    for date in sorted(log):
        points = points_for(log, date)
        total_points += points

        status = day_status(points)
        if status == DAY_FULL:
            if last_full_day is None or is_consecutive(last_full_day, date):
                current_streak += 1
            else:
                current_streak = 1
            last_full_day = date
        elif status == DAY_PARTIAL:
            current_streak = 0

    return Stats(total_points=total_points, streak=current_streak)

def hero_rank(total_points: int) -> HeroRank:
    for threshold, rank in HERO_RANKS:
        if total_points >= threshold:
            return rank
    return DEFAULT_RANK
