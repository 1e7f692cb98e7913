from datetime import date, datetime, timedelta, tzinfo
from typing import Optional, Union

import pytz

DATE_KEY_FORMAT = "%Y-%m-%d"

MONTHS_GENITIVE_RU = (
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря"
)

def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """None означает локальное время системы"""
    if not name:
        return None
    return pytz.timezone(name)

def now_local(tz: Optional[tzinfo] = None) -> datetime:
    return datetime.now(tz) if tz is not None else datetime.now()

def to_date_key(value: Union[date, datetime]) -> str:
    return value.strftime(DATE_KEY_FORMAT)

def parse_date_key(date_key: str) -> date:
    return datetime.strptime(date_key, DATE_KEY_FORMAT).date()

def try_parse_date_key(date_key: str) -> Optional[date]:
    """Импортированные ключи не проверяются: None, если ключ не дата"""
    try:
        return parse_date_key(date_key)
    except (TypeError, ValueError):
        return None

def today_key(tz: Optional[tzinfo] = None) -> str:
    return to_date_key(now_local(tz).date())

def offset(date_key: str, delta_days: int) -> str:
    return to_date_key(parse_date_key(date_key) + timedelta(days=delta_days))

def days_between(a: str, b: str) -> int:
    return (parse_date_key(b) - parse_date_key(a)).days

def is_consecutive(a: str, b: str) -> bool:
    first, second = try_parse_date_key(a), try_parse_date_key(b)
    if first is None or second is None:
        return False
    return abs((second - first).days) == 1

def compare_to_today(date_key: str, today: Optional[str] = None) -> int:
    """-1 если дата в прошлом, 0 если сегодня, 1 если в будущем"""
    today = today or today_key()
    # Ключи фиксированной ширины, лексикографический порядок = хронологический
    if date_key < today:
        return -1
    if date_key > today:
        return 1
    return 0

def format_date_ru(date_key: str) -> str:
    d = parse_date_key(date_key)
    return f"{d.day} {MONTHS_GENITIVE_RU[d.month - 1]} {d.year} г."
