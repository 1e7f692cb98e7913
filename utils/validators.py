import math
import re
from typing import Optional

DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def is_valid_date(date_str: str) -> bool:
    return isinstance(date_str, str) and bool(DATE_KEY_RE.match(date_str))

def is_valid_weight(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0

def parse_weight_input(text: str) -> Optional[float]:
    """Разбор веса из поля ввода: None, если сохранять нельзя"""
    if text is None:
        return None
    try:
        value = float(str(text).strip().replace(",", "."))
    except ValueError:
        return None
    return value if is_valid_weight(value) else None
