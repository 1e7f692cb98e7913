# ui/themes.py

from typing import Dict, List

THEMES = {
    "light": {
        "bg": "#f8f9fa",
        "card_bg": "#ffffff",
        "text": "#2c3e50",
        "text_secondary": "#7f8c8d",
        "border": "#e1e8ed",
        "accent": "#f39c12",
        "orange": "#ff6b35",
        "blue": "#4169e1",
        "green": "#4caf50",
        "toggle_icon": "moon"
    },
    "dark": {
        "bg": "#1a1a1a",
        "card_bg": "#2d2d2d",
        "text": "#ffffff",
        "text_secondary": "#a0a0a0",
        "border": "#404040",
        "accent": "#f0db4f",
        "orange": "#ff6b35",
        "blue": "#4169e1",
        "green": "#4caf50",
        "toggle_icon": "sunny"
    }
}

# Цвет упражнения - ключ палитры, а не HEX: зависит от темы
EXERCISES = [
    {"key": "pushups", "icon": "fitness", "label": "100 отжиманий", "color": "orange"},
    {"key": "situps", "icon": "accessibility", "label": "100 приседаний", "color": "blue"},
    {"key": "squats", "icon": "body", "label": "100 пресс", "color": "green"},
    {"key": "running", "icon": "walk", "label": "10 км бег", "color": "accent"},
]

def get_theme(dark_mode: bool) -> Dict[str, str]:
    return THEMES["dark" if dark_mode else "light"]

def exercise_rows(dark_mode: bool) -> List[Dict[str, str]]:
    theme = get_theme(dark_mode)
    return [dict(exercise, color=theme[exercise["color"]]) for exercise in EXERCISES]
