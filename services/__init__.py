# services/__init__.py

"""
Модуль сервисов One Punch Tracker

Бизнес-логика поверх моделей: журналы тренировок и веса, очки и ранги,
ряд для графика за 30 дней, экспорт и импорт данных.
"""
