#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
One Punch Tracker v1.0 - Configuration
Централизованная конфигурация с валидацией

Версия: 1.0.0
Дата: 2026-10-19
"""

import os
import sys
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass
from enum import Enum

import pytz

class ConfigError(ValueError):
    """Ошибка конфигурации"""
    pass

class Environment(Enum):
    """Среды выполнения"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"

class LogLevel(Enum):
    """Уровни логирования"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class StorageConfig:
    """Конфигурация локального хранилища"""
    data_dir: Path
    storage_key: str = "onePunchManData"
    max_workers: int = 1

@dataclass
class ExportConfig:
    """Конфигурация экспорта данных"""
    export_dir: Path
    app_name: str = "onepunchman"
    indent: int = 2

@dataclass
class TrackerConfig:
    """Параметры трекера"""
    timezone: Optional[str] = None  # None = локальное время системы
    window_days: int = 30
    default_weight: float = 70.0

class AppConfig:
    """Главный класс конфигурации"""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._environ = os.environ if environ is None else environ
        self._load_config()
        self._validate_config()

    def _get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._environ.get(key)
        return default if value in (None, "") else value

    def _get_int(self, key: str, default: int) -> int:
        raw = self._get(key)
        if raw is None:
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigError(f"{key} must be an integer, got {raw!r}")

    def _get_float(self, key: str, default: float) -> float:
        raw = self._get(key)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError:
            raise ConfigError(f"{key} must be a number, got {raw!r}")

    def _get_bool(self, key: str, default: bool) -> bool:
        raw = self._get(key)
        if raw is None:
            return default
        return raw.lower() in ("1", "true", "yes", "on")

    def _load_config(self):
        """Загрузка конфигурации из переменных окружения"""
        try:
            self.environment = Environment(self._get('ENVIRONMENT', 'development'))
        except ValueError:
            raise ConfigError(f"Unknown ENVIRONMENT: {self._get('ENVIRONMENT')!r}")

        # Директории
        self.data_dir = Path(self._get('DATA_DIR', 'data'))
        self.export_dir = Path(self._get('EXPORT_DIR', 'exports'))
        self.log_dir = Path(self._get('LOG_DIR', 'logs'))

        self.storage = StorageConfig(
            data_dir=self.data_dir,
            storage_key=self._get('STORAGE_KEY', 'onePunchManData'),
            max_workers=self._get_int('MAX_WORKERS', 1)
        )

        self.export = ExportConfig(
            export_dir=self.export_dir,
            app_name=self._get('APP_NAME', 'onepunchman'),
            indent=self._get_int('EXPORT_INDENT', 2)
        )

        self.tracker = TrackerConfig(
            timezone=self._get('TIMEZONE'),
            window_days=self._get_int('WINDOW_DAYS', 30),
            default_weight=self._get_float('DEFAULT_WEIGHT', 70.0)
        )

        # Логирование
        try:
            self.log_level = LogLevel(self._get('LOG_LEVEL', 'INFO').upper())
        except ValueError:
            raise ConfigError(f"Unknown LOG_LEVEL: {self._get('LOG_LEVEL')!r}")
        self.log_to_file = self._get_bool('LOG_TO_FILE', False)
        self.log_format = self._get(
            'LOG_FORMAT',
            '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        )

    def _validate_config(self):
        """Валидация конфигурации"""
        errors = []

        if self.tracker.timezone:
            try:
                pytz.timezone(self.tracker.timezone)
            except pytz.UnknownTimeZoneError:
                errors.append(f"TIMEZONE {self.tracker.timezone!r} is not a known IANA timezone")

        if self.tracker.window_days < 1:
            errors.append("WINDOW_DAYS must be positive")

        if self.tracker.default_weight <= 0:
            errors.append("DEFAULT_WEIGHT must be positive")

        if self.storage.max_workers < 1:
            errors.append("MAX_WORKERS must be at least 1")

        if not self.storage.storage_key.strip():
            errors.append("STORAGE_KEY must not be blank")

        if errors:
            raise ConfigError("Configuration errors:\n" + "\n".join(f"• {error}" for error in errors))

    def ensure_directories(self):
        """Создание необходимых директорий"""
        directories = [self.data_dir, self.export_dir]
        if self.log_to_file:
            directories.append(self.log_dir)

        for directory in directories:
            directory.mkdir(parents=True, exist_ok=True)

    def get_logging_config(self) -> Dict[str, Any]:
        """Получение конфигурации логирования"""
        handlers = ['console']
        if self.log_to_file:
            handlers.append('file')

        logging_config = {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'default': {
                    'format': self.log_format,
                    'datefmt': '%Y-%m-%d %H:%M:%S'
                }
            },
            'handlers': {
                'console': {
                    'class': 'logging.StreamHandler',
                    'level': self.log_level.value,
                    'formatter': 'default',
                    'stream': sys.stdout
                }
            },
            'loggers': {
                '': {
                    'level': self.log_level.value,
                    'handlers': handlers,
                    'propagate': False
                },
                'asyncio': {
                    'level': 'WARNING',
                    'handlers': handlers,
                    'propagate': False
                }
            }
        }

        if self.log_to_file:
            logging_config['handlers']['file'] = {
                'class': 'logging.handlers.RotatingFileHandler',
                'level': self.log_level.value,
                'formatter': 'default',
                'filename': str(self.log_dir / f"tracker_{self.environment.value}.log"),
                'maxBytes': 10485760,  # 10MB
                'backupCount': 5,
                'encoding': 'utf-8'
            }

        return logging_config

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация конфигурации в словарь"""
        return {
            'environment': self.environment.value,
            'storage': {
                'data_dir': str(self.storage.data_dir),
                'storage_key': self.storage.storage_key
            },
            'export': {
                'export_dir': str(self.export.export_dir),
                'app_name': self.export.app_name
            },
            'tracker': {
                'timezone': self.tracker.timezone,
                'window_days': self.tracker.window_days,
                'default_weight': self.tracker.default_weight
            },
            'log_level': self.log_level.value
        }

# Глобальный экземпляр конфигурации
config = AppConfig()

__all__ = [
    'config',
    'AppConfig',
    'ConfigError',
    'Environment',
    'LogLevel',
    'StorageConfig',
    'ExportConfig',
    'TrackerConfig'
]
