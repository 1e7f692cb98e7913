import logging

import pytest

from config import AppConfig, ConfigError, Environment, LogLevel


def test_defaults():
    cfg = AppConfig(environ={})
    assert cfg.environment == Environment.DEVELOPMENT
    assert cfg.storage.storage_key == "onePunchManData"
    assert cfg.export.app_name == "onepunchman"
    assert cfg.tracker.window_days == 30
    assert cfg.tracker.default_weight == 70.0
    assert cfg.tracker.timezone is None
    assert cfg.log_level == LogLevel.INFO
    assert cfg.log_to_file is False


def test_environment_overrides(tmp_path):
    cfg = AppConfig(environ={
        "ENVIRONMENT": "production",
        "DATA_DIR": str(tmp_path / "d"),
        "TIMEZONE": "Europe/Moscow",
        "WINDOW_DAYS": "14",
        "DEFAULT_WEIGHT": "82.5",
        "LOG_LEVEL": "debug",
        "EXPORT_INDENT": "4",
    })
    assert cfg.environment == Environment.PRODUCTION
    assert cfg.storage.data_dir == tmp_path / "d"
    assert cfg.tracker.timezone == "Europe/Moscow"
    assert cfg.tracker.window_days == 14
    assert cfg.tracker.default_weight == 82.5
    assert cfg.log_level == LogLevel.DEBUG
    assert cfg.export.indent == 4


def test_collects_validation_errors():
    with pytest.raises(ConfigError) as exc:
        AppConfig(environ={"TIMEZONE": "Nowhere/City", "WINDOW_DAYS": "0", "DEFAULT_WEIGHT": "-1"})
    message = str(exc.value)
    assert "TIMEZONE" in message
    assert "WINDOW_DAYS" in message
    assert "DEFAULT_WEIGHT" in message


@pytest.mark.parametrize("environ", [
    {"WINDOW_DAYS": "many"},
    {"DEFAULT_WEIGHT": "heavy"},
    {"ENVIRONMENT": "moon"},
    {"LOG_LEVEL": "LOUD"},
])
def test_invalid_values(environ):
    with pytest.raises(ConfigError):
        AppConfig(environ=environ)


def test_logging_config_file_handler(tmp_path):
    cfg = AppConfig(environ={"LOG_TO_FILE": "true", "LOG_DIR": str(tmp_path)})
    logging_config = cfg.get_logging_config()
    assert logging_config["loggers"][""]["handlers"] == ["console", "file"]
    assert logging_config["handlers"]["file"]["filename"].endswith("tracker_development.log")


def test_logging_config_console_only():
    logging_config = AppConfig(environ={}).get_logging_config()
    assert "file" not in logging_config["handlers"]
    assert logging_config["handlers"]["console"]["level"] == logging.getLevelName(logging.INFO)


def test_ensure_directories(tmp_path):
    cfg = AppConfig(environ={"DATA_DIR": str(tmp_path / "data"), "EXPORT_DIR": str(tmp_path / "out")})
    cfg.ensure_directories()
    assert (tmp_path / "data").is_dir()
    assert (tmp_path / "out").is_dir()


def test_to_dict():
    data = AppConfig(environ={}).to_dict()
    assert data["environment"] == "development"
    assert data["tracker"]["window_days"] == 30
