"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class CalendarConfig:
    """Calendar capability settings."""
    backend: str = "hebcal"
    base_url: str = "https://www.hebcal.com/converter"
    timeout: float = 10.0


@dataclass
class OptionsConfig:
    """Date-picker options settings."""
    year_span: int = 50


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"
    json_format: bool = False


@dataclass
class Settings:
    """Application settings."""

    calendar: CalendarConfig = field(default_factory=CalendarConfig)
    options: OptionsConfig = field(default_factory=OptionsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def calendar_backend(self) -> str:
        return self.calendar.backend

    @property
    def calendar_timeout(self) -> float:
        return self.calendar.timeout

    @property
    def year_span(self) -> int:
        return self.options.year_span


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)
    settings = Settings()

    if "calendar" in config:
        for key, value in config["calendar"].items():
            setattr(settings.calendar, key, value)

    if "options" in config:
        for key, value in config["options"].items():
            setattr(settings.options, key, value)

    if "logging" in config:
        for key, value in config["logging"].items():
            setattr(settings.logging, key, value)

    # Environment overrides YAML
    backend = os.getenv("HEBDATE_CALENDAR_BACKEND")
    if backend:
        settings.calendar.backend = backend

    base_url = os.getenv("HEBCAL_BASE_URL")
    if base_url:
        settings.calendar.base_url = base_url

    log_level = os.getenv("LOG_LEVEL")
    if log_level:
        settings.logging.level = log_level

    return settings
