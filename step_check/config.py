"""Project settings from .stepcheck/config.yaml, plus logging setup."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

PROJECT_DIR = ".stepcheck"
CONFIG_FILE = "config.yaml"
LOG_LEVEL_ENV = "STEPCHECK_LOG_LEVEL"

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    root: Path
    log_level: str = "WARNING"
    checks_dir: str = "checks"
    scenarios_dir: str = "scenarios"

    @property
    def checks_path(self) -> Path:
        return self.root / self.checks_dir

    @property
    def scenarios_path(self) -> Path:
        return self.root / self.scenarios_dir


def _parse_level(value: object) -> str:
    level = str(value).strip().upper()
    if level not in _LEVELS:
        raise ValueError(f"Unknown log level: {value!r}. Use one of {', '.join(_LEVELS)}")
    return level


def load_settings(cwd: str | Path) -> Settings:
    """Read settings for the project rooted at ``cwd``; defaults when absent."""
    root = Path(cwd) / PROJECT_DIR
    settings = Settings(root=root)

    config_path = root / CONFIG_FILE
    if config_path.exists():
        try:
            raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid config {config_path}: {e}") from e
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config {config_path}: expected a mapping")
        if "log_level" in raw:
            settings.log_level = _parse_level(raw["log_level"])
        for key in ("checks_dir", "scenarios_dir"):
            if raw.get(key):
                setattr(settings, key, str(raw[key]))

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        settings.log_level = _parse_level(env_level)
    return settings


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, _parse_level(level)), format="%(levelname)s: %(message)s")
