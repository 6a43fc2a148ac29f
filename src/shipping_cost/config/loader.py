from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from shipping_cost.usecases.config_models import AppConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "default_config.yml"

_ALLOWED_TOP_LEVEL = {"version", "countries", "configurations"}
_REQUIRED_TOP_LEVEL = ("version", "configurations")


# ConfigError is raised for invalid or missing configuration; nothing falls back to defaults.
class ConfigError(ValueError):
    pass


def load_config(path: Path) -> AppConfig:
    # YAML loader: parse, check the top level, then validate into typed models.
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
    return parse_config(raw)


def parse_config(raw: Any) -> AppConfig:
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    _validate_top_level(raw)
    try:
        return AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def _validate_top_level(raw: dict[str, Any]) -> None:
    # Fail fast on unknown keys to prevent silent misconfiguration.
    unknown = set(raw.keys()) - _ALLOWED_TOP_LEVEL
    if unknown:
        raise ConfigError(f"Unknown top-level keys: {sorted(unknown)}")

    missing = [key for key in _REQUIRED_TOP_LEVEL if key not in raw]
    if missing:
        raise ConfigError(f"Missing required top-level keys: {', '.join(missing)}")

    configurations = raw.get("configurations")
    if not isinstance(configurations, list):
        raise ConfigError("configurations must be a list")
