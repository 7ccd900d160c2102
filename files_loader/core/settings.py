"""Settings loading and validation.

This module provides a minimal, type-safe configuration loader for the loader.

Design principles:
- Fail-fast: invalid fields raise a readable error that includes the field path
- No side effects: this module only parses/validates configuration; nothing is loaded
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from files_loader.core.types import ALLOWED_MODES, DEFAULT_MODE


class SettingsError(ValueError):
    """Raised when settings are missing or invalid."""


@dataclass(frozen=True)
class LoaderSettings:
    default_mode: str = DEFAULT_MODE
    runner: str = "python"
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ObservabilitySettings:
    log_level: str = "INFO"
    trace_enabled: bool = False
    trace_file: str = "./logs/traces.jsonl"


@dataclass(frozen=True)
class Settings:
    loader: LoaderSettings = field(default_factory=LoaderSettings)
    observability: ObservabilitySettings = field(default_factory=ObservabilitySettings)


def _optional_section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise SettingsError(f"Invalid section type: {key}")
    return value


def _as_str(value: Any, path: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SettingsError(f"Invalid value for {path}: expected non-empty string")
    return value


def _as_bool(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise SettingsError(f"Invalid value for {path}: expected bool")
    return value


def validate_settings(settings: Settings) -> None:
    """Validate basic invariants."""

    if settings.loader.default_mode.lower() not in ALLOWED_MODES:
        raise SettingsError(
            "Invalid value for loader.default_mode: expected one of "
            + ", ".join(ALLOWED_MODES)
        )


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file."""

    settings_path = Path(path)
    if not settings_path.exists():
        raise SettingsError(f"Settings file not found: {settings_path}")

    try:
        raw_obj = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in settings file: {settings_path}") from e

    if raw_obj is None:
        raw_obj = {}
    if not isinstance(raw_obj, Mapping):
        raise SettingsError(f"Invalid settings root: expected mapping in {settings_path}")

    loader_raw = _optional_section(raw_obj, "loader")
    observability_raw = _optional_section(raw_obj, "observability")

    defaults = LoaderSettings()
    loader = LoaderSettings(
        default_mode=_as_str(
            loader_raw.get("default_mode", defaults.default_mode),
            "loader.default_mode",
        ).lower(),
        runner=_as_str(loader_raw.get("runner", defaults.runner), "loader.runner"),
        encoding=_as_str(loader_raw.get("encoding", defaults.encoding), "loader.encoding"),
    )

    obs_defaults = ObservabilitySettings()
    observability = ObservabilitySettings(
        log_level=_as_str(
            observability_raw.get("log_level", obs_defaults.log_level),
            "observability.log_level",
        ),
        trace_enabled=_as_bool(
            observability_raw.get("trace_enabled", obs_defaults.trace_enabled),
            "observability.trace_enabled",
        ),
        trace_file=_as_str(
            observability_raw.get("trace_file", obs_defaults.trace_file),
            "observability.trace_file",
        ),
    )

    settings = Settings(loader=loader, observability=observability)

    validate_settings(settings)
    return settings
