"""YAML config loader: parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from review_confidence.config.domain.config import AppConfig
from review_confidence.config.domain.observer import ConfigObserver
from review_confidence.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from review_confidence.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

# Above this the remote score is no longer close to deterministic.
_MAX_STABLE_TEMPERATURE = 0.2


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AppConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None) -> AppConfig:
        """
        Load, interpolate, validate, and return an AppConfig from a YAML file.

        A ``None`` path yields the all-defaults configuration.

        Raises:
            ConfigLoadError: if the file does not exist or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the schema is violated.
        """
        if path is None:
            cfg = AppConfig()
            self._observer.config_defaults_used()
        else:
            raw = _parse_yaml(path=path)
            _check_missing_env_vars(raw=raw)
            cfg = _build_config(resolved=interpolate(raw))
            self._observer.config_loaded(name=cfg.name, version=cfg.version)

        _emit_warnings(cfg=cfg, observer=self._observer)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc
    # An empty file parses to None; treat it as "all defaults".
    return raw if raw is not None else {}


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(resolved: Any) -> AppConfig:
    try:
        return AppConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: AppConfig, observer: ConfigObserver) -> None:
    if cfg.scorer.temperature > _MAX_STABLE_TEMPERATURE:
        observer.config_scorer_temperature_warning(cfg.scorer.temperature)
