"""Engine settings dataclass and environment override helpers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping

__all__ = [
    "EngineSettings",
    "DEFAULT_MAX_DEPTH",
    "load_settings",
]

LOGGER = logging.getLogger(__name__)
DEFAULT_MAX_DEPTH = 64
_BOOL_ENV_OVERRIDES: Mapping[str, str] = {
    "STYLETHEME_DEPRECATION_WARNINGS": "deprecation_warnings",
    "STYLETHEME_DEBUG_LOGGING": "debug_logging",
}
_INT_ENV_OVERRIDES: Mapping[str, str] = {
    "STYLETHEME_MAX_DEPTH": "max_depth",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(slots=True)
class EngineSettings:
    """Tunables shared by a theme engine and its clones."""

    max_depth: int = DEFAULT_MAX_DEPTH
    deprecation_warnings: bool = True
    debug_logging: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer")


def load_settings(*, overrides: Mapping[str, Any] | None = None) -> EngineSettings:
    """Build settings from defaults, explicit ``overrides`` and the environment.

    Environment variables win over ``overrides`` so deployments can adjust a
    host application's hard-coded choices.
    """

    settings = EngineSettings()
    if overrides:
        settings = _apply_overrides(settings, overrides, source="overrides")
    return _apply_env_overrides(settings)


def _apply_overrides(
    settings: EngineSettings,
    overrides: Mapping[str, Any],
    *,
    source: str,
) -> EngineSettings:
    known = {field.name for field in fields(EngineSettings)}
    filtered: Dict[str, Any] = {}
    for key, value in overrides.items():
        if key in known:
            filtered[key] = value
        else:
            LOGGER.warning("Ignoring unknown engine setting %r from %s", key, source)
    if filtered:
        LOGGER.debug("Applying %s settings overrides: %s", source, ", ".join(sorted(filtered)))
        settings = replace(settings, **filtered)
    return settings


def _apply_env_overrides(settings: EngineSettings) -> EngineSettings:
    overrides: Dict[str, Any] = {}
    for env_name, field_name in _BOOL_ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is not None:
            overrides[field_name] = value.strip().lower() in _TRUE_VALUES
    for env_name, field_name in _INT_ENV_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value is None:
            continue
        try:
            number = int(value, 10)
        except ValueError:
            LOGGER.warning(
                "Environment override %s=%s is not a valid integer",
                env_name,
                value,
            )
            continue
        if number < 1:
            LOGGER.warning("Environment override %s=%s must be positive", env_name, value)
            continue
        overrides[field_name] = number
    if overrides:
        settings = _apply_overrides(settings, overrides, source="environment")
    return settings
