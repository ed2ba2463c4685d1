"""styletheme: resolve named style sources into plain style dicts."""

from .services.settings import EngineSettings, load_settings
from .theme import (
    CyclicResolutionError,
    DeprecatedThemeWarning,
    InvalidStyleError,
    ResolutionDepthError,
    Theme,
    ThemeError,
    UnknownSourceError,
    merge_styles,
)
from .utils.logging import get_log_path, setup_logging

__version__ = "1.0.0"

__all__ = [
    "CyclicResolutionError",
    "DeprecatedThemeWarning",
    "EngineSettings",
    "InvalidStyleError",
    "ResolutionDepthError",
    "Theme",
    "ThemeError",
    "UnknownSourceError",
    "get_log_path",
    "load_settings",
    "merge_styles",
    "setup_logging",
]
