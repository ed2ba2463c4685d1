"""Service layer helpers (settings)."""

from .settings import DEFAULT_MAX_DEPTH, EngineSettings, load_settings

__all__ = ["DEFAULT_MAX_DEPTH", "EngineSettings", "load_settings"]
