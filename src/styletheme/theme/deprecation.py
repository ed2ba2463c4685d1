"""Deprecation helpers for legacy :class:`~styletheme.theme.Theme` entry points."""

from __future__ import annotations

import functools
import logging
import warnings
from typing import Any, Callable, TypeVar

LOGGER = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Legacy method name -> replacement
LEGACY_ALIASES: dict[str, str] = {
    "get": "get_style",
}


class DeprecatedThemeWarning(DeprecationWarning):
    """Warning for deprecated theme APIs."""

    pass


def _deprecation_message(name: str, replacement: str | None, removal_version: str) -> str:
    msg = f"{name} is deprecated and will be removed in version {removal_version}."
    if replacement:
        msg += f" Use {replacement} instead."
    return msg


def emit_deprecation_warning(
    name: str,
    replacement: str | None = None,
    removal_version: str = "2.0.0",
    *,
    stacklevel: int = 3,
) -> None:
    """Emit a deprecation warning for a legacy API.

    Args:
        name: Name of the deprecated callable.
        replacement: Name of the replacement callable.
        removal_version: Version when the callable will be removed.
        stacklevel: Passed through to :func:`warnings.warn`; the default points
            at the caller of the function that invoked this helper.
    """
    warnings.warn(
        _deprecation_message(name, replacement, removal_version),
        DeprecatedThemeWarning,
        stacklevel=stacklevel,
    )


def deprecated_alias(
    replacement: str | None = None,
    removal_version: str = "2.0.0",
) -> Callable[[F], F]:
    """Decorator marking a function or method as a deprecated alias.

    ``replacement`` defaults to the entry for the decorated name in
    ``LEGACY_ALIASES``. Methods on objects exposing
    ``settings.deprecation_warnings`` stay silent when that flag is off.
    """

    def decorator(func: F) -> F:
        target = replacement or get_replacement(func.__name__)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            owner_settings = getattr(args[0], "settings", None) if args else None
            if getattr(owner_settings, "deprecation_warnings", True):
                emit_deprecation_warning(func.__name__, target, removal_version)
            else:
                LOGGER.debug("Suppressed deprecation warning for %s", func.__name__)
            return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    return decorator


def get_replacement(legacy_name: str) -> str | None:
    """Return the replacement for ``legacy_name`` if one is known."""

    return LEGACY_ALIASES.get(legacy_name)


# Enable deprecation warnings by default in development
warnings.filterwarnings("default", category=DeprecatedThemeWarning)


__all__ = [
    "LEGACY_ALIASES",
    "DeprecatedThemeWarning",
    "deprecated_alias",
    "emit_deprecation_warning",
    "get_replacement",
]
