"""Exceptions raised while registering or resolving style sources."""

from __future__ import annotations

from typing import Any, Sequence

__all__ = [
    "ThemeError",
    "UnknownSourceError",
    "InvalidStyleError",
    "CyclicResolutionError",
    "ResolutionDepthError",
]


class ThemeError(Exception):
    """Base class for every error raised by :class:`~styletheme.theme.Theme`."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class UnknownSourceError(ThemeError, KeyError):
    """Raised when a requested style source has no registered producer."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Style source '{name}' is not registered")


class InvalidStyleError(ThemeError, TypeError):
    """Raised when a producer returns something other than a mapping."""

    def __init__(self, name: str, value: Any, *, reason: str | None = None) -> None:
        self.value = value
        detail = reason or "must return a mapping"
        super().__init__(
            name,
            f"Style source '{name}' {detail}, received {type(value).__name__}",
        )


class CyclicResolutionError(ThemeError, RecursionError):
    """Raised when a source ends up depending on itself."""

    def __init__(self, name: str, path: Sequence[str]) -> None:
        self.path = tuple(path)
        chain = " -> ".join((*self.path, name))
        super().__init__(name, f"Cyclic style resolution: {chain}")


class ResolutionDepthError(ThemeError, RecursionError):
    """Raised when mixins or modifier groups nest deeper than allowed."""

    def __init__(self, name: str, depth: int, limit: int) -> None:
        self.depth = depth
        self.limit = limit
        super().__init__(
            name,
            f"Resolving '{name}' exceeded the maximum nesting depth of {limit}",
        )
