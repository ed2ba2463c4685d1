"""Data shapes flowing through the style resolution engine."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .engine import Theme

MIXINS_KEY = "mixins"

RawStyle = Mapping[str, Any]
ResolvedStyle = Dict[str, Any]
ModifierValue = Union[bool, str]
Modifiers = Mapping[str, ModifierValue]
SourceProducer = Callable[["Theme", Optional[Any]], RawStyle]
PostProcessor = Callable[[ResolvedStyle], Any]


def is_style_mapping(value: Any) -> bool:
    """Return ``True`` when ``value`` can be merged as a style object."""

    return isinstance(value, Mapping)


def merge_styles(*styles: Mapping[str, Any] | None) -> ResolvedStyle:
    """Shallow-merge ``styles`` left to right into a new dict.

    Later mappings win on overlapping keys; nested values are copied by
    reference and never merged recursively. ``None`` entries are skipped.
    """

    merged: ResolvedStyle = {}
    for style in styles:
        if style:
            merged.update(style)
    return merged


def mixin_names(value: Any) -> list[str] | None:
    """Normalize the value stored under ``mixins`` into a list of names.

    Returns ``None`` when ``value`` is neither a name nor a sequence of names.
    """

    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence) and all(isinstance(name, str) for name in value):
        return list(value)
    return None


__all__ = [
    "MIXINS_KEY",
    "ModifierValue",
    "Modifiers",
    "PostProcessor",
    "RawStyle",
    "ResolvedStyle",
    "SourceProducer",
    "is_style_mapping",
    "merge_styles",
    "mixin_names",
]
