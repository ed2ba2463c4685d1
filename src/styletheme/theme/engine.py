"""Style source registry and the algorithm that resolves sources into styles."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, MutableMapping, Tuple

from ..services.settings import EngineSettings, load_settings
from .deprecation import deprecated_alias
from .errors import (
    CyclicResolutionError,
    InvalidStyleError,
    ResolutionDepthError,
    UnknownSourceError,
)
from .models import (
    MIXINS_KEY,
    Modifiers,
    PostProcessor,
    RawStyle,
    ResolvedStyle,
    SourceProducer,
    is_style_mapping,
    mixin_names,
)

LOGGER = logging.getLogger(__name__)


class Theme:
    """Registry of named style sources that resolves them into plain dicts.

    A source is a callable ``(theme, mod)`` returning a raw style mapping. Raw
    styles may list other sources under ``mixins`` and may contain nested
    mappings that act as modifier groups: they are merged in only when the
    caller's ``modifiers`` select them, and dropped otherwise.

    A producer may call back into :meth:`get_style`. Re-entering a source
    with equal modifiers is a cycle; re-entering it with different modifiers
    is allowed and only bounded by ``settings.max_depth``.

    Example:
        theme = Theme()
        theme.set_source("button", lambda theme, mod: {
            "color": "black",
            "hover": {"color": "blue"},
            "size": {"small": {"padding": 2}, "large": {"padding": 8}},
        })
        theme.get_style("button", {"hover": True, "size": "large"})
        # -> {"color": "blue", "padding": 8}
    """

    def __init__(
        self,
        sources: MutableMapping[str, SourceProducer] | None = None,
        *,
        settings: EngineSettings | None = None,
    ) -> None:
        self._sources: MutableMapping[str, SourceProducer] = sources if sources is not None else {}
        self._post_processor: PostProcessor | None = None
        self._settings = settings if settings is not None else load_settings()
        self._resolving: List[Tuple[str, Any]] = []

    @property
    def sources(self) -> MutableMapping[str, SourceProducer]:
        return self._sources

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    # ------------------------------------------------------------------
    # Source registration
    # ------------------------------------------------------------------
    def set_source(self, name: str, producer: SourceProducer) -> None:
        """Install ``producer`` under ``name``, replacing any previous one."""

        self._sources[name] = producer
        LOGGER.debug("Registered style source: %s", name)

    def extend_source(self, name: str, extender: SourceProducer) -> None:
        """Layer ``extender`` over the raw output of the current ``name`` source.

        Keys returned by ``extender`` replace the base keys one by one; nested
        values are not merged. When ``name`` is free this is ``set_source``.
        """

        base = self._sources.get(name)
        if base is None:
            self.set_source(name, extender)
            return

        def extended(theme: Theme, mod: Any = None) -> RawStyle:
            merged: Dict[str, Any] = dict(_require_mapping(name, base(theme, mod)))
            merged.update(_require_mapping(name, extender(theme, mod)))
            return merged

        LOGGER.debug("Extending style source: %s", name)
        self.set_source(name, extended)

    def get_source(self, name: str) -> SourceProducer | None:
        return self._sources.get(name)

    def has_source(self, name: str) -> bool:
        return name in self._sources

    def source_names(self) -> List[str]:
        return list(self._sources.keys())

    def remove_source(self, name: str) -> bool:
        """Unregister ``name``; returns ``False`` if nothing was registered."""

        if name in self._sources:
            del self._sources[name]
            LOGGER.debug("Removed style source: %s", name)
            return True
        return False

    # ------------------------------------------------------------------
    # Post-processing
    # ------------------------------------------------------------------
    def set_post_processor(self, processor: PostProcessor | None) -> None:
        self._post_processor = processor

    def get_post_processor(self) -> PostProcessor | None:
        return self._post_processor

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def get_style(
        self,
        name: str,
        modifiers: Modifiers | None = None,
        extra_style: Mapping[str, Any] | None = None,
    ) -> ResolvedStyle:
        """Resolve ``name`` into a plain style dict.

        Args:
            name: Registered source name.
            modifiers: Boolean or keyed selections for nested modifier groups.
                Also handed to every producer as its ``mod`` argument.
            extra_style: Keys merged over the resolved style before
                post-processing.

        Returns:
            The post-processor's return value when one is set, otherwise the
            merged style.

        Raises:
            UnknownSourceError: ``name`` or one of its mixins is not registered.
            InvalidStyleError: A producer returned a non-mapping value.
            CyclicResolutionError: A source depends on itself.
            ResolutionDepthError: Nesting exceeds ``settings.max_depth``.
        """

        raw = self._resolve_source(name, modifiers)
        style = self._resolve_modifiers(name, raw, modifiers or {}, depth=0)
        if extra_style:
            style.update(extra_style)
        self._log_resolution("Resolved style %s (%d keys)", name, len(style))

        processor = self._post_processor
        if processor is None:
            return style
        return processor(style)

    @deprecated_alias()
    def get(
        self,
        name: str,
        modifiers: Modifiers | None = None,
        extra_style: Mapping[str, Any] | None = None,
    ) -> ResolvedStyle:
        return self.get_style(name, modifiers, extra_style)

    def clone(self) -> "Theme":
        """Return an independent engine sharing producers and post-processor."""

        twin = type(self)(dict(self._sources), settings=self._settings)
        twin.set_post_processor(self._post_processor)
        return twin

    def _resolve_source(self, name: str, mod: Any) -> Dict[str, Any]:
        producer = self._sources.get(name)
        if producer is None:
            raise UnknownSourceError(name)
        frame = (name, _modifier_snapshot(mod))
        if frame in self._resolving:
            raise CyclicResolutionError(name, [entry for entry, _ in self._resolving])
        self._check_depth(name, len(self._resolving))

        self._resolving.append(frame)
        try:
            raw = _require_mapping(name, producer(self, mod))
            merged: Dict[str, Any] = {}
            for mixin in _require_mixin_names(name, raw.get(MIXINS_KEY)):
                merged.update(self._resolve_source(mixin, mod))
            merged.update(raw)
        finally:
            self._resolving.pop()

        merged.pop(MIXINS_KEY, None)
        return merged

    def _resolve_modifiers(
        self,
        name: str,
        style: Mapping[str, Any],
        modifiers: Modifiers,
        *,
        depth: int,
    ) -> Dict[str, Any]:
        self._check_depth(name, depth)
        resolved: Dict[str, Any] = {}
        selected: List[Mapping[str, Any]] = []
        for key, value in style.items():
            if key == MIXINS_KEY:
                continue
            if not is_style_mapping(value):
                resolved[key] = value
            elif key in modifiers:
                group = _select_group(value, modifiers[key])
                if group is not None:
                    selected.append(group)
        # Groups are merged after every plain key of this level.
        for group in selected:
            resolved.update(self._resolve_modifiers(name, group, modifiers, depth=depth + 1))
        return resolved

    def _check_depth(self, name: str, depth: int) -> None:
        limit = self._settings.max_depth
        if depth > limit:
            raise ResolutionDepthError(name, depth, limit)

    def _log_resolution(self, message: str, *args: Any) -> None:
        level = logging.INFO if self._settings.debug_logging else logging.DEBUG
        LOGGER.log(level, message, *args)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(sources={self.source_names()!r})"


def _require_mapping(name: str, value: Any) -> Mapping[str, Any]:
    if not is_style_mapping(value):
        raise InvalidStyleError(name, value)
    return value


def _require_mixin_names(name: str, value: Any) -> List[str]:
    names = mixin_names(value)
    if names is None:
        raise InvalidStyleError(
            name, value, reason="has a 'mixins' value that is not a source name or a list of names"
        )
    return names


def _modifier_snapshot(mod: Any) -> Any:
    return dict(mod) if is_style_mapping(mod) else mod


def _select_group(group: Mapping[str, Any], choice: Any) -> Mapping[str, Any] | None:
    if choice is True:
        return group
    if isinstance(choice, str):
        variant = group.get(choice)
        if is_style_mapping(variant):
            return variant
    return None


__all__ = ["Theme"]
