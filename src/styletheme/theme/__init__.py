"""Theme module: style source registry, resolution engine and its errors."""

from .deprecation import DeprecatedThemeWarning
from .engine import Theme
from .errors import (
    CyclicResolutionError,
    InvalidStyleError,
    ResolutionDepthError,
    ThemeError,
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
    merge_styles,
)

__all__ = [
    "CyclicResolutionError",
    "DeprecatedThemeWarning",
    "InvalidStyleError",
    "MIXINS_KEY",
    "Modifiers",
    "PostProcessor",
    "RawStyle",
    "ResolutionDepthError",
    "ResolvedStyle",
    "SourceProducer",
    "Theme",
    "ThemeError",
    "UnknownSourceError",
    "is_style_mapping",
    "merge_styles",
]
