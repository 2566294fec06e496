"""Overlay descriptors, fonts and rendering."""

from .colors import SUPPORTED_MODES, Color, parse_color
from .errors import (
    FontSpecError,
    ImmutableImageError,
    InvalidColorError,
    InvalidIntegerError,
    MalformedTokenError,
    OverlayError,
    ParseError,
    UnknownKeyError,
    UnsupportedModeError,
)
from .fonts import DEFAULT_FONT_SPEC, DPI, FontCache
from .render import OVERLAY_PADDING, background_box, render_overlay, render_overlays
from .spec import DEFAULT_TEXT, OverlayKey, OverlayList, OverlaySpec, SpecParser

__all__ = [
    "Color",
    "DEFAULT_FONT_SPEC",
    "DEFAULT_TEXT",
    "DPI",
    "FontCache",
    "FontSpecError",
    "ImmutableImageError",
    "InvalidColorError",
    "InvalidIntegerError",
    "MalformedTokenError",
    "OVERLAY_PADDING",
    "OverlayError",
    "OverlayKey",
    "OverlayList",
    "OverlaySpec",
    "ParseError",
    "SUPPORTED_MODES",
    "SpecParser",
    "UnknownKeyError",
    "UnsupportedModeError",
    "background_box",
    "parse_color",
    "render_overlay",
    "render_overlays",
]
