"""Text overlays for raster images."""

__version__ = "1.0.0"

from .core.config import StampConfig, load_config
from .core.debug import _is_debug_mode, debug_print
from .core.dependencies import check_external_dependencies
from .core.main import main
from .core.workflow import stamp_file, stamp_image
from .overlay import (
    Color,
    FontCache,
    FontSpecError,
    ImmutableImageError,
    InvalidColorError,
    InvalidIntegerError,
    MalformedTokenError,
    OverlayError,
    OverlayKey,
    OverlayList,
    OverlaySpec,
    ParseError,
    SpecParser,
    UnknownKeyError,
    UnsupportedModeError,
    render_overlay,
    render_overlays,
)

__all__ = [
    "__version__",
    "StampConfig",
    "load_config",
    "main",
    "debug_print",
    "_is_debug_mode",
    "check_external_dependencies",
    "stamp_file",
    "stamp_image",
    "Color",
    "FontCache",
    "FontSpecError",
    "ImmutableImageError",
    "InvalidColorError",
    "InvalidIntegerError",
    "MalformedTokenError",
    "OverlayError",
    "OverlayKey",
    "OverlayList",
    "OverlaySpec",
    "ParseError",
    "SpecParser",
    "UnknownKeyError",
    "UnsupportedModeError",
    "render_overlay",
    "render_overlays",
]
