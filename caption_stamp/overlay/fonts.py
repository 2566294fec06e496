"""Font resolution from "path:size" specs, with a process-lifetime cache.

Sizes in a spec are points. Every face is rendered at the same fixed
resolution (``DPI``), so a point size maps to a pixel size of
``points * DPI / 72`` for all fonts loaded in the process.
"""

import math
import re
import threading
from io import BytesIO
from pathlib import Path

from PIL import ImageFont

from ..core.debug import debug_print
from .errors import FontSpecError

DPI = 226
DEFAULT_FONT_SIZE = 12.0
DEFAULT_FONT_SPEC = "/usr/share/fonts/ttf/noto/NotoSans-Regular.ttf:12"

# Plain decimal or exponent notation; no spaces, underscores or special values
_SIZE_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def points_to_pixels(size: float) -> float:
    """Convert a point size to a pixel size at the fixed DPI."""
    return size * DPI / 72


def split_font_spec(spec: str) -> tuple[str, float]:
    """Split "path:size" into path and point size.

    The split happens on the first ``:``; without one the size defaults to 12.

    Raises:
        FontSpecError: If the size is not a finite number greater than zero
    """
    path, sep, size_str = spec.partition(":")
    if not sep:
        debug_print(f"Font {spec!r}: no size given, using default size {DEFAULT_FONT_SIZE:g}")
        return path, DEFAULT_FONT_SIZE

    if not _SIZE_RE.fullmatch(size_str):
        raise FontSpecError(f"invalid font size {size_str!r} in {spec!r}")
    size = float(size_str)
    if not math.isfinite(size) or size <= 0:
        raise FontSpecError(f"font size must be a positive number, got {size_str!r}")
    return path, size


class FontCache:
    """Maps literal font specs to loaded faces.

    Entries are created on first use and kept for the lifetime of the cache.
    The same literal spec always returns the same face object; a spec that
    differs in any character (including size) gets its own entry.
    Safe to share between threads.
    """

    def __init__(self) -> None:
        self._faces: dict[str, ImageFont.FreeTypeFont] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._faces)

    def __contains__(self, spec: object) -> bool:
        with self._lock:
            return spec in self._faces

    def resolve(self, spec: str) -> ImageFont.FreeTypeFont:
        """Return the face for ``spec``, loading it on a cache miss.

        Args:
            spec: "path:size" or "path" (size defaults to 12 points)

        Raises:
            FontSpecError: If the size is malformed, or the file cannot be read or parsed
        """
        with self._lock:
            face = self._faces.get(spec)
            if face is None:
                face = _load_face(spec)
                self._faces[spec] = face
            return face


def _load_face(spec: str) -> ImageFont.FreeTypeFont:
    path, size = split_font_spec(spec)

    try:
        font_bytes = Path(path).read_bytes()
    except OSError as e:
        raise FontSpecError(f"cannot read font file {path!r}: {e}") from e

    pixel_size = points_to_pixels(size)
    try:
        face = ImageFont.truetype(BytesIO(font_bytes), pixel_size)
    except (OSError, ValueError) as e:
        raise FontSpecError(f"cannot parse font file {path!r}: {e}") from e

    debug_print(f"Font loaded: {path} at {size:g}pt ({pixel_size:.2f}px @ {DPI} DPI)")
    return face
