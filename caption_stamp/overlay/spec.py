"""Overlay descriptor parsing.

A descriptor is a comma-separated list of ``key=value`` tokens::

    x=10,y=50%,fg=white,bg=black,font=/fonts/Sans.ttf:14,string=Hello

Recognized keys:
    x, y            anchor (text baseline origin) in pixels, or ``N%`` of the image size
    fg              text color, any palette color except transparent
    bg              background box color; transparent (or empty) draws no box
    font            "path:size" font spec, size in points (default 12)
    string, str, s  literal text; everything after the first ``=`` is kept
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from PIL import ImageFont

from ..core.debug import debug_print
from .colors import Color, parse_color
from .errors import (
    InvalidColorError,
    InvalidIntegerError,
    MalformedTokenError,
    OverlayError,
    UnknownKeyError,
)
from .fonts import DEFAULT_FONT_SPEC, FontCache

DEFAULT_TEXT = "<no content>"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class OverlayKey(Enum):
    """Keys accepted in an overlay descriptor."""

    X = "x"
    Y = "y"
    FG = "fg"
    BG = "bg"
    FONT = "font"
    STRING = "string"

    @classmethod
    def from_token(cls, key: str) -> "OverlayKey":
        """Look up a key by its descriptor spelling, including aliases."""
        member = _KEY_ALIASES.get(key)
        if member is None:
            raise UnknownKeyError(f"unknown key {key!r}")
        return member


_KEY_ALIASES: dict[str, OverlayKey] = {member.value: member for member in OverlayKey}
_KEY_ALIASES.update({"str": OverlayKey.STRING, "s": OverlayKey.STRING})


@dataclass(frozen=True)
class OverlaySpec:
    """A fully resolved overlay, ready to render."""

    x: int
    y: int
    foreground: Color
    background: Color
    font: ImageFont.FreeTypeFont
    text: str

    def __str__(self) -> str:
        return (
            f"{{x:{self.x} y:{self.y} fg:{self.foreground.value} "
            f"bg:{self.background.value} text:{self.text!r}}}"
        )


def parse_coordinate(value: str, dimension: int) -> int:
    """Parse an integer coordinate, or a percentage of ``dimension``.

    Percentages resolve to ``round(pct / 100 * dimension)`` with halves
    rounded up, computed on integers so no float error creeps in.

    Raises:
        InvalidIntegerError: If the value (without a trailing ``%``) is not an integer
    """
    is_percentage = value.endswith("%")
    number = value[:-1] if is_percentage else value
    if not _INTEGER_RE.fullmatch(number):
        raise InvalidIntegerError(f"invalid integer {number!r}")

    parsed = int(number)
    if is_percentage:
        return (2 * parsed * dimension + 100) // 200
    return parsed


class SpecParser:
    """Turns descriptor strings into ``OverlaySpec`` records.

    Args:
        font_cache: Cache used to resolve ``font`` values. A private cache is
            created when omitted; share one to reuse faces across parsers.
        default_font: Font spec used when a descriptor has no ``font`` key
    """

    def __init__(
        self, font_cache: FontCache | None = None, default_font: str = DEFAULT_FONT_SPEC
    ) -> None:
        self.font_cache = font_cache if font_cache is not None else FontCache()
        self.default_font = default_font

    def parse(self, raw: str, image_width: int, image_height: int) -> OverlaySpec:
        """Parse one descriptor.

        Args:
            raw: Descriptor string
            image_width: Width of the target image, for ``x=N%``
            image_height: Height of the target image, for ``y=N%``

        Returns:
            Resolved overlay

        Raises:
            ParseError: On a malformed token, unknown key, bad integer or bad color
            FontSpecError: If the given or default font cannot be loaded
        """
        fields: dict[str, Any] = {
            "x": 0,
            "y": 0,
            "foreground": Color.BLACK,
            "background": Color.WHITE,
            "text": DEFAULT_TEXT,
        }
        dimensions = {OverlayKey.X: image_width, OverlayKey.Y: image_height}

        for token in raw.split(","):
            try:
                key_str, sep, value = token.partition("=")
                if not sep:
                    raise MalformedTokenError("expected key=value")
                key = OverlayKey.from_token(key_str)
                self._setters[key](self, fields, value, dimensions.get(key, 0))
            except OverlayError as e:
                e.attach(token=token, descriptor=raw)
                raise

        if "font" not in fields:
            try:
                fields["font"] = self.font_cache.resolve(self.default_font)
            except OverlayError as e:
                e.attach(descriptor=raw)
                raise

        spec = OverlaySpec(**fields)
        debug_print(f"Parsed overlay {raw!r} -> {spec}")
        return spec

    def _set_x(self, fields: dict[str, Any], value: str, dimension: int) -> None:
        fields["x"] = parse_coordinate(value, dimension)

    def _set_y(self, fields: dict[str, Any], value: str, dimension: int) -> None:
        fields["y"] = parse_coordinate(value, dimension)

    def _set_foreground(self, fields: dict[str, Any], value: str, dimension: int) -> None:
        color = parse_color(value)
        if color is Color.TRANSPARENT:
            raise InvalidColorError(f"invalid fg color: {color.value}")
        fields["foreground"] = color

    def _set_background(self, fields: dict[str, Any], value: str, dimension: int) -> None:
        fields["background"] = parse_color(value)

    def _set_font(self, fields: dict[str, Any], value: str, dimension: int) -> None:
        fields["font"] = self.font_cache.resolve(value)

    def _set_text(self, fields: dict[str, Any], value: str, dimension: int) -> None:
        fields["text"] = value

    _setters: dict[OverlayKey, Callable[["SpecParser", dict[str, Any], str, int], None]] = {
        OverlayKey.X: _set_x,
        OverlayKey.Y: _set_y,
        OverlayKey.FG: _set_foreground,
        OverlayKey.BG: _set_background,
        OverlayKey.FONT: _set_font,
        OverlayKey.STRING: _set_text,
    }


class OverlayList(list[OverlaySpec]):
    """Ordered overlays for one image; later entries paint over earlier ones.

    Only successfully parsed descriptors are appended.
    """

    def __init__(self, parser: SpecParser | None = None) -> None:
        super().__init__()
        self.parser = parser if parser is not None else SpecParser()

    def add(self, raw: str, image_width: int, image_height: int) -> OverlaySpec:
        """Parse ``raw`` against the image size and append the result."""
        spec = self.parser.parse(raw, image_width, image_height)
        self.append(spec)
        return spec

    def __str__(self) -> str:
        return "[" + " ".join(str(spec) for spec in self) + "]"
