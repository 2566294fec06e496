"""Fixed color palette for overlay text and backgrounds."""

from enum import Enum

from PIL import Image, ImageColor

from .errors import InvalidColorError, UnsupportedModeError

# Modes whose fill value ImageColor.getcolor computes correctly
_COLOR_MODES = ("L", "LA", "RGB", "RGBA", "I", "F")
SUPPORTED_MODES = (*_COLOR_MODES, "P", "CMYK")


class Color(str, Enum):
    """Palette colors, keyed by their descriptor token."""

    TRANSPARENT = "transparent"
    BLACK = "black"
    GRAY1 = "gray1"
    GRAY2 = "gray2"
    WHITE = "white"

    @property
    def level(self) -> int | None:
        """Gray level 0-255, or None for transparent."""
        return _GRAY_LEVELS.get(self)

    def fill(self, img: Image.Image) -> int | tuple[int, ...]:
        """Return the flat fill value of this color for ``img``.

        Palette images get a palette index (allocated if the color is not in
        the palette yet), CMYK images get ink on the K channel only.

        Args:
            img: Image that will be painted

        Raises:
            ValueError: If called on ``Color.TRANSPARENT``, which paints nothing
            UnsupportedModeError: If the image mode is not in SUPPORTED_MODES
        """
        level = self.level
        if level is None:
            raise ValueError("transparent has no fill value")

        if img.mode in _COLOR_MODES:
            return ImageColor.getcolor(f"rgb({level},{level},{level})", img.mode)
        if img.mode == "CMYK":
            return (0, 0, 0, 255 - level)
        if img.mode == "P":
            # realizes a raw palette so it can be searched and extended
            img.load()
            return img.palette.getcolor((level, level, level), img)
        raise UnsupportedModeError(f"cannot paint on {img.mode} images")


_GRAY_LEVELS: dict[Color, int] = {
    Color.BLACK: 0,
    Color.GRAY1: 85,
    Color.GRAY2: 170,
    Color.WHITE: 255,
}


def check_mode(img: Image.Image) -> None:
    """Raise UnsupportedModeError unless palette colors can be painted on ``img``."""
    if img.mode not in SUPPORTED_MODES:
        raise UnsupportedModeError(
            f"cannot paint on {img.mode} images (supported: {', '.join(SUPPORTED_MODES)})"
        )


def parse_color(token: str) -> Color:
    """Parse a palette token. The empty token means transparent."""
    if token == "":
        return Color.TRANSPARENT
    try:
        return Color(token)
    except ValueError:
        raise InvalidColorError(f"invalid color {token!r}") from None
