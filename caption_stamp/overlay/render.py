"""Paint overlays onto Pillow images."""

from collections.abc import Iterable

from PIL import Image, ImageDraw

from ..core.debug import debug_print
from .colors import Color, check_mode
from .errors import ImmutableImageError
from .spec import OverlaySpec

# Space between the text extent and the edge of the background box, in pixels
OVERLAY_PADDING = 10


def text_extent(spec: OverlaySpec) -> tuple[int, int, int, int]:
    """Tight bounding box of the inked glyph pixels, relative to the baseline origin.

    Returns (left, top, right, bottom); top is negative for glyphs above the baseline.
    Text without visible glyphs (empty or whitespace) has an empty box at the origin.
    """
    if not spec.text:
        return (0, 0, 0, 0)

    # getbbox spans the advance from the origin; the ink may start after it
    left, top, right, bottom = spec.font.getbbox(spec.text, anchor="ls")
    scratch = Image.new("L", (right - left, bottom - top), 0)
    ImageDraw.Draw(scratch).text((-left, -top), spec.text, fill=255, font=spec.font, anchor="ls")
    ink = scratch.getbbox()
    if ink is None:
        return (0, 0, 0, 0)
    return (left + ink[0], top + ink[1], left + ink[2], top + ink[3])


def background_box(spec: OverlaySpec) -> tuple[int, int, int, int]:
    """Background rectangle (left, top, right, bottom) in image pixels.

    Right and bottom are exclusive, as in ``Image.paste`` boxes.
    """
    left, top, right, bottom = text_extent(spec)
    return (
        spec.x + left - OVERLAY_PADDING,
        spec.y + top - OVERLAY_PADDING,
        spec.x + right + OVERLAY_PADDING,
        spec.y + bottom + OVERLAY_PADDING,
    )


def render_overlay(img: Image.Image, spec: OverlaySpec) -> Image.Image:
    """Draw one overlay on ``img`` in place.

    The background box (unless transparent) replaces the pixels under it,
    then the text is drawn with its baseline-left origin at (x, y).
    Anything outside the image is clipped.

    Args:
        img: Image to draw on; must be a writable Pillow image in a supported mode
        spec: Resolved overlay

    Returns:
        The same image object

    Raises:
        ImmutableImageError: If ``img`` cannot be modified in place
        UnsupportedModeError: If palette colors cannot be painted on ``img``'s mode
    """
    if not isinstance(img, Image.Image):
        raise ImmutableImageError(f"image is immutable: {type(img).__name__} is not a Pillow image")
    if img.readonly:
        raise ImmutableImageError("image is immutable: pixel buffer is read-only")
    check_mode(img)

    if spec.background is not Color.TRANSPARENT:
        box = background_box(spec)
        debug_print(f"Overlay background {spec.background.value} at {box}")
        img.paste(spec.background.fill(img), box)

    if spec.text:
        ink = spec.foreground.fill(img)
        draw = ImageDraw.Draw(img)
        if img.mode == "P":
            # antialiased edges would blend palette indices, not colors
            draw.fontmode = "1"
        draw.text((spec.x, spec.y), spec.text, fill=ink, font=spec.font, anchor="ls")
    return img


def render_overlays(img: Image.Image, overlays: Iterable[OverlaySpec]) -> Image.Image:
    """Draw overlays in order; later overlays paint over earlier ones.

    Stops at the first failing overlay, leaving earlier ones applied.
    """
    for spec in overlays:
        render_overlay(img, spec)
    return img
