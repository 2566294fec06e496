"""Decode, stamp and re-encode images."""

from collections.abc import Iterable
from io import BytesIO
from pathlib import Path

from PIL import Image

from ..overlay.render import render_overlays
from ..overlay.spec import OverlayList, SpecParser
from .config import StampConfig
from .debug import debug_print

# Modes the palette can be painted on directly; anything else is converted to RGBA
_DRAWABLE_MODES = ("L", "RGB", "RGBA")


def check_writable_format(image_format: str) -> None:
    """Raise ValueError unless Pillow can encode ``image_format``."""
    Image.init()
    if image_format not in Image.SAVE:
        raise ValueError(f"cannot write {image_format} images")


def _save(img: Image.Image, image_format: str, quality: int) -> bytes:
    output = BytesIO()
    if image_format == "JPEG":
        if img.mode not in ("L", "RGB"):
            img = img.convert("RGB")
        img.save(output, format="JPEG", quality=quality)
    else:
        img.save(output, format=image_format)
    return output.getvalue()


def stamp_image(
    image_bytes: bytes,
    descriptors: Iterable[str],
    parser: SpecParser | None = None,
    quality: int = 90,
    output_format: str | None = None,
) -> bytes:
    """Apply overlay descriptors to an encoded image.

    All descriptors are parsed against the decoded image size before any
    pixel is touched, then rendered in order.

    Args:
        image_bytes: Encoded source image
        descriptors: Overlay descriptors, in paint order
        parser: Parser to use (shares its font cache across calls); a new one if None
        quality: JPEG quality when the output is JPEG
        output_format: Pillow format name for the output; defaults to the source
            format, or PNG if it is unknown

    Returns:
        Encoded stamped image

    Raises:
        PIL.UnidentifiedImageError: If the bytes are not a readable image
        OverlayError: If a descriptor cannot be parsed or rendered
        ValueError: If Pillow cannot write the output format
    """
    img = Image.open(BytesIO(image_bytes))
    image_format = output_format or img.format or "PNG"
    check_writable_format(image_format)
    img.load()
    if img.mode not in _DRAWABLE_MODES:
        img = img.convert("RGBA")

    img_width, img_height = img.size
    debug_print(f"Stamping {img_width}x{img_height} {img.mode} image, output {image_format}")

    overlays = OverlayList(parser)
    for raw in descriptors:
        overlays.add(raw, img_width, img_height)
    debug_print(f"Overlays: {overlays}")

    render_overlays(img, overlays)
    return _save(img, image_format, quality)


def stamp_file(
    input_path: str | Path,
    output_path: str | Path,
    descriptors: Iterable[str],
    config: StampConfig | None = None,
    parser: SpecParser | None = None,
) -> None:
    """Stamp ``input_path`` and write the result to ``output_path``.

    Overlays from ``config`` are applied first, then ``descriptors``.
    The output format follows the output file extension when Pillow knows it.
    """
    if config is None:
        config = StampConfig()
    if parser is None:
        parser = SpecParser(default_font=config.default_font)

    output_path = Path(output_path)
    extension = output_path.suffix.lower()
    output_format = Image.registered_extensions().get(extension) if extension else None
    if output_format is not None:
        check_writable_format(output_format)

    image_bytes = Path(input_path).read_bytes()
    stamped = stamp_image(
        image_bytes,
        [*config.overlays, *descriptors],
        parser=parser,
        quality=config.jpeg_quality,
        output_format=output_format,
    )
    output_path.write_bytes(stamped)
