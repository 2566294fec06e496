"""Shared test fixtures and helpers."""

from pathlib import Path

import pytest
from PIL import Image, ImageFont

from caption_stamp.overlay import FontCache, SpecParser

# Canvas color outside the palette, so any painted pixel shows up as a change
CANVAS_COLOR = (50, 100, 150)


@pytest.fixture(scope="session")
def font_path(tmp_path_factory) -> Path:
    """Write Pillow's bundled default font to a file usable as a font spec path."""
    font = ImageFont.load_default(size=12)
    if not isinstance(font, ImageFont.FreeTypeFont):
        pytest.skip("Pillow built without FreeType support")
    path = tmp_path_factory.mktemp("fonts") / "default.ttf"
    path.write_bytes(font.font_bytes)
    return path


@pytest.fixture
def font_spec(font_path: Path) -> str:
    """Font spec for the test font at 12pt."""
    return f"{font_path}:12"


@pytest.fixture
def font_cache() -> FontCache:
    """Fresh font cache for each test."""
    return FontCache()


@pytest.fixture
def parser(font_cache: FontCache, font_spec: str) -> SpecParser:
    """Parser whose default font is the test font."""
    return SpecParser(font_cache=font_cache, default_font=font_spec)


@pytest.fixture
def canvas() -> Image.Image:
    """300x300 RGB image filled with CANVAS_COLOR."""
    return Image.new("RGB", (300, 300), CANVAS_COLOR)

