"""Tests for font resolution and caching."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest
from PIL import ImageFont

from caption_stamp.overlay import DPI, FontCache, FontSpecError
from caption_stamp.overlay.fonts import points_to_pixels, split_font_spec


def test_points_to_pixels_uses_fixed_dpi() -> None:
    """Test point sizes scale by DPI / 72."""
    assert points_to_pixels(72) == pytest.approx(DPI)
    assert points_to_pixels(12) == pytest.approx(12 * 226 / 72)


def test_split_font_spec_with_size() -> None:
    """Test splitting path and size."""
    assert split_font_spec("/fonts/a.ttf:14.5") == ("/fonts/a.ttf", 14.5)


def test_split_font_spec_default_size() -> None:
    """Test size defaults to 12 without a colon."""
    assert split_font_spec("/fonts/a.ttf") == ("/fonts/a.ttf", 12.0)


@pytest.mark.parametrize(
    "size", ["", "abc", "0", "-3", "nan", "inf", "1e999", "12:13", " 12 ", "12 ", "1_2", "0x10"]
)
def test_split_font_spec_bad_size(size: str) -> None:
    """Test malformed or non-positive sizes are rejected."""
    with pytest.raises(FontSpecError):
        split_font_spec(f"/fonts/a.ttf:{size}")


@pytest.mark.parametrize("size,expected", [("12.5", 12.5), ("1e1", 10.0), (".5", 0.5), ("+8", 8.0)])
def test_split_font_spec_decimal_sizes(size: str, expected: float) -> None:
    """Test plain decimal and exponent sizes are accepted."""
    assert split_font_spec(f"/fonts/a.ttf:{size}") == ("/fonts/a.ttf", expected)


def test_resolve_loads_face(font_cache: FontCache, font_path: Path) -> None:
    """Test resolving a spec returns a sized FreeType face."""
    face = font_cache.resolve(f"{font_path}:12")
    assert isinstance(face, ImageFont.FreeTypeFont)
    assert face.size == pytest.approx(points_to_pixels(12))


def test_resolve_same_spec_returns_same_face(font_cache: FontCache, font_path: Path) -> None:
    """Test identical specs return the identical cached face."""
    first = font_cache.resolve(f"{font_path}:12")
    second = font_cache.resolve(f"{font_path}:12")
    assert first is second
    assert len(font_cache) == 1


def test_resolve_different_size_is_distinct(font_cache: FontCache, font_path: Path) -> None:
    """Test a different size gets its own cache entry."""
    small = font_cache.resolve(f"{font_path}:12")
    large = font_cache.resolve(f"{font_path}:24")
    assert small is not large
    assert large.size == pytest.approx(2 * small.size)
    assert len(font_cache) == 2


def test_resolve_keys_by_literal_spec(font_cache: FontCache, font_path: Path) -> None:
    """Test "path" and "path:12" are separate entries with the same size."""
    implicit = font_cache.resolve(str(font_path))
    explicit = font_cache.resolve(f"{font_path}:12")
    assert implicit is not explicit
    assert implicit.size == pytest.approx(explicit.size)
    assert str(font_path) in font_cache
    assert f"{font_path}:12" in font_cache


def test_resolve_does_not_reread_file(font_cache: FontCache, font_path: Path, tmp_path) -> None:
    """Test a cached face is returned even after the file disappears."""
    copy = tmp_path / "copy.ttf"
    copy.write_bytes(font_path.read_bytes())
    face = font_cache.resolve(f"{copy}:10")
    copy.unlink()
    assert font_cache.resolve(f"{copy}:10") is face


def test_resolve_missing_file(font_cache: FontCache) -> None:
    """Test an unreadable path raises FontSpecError and caches nothing."""
    with pytest.raises(FontSpecError, match="cannot read font file"):
        font_cache.resolve("/bad/path.ttf:12")
    assert len(font_cache) == 0


def test_resolve_malformed_font(font_cache: FontCache, tmp_path) -> None:
    """Test a file that is not a font raises FontSpecError."""
    junk = tmp_path / "junk.ttf"
    junk.write_bytes(b"this is not a font program")
    with pytest.raises(FontSpecError, match="cannot parse font file"):
        font_cache.resolve(f"{junk}:12")
    assert len(font_cache) == 0


def test_resolve_bad_size_before_reading(font_cache: FontCache, font_path: Path) -> None:
    """Test a bad size fails even when the file is valid."""
    with pytest.raises(FontSpecError, match="invalid font size"):
        font_cache.resolve(f"{font_path}:big")


def test_resolve_concurrent_callers_share_one_face(font_cache: FontCache, font_path: Path) -> None:
    """Test concurrent resolves of one spec load a single face."""
    spec = f"{font_path}:16"
    with ThreadPoolExecutor(max_workers=8) as pool:
        faces = list(pool.map(lambda _: font_cache.resolve(spec), range(32)))
    assert all(face is faces[0] for face in faces)
    assert len(font_cache) == 1
