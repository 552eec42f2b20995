"""Shared fixtures: in-memory JPEG/PNG images built with Pillow."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest
from PIL import Image

EXIF_ORIENTATION_TAG = 0x0112


def encode_test_image(image: Image.Image, fmt: str = "JPEG", **save_kwargs) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format=fmt, **save_kwargs)
    return buf.getvalue()


@pytest.fixture
def image_bytes() -> Callable[..., bytes]:
    """Factory producing a solid-colour image encoded in the requested format."""

    def _make(
        width: int,
        height: int,
        fmt: str = "JPEG",
        color: tuple[int, ...] = (200, 50, 50),
        orientation: int | None = None,
    ) -> bytes:
        mode = "RGBA" if len(color) == 4 else "RGB"
        image = Image.new(mode, (width, height), color)
        save_kwargs = {}
        if orientation is not None:
            exif = Image.Exif()
            exif[EXIF_ORIENTATION_TAG] = orientation
            save_kwargs["exif"] = exif
        return encode_test_image(image, fmt, **save_kwargs)

    return _make


@pytest.fixture
def split_image() -> Callable[[int, int], Image.Image]:
    """Factory for an RGB image whose left half is green and right half is blue."""

    def _make(width: int, height: int) -> Image.Image:
        image = Image.new("RGB", (width, height), (0, 0, 255))
        image.paste((0, 255, 0), (0, 0, width // 2, height))
        return image

    return _make
