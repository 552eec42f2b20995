# story_converter/services/compositor.py
from collections.abc import Callable

import structlog
from PIL import Image, ImageFilter

from story_converter.data.constants import (
    BLUR_RADIUS,
    OUTPUT_HEIGHT,
    OUTPUT_WIDTH,
    LayoutMode,
)
from story_converter.dto import CompositionGeometry, CropGeometry, PadGeometry, Rect
from .decoding import DecodedSurface
from .geometry import compute_geometry, to_pixel_rect

logger = structlog.get_logger(__name__)

CANVAS_BACKGROUND = (0, 0, 0)


def _new_canvas() -> Image.Image:
    return Image.new("RGB", (OUTPUT_WIDTH, OUTPUT_HEIGHT), CANVAS_BACKGROUND)


def _draw(
    canvas: Image.Image,
    image: Image.Image,
    source: Rect,
    dest: Rect,
    blur_radius: float = 0,
) -> None:
    """
    Scales the source region of `image` into `dest` on the canvas.

    Args:
        canvas: The output surface, modified in place.
        image: The decoded source image.
        source: Region of the source to sample (fractional coordinates allowed).
        dest: Where to draw it on the canvas; may extend past the canvas edges.
        blur_radius: Gaussian blur applied to the scaled pixels before drawing.
    """
    x, y, width, height = to_pixel_rect(dest)
    left, upper, right, lower = source.to_box()
    # Pillow rejects boxes past the image edge, even by float error
    box = (max(0.0, left), max(0.0, upper), min(float(image.width), right), min(float(image.height), lower))
    layer = image.resize((width, height), Image.Resampling.LANCZOS, box=box)
    if blur_radius:
        layer = layer.filter(ImageFilter.GaussianBlur(radius=blur_radius))
    mask = layer if layer.mode == "RGBA" else None
    canvas.paste(layer, (x, y), mask)


def render_crop_fill(image: Image.Image, geometry: CropGeometry) -> Image.Image:
    """Center-crops the source so it fills the whole story frame."""
    canvas = _new_canvas()
    _draw(canvas, image, geometry.source, geometry.dest)
    return canvas


def render_blur_pad_fit(image: Image.Image, geometry: PadGeometry) -> Image.Image:
    """
    Shows the whole source centered over a blurred, cover-cropped copy of itself.

    The background is always drawn before the foreground.
    """
    canvas = _new_canvas()
    _draw(canvas, image, geometry.background_source, geometry.background_dest, blur_radius=BLUR_RADIUS)
    _draw(canvas, image, geometry.foreground_source, geometry.foreground_dest)
    return canvas


RENDERERS: dict[LayoutMode, Callable[[Image.Image, CompositionGeometry], Image.Image]] = {
    LayoutMode.CROP_FILL: render_crop_fill,
    LayoutMode.BLUR_PAD_FIT: render_blur_pad_fit,
}


def compose(surface: DecodedSurface, mode: LayoutMode) -> Image.Image:
    """
    Produces a new 1080x1920 surface from the decoded image.

    Raises:
        ValueError: If no layout is registered for `mode`.
    """
    layout_mode = LayoutMode(mode)
    renderer = RENDERERS.get(layout_mode)
    if renderer is None:
        raise ValueError(f"Unsupported layout mode: {mode!r}")

    image = surface.image
    geometry = compute_geometry(image.width, image.height, layout_mode)
    canvas = renderer(image, geometry)
    logger.debug(
        "Image composed",
        layout_mode=layout_mode.value,
        source_width=surface.width,
        source_height=surface.height,
    )
    return canvas
