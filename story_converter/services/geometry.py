# story_converter/services/geometry.py
"""
Rectangle selection for the story layouts.

All math is done in floating point. Rounding to whole pixels happens only in
`to_pixel_rect`, right before a rectangle is handed to Pillow as a
destination; source rectangles are passed to Pillow unrounded.
"""
from story_converter.data.constants import (
    BLUR_RADIUS,
    OUTPUT_ASPECT,
    OUTPUT_HEIGHT,
    OUTPUT_WIDTH,
    LayoutMode,
)
from story_converter.dto import CompositionGeometry, CropGeometry, PadGeometry, Rect

CANVAS_RECT = Rect(x=0, y=0, width=OUTPUT_WIDTH, height=OUTPUT_HEIGHT)


def cover_selection(source_width: float, source_height: float, target_aspect: float = OUTPUT_ASPECT) -> Rect:
    """
    Selects the largest centered region of the source with the target aspect.

    The shorter axis (relative to the target) is kept whole and the longer
    axis is cropped equally on both sides.
    """
    input_aspect = source_width / source_height
    if input_aspect > target_aspect:
        # Wider than the target: keep full height, trim left and right
        width = source_height * target_aspect
        return Rect(x=(source_width - width) / 2, y=0, width=width, height=source_height)

    # Taller than (or same as) the target: keep full width, trim top and bottom
    height = source_width / target_aspect
    return Rect(x=0, y=(source_height - height) / 2, width=source_width, height=height)


def contain_fit(
    source_width: float,
    source_height: float,
    canvas_width: float = OUTPUT_WIDTH,
    canvas_height: float = OUTPUT_HEIGHT,
) -> Rect:
    """Scales the whole source to fit inside the canvas and centers it."""
    input_aspect = source_width / source_height
    canvas_aspect = canvas_width / canvas_height
    if input_aspect > canvas_aspect:
        width = canvas_width
        height = canvas_width / input_aspect
    else:
        height = canvas_height
        width = canvas_height * input_aspect
    return Rect(x=(canvas_width - width) / 2, y=(canvas_height - height) / 2, width=width, height=height)


def crop_fill_geometry(source_width: int, source_height: int) -> CropGeometry:
    return CropGeometry(source=cover_selection(source_width, source_height), dest=CANVAS_RECT)


def blur_pad_fit_geometry(source_width: int, source_height: int, blur_radius: float = BLUR_RADIUS) -> PadGeometry:
    """
    Geometry for the two-layer layout.

    The background reuses the cover selection and is drawn past every canvas
    edge by the blur radius, so blur falloff never reaches the visible area.
    The foreground is the whole source, contained and centered.
    """
    background_dest = Rect(
        x=-blur_radius,
        y=-blur_radius,
        width=OUTPUT_WIDTH + 2 * blur_radius,
        height=OUTPUT_HEIGHT + 2 * blur_radius,
    )
    return PadGeometry(
        background_source=cover_selection(source_width, source_height),
        background_dest=background_dest,
        foreground_source=Rect(x=0, y=0, width=source_width, height=source_height),
        foreground_dest=contain_fit(source_width, source_height),
    )


def compute_geometry(source_width: int, source_height: int, mode: LayoutMode) -> CompositionGeometry:
    if mode is LayoutMode.CROP_FILL:
        return crop_fill_geometry(source_width, source_height)
    if mode is LayoutMode.BLUR_PAD_FIT:
        return blur_pad_fit_geometry(source_width, source_height)
    raise ValueError(f"Unsupported layout mode: {mode!r}")


def to_pixel_rect(rect: Rect) -> tuple[int, int, int, int]:
    """
    Rounds a destination rectangle to whole pixels (round-half-to-even).

    Returns:
        (x, y, width, height); width and height are at least 1.
    """
    return (
        round(rect.x),
        round(rect.y),
        max(1, round(rect.width)),
        max(1, round(rect.height)),
    )
