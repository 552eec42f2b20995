"""Property tests for cover/contain rectangle selection."""

from __future__ import annotations

import pytest

from story_converter.data.constants import OUTPUT_ASPECT, OUTPUT_HEIGHT, OUTPUT_WIDTH, LayoutMode
from story_converter.dto import CropGeometry, PadGeometry, Rect
from story_converter.services.geometry import (
    blur_pad_fit_geometry,
    compute_geometry,
    contain_fit,
    cover_selection,
    crop_fill_geometry,
    to_pixel_rect,
)

SOURCE_SIZES = [
    (4000, 2000),
    (2000, 4000),
    (1080, 1920),
    (500, 500),
    (3, 7),
    (4096, 1),
    (1, 4096),
    (1081, 1920),
]


@pytest.mark.parametrize(("width", "height"), SOURCE_SIZES)
def test_cover_selection_has_output_aspect_and_stays_inside_source(width: int, height: int) -> None:
    rect = cover_selection(width, height)

    assert rect.aspect == pytest.approx(OUTPUT_ASPECT)
    assert rect.x >= 0 and rect.y >= 0
    assert rect.right == pytest.approx(width - rect.x)
    assert rect.bottom == pytest.approx(height - rect.y)
    # One axis is always kept whole
    assert rect.width == pytest.approx(width) or rect.height == pytest.approx(height)


def test_cover_selection_wide_source_trims_sides() -> None:
    rect = cover_selection(4000, 2000)

    assert rect == Rect(x=(4000 - 1125) / 2, y=0, width=1125, height=2000)


def test_cover_selection_tall_source_trims_top_and_bottom() -> None:
    rect = cover_selection(1000, 4000)

    assert rect.x == 0
    assert rect.width == 1000
    assert rect.height == pytest.approx(1000 / 0.5625)
    assert rect.y == pytest.approx((4000 - 1000 / 0.5625) / 2)


def test_crop_fill_of_exact_aspect_uses_whole_source() -> None:
    geometry = crop_fill_geometry(1080, 1920)

    assert geometry.source == Rect(x=0, y=0, width=1080, height=1920)
    assert geometry.dest == Rect(x=0, y=0, width=OUTPUT_WIDTH, height=OUTPUT_HEIGHT)


@pytest.mark.parametrize(("width", "height"), SOURCE_SIZES)
def test_contained_foreground_fits_canvas_and_spans_an_axis(width: int, height: int) -> None:
    rect = contain_fit(width, height)

    eps = 1e-6
    assert rect.x >= -eps and rect.y >= -eps
    assert rect.right <= OUTPUT_WIDTH + eps
    assert rect.bottom <= OUTPUT_HEIGHT + eps
    spans_width = rect.width == pytest.approx(OUTPUT_WIDTH) and rect.x == pytest.approx(0)
    spans_height = rect.height == pytest.approx(OUTPUT_HEIGHT) and rect.y == pytest.approx(0)
    assert spans_width or spans_height
    assert rect.aspect == pytest.approx(width / height)


def test_contain_fit_centers_wide_source() -> None:
    rect = contain_fit(4000, 2000)

    assert rect == Rect(x=0, y=(1920 - 540) / 2, width=1080, height=540)


@pytest.mark.parametrize(("width", "height"), SOURCE_SIZES)
def test_blur_pad_background_overdraws_each_edge_by_radius(width: int, height: int) -> None:
    geometry = blur_pad_fit_geometry(width, height)

    assert geometry.background_dest == Rect(x=-30, y=-30, width=1140, height=1980)
    assert geometry.background_source == cover_selection(width, height)
    assert geometry.foreground_source == Rect(x=0, y=0, width=width, height=height)


def test_compute_geometry_dispatches_on_mode() -> None:
    assert isinstance(compute_geometry(800, 600, LayoutMode.CROP_FILL), CropGeometry)
    assert isinstance(compute_geometry(800, 600, LayoutMode.BLUR_PAD_FIT), PadGeometry)


def test_to_pixel_rect_rounds_half_to_even() -> None:
    rect = Rect(x=0.5, y=1.5, width=2.5, height=3.5)

    assert to_pixel_rect(rect) == (0, 2, 2, 4)


def test_to_pixel_rect_never_collapses_to_zero() -> None:
    rect = Rect(x=10, y=10, width=0.2, height=0.4)

    assert to_pixel_rect(rect) == (10, 10, 1, 1)
