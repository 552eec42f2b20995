"""Tests for the input and error models."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from story_converter.dto import (
    ConversionFailure,
    NoFile,
    PixelExceeded,
    RawInput,
    conversion_error_adapter,
)


def test_error_round_trips_through_its_tag() -> None:
    error = PixelExceeded(max_dimension=4096, width=5000, height=20)

    restored = conversion_error_adapter.validate_python(error.model_dump())

    assert restored == error


def test_unknown_error_tag_is_rejected() -> None:
    with pytest.raises(ValidationError):
        conversion_error_adapter.validate_python({"type": "OUT_OF_CHEESE"})


def test_errors_are_immutable() -> None:
    error = PixelExceeded(max_dimension=4096, width=5000, height=20)

    with pytest.raises(ValidationError):
        error.width = 1


def test_failure_dump_shape() -> None:
    assert ConversionFailure(error=NoFile()).model_dump() == {"success": False, "error": {"type": "NO_FILE"}}


def test_raw_input_size_is_byte_length() -> None:
    assert RawInput(data=b"12345", mime_type="image/png").size == 5


@pytest.mark.parametrize(
    ("name", "expected"),
    [("photo.jpg", "image/jpeg"), ("photo.jpeg", "image/jpeg"), ("scan.png", "image/png"), ("blob.unknownext", "application/octet-stream")],
)
def test_from_path_guesses_declared_type(tmp_path: Path, name: str, expected: str) -> None:
    path = tmp_path / name
    path.write_bytes(b"xyz")

    raw = RawInput.from_path(path)

    assert raw.mime_type == expected
    assert raw.data == b"xyz"


def test_from_path_prefers_explicit_type(tmp_path: Path) -> None:
    path = tmp_path / "photo.jpg"
    path.write_bytes(b"xyz")

    assert RawInput.from_path(path, mime_type="image/png").mime_type == "image/png"
