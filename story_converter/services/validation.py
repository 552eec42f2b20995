# story_converter/services/validation.py
from story_converter.data.constants import (
    ALLOWED_MIME_TYPES,
    MAX_FILE_SIZE,
    MAX_PIXEL_DIMENSION,
)
from story_converter.dto import (
    ConversionError,
    FileTooLarge,
    InvalidMimeType,
    NoFile,
    PixelExceeded,
    RawInput,
)


def validate_input(raw: RawInput | None) -> ConversionError | None:
    """
    Cheap checks on the raw upload, done before any decoding work.

    Presence is checked first, then byte size, then the declared media type
    (exact, case-sensitive match; the content itself is not sniffed).

    Returns:
        The first failing check's error, or None if the input is acceptable.
    """
    if raw is None:
        return NoFile()

    if raw.size > MAX_FILE_SIZE:
        return FileTooLarge(max_size=MAX_FILE_SIZE, actual_size=raw.size)

    if raw.mime_type not in ALLOWED_MIME_TYPES:
        return InvalidMimeType(allowed=list(ALLOWED_MIME_TYPES), actual=raw.mime_type)

    return None


def check_dimensions(width: int, height: int) -> PixelExceeded | None:
    """Rejects decoded images with either side above the pixel ceiling."""
    if width > MAX_PIXEL_DIMENSION or height > MAX_PIXEL_DIMENSION:
        return PixelExceeded(max_dimension=MAX_PIXEL_DIMENSION, width=width, height=height)
    return None
