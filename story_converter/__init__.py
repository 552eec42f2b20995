"""Client-side conversion of photos into 1080x1920 story images."""
from story_converter.data.constants import LayoutMode
from story_converter.dto import ConversionFailure, ConversionResult, ConversionSuccess, RawInput
from story_converter.services import (
    convert_image,
    download_blob,
    generate_filename,
    get_error_message,
)

__all__ = [
    "ConversionFailure",
    "ConversionResult",
    "ConversionSuccess",
    "LayoutMode",
    "RawInput",
    "convert_image",
    "download_blob",
    "generate_filename",
    "get_error_message",
]
