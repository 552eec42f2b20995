from .errors import (
    ConversionError,
    ConversionFailed,
    DecodeFailed,
    FileTooLarge,
    InvalidMimeType,
    NoFile,
    PixelExceeded,
    conversion_error_adapter,
)
from .geometry import CompositionGeometry, CropGeometry, PadGeometry, Rect
from .raw_input import RawInput
from .results import ConversionFailure, ConversionResult, ConversionSuccess

__all__ = [
    "CompositionGeometry",
    "ConversionError",
    "ConversionFailed",
    "ConversionFailure",
    "ConversionResult",
    "ConversionSuccess",
    "CropGeometry",
    "DecodeFailed",
    "FileTooLarge",
    "InvalidMimeType",
    "NoFile",
    "PadGeometry",
    "PixelExceeded",
    "RawInput",
    "Rect",
    "conversion_error_adapter",
]
