# story_converter/data/constants.py
from enum import Enum

# Output surface, fixed to the story slot (9:16)
OUTPUT_WIDTH = 1080
OUTPUT_HEIGHT = 1920
OUTPUT_ASPECT = OUTPUT_WIDTH / OUTPUT_HEIGHT
JPEG_QUALITY = 0.9

# Validation limits
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
MAX_PIXEL_DIMENSION = 4096
ALLOWED_MIME_TYPES = ("image/jpeg", "image/png")

BLUR_RADIUS = 30

FILENAME_PREFIX = "story_"
FILENAME_SUFFIX = ".jpg"


class LayoutMode(str, Enum):
    """Layout strategies the compositor can apply."""
    CROP_FILL = "crop_fill"
    BLUR_PAD_FIT = "blur_pad_fit"


class ErrorType(str, Enum):
    """Tags of the conversion error variants."""
    NO_FILE = "NO_FILE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    INVALID_MIME_TYPE = "INVALID_MIME_TYPE"
    PIXEL_EXCEEDED = "PIXEL_EXCEEDED"
    DECODE_FAILED = "DECODE_FAILED"
    CONVERSION_FAILED = "CONVERSION_FAILED"


class ConversionStage(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    DECODING = "decoding"
    GUARDING_DIMENSIONS = "guarding_dimensions"
    COMPOSITING = "compositing"
    ENCODING = "encoding"
    DONE = "done"
    FAILED = "failed"
