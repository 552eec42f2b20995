# story_converter/services/__init__.py
from .compositor import compose
from .converter import convert_image
from .decoding import DecodedSurface, DecodeError, decode_image
from .download import download_blob
from .encoding import EncodeError, encode_image
from .geometry import compute_geometry
from .messages import get_error_message
from .naming import generate_filename
from .validation import check_dimensions, validate_input

__all__ = [
    "DecodeError",
    "DecodedSurface",
    "EncodeError",
    "check_dimensions",
    "compose",
    "compute_geometry",
    "convert_image",
    "decode_image",
    "download_blob",
    "encode_image",
    "generate_filename",
    "get_error_message",
    "validate_input",
]
