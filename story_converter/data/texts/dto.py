# story_converter/data/texts/dto.py
from pydantic import BaseModel


class ErrorTexts(BaseModel):
    """User-facing message templates, one per conversion error type."""
    no_file: str
    file_too_large: str  # {max_mb}
    invalid_mime_type: str
    pixel_exceeded: str  # {max_dimension}
    decode_failed: str
    conversion_failed: str


class LocaleTexts(BaseModel):
    """A collection of all texts for a specific locale."""
    errors: ErrorTexts
