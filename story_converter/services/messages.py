# story_converter/services/messages.py
from story_converter.data.constants import ErrorType
from story_converter.data.settings import settings
from story_converter.data.texts import get_texts
from story_converter.dto import ConversionError


def get_error_message(error: ConversionError, locale: str | None = None) -> str:
    """
    Returns the user-facing message for a conversion error.

    Args:
        error: Any conversion error variant.
        locale: Message language. Defaults to `settings.locale`; unknown
            locales fall back to English.

    Returns:
        The localized message, with size limits interpolated.
    """
    texts = get_texts(locale or settings.locale).errors
    error_type = ErrorType(error.type)

    if error_type is ErrorType.NO_FILE:
        return texts.no_file
    if error_type is ErrorType.FILE_TOO_LARGE:
        return texts.file_too_large.format(max_mb=error.max_size // 1024 // 1024)
    if error_type is ErrorType.INVALID_MIME_TYPE:
        return texts.invalid_mime_type
    if error_type is ErrorType.PIXEL_EXCEEDED:
        return texts.pixel_exceeded.format(max_dimension=error.max_dimension)
    if error_type is ErrorType.DECODE_FAILED:
        return texts.decode_failed
    return texts.conversion_failed
