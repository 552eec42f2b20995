from .dto import ErrorTexts, LocaleTexts

texts = LocaleTexts(
    errors=ErrorTexts(
        no_file="Please select a file",
        file_too_large="File size must be {max_mb}MB or less",
        invalid_mime_type="Only JPEG/PNG formats are supported",
        pixel_exceeded="Image size must be {max_dimension}px or less",
        decode_failed="Failed to load the image",
        conversion_failed="Failed to process the image",
    ),
)
