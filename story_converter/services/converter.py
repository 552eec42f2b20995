# story_converter/services/converter.py
import uuid

import structlog
from PIL import Image

from story_converter.data.constants import ConversionStage, LayoutMode
from story_converter.data.settings import settings
from story_converter.dto import (
    ConversionError,
    ConversionFailed,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    DecodeFailed,
    RawInput,
)
from .compositor import compose
from .decoding import DecodeError, decode_image
from .encoding import EncodeError, encode_image
from .naming import generate_filename
from .validation import check_dimensions, validate_input

logger = structlog.get_logger(__name__)


def _fail(
    log: structlog.typing.FilteringBoundLogger,
    stage: ConversionStage,
    error: ConversionError,
) -> ConversionFailure:
    log.warning(
        "Conversion failed",
        stage=stage.value,
        error_type=error.type,
        next_stage=ConversionStage.FAILED.value,
    )
    return ConversionFailure(error=error)


async def convert_image(
    raw: RawInput | None,
    mode: LayoutMode | str | None = None,
) -> ConversionResult:
    """
    Converts an uploaded photo into a 1080x1920 JPEG story image.

    Stages run strictly in order (validate, decode, dimension guard,
    compose, encode, name) and the first failing stage ends the call. No
    stage is retried. Failures are returned as data, never raised.

    Args:
        raw: The uploaded image, or None when nothing was supplied.
        mode: Layout to apply. Defaults to `settings.default_layout`.

    Returns:
        ConversionSuccess with the JPEG bytes and file name, or
        ConversionFailure carrying the error of the stage that failed.

    Raises:
        ValueError: If `mode` is not a known layout. Checked after the input
            has passed validation and before it is decoded.
    """
    log = logger.bind(call_id=uuid.uuid4().hex[:12])

    stage = ConversionStage.VALIDATING
    log.debug("Conversion stage", stage=stage.value)
    error = validate_input(raw)
    if error is not None:
        return _fail(log, stage, error)

    layout_mode = LayoutMode(mode) if mode is not None else settings.default_layout
    log = log.bind(layout_mode=layout_mode.value)

    stage = ConversionStage.DECODING
    log.debug("Conversion stage", stage=stage.value, size=raw.size, mime_type=raw.mime_type)
    try:
        surface = await decode_image(raw)
    except DecodeError as e:
        return _fail(log, stage, DecodeFailed(message=str(e)))

    canvas: Image.Image | None = None
    try:
        # The surface is released when this block exits, on every path
        with surface:
            stage = ConversionStage.GUARDING_DIMENSIONS
            log.debug("Conversion stage", stage=stage.value, width=surface.width, height=surface.height)
            error = check_dimensions(surface.width, surface.height)
            if error is not None:
                return _fail(log, stage, error)

            stage = ConversionStage.COMPOSITING
            log.debug("Conversion stage", stage=stage.value)
            canvas = compose(surface, layout_mode)

        stage = ConversionStage.ENCODING
        log.debug("Conversion stage", stage=stage.value)
        data = await encode_image(canvas)
    except EncodeError as e:
        return _fail(log, stage, ConversionFailed(message=str(e)))
    except Exception as e:
        log.exception("Unexpected error during conversion", stage=stage.value)
        return _fail(log, stage, ConversionFailed(message=str(e) or "Unknown error"))
    finally:
        if canvas is not None:
            canvas.close()

    filename = generate_filename()
    log.info(
        "Conversion finished",
        stage=ConversionStage.DONE.value,
        filename=filename,
        size=len(data),
    )
    return ConversionSuccess(data=data, filename=filename)
