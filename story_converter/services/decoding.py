# story_converter/services/decoding.py
import asyncio
import io

import structlog
from PIL import Image, ImageOps

from story_converter.dto import RawInput

logger = structlog.get_logger(__name__)


class DecodeError(Exception):
    pass


class DecodedSurface:
    """
    An upright, decoded pixel surface owned by a single conversion call.

    The wrapped image is closed exactly once, either by an explicit
    `release()` or on leaving a `with` block. Further releases are no-ops.
    """

    def __init__(self, image: Image.Image) -> None:
        self._image = image
        self.released = False

    @property
    def image(self) -> Image.Image:
        if self.released:
            raise ValueError("Decoded surface has already been released")
        return self._image

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    def release(self) -> None:
        if self.released:
            return
        self.released = True
        self._image.close()
        logger.debug("Decoded surface released", width=self.width, height=self.height)

    def __enter__(self) -> "DecodedSurface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def _decode_upright(data: bytes) -> Image.Image:
    """Decodes bytes and applies EXIF orientation so the pixel grid is upright."""
    with Image.open(io.BytesIO(data)) as img:
        # exif_transpose always hands back a fully loaded copy
        upright = ImageOps.exif_transpose(img)

    if upright.mode == "I" or upright.mode.startswith("I;16"):
        # 16-bit greyscale PNG; a plain convert would clip everything above 255
        wide = upright if upright.mode == "I" else upright.convert("I")
        scaled = wide.point(lambda v: v * (1 / 256)).convert("L")
        if wide is not upright:
            wide.close()
        upright.close()
        upright = scaled

    if upright.mode not in ("RGB", "RGBA"):
        has_alpha = upright.mode in ("LA", "PA") or "transparency" in upright.info
        converted = upright.convert("RGBA" if has_alpha else "RGB")
        upright.close()
        upright = converted
    return upright


async def decode_image(raw: RawInput) -> DecodedSurface:
    """
    Decodes the raw bytes off the event loop.

    Raises:
        DecodeError: If Pillow cannot decode the stream. The message is
            Pillow's own diagnostic.
    """
    loop = asyncio.get_running_loop()
    try:
        image = await loop.run_in_executor(None, _decode_upright, raw.data)
    except Exception as e:
        raise DecodeError(str(e) or "Unknown error") from e

    logger.debug("Image decoded", width=image.width, height=image.height, mode=image.mode)
    return DecodedSurface(image)
