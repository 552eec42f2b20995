# story_converter/services/encoding.py
import asyncio
import io

import structlog
from PIL import Image

from story_converter.data.constants import JPEG_QUALITY

logger = structlog.get_logger(__name__)


class EncodeError(Exception):
    pass


def convert_to_jpeg_bytes(img: Image.Image, quality: float = JPEG_QUALITY) -> bytes:
    """Converts a composed surface to JPEG bytes in memory."""
    if img.mode != "RGB":
        img = img.convert("RGB")
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=round(quality * 100))
    return buf.getvalue()


async def encode_image(img: Image.Image) -> bytes:
    """
    Encodes the composed surface off the event loop.

    Raises:
        EncodeError: If the encoder produced no data.
    """
    loop = asyncio.get_running_loop()
    data = await loop.run_in_executor(None, convert_to_jpeg_bytes, img)
    if not data:
        raise EncodeError("Failed to create blob")

    logger.debug("Image encoded", size=len(data))
    return data
