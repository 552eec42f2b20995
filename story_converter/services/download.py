# story_converter/services/download.py
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


def download_blob(data: bytes, filename: str, directory: str | Path = ".") -> Path:
    """
    Saves encoded image bytes under the given file name.

    Args:
        data: The encoded image.
        filename: The name to save it under.
        directory: Target directory, created if missing.

    Returns:
        The path of the written file.
    """
    path = Path(directory) / filename
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.write(data)
    logger.info("Story image saved", path=str(path), size=len(data))
    return path
