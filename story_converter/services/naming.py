# story_converter/services/naming.py
from datetime import datetime

from story_converter.data.constants import FILENAME_PREFIX, FILENAME_SUFFIX


def generate_filename(now: datetime | None = None) -> str:
    """
    Builds `story_YYYYMMDD_HHMMSS.jpg` from the local wall-clock time.

    Two calls within the same second return the same name.
    """
    if now is None:
        now = datetime.now()
    return f"{FILENAME_PREFIX}{now:%Y%m%d}_{now:%H%M%S}{FILENAME_SUFFIX}"
