# story_converter/dto/raw_input.py
import mimetypes
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class RawInput(BaseModel):
    """
    An encoded image as supplied by the caller, together with the media type
    the caller declared for it. The declared type is trusted as-is; the
    content is never sniffed.
    """
    model_config = ConfigDict(frozen=True)

    data: bytes
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path, mime_type: str | None = None) -> "RawInput":
        """
        Reads a file from disk into a RawInput.

        Args:
            path: The file to read.
            mime_type: The declared media type. Guessed from the file name when omitted.

        Returns:
            A RawInput holding the file's bytes.
        """
        path = Path(path)
        if mime_type is None:
            mime_type, _ = mimetypes.guess_type(path.name)
            if not mime_type:
                mime_type = "application/octet-stream"
        return cls(data=path.read_bytes(), mime_type=mime_type)
