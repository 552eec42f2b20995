# story_converter/dto/geometry.py
from pydantic import BaseModel, ConfigDict


class Rect(BaseModel):
    """An axis-aligned rectangle in floating-point pixel coordinates."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.width / self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_box(self) -> tuple[float, float, float, float]:
        """Returns the (left, upper, right, lower) box Pillow expects."""
        return (self.x, self.y, self.right, self.bottom)


class CropGeometry(BaseModel):
    """One cover-selected source region drawn over the whole canvas."""
    model_config = ConfigDict(frozen=True)

    source: Rect
    dest: Rect


class PadGeometry(BaseModel):
    """
    A blurred cover-selected background plus the whole source contained
    and centered on top of it.
    """
    model_config = ConfigDict(frozen=True)

    background_source: Rect
    background_dest: Rect
    foreground_source: Rect
    foreground_dest: Rect


CompositionGeometry = CropGeometry | PadGeometry
