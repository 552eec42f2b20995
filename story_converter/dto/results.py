# story_converter/dto/results.py
from typing import Literal, Union

from pydantic import BaseModel, ConfigDict

from .errors import ConversionError


class ConversionSuccess(BaseModel):
    """The encoded story image and the name it should be saved under."""
    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    data: bytes
    filename: str


class ConversionFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    error: ConversionError


ConversionResult = Union[ConversionSuccess, ConversionFailure]
