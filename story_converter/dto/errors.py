# story_converter/dto/errors.py
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class _ErrorBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class NoFile(_ErrorBase):
    type: Literal["NO_FILE"] = "NO_FILE"


class FileTooLarge(_ErrorBase):
    type: Literal["FILE_TOO_LARGE"] = "FILE_TOO_LARGE"
    max_size: int
    actual_size: int


class InvalidMimeType(_ErrorBase):
    type: Literal["INVALID_MIME_TYPE"] = "INVALID_MIME_TYPE"
    allowed: list[str]
    actual: str


class PixelExceeded(_ErrorBase):
    type: Literal["PIXEL_EXCEEDED"] = "PIXEL_EXCEEDED"
    max_dimension: int
    width: int
    height: int


class DecodeFailed(_ErrorBase):
    type: Literal["DECODE_FAILED"] = "DECODE_FAILED"
    message: str


class ConversionFailed(_ErrorBase):
    type: Literal["CONVERSION_FAILED"] = "CONVERSION_FAILED"
    message: str


ConversionError = Annotated[
    Union[NoFile, FileTooLarge, InvalidMimeType, PixelExceeded, DecodeFailed, ConversionFailed],
    Field(discriminator="type"),
]

conversion_error_adapter: TypeAdapter[ConversionError] = TypeAdapter(ConversionError)
