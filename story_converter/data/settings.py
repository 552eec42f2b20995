# story_converter/data/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict

from story_converter.data.constants import LayoutMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="STORY_CONVERTER_",
        env_nested_delimiter="__",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    logging_level: int = 20
    locale: str = "en"
    default_layout: LayoutMode = LayoutMode.CROP_FILL


settings = Settings()
