# story_converter/data/texts/__init__.py
from .en import texts as en_texts
from .ja import texts as ja_texts
from .dto import ErrorTexts, LocaleTexts

ALL_TEXTS: dict[str, LocaleTexts] = {
    "en": en_texts,
    "ja": ja_texts,
}

DEFAULT_LOCALE = "en"


def get_texts(locale: str) -> LocaleTexts:
    """
    Retrieves the text object for a given locale, falling back to the default.
    """
    return ALL_TEXTS.get(locale, ALL_TEXTS[DEFAULT_LOCALE])
