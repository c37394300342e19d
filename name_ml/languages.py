"""Languages supported by the name grammars."""
from enum import Enum
from typing import Union

from name_ml.errors import UnsupportedLanguageError


class Language(Enum):
    """A supported language, valued by its ISO 639-1 code."""

    ENGLISH = "en"
    GERMAN = "de"
    FRENCH = "fr"
    SPANISH = "es"
    ITALIAN = "it"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_value(cls, value: Union["Language", str]) -> "Language":
        """Resolve a language from an enum member, an ISO code or an English name.

        Args:
            value: Language, code (e.g. "de") or name (e.g. "German")

        Returns:
            The matching Language

        Raises:
            UnsupportedLanguageError: If the value names no supported language
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for language in cls:
                if key == language.value or key == language.name.lower():
                    return language
        raise UnsupportedLanguageError(value)


LanguageLike = Union[Language, str]
