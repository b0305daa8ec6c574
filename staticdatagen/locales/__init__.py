"""Read-only label lookup for generated markup (English, French, German).

A ``Translator`` is built once per build pass and passed by reference to
the generators that render human-readable labels.  Tables are never mutated
at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from staticdatagen.locales import de, en, fr

DEFAULT_LANGUAGE = "en"

LOCALE_TABLES: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "en": MappingProxyType(en.TRANSLATIONS),
        "fr": MappingProxyType(fr.TRANSLATIONS),
        "de": MappingProxyType(de.TRANSLATIONS),
    }
)


class TranslationError(KeyError):
    """Raised when a label key is unknown."""


class Translator:
    """Label lookup bound to one language.

    Unsupported languages fall back to English.

    Parameters
    ----------
    language:
        ISO 639-1 code, e.g. ``"fr"``.
    """

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        self.language = language if language in LOCALE_TABLES else DEFAULT_LANGUAGE
        self._table = LOCALE_TABLES[self.language]

    def translate(self, key: str, **params: object) -> str:
        """Return the label for *key*, formatted with *params*."""
        try:
            template = self._table[key]
        except KeyError:
            raise TranslationError(key) from None
        return template.format(**params) if params else template

    def __repr__(self) -> str:
        return f"<Translator language={self.language!r}>"


def supported_languages() -> list[str]:
    """Languages with a label table."""
    return sorted(LOCALE_TABLES)
