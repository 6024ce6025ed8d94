"""
Supported languages.

The set is closed: every member maps to exactly one bundled dictionary
asset, and no two members share an asset.

Usage:
    from lemmata.languages import Language

    Language.parse("swedish")   # Language.SWEDISH
    Language.parse("sv")        # Language.SWEDISH
    Language.SWEDISH.asset_path # "data/sv.gz"
"""

from __future__ import annotations

from enum import Enum

from lemmata.errors import UnsupportedLanguage


class Language(Enum):
    """A supported language: (canonical name, ISO 639-1 code)."""

    ENGLISH = ("english", "en")
    FRENCH = ("french", "fr")
    GERMAN = ("german", "de")
    ITALIAN = ("italian", "it")
    SPANISH = ("spanish", "es")
    SWEDISH = ("swedish", "sv")

    def __init__(self, label: str, code: str):
        self.label = label
        self.code = code

    @property
    def asset_path(self) -> str:
        """Virtual path of this language's compressed dictionary."""
        return f"data/{self.code}.gz"

    @classmethod
    def parse(cls, value: Language | str) -> Language:
        """Resolve a Language from a member, canonical name or ISO code.

        Matching is case-insensitive.  Raises UnsupportedLanguage for
        anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            lang = _BY_KEY.get(key)
            if lang is not None:
                return lang
        raise UnsupportedLanguage(value)

    def __str__(self) -> str:
        return self.label


_BY_KEY: dict[str, Language] = {}
for _lang in Language:
    _BY_KEY[_lang.label] = _lang
    _BY_KEY[_lang.code] = _lang
del _lang
