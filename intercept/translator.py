"""Interface text translation between English and Ukrainian."""

from __future__ import annotations

import logging
from enum import IntEnum
from itertools import zip_longest

logger = logging.getLogger(__name__)

UKRAINIAN_TRANSLATION_FILENAME = "./translation/ukr.txt"


class Language(IntEnum):
    ENGLISH = 0
    UKRAINIAN = 1


class Translator:
    """Maps English interface strings to their translations."""

    def __init__(self):
        self._tables: dict[Language, dict[str, str]] = {}

    def load(self, path=UKRAINIAN_TRANSLATION_FILENAME):
        """Load the Ukrainian table from a file of alternating English/Ukrainian lines."""
        with open(path, encoding="utf-8") as lines:
            self.load_lines(lines)

    def load_lines(self, lines):
        """Load alternating English and Ukrainian lines; an unpaired line maps to ''."""
        stripped = (line.rstrip("\n") for line in lines)
        table = self._tables.setdefault(Language.UKRAINIAN, {})
        for english, translated in zip_longest(stripped, stripped, fillvalue=""):
            table[english] = translated

    def translate(self, text, language):
        """Translate ``text``; English is returned unchanged, unknown text gives ''."""
        language = Language(language)
        if language is Language.ENGLISH:
            return text
        result = self._tables.get(language, {}).get(text, "")
        if not result:
            logger.warning("Failed to translate: %s", text)
        return result