"""
Cyrillic <-> Latin transliteration.

Transliteration is a sequence of whole-string substitutions driven by a
SubstitutionTable. The backward direction is lossy: several Cyrillic letters
share one Latin rendering (e.g. 'е' and 'э' both become 'e'), and the
reverse mapping always picks the first of them.
"""

from abc import ABC, abstractmethod
from typing import Optional

from .table import CYRILLIC_TABLE, SubstitutionTable


class Transliterator(ABC):
    """Abstract base class for script transliterators."""

    @abstractmethod
    def to_transliteration(self, text: Optional[str]) -> str:
        """Render text in the target script."""
        pass

    @abstractmethod
    def from_transliteration(self, text: Optional[str]) -> str:
        """Convert transliterated text back to the source script."""
        pass


class TableTransliterator(Transliterator):
    """
    Transliterator backed by a SubstitutionTable.

    Each direction walks the table longest-token-first on the side being
    matched and replaces every non-overlapping occurrence of a token before
    moving to the next one.
    """

    def __init__(self, table: SubstitutionTable):
        self.table = table

    def to_transliteration(self, text: Optional[str]) -> str:
        if not text:
            return ""

        for entry in self.table.by_source_length():
            text = text.replace(entry.source, entry.target)

        return text

    def from_transliteration(self, text: Optional[str]) -> str:
        if not text:
            return ""

        for entry in self.table.by_target_length():
            text = text.replace(entry.target, entry.source)

        return text


class CyrillicTransliterator(TableTransliterator):
    """Transliterates Russian and Ukrainian Cyrillic to Latin and back."""

    def __init__(self):
        super().__init__(CYRILLIC_TABLE)


_default_transliterator = CyrillicTransliterator()


def to_transliteration(text: Optional[str]) -> str:
    """Transliterate Cyrillic text to Latin with the default table."""
    return _default_transliterator.to_transliteration(text)


def from_transliteration(text: Optional[str]) -> str:
    """Convert Latin transliteration back to Cyrillic with the default table."""
    return _default_transliterator.from_transliteration(text)
