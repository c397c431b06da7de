"""
Transliteration module.

Provides substitution tables and table driven transliterators for
converting between Cyrillic and Latin scripts.
"""

from .table import (
    SubstitutionTable,
    CYRILLIC_TABLE
)

from .transliterator import (
    Transliterator,
    TableTransliterator,
    CyrillicTransliterator,
    to_transliteration,
    from_transliteration
)

__all__ = [
    'SubstitutionTable',
    'CYRILLIC_TABLE',
    'Transliterator',
    'TableTransliterator',
    'CyrillicTransliterator',
    'to_transliteration',
    'from_transliteration',
]
