"""
Substitution tables for transliteration.

A table is an immutable, ordered collection of source -> target token pairs.
Tokens may be several characters long, so tables hand out their entries
longest-source-first to keep digraphs such as 'хэ' from being split by the
single letter 'х'.
"""

import logging
from typing import Iterable, Iterator, Tuple

from ..models import InvalidArgumentError, SubstitutionEntry

logger = logging.getLogger(__name__)


class SubstitutionTable:
    """
    Immutable ordered mapping of source tokens to target tokens.

    Declaration order is kept; ``by_source_length`` and ``by_target_length``
    return stable sorts of the entries by descending token length.
    """

    def __init__(self, pairs: Iterable[Tuple[str, str]]):
        """
        Initialize SubstitutionTable.

        Args:
            pairs: (source, target) token pairs in declaration order

        Raises:
            InvalidArgumentError: On empty tokens or duplicate sources
        """
        entries = tuple(SubstitutionEntry(source, target) for source, target in pairs)

        seen = set()
        for entry in entries:
            if entry.source in seen:
                raise InvalidArgumentError(
                    stage="substitution_table",
                    message=f"Duplicate source token: {entry.source!r}",
                    source=entry.source
                )
            seen.add(entry.source)

        self._entries = entries
        self._by_source_length = tuple(sorted(entries, key=lambda e: len(e.source), reverse=True))
        self._by_target_length = tuple(sorted(entries, key=lambda e: len(e.target), reverse=True))
        logger.debug(f"Built substitution table with {len(entries)} entries")

    @property
    def entries(self) -> Tuple[SubstitutionEntry, ...]:
        """Entries in declaration order."""
        return self._entries

    def by_source_length(self) -> Tuple[SubstitutionEntry, ...]:
        """Entries sorted by descending source length, ties in declaration order."""
        return self._by_source_length

    def by_target_length(self) -> Tuple[SubstitutionEntry, ...]:
        """Entries sorted by descending target length, ties in declaration order."""
        return self._by_target_length

    def __iter__(self) -> Iterator[SubstitutionEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, source: object) -> bool:
        return any(entry.source == source for entry in self._entries)


CYRILLIC_TABLE = SubstitutionTable([
    ("щ", "shch"),
    ("Щ", "Shch"),

    ("ё", "yo"),
    ("Ё", "Yo"),

    ("ж", "zh"),
    ("Ж", "Zh"),

    ("ї", "yi"),
    ("Ї", "Yi"),

    ("ч", "ch"),
    ("Ч", "Ch"),

    ("ш", "sh"),
    ("Ш", "Sh"),

    ("ц", "ts"),
    ("Ц", "Ts"),

    ("ю", "yu"),
    ("Ю", "Yu"),

    ("Я", "Ya"),
    ("я", "ya"),

    ("ъ", "__"),
    ("Ъ", "__"),

    ("х", "kh"),
    ("Х", "Kh"),

    ("хэ", "he"),
    ("Хэ", "He"),

    ("ь", "_"),
    ("Ь", "_"),

    ("б", "b"),
    ("Б", "B"),

    ("в", "v"),
    ("В", "V"),

    ("во", "wo"),
    ("Во", "Wo"),

    ("г", "g"),
    ("Г", "G"),

    ("ґ", "g"),
    ("Ґ", "G"),

    ("д", "d"),
    ("Д", "D"),

    ("е", "e"),
    ("Е", "E"),

    ("є", "ye"),

    ("з", "z"),
    ("З", "Z"),

    ("и", "i"),
    ("И", "I"),

    ("й", "y"),
    ("Й", "Y"),

    ("к", "k"),
    ("К", "K"),

    ("л", "l"),
    ("Л", "L"),

    ("м", "m"),
    ("М", "M"),

    ("н", "n"),
    ("Н", "N"),

    ("п", "p"),
    ("П", "P"),

    ("р", "r"),
    ("Р", "R"),

    ("с", "s"),
    ("С", "S"),

    ("т", "t"),
    ("Т", "T"),

    ("о", "o"),
    ("О", "O"),

    ("а", "a"),
    ("А", "A"),

    ("ф", "f"),
    ("Ф", "F"),

    ("і", "i"),
    ("І", "I"),

    ("У", "U"),
    ("у", "u"),

    ("ы", "y"),
    ("Ы", "Y"),

    ("э", "e"),
    ("Э", "E"),
])
