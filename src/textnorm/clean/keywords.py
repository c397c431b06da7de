"""
Frequency based keyword extraction.

Keywords are the most frequent long words of a text after markup and
system characters have been removed. Words with equal frequency keep the
order in which they first appear in the text.
"""

import logging
from collections import Counter
from typing import List, Optional

from ..config import KeywordConfig
from ..models import InvalidArgumentError, Keyword
from .html_cleaner import to_plain_text
from .normalize import SYSTEM_CHARACTERS, replace_all

logger = logging.getLogger(__name__)


class KeywordExtractor:
    """
    Extracts ranked keywords from HTML or plain text.

    Words no longer than ``min_length`` characters are ignored.
    """

    def __init__(self, min_length: int = 4):
        """
        Initialize KeywordExtractor.

        Args:
            min_length: Words must be strictly longer than this to count
        """
        if min_length < 0:
            raise InvalidArgumentError(
                stage="keywords",
                message=f"min_length must be non-negative, got {min_length}",
                min_length=min_length
            )
        self.min_length = min_length

    @classmethod
    def from_config(cls, config: KeywordConfig) -> "KeywordExtractor":
        """Create an extractor from a KeywordConfig section."""
        return cls(min_length=config.min_length)

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Split text into lowercase words eligible as keywords.

        Args:
            text: HTML or plain text

        Returns:
            Words in text order, duplicates included
        """
        if not text:
            return []

        text = to_plain_text(text, preserve_line_breaks=True)
        text = replace_all(text, SYSTEM_CHARACTERS, "")
        text = text.strip().lower()

        words = (word.strip() for word in text.split(" "))
        return [word for word in words if len(word) > self.min_length]

    def extract(self, text: Optional[str], count: int) -> List[Keyword]:
        """
        Extract the ``count`` most frequent words.

        Args:
            text: HTML or plain text
            count: Maximum number of keywords to return

        Returns:
            Keywords ordered by descending frequency, ties in first-seen order

        Raises:
            InvalidArgumentError: If ``count`` is negative
        """
        if count < 0:
            raise InvalidArgumentError(
                stage="keywords",
                message=f"count must be non-negative, got {count}",
                count=count
            )

        if count == 0:
            return []

        frequencies = Counter(self.tokenize(text))
        logger.debug(f"Found {len(frequencies)} distinct keyword candidates")

        return [Keyword(text=word, frequency=frequency)
                for word, frequency in frequencies.most_common(count)]

    def get_keywords(self, text: Optional[str], count: int) -> str:
        """
        Extract keywords and join them with ', '.

        Args:
            text: HTML or plain text
            count: Maximum number of keywords to return

        Returns:
            Comma separated keyword list, possibly empty
        """
        return ", ".join(keyword.text for keyword in self.extract(text, count))


_default_extractor = KeywordExtractor()


def extract_keywords(text: Optional[str], count: int) -> List[Keyword]:
    """Extract ranked Keyword objects with the default extractor."""
    return _default_extractor.extract(text, count)


def get_keywords(text: Optional[str], count: int) -> str:
    """Return up to ``count`` comma separated keywords with the default extractor."""
    return _default_extractor.get_keywords(text, count)
