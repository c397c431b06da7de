"""
Text truncation and slug normalization.

This module provides the small string helpers used across textnorm:
- Sequential token replacement
- Length-bounded truncation with an optional ending marker
- Sentence-aware text cutting
- Conversion of arbitrary text into lowercase hyphenated slugs
"""

from typing import Iterable, Optional

from ..models import InvalidArgumentError


# Punctuation and control tokens treated as noise. Order matters because
# replacements are applied one after another over the whole string.
SYSTEM_CHARACTERS = (
    "&", "?", "^", ":", "/", "\\", "@", "$", "(", ")", "+", "[",
    "]", "{", "}", "%", "~", ">", "<", "=", "*", "“", "\"", "!",
    "”", "«", "»", ".", ",", "#", "§", "quot;", "--", ";", "\r", "\n", "\t",
    "...",
)

DEFAULT_CUT_LENGTH = 200


def replace_all(text: str, targets: Iterable[str], replacement: str) -> str:
    """
    Replace every occurrence of each target token, one token at a time.

    Args:
        text: Input text
        targets: Tokens to replace, applied in iteration order
        replacement: Replacement for every token

    Returns:
        Text with all target tokens replaced
    """
    for target in targets:
        text = text.replace(target, replacement)
    return text


def substring(text: Optional[str], length: int, end_part: str = "") -> str:
    """
    Truncate text to at most ``length`` characters.

    When the text is longer than ``length`` it is cut so that the result,
    including ``end_part``, is exactly ``length`` characters long.

    Args:
        text: Input text
        length: Maximum length of the result
        end_part: Marker appended to truncated text, e.g. '...'

    Returns:
        Truncated text, or the input when it already fits

    Raises:
        InvalidArgumentError: If ``length`` is negative, or the text must be
            cut and ``end_part`` does not fit into ``length``
    """
    if length < 0:
        raise InvalidArgumentError(
            stage="substring",
            message=f"Length must not be negative, got {length}",
            length=length,
            end_part=end_part
        )

    if not text or len(text) <= length:
        return text or ""

    if len(end_part) > length:
        raise InvalidArgumentError(
            stage="substring",
            message=f"Ending '{end_part}' does not fit into length {length}",
            length=length,
            end_part=end_part
        )

    return text[:length - len(end_part)] + end_part


def clean_characters(text: Optional[str]) -> str:
    """
    Convert text into a lowercase, hyphen separated slug.

    System characters are replaced with spaces, space runs are collapsed,
    the result is lowercased and remaining spaces become hyphens.

    Args:
        text: Input text

    Returns:
        Slug, e.g. 'hello-world' for 'Hello & World!'
    """
    if not text:
        return ""

    result = replace_all(text, SYSTEM_CHARACTERS, " ")

    while "  " in result:
        result = result.replace("  ", " ").strip()

    return result.strip().lower().replace(" ", "-")


def cut_text(text: Optional[str], max_length: int = DEFAULT_CUT_LENGTH) -> str:
    """
    Shorten text to ``max_length`` characters, preferring a sentence end.

    Args:
        text: Input text
        max_length: Maximum number of characters to keep

    Returns:
        The input when short enough, text up to and including the last '.'
        found at or before ``max_length``, or the first ``max_length``
        characters followed by '...'

    Raises:
        InvalidArgumentError: If ``max_length`` is negative
    """
    if max_length < 0:
        raise InvalidArgumentError(
            stage="cut_text",
            message=f"max_length must be non-negative, got {max_length}",
            max_length=max_length
        )

    if not text:
        return ""

    if len(text) <= max_length:
        return text

    dot_index = text.rfind(".", 0, max_length + 1)
    if dot_index != -1:
        return text[:dot_index + 1]

    return text[:max_length] + "..."
