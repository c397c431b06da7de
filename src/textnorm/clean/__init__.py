"""
Text cleaning module.

This module provides text cleaning capabilities including:
- Length-bounded truncation and sentence-aware cutting
- Slug generation from arbitrary text
- Heuristic HTML to plain text conversion with optional line breaks
- Frequency based keyword extraction
"""

from .normalize import (
    SYSTEM_CHARACTERS,
    replace_all,
    substring,
    clean_characters,
    cut_text
)

from .html_cleaner import (
    LINE_BREAK_TAGS,
    LINE_BREAK_PLACEHOLDER,
    HtmlToTextConverter,
    to_plain_text,
    trim_line_breaks_from_start
)

from .keywords import (
    KeywordExtractor,
    extract_keywords,
    get_keywords
)

__all__ = [
    # Normalization
    'SYSTEM_CHARACTERS',
    'replace_all',
    'substring',
    'clean_characters',
    'cut_text',

    # HTML conversion
    'LINE_BREAK_TAGS',
    'LINE_BREAK_PLACEHOLDER',
    'HtmlToTextConverter',
    'to_plain_text',
    'trim_line_breaks_from_start',

    # Keywords
    'KeywordExtractor',
    'extract_keywords',
    'get_keywords'
]
