"""
HTML to plain text conversion module.

This module strips markup from HTML fragments with an ordered set of regular
expressions. It is a heuristic extractor rather than a parser: malformed or
deeply nested markup may leave stray fragments behind.

Line breaks can optionally be preserved. Break-like tags are swapped for a
placeholder before stripping and restored as ``<br />`` afterwards.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import PlainTextConfig

logger = logging.getLogger(__name__)

LINE_BREAK_PLACEHOLDER = "[[LINE_BREAK]]"

# Matched as case-sensitive literals.
LINE_BREAK_TAGS = (
    "<br>", "<br/>", "<br />", "<BR>", "<BR/>", "<BR />",
    "<P>", "<P/>", "<P />", "</P>", "<p>", "<p/>", "<p />", "</p>",
)

# Applied strictly in this order, each match is removed.
_STRIP_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(pattern, re.IGNORECASE) for pattern in (
        r'<!--[\s\S]+?-->',
        r'<title>[\s\S]+?</title>',
        r'\s?class=\w+',
        r"\s+style='[^']+'",
        r'<(meta|link|/?o:|/?style|/?div|/?st\d|/?head|/?html|body|/?body|/?span|!\[)[^>]*?>',
        r'(<[^>]+>)+&nbsp;(</\w+>)+',
        r'\s+v:\w+="[^"]+"',
        r'(\n\r){2,}',
    )
)

_ANY_TAG_PATTERN = re.compile(r'<[^>]*>')
_BRACES_PATTERN = re.compile(r'{[^}]*}')

# Replaced with a single space.
_SPECIAL_SYMBOLS = ("&", "/", "\\", "?", "=", "quot;", "nbsp;", "rsquo;", "ndash;", "<", ">")

# Replaced after the special symbols, in this order.
_LEFTOVER_FRAGMENTS = (
    ("<p>", ""),
    ("<p/>", ""),
    ("<p />", ""),
    ("<P>", ""),
    ("<P />", ""),
    ("<div />", ""),
    ("<div>", ""),
    ("<span />", ""),
    ("<span>", ""),
    ("&quot;", ""),
    ("\r", " "),
    ("\n", " "),
    ("&laquo;", ""),
    ("&raquo;", ""),
)


def trim_line_breaks_from_start(text: Optional[str], placeholder: str = LINE_BREAK_PLACEHOLDER) -> Optional[str]:
    """
    Remove every placeholder at the very start of the text.

    Args:
        text: Text containing line break placeholders
        placeholder: Placeholder token to trim

    Returns:
        Text without leading placeholders
    """
    if not text:
        return text

    while text.startswith(placeholder):
        text = text[len(placeholder):]

    return text


@dataclass
class HtmlToTextConverter:
    """
    Regex based HTML to plain text converter.

    The stripping pipeline is shared and read-only, so a single converter
    can be used from several threads at once.
    """
    line_break_replacement: str = "<br />"
    preserve_line_breaks: bool = False

    @classmethod
    def from_config(cls, config: PlainTextConfig) -> "HtmlToTextConverter":
        """Create a converter from a PlainTextConfig section."""
        return cls(
            line_break_replacement=config.line_break_replacement,
            preserve_line_breaks=config.preserve_line_breaks
        )

    def convert(self, html: Optional[str], preserve_line_breaks: Optional[bool] = None) -> str:
        """
        Convert an HTML fragment to plain text.

        Args:
            html: HTML content
            preserve_line_breaks: Keep break-like tags as ``<br />``. Defaults
                to the converter setting.

        Returns:
            Trimmed plain text, possibly empty
        """
        if not html:
            return ""

        if preserve_line_breaks is None:
            preserve_line_breaks = self.preserve_line_breaks

        if not preserve_line_breaks:
            return self.strip_markup(html)

        text = self._mark_line_breaks(html)
        text = self.strip_markup(text)

        return text.replace(LINE_BREAK_PLACEHOLDER, self.line_break_replacement)

    def strip_markup(self, html: str) -> str:
        """
        Run the core stripping pipeline over the text.

        Args:
            html: HTML content

        Returns:
            Text with tags, comments and entity leftovers removed
        """
        original_length = len(html)
        text = html

        for pattern in _STRIP_PATTERNS:
            text = pattern.sub("", text)

        text = _ANY_TAG_PATTERN.sub("", text)
        text = _BRACES_PATTERN.sub("", text)

        for symbol in _SPECIAL_SYMBOLS:
            text = text.replace(symbol, " ")

        for fragment, replacement in _LEFTOVER_FRAGMENTS:
            text = text.replace(fragment, replacement)

        text = text.strip()
        logger.debug(f"Stripped markup: {original_length} -> {len(text)} characters")
        return text

    def batch_convert(self, html_contents: List[str], preserve_line_breaks: Optional[bool] = None) -> List[str]:
        """
        Convert multiple HTML fragments.

        Args:
            html_contents: List of HTML content strings
            preserve_line_breaks: See ``convert``

        Returns:
            List of plain text strings
        """
        return [self.convert(content, preserve_line_breaks) for content in html_contents]

    @staticmethod
    def _mark_line_breaks(html: str) -> str:
        doubled = LINE_BREAK_PLACEHOLDER * 2

        for tag in LINE_BREAK_TAGS:
            html = html.replace(tag, LINE_BREAK_PLACEHOLDER)

        while doubled in html:
            html = html.replace(doubled, LINE_BREAK_PLACEHOLDER)

        return trim_line_breaks_from_start(html)


_default_converter = HtmlToTextConverter()


def to_plain_text(html: Optional[str], preserve_line_breaks: bool = False) -> str:
    """
    Convenience function to convert HTML to plain text with default settings.

    Args:
        html: HTML content
        preserve_line_breaks: Keep break-like tags as ``<br />``

    Returns:
        Plain text content
    """
    return _default_converter.convert(html, preserve_line_breaks)
