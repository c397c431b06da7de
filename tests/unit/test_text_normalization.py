"""
Unit tests for truncation and slug normalization helpers.

Tests substring, cut_text, clean_characters and replace_all for
common inputs and edge cases.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from textnorm.clean.normalize import (
    SYSTEM_CHARACTERS, replace_all, substring, clean_characters, cut_text
)
from textnorm.models import InvalidArgumentError, ProcessingError


class TestSubstring:
    """Test cases for substring."""

    @pytest.mark.parametrize("text, length, end_part, expected", [
        ("This is a test string.", 10, "...", "This is..."),
        ("Short", 10, "...", "Short"),
        ("", 10, "...", ""),
    ])
    def test_substring_with_end_part(self, text, length, end_part, expected):
        """Test truncation with an ending marker."""
        assert substring(text, length, end_part) == expected

    def test_substring_without_end_part(self):
        """Test truncation without an ending marker."""
        assert substring("abcdef", 3) == "abc"
        assert substring("abc", 3) == "abc"

    def test_truncated_length_matches_limit(self):
        """Test that truncated output is exactly the requested length."""
        result = substring("The quick brown fox jumps", 12, "…")
        assert len(result) == 12
        assert result.endswith("…")

    def test_none_input(self):
        """Test that None is treated as empty text."""
        assert substring(None, 5) == ""

    def test_end_part_longer_than_length(self):
        """Test that an ending that cannot fit is rejected."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            substring("This is a test string.", 2, "...")

        error = exc_info.value
        assert error.stage == "substring"
        assert error.context["end_part"] == "..."
        assert "does not fit" in str(error)

    @pytest.mark.parametrize("text, expected", [
        ("", ""),
        (None, ""),
        ("Hi", "Hi"),
    ])
    def test_long_end_part_ignored_when_no_cut_needed(self, text, expected):
        """Test that the ending is only validated when text is cut."""
        assert substring(text, 2, "...") == expected

    def test_negative_length(self):
        """Test that a negative length is rejected."""
        with pytest.raises(ValueError):
            substring("text", -1)

        with pytest.raises(InvalidArgumentError):
            substring("", -1)


class TestCleanCharacters:
    """Test cases for clean_characters."""

    def test_removes_system_characters(self):
        """Test slug generation from punctuated text."""
        assert clean_characters("Hello & World!") == "hello-world"

    def test_empty_and_none_input(self):
        """Test handling of empty and None inputs."""
        assert clean_characters("") == ""
        assert clean_characters(None) == ""

    def test_collapses_repeated_separators(self):
        """Test that runs of removed characters yield single hyphens."""
        assert clean_characters("C# (and) .NET -- Framework") == "c-and-net-framework"

    def test_control_characters(self):
        """Test that tabs and line breaks act as separators."""
        assert clean_characters("Hello\tWorld\r\nAgain\n") == "hello-world-again"

    def test_cyrillic_text(self):
        """Test that non-Latin letters are kept and lowercased."""
        assert clean_characters("Привет, Мир!") == "привет-мир"

    def test_only_system_characters(self):
        """Test that pure punctuation produces an empty slug."""
        assert clean_characters("?!...") == ""


class TestCutText:
    """Test cases for cut_text."""

    def test_short_text_unchanged(self):
        """Test that text within the limit is returned unchanged."""
        text = "A short sentence."
        assert cut_text(text, 50) == text
        assert cut_text(cut_text(text, 50), 50) == text

    def test_exact_length_unchanged(self):
        """Test that text exactly at the limit is returned unchanged."""
        assert cut_text("abcde", 5) == "abcde"

    def test_cuts_at_last_dot(self):
        """Test cutting at the last sentence end before the limit."""
        text = "First one. Second one. Third sentence is long."
        result = cut_text(text, 25)
        assert result == "First one. Second one."
        assert result.endswith(".")

    def test_dot_at_limit_is_included(self):
        """Test that a dot exactly at the limit index is kept."""
        assert cut_text("abcde.fghij", 5) == "abcde."

    def test_no_dot_appends_ellipsis(self):
        """Test fallback to a hard cut with an ellipsis."""
        text = "abcdefghijklmnopqrstuvwxyz"
        result = cut_text(text, 10)
        assert result == "abcdefghij..."
        assert len(result) == 13

    def test_default_max_length(self):
        """Test the default limit of 200 characters."""
        text = "x" * 250
        result = cut_text(text)
        assert result == "x" * 200 + "..."

    def test_empty_input(self):
        """Test handling of empty input."""
        assert cut_text("") == ""
        assert cut_text(None) == ""

    def test_negative_max_length(self):
        """Test that a negative limit is rejected."""
        with pytest.raises(InvalidArgumentError):
            cut_text("some text", -5)


class TestReplaceAll:
    """Test cases for replace_all."""

    def test_replaces_each_target(self):
        """Test sequential replacement of several targets."""
        assert replace_all("Hello & World!", ["&", "!"], "") == "Hello  World"

    def test_order_is_significant(self):
        """Test that earlier targets are replaced first."""
        assert replace_all("a...b", [".", "..."], "-") == "a---b"
        assert replace_all("a...b", ["...", "."], "-") == "a-b"

    def test_system_characters_contents(self):
        """Test that the system character set covers common punctuation."""
        for token in ("&", "?", "!", ".", ",", "\n", "\t", "quot;", "«", "»"):
            assert token in SYSTEM_CHARACTERS


class TestErrors:
    """Test cases for the error model."""

    def test_invalid_argument_is_processing_error(self):
        """Test error hierarchy and serialization."""
        error = InvalidArgumentError(stage="cut_text", message="bad value", max_length=-1)

        assert isinstance(error, ProcessingError)
        assert isinstance(error, ValueError)
        assert str(error) == "bad value"

        data = error.to_dict()
        assert data["error_type"] == "InvalidArgument"
        assert data["severity"] == "low"
        assert data["context"] == {"max_length": -1}
