"""textnorm - Text normalization utilities.

Truncation, slug generation, HTML to plain text conversion, keyword
extraction and Cyrillic/Latin transliteration over in-memory strings.
Import submodules directly where needed, e.g.:

    from textnorm.clean import to_plain_text, get_keywords
    from textnorm.transliterate import to_transliteration
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
]
