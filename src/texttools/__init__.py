"""Text normalization toolkit: case styles, slugs, previews, plain text and CP1258 decoding."""

from .casing import (
    CaseStyle,
    camel_case,
    convert,
    kebab_case,
    pascal_case,
    slug,
    snake_case,
    tokenize,
    uncase,
)
from .charset import CP1258, TRANSLITERATIONS, cp1258_to_utf8, transliterate
from .markup import html_to_text, markdown_to_text, sanitize_text, strip_tags
from .secure import ALPHABET, random_string
from .shorten import normalize_whitespace, shorten

__version__ = "0.1.0"

__all__ = [
    "ALPHABET",
    "CP1258",
    "CaseStyle",
    "TRANSLITERATIONS",
    "camel_case",
    "convert",
    "cp1258_to_utf8",
    "html_to_text",
    "kebab_case",
    "markdown_to_text",
    "normalize_whitespace",
    "pascal_case",
    "random_string",
    "sanitize_text",
    "shorten",
    "slug",
    "snake_case",
    "strip_tags",
    "tokenize",
    "transliterate",
    "uncase",
]
