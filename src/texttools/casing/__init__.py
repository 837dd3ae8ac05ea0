"""Case tokenization and case-style composition."""

from .styles import (
    CaseStyle,
    camel_case,
    convert,
    kebab_case,
    pascal_case,
    slug,
    snake_case,
    uncase,
)
from .tokenizer import tokenize

__all__ = [
    "CaseStyle",
    "camel_case",
    "convert",
    "kebab_case",
    "pascal_case",
    "slug",
    "snake_case",
    "tokenize",
    "uncase",
]
