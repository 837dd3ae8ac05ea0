"""Character tables, transliteration and legacy codepage decoding."""

from .codepage import cp1258_to_utf8
from .tables import CP1258, TRANSLITERATIONS
from .transliterate import transliterate

__all__ = ["CP1258", "TRANSLITERATIONS", "cp1258_to_utf8", "transliterate"]
