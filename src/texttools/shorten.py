"""Word-aware truncation of text into short previews.

Lengths are counted in UTF-8 bytes, not characters, so previews built
from non-ASCII text may hold fewer characters than ``max_length``.
"""

from __future__ import annotations

import re

from texttools.logging import logger


_WHITESPACE_RE = re.compile(r"[\t\n\f\r ]+")
_SPACE_BEFORE_PUNCTUATION_RE = re.compile(r"[\t\n\f\r ]+([.,;!?]+)")

_DROPPED_PUNCTUATION = (".", ",", ";")
_KEPT_PUNCTUATION = ("?", "!")


def _byte_len(value: str) -> int:
    return len(value.encode("utf-8"))


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs, glue punctuation to the previous word and trim.

    >>> normalize_whitespace("  sample text .\\r\\n\\r\\n  Next  ")
    'sample text. Next'
    """

    text = _WHITESPACE_RE.sub(" ", text)
    text = _SPACE_BEFORE_PUNCTUATION_RE.sub(r"\1", text)
    return text.strip(" ")


def shorten(text: str, max_length: int, suffix: str = "") -> str:
    """Return the most sensible preview of ``text`` fitting ``max_length`` bytes.

    Text that already fits is returned normalized but otherwise unchanged,
    without ``suffix``. Longer text is cut at the last whole word that leaves
    room for ``suffix``; a single word too long to fit is cut mid-word.

    When a suffix is appended, a trailing ``.``, ``,`` or ``;`` is dropped
    from the preview, while a trailing ``?`` or ``!`` is kept and the
    suffix loses its last character instead (``"that?.."``).

    ``max_length`` is expected to exceed the byte length of ``suffix``.
    """

    text = normalize_whitespace(text)
    if _byte_len(text) <= max_length:
        return text

    suffix_len = _byte_len(suffix)
    shorter = ""
    for word in text.split(" "):
        if not word:
            continue
        if _byte_len(shorter) + _byte_len(word) + suffix_len >= max_length:
            break
        shorter = f"{shorter} {word}" if shorter else word

    if not shorter:
        end = max(max_length - suffix_len, 0)
        logger.debug("No whole word fits in %d bytes, cutting at byte %d", max_length, end)
        shorter = text.encode("utf-8")[:end].decode("utf-8", errors="ignore")

    if shorter and suffix:
        if shorter.endswith(_DROPPED_PUNCTUATION):
            shorter = shorter[:-1]
        elif shorter.endswith(_KEPT_PUNCTUATION):
            suffix = suffix[:-1]

    return shorter + suffix
