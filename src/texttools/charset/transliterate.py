"""Fold accented Latin-1 letters into plain ASCII."""

from __future__ import annotations

from .tables import TRANSLITERATIONS


_TRANSLATION_TABLE = str.maketrans(dict(TRANSLITERATIONS))


def transliterate(text: str) -> str:
    """Replace every character found in ``TRANSLITERATIONS`` with its ASCII form.

    Characters without an entry, ASCII included, are left untouched.

    >>> transliterate("Crème brûlée à la Æbleskiver")
    'Creme brulee a la AEbleskiver'
    """

    return text.translate(_TRANSLATION_TABLE)
