"""Decoding of Windows-1258 byte strings."""

from __future__ import annotations

from typing import Iterable, Union

from .tables import CP1258


def cp1258_to_utf8(data: Union[bytes, bytearray, Iterable[int]]) -> str:
    """Decode CP1258 ``data`` one byte at a time.

    Positions the codepage leaves undefined come back as U+FFFD instead
    of raising, so any byte sequence decodes. Integers outside 0-255 are
    not bytes and raise :class:`ValueError`.
    """

    return "".join(chr(CP1258[byte]) for byte in bytes(data))
