"""Split arbitrary identifiers and phrases into lowercase word tokens."""

from __future__ import annotations

import re


_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]+")
# lower/digit -> Upper ("sampleText", "64Encode") and the end of an
# acronym ("HTTPServer" -> "HTTP" | "Server").
_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def tokenize(text: str) -> tuple[str, ...]:
    """Return the lowercase ASCII words making up ``text``.

    Anything outside ``[A-Za-z0-9]`` separates words and never produces a
    token of its own. Digits stay attached to the letters before them.

    >>> tokenize("___$$Base64Encode")
    ('base64', 'encode')
    >>> tokenize("sample 2 Text")
    ('sample', '2', 'text')
    """

    tokens: list[str] = []
    for chunk in _SEPARATOR_RE.split(text):
        if not chunk:
            continue
        tokens.extend(part.lower() for part in _BOUNDARY_RE.split(chunk) if part)
    return tuple(tokens)
