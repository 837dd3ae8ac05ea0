"""Cryptographically secure random identifiers."""

from __future__ import annotations

import secrets
import string


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits


def random_string(length: int) -> str:
    """Return ``length`` characters drawn uniformly from ``ALPHABET``.

    Each character comes from :func:`secrets.randbelow`. Errors raised by
    the operating system's entropy source propagate to the caller.
    """

    return "".join(ALPHABET[secrets.randbelow(len(ALPHABET))] for _ in range(length))
