"""Compose word tokens into snake, kebab, camel, Pascal and sentence case."""

from __future__ import annotations

from enum import Enum
from typing import Union

from texttools.charset.transliterate import transliterate

from .tokenizer import tokenize


class CaseStyle(str, Enum):
    """Output styles understood by :func:`convert`."""

    SNAKE = "snake"
    KEBAB = "kebab"
    CAMEL = "camel"
    PASCAL = "pascal"
    HUMAN = "human"


def snake_case(text: str) -> str:
    return "_".join(tokenize(text))


def kebab_case(text: str) -> str:
    return snake_case(text).replace("_", "-")


def camel_case(text: str) -> str:
    tokens = tokenize(text)
    if not tokens:
        return ""
    head, *rest = tokens
    return head + "".join(token[:1].upper() + token[1:] for token in rest)


def pascal_case(text: str) -> str:
    out = camel_case(text)
    return out[:1].upper() + out[1:]


def uncase(text: str) -> str:
    """Turn an identifier in any case into a sentence.

    >>> uncase("inviteYourCustomersAddInvites")
    'Invite your customers add invites'
    """

    out = snake_case(text).replace("_", " ")
    return out[:1].upper() + out[1:]


def slug(text: str) -> str:
    """Build a URL slug, folding accented letters to ASCII first.

    >>> slug("Crème Brûlée Recipe")
    'creme-brulee-recipe'
    """

    return kebab_case(transliterate(text))


_CONVERTERS = {
    CaseStyle.SNAKE: snake_case,
    CaseStyle.KEBAB: kebab_case,
    CaseStyle.CAMEL: camel_case,
    CaseStyle.PASCAL: pascal_case,
    CaseStyle.HUMAN: uncase,
}


def convert(text: str, style: Union[CaseStyle, str]) -> str:
    """Apply the converter registered for ``style``."""

    return _CONVERTERS[CaseStyle(style)](text)
