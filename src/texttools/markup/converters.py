"""Conversion of HTML and Markdown content into plain text."""

from __future__ import annotations

import warnings

from bs4 import BeautifulSoup, MarkupResemblesLocatorWarning
from markdown_it import MarkdownIt


# Applied in order after tags are stripped.
_SANITIZE_REPLACEMENTS = (
    ("½", "1/2"),
    ("\\\\", "\\"),
    ("\\'", "'"),
    ('\\"', '"'),
)

_markdown = MarkdownIt("commonmark", {"html": True})


def strip_tags(html: str) -> str:
    """Remove every markup tag from ``html`` and return the remaining text."""

    # Plain text such as "index.html" is still markup here, not a file name.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MarkupResemblesLocatorWarning)
        soup = BeautifulSoup(html, "html.parser")
    return soup.get_text()


def html_to_text(html: str) -> str:
    """Convert an HTML fragment to a single line of plain text."""

    text = html.replace("\r\n", " ")
    text = strip_tags(text)
    return text.strip(" ")


def sanitize_text(text: str) -> str:
    """Strip HTML like :func:`html_to_text` and undo common escaping.

    >>> sanitize_text("Text <b>with</b> a half char: ½")
    'Text with a half char: 1/2'
    """

    text = html_to_text(text)
    for old, new in _SANITIZE_REPLACEMENTS:
        text = text.replace(old, new)
    return text


def markdown_to_text(markdown: str) -> str:
    """Render CommonMark ``markdown`` and return its text content."""

    return strip_tags(_markdown.render(markdown)).strip()
