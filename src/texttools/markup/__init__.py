"""HTML and Markdown to plain text conversion."""

from .converters import html_to_text, markdown_to_text, sanitize_text, strip_tags

__all__ = ["html_to_text", "markdown_to_text", "sanitize_text", "strip_tags"]
