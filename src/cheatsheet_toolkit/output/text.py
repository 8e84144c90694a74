"""
Module: output.text

Purpose:
    Plain-text preparation of box content for the renderers.
    Box bodies may carry editor markup (<p>, <mark>, <br>); the PDF
    and preview renderers draw plain wrapped lines.

Key Functions:
    - strip_markup(): Markup -> plain text with paragraph breaks
    - wrap_lines(): Plain text -> lines of at most N characters
"""

from __future__ import annotations

import html
import re
import textwrap

_BREAK_TAGS = re.compile(r"<\s*(br|/p|/div|/li)\s*/?\s*>", re.IGNORECASE)
_ANY_TAG = re.compile(r"<[^>]*>")


def strip_markup(content: str) -> str:
    """
    Drop markup tags, keeping paragraph and line breaks.

    Example:
        >>> strip_markup("<p>a<br>b</p><p>c</p>")
        'a\\nb\\nc'
    """
    text = _BREAK_TAGS.sub("\n", content or "")
    text = _ANY_TAG.sub("", text)
    text = html.unescape(text)
    lines = [line.strip() for line in text.splitlines()]
    return "\n".join(line for line in lines if line)


def wrap_lines(text: str, width: int) -> list[str]:
    """Wrap each paragraph to `width` characters; blank input gives []."""
    width = max(1, width)
    lines: list[str] = []
    for paragraph in text.splitlines():
        lines.extend(textwrap.wrap(paragraph, width=width) or [""])
    return lines
