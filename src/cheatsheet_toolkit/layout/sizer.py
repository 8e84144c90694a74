"""
Module: layout.sizer

Purpose:
    Estimate a box size from its text before anything is rendered.
    Cheap heuristic driven by title length, body length, line count,
    word count and the presence of LaTeX or math notation. The user
    corrects the estimate later by resizing manually.

Key Functions:
    - estimate_size(): Title + body -> BoxSize

Algorithm:
    Start from 180x120, add every adjustment, then clamp into the
    geometry's size range:
    1. Long title widens the box (and heightens it past 30 chars)
    2. Long body widens the box
    3. Estimated line count (40 chars per line) adds height
    4. LaTeX commands or $...$ add room
    5. Complex math (^, _, braces, \\frac, \\sqrt, \\sum, \\int) adds more
    6. More than 15 words adds height

Dependencies:
    - layout.config: PageGeometry
    - re (std)

Used By:
    - workspace.canvas: Sizing new boxes
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from .config import PageGeometry
from .models import BoxSize

logger = logging.getLogger(__name__)

BASE_WIDTH = 180
BASE_HEIGHT = 120
CHARS_PER_LINE = 40
LINE_HEIGHT = 22
WORD_THRESHOLD = 15

LATEX_PATTERN = re.compile(r"\\[a-zA-Z]+|\$.*\$|\\\(.*\\\)")
COMPLEX_MATH_PATTERN = re.compile(r"\^|\{|\}|_|\\frac|\\sqrt|\\sum|\\int")


def estimate_size(
    title: str,
    content: str,
    geometry: Optional[PageGeometry] = None,
) -> BoxSize:
    """
    Estimate the canvas size for a title/body pair.

    Never fails: empty strings give the base size, clamped.

    Args:
        title: Box title
        content: Box body (plain text, markup or LaTeX)
        geometry: Supplies the clamp range (defaults to PageGeometry())

    Returns:
        BoxSize within [min_width, max_width] x [min_height, max_height]

    Example:
        >>> estimate_size("Pythagorean Theorem", "a^2 + b^2 = c^2")
        BoxSize(width=240, height=182)
    """
    geometry = geometry or PageGeometry()
    title = title or ""
    content = content or ""

    title_length = len(title)
    content_length = len(content)

    width = BASE_WIDTH
    height = BASE_HEIGHT

    if title_length > 20:
        width += min(100, (title_length - 20) * 3)
    if title_length > 30:
        height += 25

    if content_length > 50:
        width += min(120, (content_length - 50) // 8)

    newline_count = content.count("\n")
    estimated_lines = max(1, newline_count + math.ceil(content_length / CHARS_PER_LINE))
    height += estimated_lines * LINE_HEIGHT

    if LATEX_PATTERN.search(content):
        width += 40
        height += 30
    if COMPLEX_MATH_PATTERN.search(content):
        width += 60
        height += 40

    # Empty body still counts as one word
    word_count = len(re.split(r"\s+", content))
    if word_count > WORD_THRESHOLD:
        height += min(80, (word_count - WORD_THRESHOLD) * 4)

    clamped_width, clamped_height = geometry.clamp_size(width, height)
    logger.debug(
        f"Estimated {clamped_width}x{clamped_height} for {title[:30]!r} "
        f"({content_length} chars, {estimated_lines} lines, {word_count} words)"
    )
    return BoxSize(width=clamped_width, height=clamped_height)
