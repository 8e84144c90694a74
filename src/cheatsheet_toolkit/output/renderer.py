"""
Module: output.renderer

Purpose:
    Export a cheat sheet canvas to PDF using ReportLab.
    Each PagePlan becomes one PDF page with boxes drawn at their
    page-relative positions.

Key Functions:
    - render_to_pdf(): Main rendering function

Coordinate system:
    Canvas units are CSS pixels at 96 DPI, origin top-left.
    ReportLab uses points (1/72 in), origin bottom-left.

Dependencies:
    - reportlab: PDF generation
    - layout.paginator: Page plans

Used By:
    - cli: `render`
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from cheatsheet_toolkit.core.models import Box
from cheatsheet_toolkit.layout import PageGeometry, PagePlan, paginate

from .colors import BODY_COLOR, BORDER_COLOR, TITLE_COLOR, resolve_fill
from .text import strip_markup

logger = logging.getLogger(__name__)

CANVAS_DPI = 96
TITLE_FONT = "Helvetica-Bold"
TITLE_FONT_SIZE = 9
BODY_FONT = "Helvetica"
BODY_FONT_SIZE = 7.5
TEXT_PADDING_PT = 4.5
CORNER_RADIUS_PT = 3


def render_to_pdf(
    boxes: Sequence[Box],
    geometry: PageGeometry,
    output_path: Path,
    *,
    title: str = "",
) -> int:
    """
    Render a canvas to a PDF file.

    Args:
        boxes: All boxes on the canvas
        geometry: Page geometry; page size becomes the PDF page size
        output_path: Path to write PDF
        title: Document title metadata

    Returns:
        Number of pages written (at least one)

    Raises:
        OSError: If PDF cannot be written

    Example:
        >>> render_to_pdf(canvas.boxes, canvas.geometry, Path("out/sheet.pdf"))
        2
    """
    layout = paginate(boxes, geometry)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    page_width_pt = _px_to_pt(geometry.page_width)
    page_height_pt = _px_to_pt(geometry.page_height)

    c = canvas.Canvas(str(output_path), pagesize=(page_width_pt, page_height_pt))
    if title:
        c.setTitle(title)

    for page in layout.pages:
        _render_page(c, page, page_height_pt)
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages to {output_path}")
    return layout.page_count


def _render_page(c: canvas.Canvas, page: PagePlan, page_height_pt: float) -> None:
    """Draw every box of one page."""
    for box in page.boxes:
        _draw_box(c, box, page, page_height_pt)


def _draw_box(c: canvas.Canvas, box: Box, page: PagePlan, page_height_pt: float) -> None:
    """
    Draw a box with its title and wrapped body, clipped to the box.

    Args:
        c: ReportLab canvas
        box: Box to draw
        page: Page the box is drawn on (supplies the y offset)
        page_height_pt: Page height in points
    """
    x_pt = _px_to_pt(box.x)
    width_pt = _px_to_pt(box.width)
    height_pt = _px_to_pt(box.height)
    top_pt = page_height_pt - _px_to_pt(page.relative_y(box))
    bottom_pt = top_pt - height_pt

    c.saveState()
    c.setFillColorRGB(*_unit_rgb(resolve_fill(box.color)))
    c.setStrokeColorRGB(*_unit_rgb(BORDER_COLOR))
    c.setLineWidth(0.5)
    c.roundRect(x_pt, bottom_pt, width_pt, height_pt, CORNER_RADIUS_PT, stroke=1, fill=1)

    clip = c.beginPath()
    clip.rect(x_pt, bottom_pt, width_pt, height_pt)
    c.clipPath(clip, stroke=0, fill=0)

    text_width = width_pt - 2 * TEXT_PADDING_PT
    cursor = top_pt - TEXT_PADDING_PT - TITLE_FONT_SIZE

    c.setFillColorRGB(*_unit_rgb(TITLE_COLOR))
    c.setFont(TITLE_FONT, TITLE_FONT_SIZE)
    for line in simpleSplit(box.title, TITLE_FONT, TITLE_FONT_SIZE, text_width)[:2]:
        c.drawString(x_pt + TEXT_PADDING_PT, cursor, line)
        cursor -= TITLE_FONT_SIZE * 1.2

    cursor -= BODY_FONT_SIZE * 0.4
    c.setFillColorRGB(*_unit_rgb(BODY_COLOR))
    c.setFont(BODY_FONT, BODY_FONT_SIZE)
    for paragraph in strip_markup(box.content).splitlines():
        for line in simpleSplit(paragraph, BODY_FONT, BODY_FONT_SIZE, text_width):
            if cursor < bottom_pt + TEXT_PADDING_PT:
                c.restoreState()
                return
            c.drawString(x_pt + TEXT_PADDING_PT, cursor, line)
            cursor -= BODY_FONT_SIZE * 1.3

    c.restoreState()


def _px_to_pt(px: float) -> float:
    """Convert canvas pixels to PDF points."""
    return px * 72.0 / CANVAS_DPI


def _unit_rgb(rgb: tuple[int, int, int]) -> tuple[float, float, float]:
    return rgb[0] / 255.0, rgb[1] / 255.0, rgb[2] / 255.0
