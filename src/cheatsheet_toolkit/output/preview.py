"""
Module: output.preview

Purpose:
    Raster previews of cheat sheet pages for thumbnails and for
    checking a layout by eye. Each box is drawn as a filled rectangle
    at its page-relative position with its title and body text.

Key Functions:
    - render_page_preview(): One page -> PIL Image
    - save_page_previews(): Every page -> PNG files

Dependencies:
    - PIL: Image drawing
    - layout.paginator: Page membership and offsets

Used By:
    - cli: `render --png`
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from cheatsheet_toolkit.core.models import Box
from cheatsheet_toolkit.layout import PageGeometry, PagePlan, paginate

from .colors import BODY_COLOR, BORDER_COLOR, TITLE_COLOR, resolve_fill
from .text import strip_markup, wrap_lines

logger = logging.getLogger(__name__)

# Visualization constants
PAGE_BACKGROUND = (255, 255, 255)
MARGIN_GUIDE_COLOR = (226, 232, 240)
BOX_LINE_WIDTH = 1
TEXT_PADDING = 6
LINE_SPACING = 12
CHAR_WIDTH = 6  # PIL default bitmap font


def render_page_preview(
    boxes: Sequence[Box],
    geometry: PageGeometry,
    page_index: int = 0,
    *,
    scale: float = 1.0,
    show_margins: bool = True,
) -> Image.Image:
    """
    Draw one page of the canvas.

    Boxes straddling a page cut are drawn on both pages and clipped
    by the image edge.

    Args:
        boxes: All boxes on the canvas
        geometry: Page geometry
        page_index: Page to draw (0-indexed)
        scale: Output pixels per canvas unit
        show_margins: Draw the margin guide rectangle

    Returns:
        RGB image of size (page_width * scale, page_height * scale)
    """
    layout = paginate(boxes, geometry)
    if page_index < layout.page_count:
        page = layout.pages[page_index]
    else:
        page = PagePlan(index=page_index, boxes=(), offset_y=page_index * geometry.page_height)

    size = (round(geometry.page_width * scale), round(geometry.page_height * scale))
    image = Image.new("RGB", size, PAGE_BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    if show_margins:
        m = geometry.margin * scale
        draw.rectangle(
            (m, m, size[0] - m, size[1] - m),
            outline=MARGIN_GUIDE_COLOR,
        )

    for box in page.boxes:
        _draw_box(draw, box, page, scale, font)

    logger.debug(f"Rendered preview of page {page_index} with {page.box_count} boxes")
    return image


def save_page_previews(
    boxes: Sequence[Box],
    geometry: PageGeometry,
    output_dir: Path,
    *,
    prefix: str = "page",
    scale: float = 1.0,
) -> List[Path]:
    """
    Write one PNG per page.

    Returns:
        Paths written, in page order (prefix_01.png, prefix_02.png, ...)
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    layout = paginate(boxes, geometry)

    paths = []
    for page in layout.pages:
        image = render_page_preview(boxes, geometry, page.index, scale=scale)
        path = output_dir / f"{prefix}_{page.index + 1:02d}.png"
        image.save(path)
        paths.append(path)

    logger.info(f"Saved {len(paths)} page previews to {output_dir}")
    return paths


def _draw_box(
    draw: ImageDraw.ImageDraw,
    box: Box,
    page: PagePlan,
    scale: float,
    font: Optional[ImageFont.ImageFont],
) -> None:
    """Draw a box with its title and as much body text as fits."""
    left = box.x * scale
    top = page.relative_y(box) * scale
    right = box.right * scale
    bottom = top + box.height * scale

    draw.rectangle(
        (left, top, right, bottom),
        fill=resolve_fill(box.color),
        outline=BORDER_COLOR,
        width=BOX_LINE_WIDTH,
    )

    chars = int((box.width * scale - 2 * TEXT_PADDING) // CHAR_WIDTH)
    cursor = top + TEXT_PADDING
    for line in wrap_lines(box.title, chars)[:2]:
        draw.text((left + TEXT_PADDING, cursor), line, fill=TITLE_COLOR, font=font)
        cursor += LINE_SPACING
    cursor += LINE_SPACING // 2

    for line in wrap_lines(strip_markup(box.content), chars):
        if cursor + LINE_SPACING > bottom - TEXT_PADDING:
            break
        draw.text((left + TEXT_PADDING, cursor), line, fill=BODY_COLOR, font=font)
        cursor += LINE_SPACING
