"""
Module: layout.paginator

Purpose:
    Derive pages from the vertical extent of the canvas and split
    boxes by page for rendering.

Key Functions:
    - page_count(): Number of pages the canvas needs
    - boxes_for_page(): Boxes intersecting one page
    - paginate(): PagePlan for every page

Algorithm:
    The canvas is one tall strip cut every `page_height` units.
    A box belongs to page p when it intersects
    [p * page_height, (p + 1) * page_height); a box straddling a cut
    belongs to both pages. Coordinates are never rewritten here.

Dependencies:
    - core.models: Box
    - layout.config: PageGeometry
    - layout.models: PagePlan, LayoutResult

Used By:
    - workspace.canvas: Page queries
    - output.renderer / output.preview: Per-page drawing
"""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Sequence

from cheatsheet_toolkit.core.models import Box

from .config import PageGeometry
from .models import LayoutResult, PagePlan

logger = logging.getLogger(__name__)


def page_count(boxes: Sequence[Box], geometry: Optional[PageGeometry] = None) -> int:
    """
    Number of pages needed to show every box.

    Args:
        boxes: All boxes on the canvas
        geometry: Page geometry (defaults to PageGeometry())

    Returns:
        max(1, ceil((max_bottom + margin) / page_height)); an empty
        canvas has one page.

    Example:
        >>> page_count([Box("b", "", "", y=1000, height=100)])
        2  # ceil((1100 + 40) / 1056)
    """
    geometry = geometry or PageGeometry()
    max_y = max((box.bottom for box in boxes), default=0)
    return max(1, math.ceil((max_y + geometry.margin) / geometry.page_height))


def boxes_for_page(
    boxes: Sequence[Box],
    page_index: int,
    geometry: Optional[PageGeometry] = None,
) -> List[Box]:
    """
    Boxes that vertically intersect a page, in canvas order.

    Args:
        boxes: All boxes on the canvas
        page_index: Page number (0-indexed)
        geometry: Page geometry (defaults to PageGeometry())

    Returns:
        Boxes with y unchanged; callers subtract page_index * page_height
    """
    geometry = geometry or PageGeometry()
    page_top = page_index * geometry.page_height
    page_bottom = (page_index + 1) * geometry.page_height
    return [box for box in boxes if box.y < page_bottom and box.bottom > page_top]


def paginate(boxes: Sequence[Box], geometry: Optional[PageGeometry] = None) -> LayoutResult:
    """
    Split a canvas into page plans.

    Always returns at least one page. Boxes past the right margin or
    taller than the printable page are reported in `warnings`; they
    are still placed.

    Args:
        boxes: All boxes on the canvas
        geometry: Page geometry (defaults to PageGeometry())

    Returns:
        LayoutResult with one PagePlan per page
    """
    geometry = geometry or PageGeometry()
    warnings: List[str] = []

    for box in boxes:
        if box.right > geometry.page_width - geometry.margin:
            warnings.append(
                f"Box {box.id} extends past the right margin "
                f"({box.right} > {geometry.page_width - geometry.margin})"
            )
        if box.height > geometry.page_height - 2 * geometry.margin:
            warnings.append(
                f"Box {box.id} is taller than the printable page "
                f"({box.height} > {geometry.page_height - 2 * geometry.margin})"
            )

    total = page_count(boxes, geometry)
    pages = tuple(
        PagePlan(
            index=index,
            boxes=tuple(boxes_for_page(boxes, index, geometry)),
            offset_y=index * geometry.page_height,
        )
        for index in range(total)
    )

    for message in warnings:
        logger.warning(message)
    logger.info(f"Paginated {len(boxes)} boxes onto {total} pages")

    return LayoutResult(pages=pages, warnings=warnings)
