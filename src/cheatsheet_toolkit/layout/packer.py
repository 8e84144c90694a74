"""
Module: layout.packer

Purpose:
    Place boxes on the canvas without overlap, filling rows left to
    right before starting a new row below ("Tetris" packing).

Key Functions:
    - find_position(): Incremental placement of one new box
    - relayout_all(): Repack every box from an empty canvas
    - boxes_overlap(): Pairwise overlap check over a box set

Algorithm:
    Greedy, no lookahead:
    1. Empty canvas: anchor at (margin, margin)
    2. Group existing boxes into rows by top y (within `spacing`)
    3. Try rows top to bottom; a row accepts the box when it is no
       taller than the row (+ spacing), fits right of the row's
       rightmost edge, and hits no other box
    4. Otherwise start a new row at the left margin below everything

    Relayout sorts by (height, width) and replays step 1-4 against
    the boxes already repositioned in the same run.

Dependencies:
    - core.models: Box
    - layout.config: PageGeometry

Used By:
    - workspace.canvas: Adding and relayout
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from cheatsheet_toolkit.core.models import Box

from .config import PageGeometry
from .models import Position

logger = logging.getLogger(__name__)


def find_position(
    width: int,
    height: int,
    existing: Sequence[Box],
    geometry: Optional[PageGeometry] = None,
) -> Position:
    """
    Find a non-overlapping position for a new box.

    Rows are tried in increasing y so higher rows fill first. A new
    row always starts at the left margin. Gaps left by deleted boxes
    are only reused when the row-end slot happens to be free.

    Args:
        width: New box width (> 0)
        height: New box height (> 0)
        existing: Committed, non-overlapping boxes
        geometry: Page geometry (defaults to PageGeometry())

    Returns:
        Position that does not overlap any existing box. A box wider
        than the usable width still gets a new-row position; page
        allocation absorbs the overflow.

    Example:
        >>> find_position(200, 150, [])
        Position(x=40, y=40)
    """
    geometry = geometry or PageGeometry()

    if width > geometry.usable_width:
        logger.warning(
            f"Box width {width} exceeds usable width {geometry.usable_width}; "
            "it will overflow the page"
        )

    if not existing:
        return Position(geometry.margin, geometry.margin)

    for row_y, row_boxes in _rows(existing, geometry.spacing):
        row_height = max(box.height for box in row_boxes)
        if height > row_height + geometry.spacing:
            continue

        rightmost = max(box.right for box in row_boxes)
        candidate_x = rightmost + geometry.spacing
        if candidate_x + width > geometry.right_limit:
            continue

        # Check the whole canvas, rows may hold gaps from deletions
        conflict = next(
            (box for box in existing if _intersects(candidate_x, row_y, width, height, box)),
            None,
        )
        if conflict is not None:
            logger.debug(f"Row y={row_y} slot at x={candidate_x} blocked by {conflict.id}")
            continue

        logger.debug(f"Placed {width}x{height} in row y={row_y} at x={candidate_x}")
        return Position(candidate_x, row_y)

    max_y = max(box.bottom for box in existing)
    logger.debug(f"Placed {width}x{height} on new row y={max_y + geometry.spacing}")
    return Position(geometry.margin, max_y + geometry.spacing)


def relayout_all(
    boxes: Sequence[Box],
    geometry: Optional[PageGeometry] = None,
) -> List[Box]:
    """
    Recompute every position from scratch.

    Boxes are placed shortest first (ties: narrowest first) so small
    boxes fill the space beside tall ones. Placement only consults
    boxes repositioned earlier in this run. The sort is stable, so
    running relayout on its own output gives the same layout.

    Args:
        boxes: Boxes in canvas (insertion) order
        geometry: Page geometry (defaults to PageGeometry())

    Returns:
        Same boxes in the same order with new x/y; size, content
        and color unchanged.
    """
    geometry = geometry or PageGeometry()
    if not boxes:
        return []

    order = sorted(range(len(boxes)), key=lambda i: (boxes[i].height, boxes[i].width))

    placed: List[Box] = []
    moved: dict[int, Box] = {}
    for index in order:
        box = boxes[index]
        position = find_position(box.width, box.height, placed, geometry)
        repositioned = box.moved_to(position.x, position.y)
        placed.append(repositioned)
        moved[index] = repositioned

    bottom = max(box.bottom for box in placed)
    logger.info(f"Relayout of {len(boxes)} boxes, content ends at y={bottom}")
    return [moved[i] for i in range(len(boxes))]


def boxes_overlap(boxes: Iterable[Box]) -> List[Tuple[Box, Box]]:
    """
    List every overlapping pair.

    Manual moves and resizes bypass the packer, so a canvas can hold
    overlaps; relayout is the repair path.
    """
    items = list(boxes)
    pairs = []
    for i, first in enumerate(items):
        for second in items[i + 1:]:
            if first.overlaps(second):
                pairs.append((first, second))
    return pairs


def _rows(boxes: Sequence[Box], spacing: int) -> List[Tuple[int, List[Box]]]:
    """
    Group boxes into rows keyed by anchor y, top to bottom.

    Distinct y values within `spacing` of the current anchor share
    that anchor's row.
    """
    anchors: List[int] = []
    for y in sorted({box.y for box in boxes}):
        if not anchors or y - anchors[-1] > spacing:
            anchors.append(y)

    return [
        (anchor, [box for box in boxes if abs(box.y - anchor) <= spacing])
        for anchor in anchors
    ]


def _intersects(x: int, y: int, width: int, height: int, box: Box) -> bool:
    """Axis-aligned test of a candidate rectangle against a box."""
    return not (
        x + width <= box.x
        or x >= box.right
        or y + height <= box.y
        or y >= box.bottom
    )
