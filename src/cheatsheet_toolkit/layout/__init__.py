"""
Module: layout

Purpose:
    Content-aware sizing and automatic packing of cheat sheet boxes.
    Pure functions over snapshots of the canvas: nothing here owns
    or mutates state.

Key Functions:
    - estimate_size(): Title + body -> size
    - find_position(): Place one new box
    - relayout_all(): Repack all boxes
    - page_count() / boxes_for_page() / paginate(): Page splitting

Key Classes:
    - PageGeometry: Page dimensions, margin, spacing, size range
    - BoxSize, Position, PagePlan, LayoutResult: Results

Dependencies:
    - cheatsheet_toolkit.core.models: Box

Used By:
    - cheatsheet_toolkit.workspace: Canvas operations
    - cheatsheet_toolkit.output: Rendering
    - cheatsheet_toolkit.cli
"""

from .config import PageGeometry, PAGE_PRESETS
from .models import BoxSize, Position, PagePlan, LayoutResult
from .sizer import estimate_size
from .packer import find_position, relayout_all, boxes_overlap
from .paginator import page_count, boxes_for_page, paginate

__all__ = [
    # Config
    "PageGeometry",
    "PAGE_PRESETS",
    # Models
    "BoxSize",
    "Position",
    "PagePlan",
    "LayoutResult",
    # Functions
    "estimate_size",
    "find_position",
    "relayout_all",
    "boxes_overlap",
    "page_count",
    "boxes_for_page",
    "paginate",
]
