"""
Module: layout.models

Purpose:
    Value objects produced by the layout engine.
    Immutable dataclasses for sizes, positions and page plans.

Key Classes:
    - BoxSize: Estimated box size from the sizer
    - Position: Top-left placement from the packer
    - PagePlan: Boxes intersecting a single page
    - LayoutResult: All pages of a canvas

Dependencies:
    - core.models: Box
    - dataclasses (std)

Used By:
    - layout.sizer: Returns BoxSize
    - layout.packer: Returns Position
    - layout.paginator: Creates PagePlans
    - output: Rendering per page
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cheatsheet_toolkit.core.models import Box


@dataclass(frozen=True)
class BoxSize:
    """Width and height in canvas units."""

    width: int
    height: int


@dataclass(frozen=True)
class Position:
    """Top-left corner in canvas units."""

    x: int
    y: int


@dataclass(frozen=True)
class PagePlan:
    """
    Boxes that intersect one page.

    Box coordinates stay absolute; `offset_y` is what a renderer
    subtracts to get page-relative positions.

    Attributes:
        index: Page number (0-indexed)
        boxes: Boxes vertically intersecting the page, in canvas order
        offset_y: Absolute y of the page top (index * page_height)

    Example:
        >>> page = PagePlan(index=1, boxes=(box,), offset_y=1056)
        >>> page.relative_y(box)
        44  # box.y == 1100
    """

    index: int
    boxes: tuple[Box, ...]
    offset_y: int

    @property
    def box_count(self) -> int:
        """Number of boxes on this page."""
        return len(self.boxes)

    @property
    def is_empty(self) -> bool:
        """Check if page has no boxes."""
        return len(self.boxes) == 0

    def relative_y(self, box: Box) -> int:
        """Y of a box relative to this page's top edge."""
        return box.y - self.offset_y


@dataclass(frozen=True)
class LayoutResult:
    """
    Paginated canvas with diagnostics.

    Attributes:
        pages: One PagePlan per page, at least one
        warnings: Overflow messages (boxes past the right margin or taller than a page)
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)

    @property
    def page_count(self) -> int:
        """Number of pages in layout."""
        return len(self.pages)
