"""
Module: workspace.canvas

Purpose:
    Immutable cheat sheet canvas with command/result operations.
    Callers invoke an operation, get a new Canvas back and commit it;
    nothing reaches into shared mutable state.

Key Classes:
    - Canvas: Boxes (insertion order) + page geometry
    - NewBox: Content item waiting to be sized and placed
    - BoxNotFoundError: Unknown box id

Operations:
    - add_box() / add_boxes(): Size with the sizer, place with the packer
    - relayout(): Repack every box
    - update_box(), delete_box(), copy_box(), clear()
    - move_box(), resize_box(), recolor_box(): Manual edits, not overlap-checked
    - page_count(), boxes_for_page(), paginate(): Page queries

Dependencies:
    - layout: Sizing, packing, pagination
    - core.models: Box

Used By:
    - workspace.commands: Chat box commands
    - cli: Batch layout and relayout
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from cheatsheet_toolkit.core.models import Box, DEFAULT_COLOR
from cheatsheet_toolkit.layout import (
    LayoutResult,
    PageGeometry,
    boxes_for_page,
    estimate_size,
    find_position,
    page_count,
    paginate,
    relayout_all,
)

logger = logging.getLogger(__name__)

COPY_OFFSET = 20


class BoxNotFoundError(KeyError):
    """Raised when a canvas operation names an unknown box id."""

    def __init__(self, box_id: str):
        super().__init__(box_id)
        self.box_id = box_id

    def __str__(self) -> str:
        return f"Box not found: {self.box_id!r}"


@dataclass(frozen=True)
class NewBox:
    """
    Content item to add to the canvas.

    Attributes:
        title: Box title
        content: Box body
        color: Display tag
        position: Manual (x, y); None lets the packer choose
        box_id: Fixed id; None generates one
    """

    title: str
    content: str
    color: str = DEFAULT_COLOR
    position: Optional[Tuple[int, int]] = None
    box_id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NewBox:
        """Build from a generated item {"title", "content", "color"?}."""
        return cls(
            title=data.get("title", ""),
            content=data.get("content", ""),
            color=data.get("color") or DEFAULT_COLOR,
        )


def new_box_id() -> str:
    """Opaque unique id for a new box."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Canvas:
    """
    Cheat sheet canvas state (immutable).

    Box order is insertion order: it is the z-order, the chat command
    numbering and the persisted order. Layout never reorders it.

    Attributes:
        boxes: Boxes in insertion order
        geometry: Page geometry for sizing, packing and pagination
        title: Cheat sheet title

    Example:
        >>> canvas, box = Canvas().add_box("Power Rule", "d/dx x^n = nx^(n-1)")
        >>> (box.x, box.y)
        (40, 40)
    """

    boxes: Tuple[Box, ...] = ()
    geometry: PageGeometry = field(default_factory=PageGeometry)
    title: str = ""

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.boxes)

    def get(self, box_id: str) -> Box:
        """Box by id."""
        for box in self.boxes:
            if box.id == box_id:
                return box
        raise BoxNotFoundError(box_id)

    def box_number(self, box_id: str) -> int:
        """1-based position of a box in insertion order."""
        for index, box in enumerate(self.boxes):
            if box.id == box_id:
                return index + 1
        raise BoxNotFoundError(box_id)

    def box_at(self, number: int) -> Optional[Box]:
        """Box by 1-based number, or None when out of range."""
        if 1 <= number <= len(self.boxes):
            return self.boxes[number - 1]
        return None

    def page_count(self) -> int:
        return page_count(self.boxes, self.geometry)

    def boxes_for_page(self, page_index: int) -> List[Box]:
        return boxes_for_page(self.boxes, page_index, self.geometry)

    def paginate(self) -> LayoutResult:
        return paginate(self.boxes, self.geometry)

    # ─────────────────────────────────────────────────────────────────────────
    # Adding
    # ─────────────────────────────────────────────────────────────────────────

    def add_box(
        self,
        title: str,
        content: str,
        color: str = DEFAULT_COLOR,
        position: Optional[Tuple[int, int]] = None,
        box_id: Optional[str] = None,
    ) -> Tuple[Canvas, Box]:
        """
        Size and place one new box.

        An explicit position is authoritative (manual placement) and
        is not checked for overlap; negative coordinates are pinned to 0.

        Returns:
            (new canvas, the added box)
        """
        box = self._build_box(NewBox(title, content, color, position, box_id), self.boxes)
        logger.info(f"Added box {box.id} {box.width}x{box.height} at ({box.x}, {box.y})")
        return self._with_boxes(self.boxes + (box,)), box

    def add_boxes(self, items: Iterable[NewBox | dict[str, Any]]) -> Tuple[Canvas, List[Box]]:
        """
        Add a batch of boxes with one commit.

        Each placement sees the boxes placed earlier in the batch.

        Returns:
            (new canvas, the added boxes in order)
        """
        working: List[Box] = list(self.boxes)
        added: List[Box] = []
        for item in items:
            new_box = item if isinstance(item, NewBox) else NewBox.from_dict(item)
            box = self._build_box(new_box, working)
            working.append(box)
            added.append(box)

        logger.info(f"Added batch of {len(added)} boxes ({len(working)} total)")
        return self._with_boxes(tuple(working)), added

    def _build_box(self, new_box: NewBox, existing: Sequence[Box]) -> Box:
        size = estimate_size(new_box.title, new_box.content, self.geometry)
        if new_box.position is not None:
            x, y = max(0, new_box.position[0]), max(0, new_box.position[1])
        else:
            placed = find_position(size.width, size.height, existing, self.geometry)
            x, y = placed.x, placed.y
        return Box(
            id=new_box.box_id or new_box_id(),
            title=new_box.title,
            content=new_box.content,
            color=new_box.color,
            x=x,
            y=y,
            width=size.width,
            height=size.height,
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Layout
    # ─────────────────────────────────────────────────────────────────────────

    def relayout(self) -> Canvas:
        """Repack every box from an empty canvas; order is kept."""
        return self._with_boxes(tuple(relayout_all(self.boxes, self.geometry)))

    def with_geometry(self, geometry: PageGeometry, relayout: bool = True) -> Canvas:
        """Switch page geometry, repacking by default.

        Box sizes are clamped into the new geometry's size range first.
        """
        clamped = tuple(box.resized_to(*geometry.clamp_size(box.width, box.height)) for box in self.boxes)
        canvas = replace(self, boxes=clamped, geometry=geometry)
        return canvas.relayout() if relayout else canvas

    # ─────────────────────────────────────────────────────────────────────────
    # Editing
    # ─────────────────────────────────────────────────────────────────────────

    def update_box(self, box_id: str, *, resize: bool = False, **changes: Any) -> Canvas:
        """
        Replace fields of one box.

        Args:
            box_id: Box to change
            resize: Re-run the sizer on the (new) title and content
            **changes: Box fields (title, content, color, x, y, width, height)
                width and height are clamped into the geometry's size range
        """
        box = self.get(box_id)
        if "width" in changes or "height" in changes:
            changes["width"], changes["height"] = self.geometry.clamp_size(
                changes.get("width", box.width), changes.get("height", box.height)
            )
        updated = box.with_changes(**changes)
        if resize:
            size = estimate_size(updated.title, updated.content, self.geometry)
            updated = updated.resized_to(size.width, size.height)
        return self._replace_box(updated)

    def delete_box(self, box_id: str) -> Canvas:
        """Remove one box. Other boxes keep their positions."""
        self.get(box_id)
        logger.info(f"Deleted box {box_id}")
        return self._with_boxes(tuple(b for b in self.boxes if b.id != box_id))

    def clear(self) -> Canvas:
        """Remove every box."""
        return self._with_boxes(())

    def copy_box(self, box_id: str) -> Tuple[Canvas, Box]:
        """Duplicate a box, offset down-right, appended at the end."""
        source = self.get(box_id)
        copy = source.with_changes(
            id=new_box_id(),
            title=f"{source.title} (Copy)",
            x=source.x + COPY_OFFSET,
            y=source.y + COPY_OFFSET,
        )
        return self._with_boxes(self.boxes + (copy,)), copy

    def move_box(self, box_id: str, x: int, y: int) -> Canvas:
        """Manual move; negative coordinates are pinned to 0."""
        box = self.get(box_id)
        return self._replace_box(box.moved_to(max(0, x), max(0, y)))

    def resize_box(self, box_id: str, width: int, height: int) -> Canvas:
        """Manual resize, clamped into the geometry's size range."""
        box = self.get(box_id)
        new_width, new_height = self.geometry.clamp_size(width, height)
        return self._replace_box(box.resized_to(new_width, new_height))

    def recolor_box(self, box_id: str, color: str) -> Canvas:
        box = self.get(box_id)
        return self._replace_box(box.with_changes(color=color))

    # ─────────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _replace_box(self, updated: Box) -> Canvas:
        return self._with_boxes(
            tuple(updated if b.id == updated.id else b for b in self.boxes)
        )

    def _with_boxes(self, boxes: Tuple[Box, ...]) -> Canvas:
        return replace(self, boxes=boxes)
