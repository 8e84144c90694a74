"""
Module: boxes

Purpose:
    Provides the Box dataclass - a placed content box on the cheat
    sheet canvas. Carries the content (title, body), an opaque color
    tag and its axis-aligned rectangle in canvas units.

Key Functions:
    - Box.overlaps(other): Axis-aligned intersection test
    - Box.moved_to(x, y): Copy with a new position
    - Box.to_dict(): Serialize for JSON
    - Box.from_dict(data): Deserialize from JSON

Dependencies:
    - dataclasses (std)

Used By:
    - layout.packer: Existing boxes and relayout results
    - layout.paginator: Page membership
    - workspace.canvas: Canvas state
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


DEFAULT_COLOR = "from-blue-50 to-blue-100"


@dataclass(frozen=True, slots=True)
class Box:
    """
    Content box placed on the canvas (immutable).

    Position is the top-left corner. The region covered is
    [x, x + width) x [y, y + height), so boxes that share an edge
    do not overlap.

    Attributes:
        id: Opaque identifier
        title: Box heading
        content: Body text, may contain HTML markup or LaTeX
        color: Display tag (hex, CSS name or gradient class), ignored by layout
        x: Left edge
        y: Top edge
        width: Box width
        height: Box height

    Invariants:
        - x >= 0, y >= 0
        - width > 0, height > 0

    Example:
        >>> box = Box("b1", "Power Rule", "d/dx x^n = nx^(n-1)", x=40, y=40, width=240, height=182)
        >>> box.right, box.bottom
        (280, 222)
    """

    id: str
    title: str
    content: str
    color: str = DEFAULT_COLOR
    x: int = 0
    y: int = 0
    width: int = 160
    height: int = 100

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.x < 0 or self.y < 0:
            raise ValueError(f"position must be non-negative: ({self.x}, {self.y})")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"size must be positive: {self.width}x{self.height}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def right(self) -> int:
        """Right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Bottom edge (exclusive)."""
        return self.y + self.height

    # ─────────────────────────────────────────────────────────────────────────
    # Query Methods
    # ─────────────────────────────────────────────────────────────────────────

    def overlaps(self, other: Box) -> bool:
        """
        Check if this box intersects another.

        Touching edges do not count as an overlap.
        """
        return not (
            self.right <= other.x
            or self.x >= other.right
            or self.bottom <= other.y
            or self.y >= other.bottom
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Copies
    # ─────────────────────────────────────────────────────────────────────────

    def moved_to(self, x: int, y: int) -> Box:
        """Return a copy at a new position."""
        return replace(self, x=x, y=y)

    def resized_to(self, width: int, height: int) -> Box:
        """Return a copy with a new size."""
        return replace(self, width=width, height=height)

    def with_changes(self, **changes: Any) -> Box:
        """Return a copy with arbitrary fields replaced."""
        return replace(self, **changes)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to the persisted box shape.

        Returns:
            Dict with id, title, content, color, position and size
        """
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "color": self.color,
            "position": {"x": self.x, "y": self.y},
            "size": {"width": self.width, "height": self.height},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Box:
        """
        Deserialize from the persisted box shape.

        Coordinates stored as floats (e.g. after a manual drag) are rounded.
        """
        position = data.get("position", {})
        size = data["size"]
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            content=data.get("content", ""),
            color=data.get("color", DEFAULT_COLOR),
            x=round(position.get("x", 0)),
            y=round(position.get("y", 0)),
            width=round(size["width"]),
            height=round(size["height"]),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"Box({self.id!r}, {self.x},{self.y} {self.width}x{self.height})"
