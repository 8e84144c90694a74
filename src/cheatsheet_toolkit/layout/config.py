"""
Module: layout.config

Purpose:
    Page geometry for the packing engine.
    Defines page dimensions, margin, inter-box spacing and the
    allowed box size range shared by the sizer and the packer.

Key Classes:
    - PageGeometry: Immutable page geometry

Key Constants:
    - PAGE_PRESETS: Named page sizes in 96-DPI canvas units

Dependencies:
    - dataclasses (std)

Used By:
    - layout.sizer: Size clamping
    - layout.packer: Row width limit, margin anchor, spacing
    - layout.paginator: Page height and margin
    - workspace.canvas: Injected into every canvas
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any


# US Letter at 96 DPI
DEFAULT_PAGE_WIDTH = 816
DEFAULT_PAGE_HEIGHT = 1056
DEFAULT_MARGIN = 40
DEFAULT_SPACING = 8

# (width, height) in canvas units at 96 DPI
PAGE_PRESETS: dict[str, tuple[int, int]] = {
    "letter": (816, 1056),
    "legal": (816, 1344),
    "a4": (794, 1123),
    "a3": (1123, 1587),
    "tabloid": (1056, 1632),
    "executive": (696, 1008),
    "ledger": (1632, 1056),
}


@dataclass(frozen=True)
class PageGeometry:
    """
    Page geometry for box layout (immutable).

    All values are canvas units (CSS pixels at 96 DPI). The same
    instance is passed to the sizer, the packer and the paginator.

    Attributes:
        page_width: Page width
        page_height: Page height
        margin: Margin on every side; first box anchors at (margin, margin)
        spacing: Gap between neighbouring boxes, also the row-matching tolerance
        min_width: Smallest width the sizer produces
        min_height: Smallest height the sizer produces
        max_width: Largest width the sizer produces
        max_height: Largest height the sizer produces

    Example:
        >>> geometry = PageGeometry()
        >>> geometry.usable_width
        736  # 816 - 2 * 40
    """

    page_width: int = DEFAULT_PAGE_WIDTH
    page_height: int = DEFAULT_PAGE_HEIGHT
    margin: int = DEFAULT_MARGIN
    spacing: int = DEFAULT_SPACING

    # Box size range
    min_width: int = 160
    min_height: int = 100
    max_width: int = 450
    max_height: int = 500

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        if self.page_width <= 0:
            raise ValueError(f"page_width must be positive: {self.page_width}")
        if self.page_height <= 0:
            raise ValueError(f"page_height must be positive: {self.page_height}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0: {self.margin}")
        if self.spacing < 0:
            raise ValueError(f"spacing must be >= 0: {self.spacing}")
        if self.usable_width <= 0:
            raise ValueError("Margins exceed page width")
        if not 0 < self.min_width <= self.max_width:
            raise ValueError(
                f"Invalid width range: [{self.min_width}, {self.max_width}]"
            )
        if not 0 < self.min_height <= self.max_height:
            raise ValueError(
                f"Invalid height range: [{self.min_height}, {self.max_height}]"
            )

    @property
    def usable_width(self) -> int:
        """Width available for boxes (excluding both margins)."""
        return self.page_width - 2 * self.margin

    @property
    def right_limit(self) -> int:
        """Rightmost x a box in an existing row may reach."""
        return self.margin + self.usable_width

    def clamp_size(self, width: float, height: float) -> tuple[int, int]:
        """Clamp a size into the configured range and round to integers."""
        width = max(self.min_width, min(self.max_width, width))
        height = max(self.min_height, min(self.max_height, height))
        return round(width), round(height)

    @classmethod
    def from_preset(cls, name: str, **overrides: Any) -> PageGeometry:
        """
        Build geometry for a named page size.

        Args:
            name: Preset name (case-insensitive), e.g. "letter" or "a4"
            **overrides: Any other PageGeometry field

        Raises:
            ValueError: If the preset is unknown
        """
        key = name.lower()
        if key not in PAGE_PRESETS:
            raise ValueError(
                f"Unknown page preset: {name!r} (expected one of {sorted(PAGE_PRESETS)})"
            )
        width, height = PAGE_PRESETS[key]
        return cls(page_width=width, page_height=height, **overrides)

    def with_changes(self, **changes: Any) -> PageGeometry:
        """Return a copy with some fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, int]:
        """Serialize for JSON storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PageGeometry:
        """Deserialize from a dict; missing keys keep their defaults."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in data.items() if k in known})
