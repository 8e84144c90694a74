"""
Serialization Utilities

To/from JSON for boxes and canvas documents.

Document shape:
    {
        "schema_version": 1,
        "title": "Calculus",
        "geometry": {"page_width": 816, ...},
        "boxes": [{"id", "title", "content", "color",
                   "position": {"x", "y"}, "size": {"width", "height"}}, ...]
    }

Box order in the document is canvas (insertion) order, which is also
the 1-based numbering used by chat commands.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Sequence

from cheatsheet_toolkit.layout.config import PageGeometry

from ..models.boxes import Box
from ..schemas.validator import CANVAS_SCHEMA_VERSION, ValidationError, validate_canvas
from .file_locking import locked_read_json, locked_write_json

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Box Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_boxes(boxes: Iterable[Box]) -> list[dict[str, Any]]:
    """Serialize boxes to a JSON-ready list, keeping order."""
    return [box.to_dict() for box in boxes]


def deserialize_boxes(data: Sequence[dict[str, Any]]) -> tuple[Box, ...]:
    """
    Deserialize a list of persisted boxes.

    Raises:
        ValidationError: If a box cannot be constructed
    """
    boxes = []
    for i, item in enumerate(data):
        try:
            boxes.append(Box.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid box at index {i}: {e}",
                path=f"boxes[{i}]",
                errors=[str(e)],
            ) from e
    return tuple(boxes)


# ─────────────────────────────────────────────────────────────────────────────
# Canvas Document Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_canvas(
    boxes: Iterable[Box],
    geometry: PageGeometry,
    title: str = "",
) -> dict[str, Any]:
    """
    Build a canvas document.

    Args:
        boxes: Boxes in canvas order
        geometry: Page geometry stored alongside the boxes
        title: Cheat sheet title

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": CANVAS_SCHEMA_VERSION,
        "title": title,
        "geometry": geometry.to_dict(),
        "boxes": serialize_boxes(boxes),
    }


def deserialize_canvas(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> tuple[tuple[Box, ...], PageGeometry, str]:
    """
    Parse a canvas document.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate first
        strict: Use full jsonschema validation

    Returns:
        Tuple of (boxes, geometry, title)

    Raises:
        ValidationError: If the document is invalid
    """
    if validate:
        validate_canvas(data, strict=strict)

    try:
        geometry = PageGeometry.from_dict(data.get("geometry", {}))
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid geometry: {e}", path="geometry", errors=[str(e)]) from e

    boxes = deserialize_boxes(data.get("boxes", []))
    return boxes, geometry, data.get("title", "")


# ─────────────────────────────────────────────────────────────────────────────
# File Utilities
# ─────────────────────────────────────────────────────────────────────────────

def load_canvas_json(
    path: Path,
    *,
    validate: bool = True,
    strict: bool = False,
) -> tuple[tuple[Box, ...], PageGeometry, str]:
    """
    Load a canvas document from disk.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the JSON is malformed or invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"Canvas file not found: {path}")

    try:
        data = locked_read_json(path)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Error parsing {path.name}: {e}",
            path=str(path),
            errors=[str(e)],
        ) from e

    boxes, geometry, title = deserialize_canvas(data, validate=validate, strict=strict)
    logger.info(f"Loaded {len(boxes)} boxes from {path}")
    return boxes, geometry, title


def save_canvas_json(
    path: Path,
    boxes: Iterable[Box],
    geometry: PageGeometry,
    title: str = "",
) -> None:
    """
    Save a canvas document to disk under an exclusive lock.

    Args:
        path: Output path
        boxes: Boxes in canvas order
        geometry: Page geometry
        title: Cheat sheet title
    """
    data = serialize_canvas(boxes, geometry, title)
    locked_write_json(path, data)
    logger.info(f"Saved {len(data['boxes'])} boxes to {path}")


def load_items_json(path: Path) -> list[dict[str, Any]]:
    """
    Load generated content items: [{"title", "content", "color"?}, ...].

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not a list of titled items
    """
    if not path.exists():
        raise FileNotFoundError(f"Items file not found: {path}")

    try:
        data = locked_read_json(path)
    except json.JSONDecodeError as e:
        raise ValidationError(f"Error parsing {path.name}: {e}", path=str(path)) from e

    if not isinstance(data, list):
        raise ValidationError("Items file must contain a list", path=str(path))

    for i, item in enumerate(data):
        if not isinstance(item, dict) or not isinstance(item.get("title"), str):
            raise ValidationError(f"Item {i} must be an object with a title", path=f"[{i}]")
        if not isinstance(item.get("content", ""), str):
            raise ValidationError(f"Item {i} content must be a string", path=f"[{i}].content")
    return data
