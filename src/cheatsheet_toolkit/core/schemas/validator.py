"""
Schema Validation Utilities

Validates persisted canvas documents before deserialization.

Two levels:
- Basic checks (default): required fields, types, positive sizes,
  schema version. Fast and produce precise error paths.
- Strict: full jsonschema validation against canvas.schema.json.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


CANVAS_SCHEMA_VERSION = 1

_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_canvas(data: Any, *, strict: bool = False) -> None:
    """
    Validate a canvas document.

    Args:
        data: Parsed JSON document
        strict: If True, also run jsonschema against canvas.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Canvas document must be an object, got {type(data).__name__}"
        )

    required = ["schema_version", "boxes"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != CANVAS_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported canvas schema version: {version} (expected {CANVAS_SCHEMA_VERSION})",
            path="schema_version",
        )

    geometry = data.get("geometry", {})
    if not isinstance(geometry, dict):
        raise ValidationError("geometry must be an object", path="geometry")

    boxes = data["boxes"]
    if not isinstance(boxes, list):
        raise ValidationError("boxes must be a list", path="boxes")

    seen: set[str] = set()
    for i, box in enumerate(boxes):
        validate_box(box, path=f"boxes[{i}]")
        if box["id"] in seen:
            raise ValidationError(
                f"Duplicate box id: {box['id']!r}",
                path=f"boxes[{i}].id",
            )
        seen.add(box["id"])

    if strict:
        schema = _load_schema("canvas")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def validate_box(data: Any, *, path: str = "") -> None:
    """
    Validate one persisted box.

    Raises:
        ValidationError: If the box is missing fields or has bad geometry
    """
    if not isinstance(data, dict):
        raise ValidationError("box must be an object", path=path)

    required = ["id", "title", "content", "position", "size"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Box missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    if not isinstance(data["id"], str) or not data["id"]:
        raise ValidationError(f"Invalid id: {data['id']!r}", path=f"{path}.id")

    for field in ("title", "content"):
        if not isinstance(data[field], str):
            raise ValidationError(f"{field} must be a string", path=f"{path}.{field}")

    position = data["position"]
    if not isinstance(position, dict) or "x" not in position or "y" not in position:
        raise ValidationError("position must have x and y", path=f"{path}.position")
    for axis in ("x", "y"):
        value = position[axis]
        if not _is_number(value) or value < 0:
            raise ValidationError(
                f"Invalid {axis}: {value!r} (must be a non-negative number)",
                path=f"{path}.position.{axis}",
            )

    size = data["size"]
    if not isinstance(size, dict) or "width" not in size or "height" not in size:
        raise ValidationError("size must have width and height", path=f"{path}.size")
    for axis in ("width", "height"):
        value = size[axis]
        if not _is_number(value) or value <= 0:
            raise ValidationError(
                f"Invalid {axis}: {value!r} (must be a positive number)",
                path=f"{path}.size.{axis}",
            )


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
