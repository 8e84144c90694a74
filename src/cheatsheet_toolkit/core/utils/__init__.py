"""
Core utilities: canvas serialization and locked file access.
"""

from .serialization import (
    serialize_boxes,
    deserialize_boxes,
    serialize_canvas,
    deserialize_canvas,
    load_canvas_json,
    save_canvas_json,
    load_items_json,
)

__all__ = [
    "serialize_boxes",
    "deserialize_boxes",
    "serialize_canvas",
    "deserialize_canvas",
    "load_canvas_json",
    "save_canvas_json",
    "load_items_json",
]
