"""
Schemas Package

JSON schema definition and validation for persisted canvas documents.
"""

from .validator import (
    validate_box,
    validate_canvas,
    ValidationError,
    CANVAS_SCHEMA_VERSION,
)

__all__ = [
    "validate_box",
    "validate_canvas",
    "ValidationError",
    "CANVAS_SCHEMA_VERSION",
]
