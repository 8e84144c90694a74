"""
Cheat Sheet Toolkit Core Package

Box model, persisted-document validation and JSON serialization.
The canvas document is the single source of truth; the layout engine
only reads snapshots of it and returns new values.
"""

from .models import Box, DEFAULT_COLOR
from .schemas import ValidationError

__all__ = [
    "Box",
    "DEFAULT_COLOR",
    "ValidationError",
]
