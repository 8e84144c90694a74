"""
Core Models Package

Immutable data models shared by the layout engine, the workspace
and persistence. Every change produces a new instance; nothing in
the layout layer mutates a box in place.
"""

from .boxes import Box, DEFAULT_COLOR

__all__ = [
    "Box",
    "DEFAULT_COLOR",
]
