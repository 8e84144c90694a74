"""
Module: output

Purpose:
    Rendering of a paginated canvas: PDF export via ReportLab and
    PNG page previews via PIL.

Key Functions:
    - render_to_pdf(): Canvas to PDF
    - render_page_preview(): One page to a PIL image
    - save_page_previews(): Every page to PNG
    - resolve_fill(): Box color tag to RGB
"""

from .colors import resolve_fill
from .preview import render_page_preview, save_page_previews
from .renderer import render_to_pdf

__all__ = [
    "resolve_fill",
    "render_page_preview",
    "save_page_previews",
    "render_to_pdf",
]
