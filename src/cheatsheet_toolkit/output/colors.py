"""
Module: output.colors

Purpose:
    Turn a box's opaque color tag into an RGB fill for rendering.
    Tags come from three places: hex codes sent by the assistant,
    CSS color names, and gradient class pairs such as
    "from-blue-50 to-blue-100" created by the workspace.

Key Functions:
    - resolve_fill(): Color tag -> (r, g, b)

Dependencies:
    - PIL.ImageColor: Hex and CSS name parsing
"""

from __future__ import annotations

import re

from PIL import ImageColor

RGB = tuple[int, int, int]

DEFAULT_FILL: RGB = (239, 246, 255)  # blue-50
BORDER_COLOR: RGB = (148, 163, 184)  # slate-400
TITLE_COLOR: RGB = (30, 41, 59)      # slate-800
BODY_COLOR: RGB = (51, 65, 85)       # slate-700

# Light shades (50/100/200) of the palette used by the workspace
PALETTE: dict[str, dict[int, RGB]] = {
    "blue": {50: (239, 246, 255), 100: (219, 234, 254), 200: (191, 219, 254)},
    "red": {50: (254, 242, 242), 100: (254, 226, 226), 200: (254, 202, 202)},
    "green": {50: (240, 253, 244), 100: (220, 252, 231), 200: (187, 247, 208)},
    "yellow": {50: (254, 252, 232), 100: (254, 249, 195), 200: (254, 240, 138)},
    "purple": {50: (250, 245, 255), 100: (243, 232, 255), 200: (233, 213, 255)},
    "pink": {50: (253, 242, 248), 100: (252, 231, 243), 200: (251, 207, 232)},
    "gray": {50: (249, 250, 251), 100: (243, 244, 246), 200: (229, 231, 235)},
    "orange": {50: (255, 247, 237), 100: (255, 237, 213), 200: (254, 215, 170)},
    "teal": {50: (240, 253, 250), 100: (204, 251, 241), 200: (153, 246, 228)},
    "indigo": {50: (238, 242, 255), 100: (224, 231, 255), 200: (199, 210, 254)},
    "cyan": {50: (236, 254, 255), 100: (207, 250, 254), 200: (165, 243, 252)},
}

_GRADIENT_STOP = re.compile(r"from-([a-z]+)-(\d+)")


def resolve_fill(color: str | None) -> RGB:
    """
    Resolve a color tag to an RGB fill.

    Gradients use their "from" stop. Unknown tags fall back to light blue.

    Example:
        >>> resolve_fill("from-red-50 to-red-100")
        (254, 242, 242)
        >>> resolve_fill("#f0f9ff")
        (240, 249, 255)
    """
    if not color:
        return DEFAULT_FILL

    match = _GRADIENT_STOP.search(color)
    if match:
        shades = PALETTE.get(match.group(1))
        if shades is None:
            return DEFAULT_FILL
        shade = int(match.group(2))
        nearest = min(shades, key=lambda s: abs(s - shade))
        return shades[nearest]

    try:
        return ImageColor.getrgb(color.strip())[:3]
    except ValueError:
        return DEFAULT_FILL
