import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import cheatsheet_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from cheatsheet_toolkit.core.models import Box
from cheatsheet_toolkit.layout import PageGeometry


# Common test fixtures
@pytest.fixture
def geometry():
    """Letter page, margin 40, spacing 8 (usable width 736)."""
    return PageGeometry()


@pytest.fixture
def make_box():
    """Factory for boxes with sequential ids."""
    counter = {"n": 0}

    def _create(x=0, y=0, width=200, height=150, title="", content="", color="#f0f9ff", box_id=None):
        counter["n"] += 1
        return Box(
            id=box_id or f"b{counter['n']}",
            title=title,
            content=content,
            color=color,
            x=x,
            y=y,
            width=width,
            height=height,
        )
    return _create


@pytest.fixture
def formula_items():
    """Generated content items as the assistant returns them."""
    return [
        {"title": "Power Rule", "content": "d/dx x^n = nx^(n-1)", "color": "from-blue-50 to-blue-100"},
        {"title": "Product Rule", "content": "d/dx [u(x)v(x)] = u'(x)v(x) + u(x)v'(x)", "color": "from-green-50 to-green-100"},
        {"title": "Chain Rule", "content": "d/dx f(g(x)) = f'(g(x)) g'(x)", "color": "from-pink-50 to-pink-100"},
        {"title": "Exponential", "content": "d/dx e^x = e^x", "color": "from-red-50 to-red-100"},
        {"title": "Logarithm", "content": "d/dx ln x = 1/x", "color": "from-orange-50 to-orange-100"},
        {"title": "Sine Function", "content": "d/dx sin x = cos x", "color": "from-teal-50 to-teal-100"},
        {"title": "Quadratic Formula", "content": "$x = \\frac{-b \\pm \\sqrt{b^2 - 4ac}}{2a}$", "color": "from-red-50 to-red-100"},
        {"title": "Fundamental Theorem of Calculus", "content": "\\int_a^b f'(x) dx = f(b) - f(a)", "color": "from-yellow-50 to-yellow-100"},
        {"title": "Euler's Formula", "content": "e^(ix) = cos x + i sin x", "color": "from-indigo-50 to-indigo-100"},
        {"title": "Mean Value Theorem", "content": "There exists c in (a, b) such that the derivative at c equals the average rate of change of f over the interval [a, b].\nf'(c) = (f(b) - f(a)) / (b - a)", "color": "from-blue-50 to-blue-100"},
    ]
