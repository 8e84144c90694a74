"""
Benchmark script for the layout engine.
Measures execution time for incremental adds and full relayout.
"""

import logging
import random
import statistics
import sys
import time
from pathlib import Path

# Add src to path so we can import cheatsheet_toolkit
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root / "src"))

from cheatsheet_toolkit.layout import PageGeometry, boxes_overlap
from cheatsheet_toolkit.workspace import Canvas, NewBox

# Setup logging
logging.basicConfig(level=logging.WARNING, format='%(message)s')
logger = logging.getLogger("benchmark")

SAMPLE_BODIES = [
    "a^2 + b^2 = c^2",
    "d/dx x^n = nx^(n-1)",
    "$x = \\frac{-b \\pm \\sqrt{b^2 - 4ac}}{2a}$",
    "\\int_a^b f'(x) dx = f(b) - f(a)",
    "The derivative measures the instantaneous rate of change of a function.",
    "Step 1: isolate x\nStep 2: divide both sides\nStep 3: check the answer",
]


def generate_items(count: int, seed: int):
    """Random titles and bodies drawn from the sample pool."""
    rng = random.Random(seed)
    items = []
    for i in range(count):
        title = f"Formula {i + 1}" + " extended" * rng.randint(0, 4)
        body = "\n".join(rng.choice(SAMPLE_BODIES) for _ in range(rng.randint(1, 4)))
        items.append(NewBox(title, body))
    return items


def benchmark_add(count: int, geometry: PageGeometry, iterations: int = 5):
    """Benchmark incremental adds (one packer call per box)."""
    print(f"\n--- Benchmarking Add (x{iterations}) ---")
    print(f"Boxes: {count}")

    times = []
    canvas = Canvas(geometry=geometry)
    for i in range(iterations):
        items = generate_items(count, seed=12345 + i)

        start = time.perf_counter()
        canvas, _ = Canvas(geometry=geometry).add_boxes(items)
        duration = time.perf_counter() - start

        times.append(duration)
        print(f"Run {i+1}: {duration:.4f}s ({canvas.page_count()} pages)")

    print(f"Average: {statistics.mean(times):.4f}s")
    print(f"Min: {min(times):.4f}s")
    print(f"Max: {max(times):.4f}s")
    return canvas


def benchmark_relayout(canvas: Canvas, iterations: int = 5):
    """Benchmark relayout of an existing canvas."""
    print(f"\n--- Benchmarking Relayout (x{iterations}) ---")
    print(f"Boxes: {len(canvas)}, pages before: {canvas.page_count()}")

    times = []
    result = canvas
    for i in range(iterations):
        start = time.perf_counter()
        result = canvas.relayout()
        duration = time.perf_counter() - start

        times.append(duration)
        print(f"Run {i+1}: {duration:.4f}s ({result.page_count()} pages)")

    overlaps = len(boxes_overlap(result.boxes))
    print(f"Average: {statistics.mean(times):.4f}s")
    print(f"Overlaps after relayout: {overlaps}")
    return statistics.mean(times)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Benchmark box packing")
    parser.add_argument("--count", type=int, default=200, help="Boxes per run")
    parser.add_argument("--preset", type=str, default="letter", help="Page preset")
    parser.add_argument("--iterations", type=int, default=5)

    args = parser.parse_args()

    geometry = PageGeometry.from_preset(args.preset)
    canvas = benchmark_add(args.count, geometry, args.iterations)
    benchmark_relayout(canvas, args.iterations)
