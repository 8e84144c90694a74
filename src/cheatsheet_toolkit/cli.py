"""
Command-line front end for the cheat sheet layout engine.

Commands:
    layout    Size and pack generated items into a new canvas document
    relayout  Repack an existing canvas document
    pages     Print the page split of a canvas document
    render    Export a canvas document to PDF or PNG previews
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from cheatsheet_toolkit.core.schemas import ValidationError
from cheatsheet_toolkit.core.utils.serialization import (
    load_canvas_json,
    load_items_json,
    save_canvas_json,
)
from cheatsheet_toolkit.layout import PAGE_PRESETS, PageGeometry, boxes_overlap
from cheatsheet_toolkit.output import render_to_pdf, save_page_previews
from cheatsheet_toolkit.workspace import Canvas

logger = logging.getLogger("cheatsheet_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cheatsheet-toolkit",
        description="Pack cheat sheet boxes onto pages",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    layout = sub.add_parser("layout", help="Pack generated items into a canvas")
    layout.add_argument("items", type=Path, help='JSON list of {"title", "content", "color"?}')
    layout.add_argument("-o", "--output", type=Path, required=True, help="Canvas JSON to write")
    layout.add_argument("--preset", choices=sorted(PAGE_PRESETS), default="letter")
    layout.add_argument("--margin", type=int, default=None)
    layout.add_argument("--spacing", type=int, default=None)
    layout.add_argument("--title", default="", help="Cheat sheet title")
    layout.add_argument("--relayout", action="store_true", help="Repack after adding")

    relayout = sub.add_parser("relayout", help="Repack a canvas")
    relayout.add_argument("canvas", type=Path)
    relayout.add_argument("-o", "--output", type=Path, help="Defaults to overwriting the input")

    pages = sub.add_parser("pages", help="Show the page split")
    pages.add_argument("canvas", type=Path)

    render = sub.add_parser("render", help="Export to PDF or PNG")
    render.add_argument("canvas", type=Path)
    render.add_argument("-o", "--output", type=Path, required=True, help="PDF file, or directory with --png")
    render.add_argument("--png", action="store_true", help="Write PNG page previews instead of a PDF")
    render.add_argument("--scale", type=float, default=1.0, help="PNG pixels per canvas unit")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    try:
        return _COMMANDS[args.command](args)
    except (FileNotFoundError, ValidationError) as e:
        logger.error(str(e))
        return 1


def _cmd_layout(args: argparse.Namespace) -> int:
    overrides = {}
    if args.margin is not None:
        overrides["margin"] = args.margin
    if args.spacing is not None:
        overrides["spacing"] = args.spacing
    try:
        geometry = PageGeometry.from_preset(args.preset, **overrides)
    except ValueError as e:
        logger.error(f"Invalid page geometry: {e}")
        return 1

    items = load_items_json(args.items)
    canvas, added = Canvas(geometry=geometry, title=args.title).add_boxes(items)
    if args.relayout:
        canvas = canvas.relayout()

    save_canvas_json(args.output, canvas.boxes, canvas.geometry, canvas.title)
    print(f"Packed {len(added)} boxes onto {canvas.page_count()} page(s) -> {args.output}")
    return 0


def _cmd_relayout(args: argparse.Namespace) -> int:
    boxes, geometry, title = load_canvas_json(args.canvas)
    canvas = Canvas(boxes=boxes, geometry=geometry, title=title)

    before = canvas.page_count()
    overlaps = len(boxes_overlap(canvas.boxes))
    canvas = canvas.relayout()

    output = args.output or args.canvas
    save_canvas_json(output, canvas.boxes, canvas.geometry, canvas.title)
    print(
        f"Relayout: {before} -> {canvas.page_count()} page(s), "
        f"{overlaps} overlap(s) repaired -> {output}"
    )
    return 0


def _cmd_pages(args: argparse.Namespace) -> int:
    boxes, geometry, title = load_canvas_json(args.canvas)
    layout = Canvas(boxes=boxes, geometry=geometry, title=title).paginate()

    print(f"{title or args.canvas.name}: {layout.page_count} page(s)")
    for page in layout.pages:
        print(f"  Page {page.index + 1}: {page.box_count} box(es)")
        for box in page.boxes:
            print(f"    - {box.title} ({box.width}x{box.height} at {box.x},{page.relative_y(box)})")
    for warning in layout.warnings:
        print(f"  ! {warning}")
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    boxes, geometry, title = load_canvas_json(args.canvas)
    if args.png:
        paths = save_page_previews(boxes, geometry, args.output, scale=args.scale)
        print(f"Wrote {len(paths)} preview(s) to {args.output}")
    else:
        count = render_to_pdf(boxes, geometry, args.output, title=title)
        print(f"Wrote {count} page(s) to {args.output}")
    return 0


_COMMANDS = {
    "layout": _cmd_layout,
    "relayout": _cmd_relayout,
    "pages": _cmd_pages,
    "render": _cmd_render,
}


if __name__ == "__main__":
    sys.exit(main())
