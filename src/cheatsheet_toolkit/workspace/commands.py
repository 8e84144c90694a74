"""
Module: workspace.commands

Purpose:
    Numbered box commands typed into the chat panel, e.g.
    "delete box 3" or "make box 2 red". Parsing is separate from
    execution so the chat layer can decide what to do with text
    that is not a command (send it to the assistant).

Key Functions:
    - parse_command(): Text -> Command or None
    - execute_command(): Canvas + Command -> CommandResult

Key Classes:
    - Command: Parsed command
    - CommandResult: New canvas plus a user-facing message

Dependencies:
    - workspace.canvas: Canvas operations
    - re (std)

Used By:
    - Chat front ends driving a Canvas
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Optional

from .canvas import Canvas

logger = logging.getLogger(__name__)

COLOR_MAP = {
    "blue": "from-blue-100 to-blue-200",
    "red": "from-red-100 to-red-200",
    "green": "from-green-100 to-green-200",
    "yellow": "from-yellow-100 to-yellow-200",
    "purple": "from-purple-100 to-purple-200",
    "pink": "from-pink-100 to-pink-200",
    "gray": "from-gray-100 to-gray-200",
    "orange": "from-orange-100 to-orange-200",
}
FALLBACK_COLOR = COLOR_MAP["blue"]

# Named anchors for "move box N to ..."
MOVE_X = {"left": 100, "right": 600, "center": 400}
MOVE_Y = {"top": 100, "bottom": 500, "middle": 300}

RESIZE_STEP_WIDTH = 50
RESIZE_STEP_HEIGHT = 30

HELP_TEXT = """Box commands:
- "delete box 3" - remove a box
- "edit box 2 to New Content" - replace box content
- "highlight box 1" - highlight box content
- "select box 4" - focus a box
- "copy box 2" - duplicate a box with a slight offset
- "change box 3 title to New Title" / "rename box 1 title to Math Rules"
- "make box 3 red" - colors: red, blue, green, yellow, purple, pink, gray, orange
- "resize box 1 larger" - larger, smaller, big, small
- "move box 2 to top left" - top/middle/bottom + left/center/right
- "clear all boxes" / "delete all boxes"
- "how many boxes" / "count boxes"
Boxes are numbered from 1 in the order they were added."""


@dataclass(frozen=True)
class Command:
    """
    Parsed chat command.

    Attributes:
        action: One of delete, edit, highlight, select, move, title,
            resize, color, copy, clear, count, help
        number: 1-based box number, None for canvas-wide commands
        argument: Free text (new content, title, color, position, size word)
    """

    action: str
    number: Optional[int] = None
    argument: Optional[str] = None


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a command.

    Attributes:
        canvas: Canvas to commit (unchanged when ok is False)
        ok: Whether the command applied
        message: Text for the user
        selected_id: Box to focus, if the command selects one
    """

    canvas: Canvas
    ok: bool
    message: str
    selected_id: Optional[str] = None


# Ordered: first match wins
_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("delete", re.compile(r"delete box (\d+)", re.IGNORECASE)),
    ("edit", re.compile(r"edit box (\d+) to (.+)", re.IGNORECASE)),
    ("highlight", re.compile(r"highlight (?:text in )?box (\d+)", re.IGNORECASE)),
    ("select", re.compile(r"select box (\d+)", re.IGNORECASE)),
    ("move", re.compile(r"move box (\d+) to (.+)", re.IGNORECASE)),
    ("title", re.compile(r"(?:change|rename) box (\d+) title to (.+)", re.IGNORECASE)),
    ("resize", re.compile(r"(?:resize|make) box (\d+) (larger|smaller|big|small)\b", re.IGNORECASE)),
    ("color", re.compile(r"(?:change|make) box (\d+) (?:color )?(.+)", re.IGNORECASE)),
    ("copy", re.compile(r"copy box (\d+)", re.IGNORECASE)),
]


def parse_command(text: str) -> Optional[Command]:
    """
    Parse a chat message into a box command.

    Matching is case-insensitive. Free-text arguments keep the
    user's original casing.

    Returns:
        Command, or None if the text is not a box command

    Example:
        >>> parse_command("Make box 3 red")
        Command(action='color', number=3, argument='red')
    """
    original = text.strip()
    lowered = original.lower()

    for action, pattern in _PATTERNS:
        match = pattern.search(original)
        if match is None:
            continue
        number = int(match.group(1))
        argument = None
        if match.lastindex and match.lastindex >= 2:
            argument = match.group(2).strip()
        return Command(action=action, number=number, argument=argument)

    if "clear all boxes" in lowered or "delete all boxes" in lowered:
        return Command("clear")
    if "how many boxes" in lowered or "count boxes" in lowered:
        return Command("count")
    if "help" in lowered or "commands" in lowered:
        return Command("help")
    return None


def execute_command(canvas: Canvas, command: Command) -> CommandResult:
    """
    Apply a parsed command to a canvas.

    Never raises for a bad box number: the result has ok=False and a
    "Box N not found" message, and the canvas is returned unchanged.
    """
    if command.action == "clear":
        return CommandResult(canvas.clear(), True, "Cleared all boxes")
    if command.action == "count":
        count = len(canvas)
        return CommandResult(canvas, True, f"There are currently {count} boxes in your cheat sheet.")
    if command.action == "help":
        return CommandResult(canvas, True, HELP_TEXT)

    handler = _HANDLERS.get(command.action)
    if handler is None:
        return CommandResult(canvas, False, f"Unknown command: {command.action}")

    box = canvas.box_at(command.number or 0)
    if box is None:
        logger.info(f"Command {command.action} names missing box {command.number}")
        return CommandResult(canvas, False, f"Box {command.number} not found")

    return handler(canvas, box.id, command)


def run_command(canvas: Canvas, text: str) -> Optional[CommandResult]:
    """Parse and execute in one step; None when text is not a command."""
    command = parse_command(text)
    if command is None:
        return None
    result = execute_command(canvas, command)
    logger.debug(f"Command {command} -> ok={result.ok}: {result.message.splitlines()[0]}")
    return result


# ─────────────────────────────────────────────────────────────────────────────
# Handlers
# ─────────────────────────────────────────────────────────────────────────────

def _delete(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    return CommandResult(canvas.delete_box(box_id), True, f"Deleted box {command.number}")


def _edit(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    updated = canvas.update_box(box_id, content=f"<p>{command.argument}</p>")
    return CommandResult(updated, True, f"Updated box {command.number}", selected_id=box_id)


def _highlight(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    content = canvas.get(box_id).content
    highlighted = content.replace("<p>", "<p><mark>").replace("</p>", "</mark></p>")
    updated = canvas.update_box(box_id, content=highlighted)
    return CommandResult(updated, True, f"Highlighted box {command.number}", selected_id=box_id)


def _select(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    return CommandResult(canvas, True, f"Selected box {command.number}", selected_id=box_id)


def _move(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    box = canvas.get(box_id)
    where = (command.argument or "").lower()
    x, y = box.x, box.y
    for word, value in MOVE_X.items():
        if word in where:
            x = value
    for word, value in MOVE_Y.items():
        if word in where:
            y = value
    return CommandResult(
        canvas.move_box(box_id, x, y), True,
        f"Moved box {command.number} to {command.argument}",
        selected_id=box_id,
    )


def _title(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    updated = canvas.update_box(box_id, title=command.argument or "")
    return CommandResult(updated, True, f"Changed box {command.number} title")


def _resize(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    box = canvas.get(box_id)
    if (command.argument or "").lower() in ("larger", "big"):
        width, height = box.width + RESIZE_STEP_WIDTH, box.height + RESIZE_STEP_HEIGHT
    else:
        width, height = box.width - RESIZE_STEP_WIDTH, box.height - RESIZE_STEP_HEIGHT
    return CommandResult(canvas.resize_box(box_id, width, height), True, f"Resized box {command.number}")


def _color(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    name = (command.argument or "").lower()
    color = COLOR_MAP.get(name, FALLBACK_COLOR)
    return CommandResult(
        canvas.recolor_box(box_id, color), True,
        f"Changed box {command.number} to {name}",
    )


def _copy(canvas: Canvas, box_id: str, command: Command) -> CommandResult:
    updated, copy = canvas.copy_box(box_id)
    return CommandResult(updated, True, f"Copied box {command.number}", selected_id=copy.id)


_HANDLERS: dict[str, Callable[[Canvas, str, Command], CommandResult]] = {
    "delete": _delete,
    "edit": _edit,
    "highlight": _highlight,
    "select": _select,
    "move": _move,
    "title": _title,
    "resize": _resize,
    "color": _color,
    "copy": _copy,
}
