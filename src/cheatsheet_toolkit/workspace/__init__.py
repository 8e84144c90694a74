"""
Module: workspace

Purpose:
    Cheat sheet canvas state and the chat box commands that edit it.
    Every operation returns a new Canvas for the caller to commit.

Key Classes:
    - Canvas, NewBox, BoxNotFoundError
    - Command, CommandResult

Key Functions:
    - parse_command(), execute_command(), run_command()
"""

from .canvas import Canvas, NewBox, BoxNotFoundError, new_box_id
from .commands import Command, CommandResult, parse_command, execute_command, run_command

__all__ = [
    "Canvas",
    "NewBox",
    "BoxNotFoundError",
    "new_box_id",
    "Command",
    "CommandResult",
    "parse_command",
    "execute_command",
    "run_command",
]
