"""Render a maze as rows of text glyphs with coordinate annotations."""

from __future__ import annotations

import sys
from typing import TextIO

from models import Maze


def render_text(maze: Maze) -> str:
    """Header of column indices (mod 10), then one line per row prefixed by its index."""
    lines: list[str] = []
    lines.append("  " + "".join(f"r{x % 10} " for x in range(maze.width)))
    for y, row in enumerate(maze.cells):
        symbols = "".join(f" {cell.symbol()} " for cell in row)
        lines.append(f"c{y % 10} {symbols}")
    return "\n".join(lines) + "\n"


def print_maze(maze: Maze, stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    out.write(render_text(maze))
