"""Build the initial room/wall lattice and carve it into a maze."""

from __future__ import annotations

import random

from carving import CarvingStrategy
from models import CellType, Maze


def grid_fill(width: int, height: int) -> Maze:
    """Create a Maze of WALL cells with a TILE room at every even (x, y)."""
    if width < 1 or height < 1:
        raise ValueError(f"Maze dimensions must be positive, got {width}x{height}")

    maze = Maze.create(width, height)
    for y in range(0, height, 2):
        for x in range(0, width, 2):
            maze.cells[y][x].convert_to(CellType.TILE)
    return maze


def new_maze(
    width: int,
    height: int,
    strategy: CarvingStrategy,
    rng: random.Random | None = None,
) -> Maze:
    """Fill the lattice, then let *strategy* carve passages into it."""
    maze = grid_fill(width, height)
    maze.carve(strategy, rng)
    return maze
