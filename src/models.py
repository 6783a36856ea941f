"""Data models for the maze generator."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from carving import CarvingStrategy

Coord = tuple[int, int]


class CellType(Enum):
    WALL = "WALL"
    TILE = "TILE"
    DOOR = "DOOR"


@dataclass
class Cell:
    """A single cell in the maze grid."""

    cell_type: CellType = CellType.WALL
    visited: bool = False

    def type(self) -> CellType:
        return self.cell_type

    def is_visited(self) -> bool:
        return self.visited

    def mark_visited(self) -> None:
        """Set the visited flag. A visited WALL is an opened passage and becomes a TILE."""
        if self.cell_type == CellType.WALL:
            self.cell_type = CellType.TILE
        self.visited = True

    def convert_to(self, cell_type: CellType) -> None:
        self.cell_type = cell_type

    def symbol(self) -> str:
        """Display glyph for the text renderer."""
        if self.cell_type == CellType.WALL:
            return "█"
        if self.cell_type == CellType.DOOR:
            return "^"
        return "x" if self.visited else "_"


@dataclass
class Maze:
    """A width x height grid of Cell objects, indexed ``cells[y][x]``."""

    width: int
    height: int
    cells: list[list[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @classmethod
    def create(cls, width: int, height: int) -> Maze:
        """Create a maze of all-WALL cells."""
        cells = [[Cell() for _ in range(width)] for _ in range(height)]
        return cls(width=width, height=height, cells=cells)

    def cell_at(self, x: int, y: int) -> Cell:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise MazeBoundsError(
                f"Cell ({x},{y}) outside {self.width}x{self.height} maze"
            )
        return self.cells[y][x]

    def dimensions(self) -> tuple[int, int]:
        return self.width, self.height

    def rooms(self) -> Iterator[Coord]:
        """Yield every room coordinate (even x and even y), row by row."""
        for y in range(0, self.height, 2):
            for x in range(0, self.width, 2):
                yield x, y

    def remove_wall_between(self, cell: Coord, neighbor: Coord) -> None:
        """Open the wall midway between two rooms that are 2 apart on one axis."""
        (cx, cy), (nx, ny) = cell, neighbor
        dx, dy = abs(cx - nx), abs(cy - ny)
        if sorted((dx, dy)) != [0, 2]:
            raise MazeInvariantError(
                f"Rooms ({cx},{cy}) and ({nx},{ny}) are not 2 apart on one axis"
            )
        for x, y in (cell, neighbor):
            if x % 2 or y % 2:
                raise MazeInvariantError(f"({x},{y}) is not a room")
        self._closed_wall((cx + nx) // 2, (cy + ny) // 2).mark_visited()

    def remove_wall(self, x: int, y: int) -> None:
        """Force the WALL at (x, y) into a TILE."""
        self._closed_wall(x, y).convert_to(CellType.TILE)

    def _closed_wall(self, x: int, y: int) -> Cell:
        cell = self.cell_at(x, y)
        if cell.cell_type == CellType.TILE:
            raise MazeInvariantError(f'"Wall" at ({x},{y}) is actually a Tile')
        if cell.cell_type == CellType.DOOR:
            raise MazeInvariantError(f'"Wall" at ({x},{y}) is actually a Door')
        return cell

    def carve(self, strategy: CarvingStrategy, rng: random.Random | None = None) -> None:
        strategy.carve(self, rng)


class MazeError(Exception):
    """Fatal error during maze generation."""


class MazeBoundsError(MazeError, IndexError):
    """A coordinate fell outside the maze."""


class MazeInvariantError(MazeError):
    """Carving tried to open something that is not a closed wall."""
