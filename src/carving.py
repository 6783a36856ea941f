"""Carving strategies: algorithms that open passages between maze rooms."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod

from models import Coord, Maze, MazeError

# (dx, dy): up, down, right, left
JUMPS: list[Coord] = [(0, -2), (0, 2), (2, 0), (-2, 0)]


class CarvingStrategy(ABC):
    """Interface every carving algorithm implements."""

    @abstractmethod
    def neighbors(self, x: int, y: int, maze: Maze) -> list[Coord]:
        """Rooms one jump away from (x, y) that lie inside the maze."""

    @abstractmethod
    def carve(self, maze: Maze, rng: random.Random | None = None) -> None:
        """Open passages in *maze* in place until carving is complete."""


class DFSCarvingAlgorithm(CarvingStrategy):
    """Randomized depth-first traversal with an explicit stack (recursive backtracker)."""

    def neighbors(self, x: int, y: int, maze: Maze) -> list[Coord]:
        width, height = maze.dimensions()
        result: list[Coord] = []
        for dx, dy in JUMPS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < width and 0 <= ny < height:
                result.append((nx, ny))
        return result

    def carve(self, maze: Maze, rng: random.Random | None = None) -> None:
        if rng is None:
            rng = random.Random()

        maze.cell_at(0, 0).mark_visited()
        stack: list[Coord] = [(0, 0)]

        while stack:
            x, y = stack[-1]
            candidates = self.neighbors(x, y, maze)
            rng.shuffle(candidates)

            for nx, ny in candidates:
                if not maze.cell_at(nx, ny).is_visited():
                    maze.remove_wall_between((x, y), (nx, ny))
                    maze.cell_at(nx, ny).mark_visited()
                    stack.append((nx, ny))
                    break
            else:
                stack.pop()


class HomemadeCarvingAlgorithm(CarvingStrategy):
    """Placeholder for a second carving algorithm. Not implemented yet."""

    def neighbors(self, x: int, y: int, maze: Maze) -> list[Coord]:
        raise NotImplementedError("HomemadeCarvingAlgorithm.neighbors")

    def carve(self, maze: Maze, rng: random.Random | None = None) -> None:
        raise NotImplementedError("HomemadeCarvingAlgorithm.carve")


STRATEGIES: dict[str, type[CarvingStrategy]] = {
    "dfs": DFSCarvingAlgorithm,
    "homemade": HomemadeCarvingAlgorithm,
}


def get_strategy(name: str) -> CarvingStrategy:
    """Instantiate the strategy registered under *name*."""
    try:
        return STRATEGIES[name]()
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise MazeError(f"Unknown carving strategy '{name}' (known: {known})") from None
