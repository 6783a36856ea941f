"""Tests for grid_builder.py."""

import random

import pytest

from carving import DFSCarvingAlgorithm, HomemadeCarvingAlgorithm
from connectivity import is_perfect
from grid_builder import grid_fill, new_maze
from models import CellType


class TestGridFill:
    def test_5x5_lattice(self):
        maze = grid_fill(5, 5)
        tiles = {
            (x, y) for y in range(5) for x in range(5)
            if maze.cell_at(x, y).type() == CellType.TILE
        }
        walls = [
            (x, y) for y in range(5) for x in range(5)
            if maze.cell_at(x, y).type() == CellType.WALL
        ]
        assert tiles == {(x, y) for x in (0, 2, 4) for y in (0, 2, 4)}
        assert len(walls) == 16

    def test_nothing_visited(self):
        maze = grid_fill(7, 5)
        assert not any(cell.visited for row in maze.cells for cell in row)

    def test_dimensions(self):
        maze = grid_fill(7, 3)
        assert maze.dimensions() == (7, 3)
        assert len(maze.cells) == 3
        assert len(maze.cells[0]) == 7

    def test_even_dimensions_keep_outer_wall(self):
        maze = grid_fill(4, 4)
        assert all(maze.cell_at(3, y).type() == CellType.WALL for y in range(4))

    def test_single_cell(self):
        maze = grid_fill(1, 1)
        assert maze.cell_at(0, 0).type() == CellType.TILE

    @pytest.mark.parametrize("w,h", [(0, 5), (5, 0), (-3, 3)])
    def test_rejects_non_positive(self, w, h):
        with pytest.raises(ValueError, match="must be positive"):
            grid_fill(w, h)


class TestNewMaze:
    def test_carves(self):
        maze = new_maze(9, 7, DFSCarvingAlgorithm(), random.Random(3))
        assert is_perfect(maze)

    def test_unimplemented_strategy_fails(self):
        with pytest.raises(NotImplementedError):
            new_maze(5, 5, HomemadeCarvingAlgorithm())
