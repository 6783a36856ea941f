"""Structural checks over a carved maze: room graph, opened walls, perfection."""

from __future__ import annotations

from collections import deque

from models import CellType, Coord, Maze

RoomGraph = dict[Coord, set[Coord]]


def room_cells(maze: Maze) -> list[Coord]:
    return list(maze.rooms())


def opened_walls(maze: Maze) -> list[Coord]:
    """Connector cells (exactly one odd coordinate) that are no longer walls."""
    result: list[Coord] = []
    for y in range(maze.height):
        for x in range(maze.width):
            if (x % 2) + (y % 2) != 1:
                continue
            if maze.cells[y][x].cell_type != CellType.WALL:
                result.append((x, y))
    return result


def room_graph(maze: Maze, skip: Coord | None = None) -> RoomGraph:
    """Adjacency of rooms joined through an opened wall.

    *skip* treats one opened wall as closed, for cycle checks.
    """
    graph: RoomGraph = {room: set() for room in maze.rooms()}
    for x, y in opened_walls(maze):
        if (x, y) == skip:
            continue
        if x % 2:
            a, b = (x - 1, y), (x + 1, y)
        else:
            a, b = (x, y - 1), (x, y + 1)
        if a in graph and b in graph:
            graph[a].add(b)
            graph[b].add(a)
    return graph


def count_components(graph: RoomGraph) -> int:
    """Number of connected components, via BFS."""
    seen: set[Coord] = set()
    components = 0
    for start in graph:
        if start in seen:
            continue
        components += 1
        seen.add(start)
        q = deque([start])
        while q:
            node = q.popleft()
            for nxt in graph[node]:
                if nxt not in seen:
                    seen.add(nxt)
                    q.append(nxt)
    return components


def is_perfect(maze: Maze) -> bool:
    """Every room visited, rooms connected, and exactly rooms - 1 passages (a spanning tree)."""
    rooms = room_cells(maze)
    if not all(maze.cells[y][x].visited for x, y in rooms):
        return False
    if len(opened_walls(maze)) != len(rooms) - 1:
        return False
    return count_components(room_graph(maze)) == 1
