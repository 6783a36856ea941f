"""Render a maze as standalone SVG."""

from __future__ import annotations

from models import CellType, Maze

TILE_FILL = "white"
VISITED_FILL = "#dddddd"
DOOR_FILL = "#b5651d"


def render_svg(
    maze: Maze,
    output_path: str,
    cell_size: float | None = None,
    show_visited: bool = False,
) -> None:
    """Write the maze to an SVG file."""
    if cell_size is None:
        cell_size = _default_cell_size(max(maze.width, maze.height))

    svg_w = cell_size * maze.width
    svg_h = cell_size * maze.height

    parts: list[str] = []
    parts.append(
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<svg xmlns="http://www.w3.org/2000/svg" '
        f'width="{svg_w}" height="{svg_h}" '
        f'viewBox="0 0 {svg_w} {svg_h}">\n'
    )

    for y in range(maze.height):
        for x in range(maze.width):
            cell = maze.cells[y][x]
            px = x * cell_size
            py = y * cell_size

            if cell.cell_type == CellType.WALL:
                fill = "black"
            elif cell.cell_type == CellType.DOOR:
                fill = DOOR_FILL
            elif show_visited and cell.visited:
                fill = VISITED_FILL
            else:
                fill = TILE_FILL

            parts.append(
                f'  <rect x="{px}" y="{py}" width="{cell_size}" '
                f'height="{cell_size}" fill="{fill}"/>\n'
            )

    # Outer border
    parts.append(
        f'  <rect x="0" y="0" width="{svg_w}" height="{svg_h}" '
        f'fill="none" stroke="black" stroke-width="1.5"/>\n'
    )
    parts.append('</svg>\n')

    with open(output_path, 'w', encoding='utf-8') as f:
        f.writelines(parts)


def _default_cell_size(longest_side: int) -> float:
    if longest_side <= 21:
        return 16.0
    elif longest_side <= 51:
        return 10.0
    else:
        return 6.0
