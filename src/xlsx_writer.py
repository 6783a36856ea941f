"""Write a maze to an XLSX workbook, one spreadsheet cell per maze cell."""

from __future__ import annotations

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from connectivity import opened_walls, room_cells
from models import CellType, Maze

WALL_FILL = PatternFill(fill_type="solid", start_color="000000", end_color="000000")
DOOR_FILL = PatternFill(fill_type="solid", start_color="B5651D", end_color="B5651D")


def write_maze_xlsx(maze: Maze, output_path: str) -> None:
    """Write the maze to an Excel workbook.

    Sheet "Maze" paints walls black and doors brown on a square cell grid.
    Sheet "Info" lists dimensions, room count and opened walls.
    """
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Maze"

    for y in range(maze.height):
        for x in range(maze.width):
            cell_type = maze.cells[y][x].cell_type
            if cell_type == CellType.WALL:
                ws.cell(row=y + 1, column=x + 1).fill = WALL_FILL
            elif cell_type == CellType.DOOR:
                ws.cell(row=y + 1, column=x + 1).fill = DOOR_FILL

    # Square-ish cells
    for x in range(1, maze.width + 1):
        ws.column_dimensions[get_column_letter(x)].width = 2.5
    for y in range(1, maze.height + 1):
        ws.row_dimensions[y].height = 15

    header_font = Font(bold=True, size=12)
    info = wb.create_sheet(title="Info")
    info.cell(row=1, column=1, value="Property").font = header_font
    info.cell(row=1, column=2, value="Value").font = header_font
    rows = [
        ("Width", maze.width),
        ("Height", maze.height),
        ("Rooms", len(room_cells(maze))),
        ("Opened walls", len(opened_walls(maze))),
    ]
    for i, (name, value) in enumerate(rows, start=2):
        info.cell(row=i, column=1, value=name)
        info.cell(row=i, column=2, value=value)
    info.column_dimensions["A"].width = 20
    info.column_dimensions["B"].width = 10

    wb.save(output_path)
