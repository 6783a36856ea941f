"""Render a maze to a one-page PDF using ReportLab.

Layout: black title banner across the top, maze centered below it,
cells scaled down until the whole maze fits the usable page area.
"""

from __future__ import annotations

from dataclasses import dataclass

from reportlab.lib.pagesizes import letter
from reportlab.pdfbase.pdfmetrics import stringWidth

from models import CellType, Maze

PAGE_W, PAGE_H = letter  # 612 x 792
MARGIN = 36


@dataclass
class LayoutParams:
    """All computed layout measurements."""

    page_w: float = PAGE_W
    page_h: float = PAGE_H
    margin: float = MARGIN
    usable_w: float = PAGE_W - 2 * MARGIN
    usable_h: float = PAGE_H - 2 * MARGIN

    # Maze
    width: int = 41
    height: int = 29
    cell_size: float = 14.0
    maze_w: float = 0.0
    maze_h: float = 0.0
    maze_x: float = 0.0
    maze_y: float = 0.0  # top of maze in page coords

    # Title banner
    banner_h: float = 28.0
    banner_y: float = 0.0
    banner_gap: float = 12.0

    title: str = "MAZE"


def render_pdf(maze: Maze, title: str, output_path: str) -> None:
    """Compute layout, draw banner and maze, save."""
    from reportlab.pdfgen.canvas import Canvas

    layout = _compute_layout(maze.width, maze.height, title)

    c = Canvas(output_path, pagesize=letter)
    _draw_title_banner(c, layout)
    _draw_maze(c, maze, layout)
    c.showPage()
    c.save()


def _compute_layout(width: int, height: int, title: str) -> LayoutParams:
    """Pick the largest cell size (capped) that fits both axes, then position."""
    lp = LayoutParams(width=width, height=height, title=title)

    lp.banner_y = lp.page_h - lp.margin - lp.banner_h
    avail_h = lp.usable_h - lp.banner_h - lp.banner_gap
    lp.cell_size = min(lp.cell_size, lp.usable_w / width, avail_h / height)

    lp.maze_w = lp.cell_size * width
    lp.maze_h = lp.cell_size * height
    lp.maze_x = (lp.page_w - lp.maze_w) / 2
    lp.maze_y = lp.banner_y - lp.banner_gap
    return lp


# ─── Drawing functions ──────────────────────────────────────────────────────


def _draw_title_banner(c, layout: LayoutParams) -> None:
    """Black rect + white centered bold text."""
    x = layout.margin
    y = layout.banner_y
    w = layout.usable_w
    h = layout.banner_h

    c.setFillColorRGB(0, 0, 0)
    c.rect(x, y, w, h, fill=1, stroke=0)

    c.setFillColorRGB(1, 1, 1)
    c.setFont("Helvetica-Bold", 16)
    text_w = stringWidth(layout.title, "Helvetica-Bold", 16)
    tx = x + (w - text_w) / 2
    ty = y + (h - 16) / 2 + 2
    c.drawString(tx, ty, layout.title)


def _draw_maze(c, maze: Maze, layout: LayoutParams) -> None:
    """Walls as filled black squares, doors in brown; tiles stay blank."""
    x0 = layout.maze_x
    y0 = layout.maze_y
    cs = layout.cell_size

    for y in range(maze.height):
        for x in range(maze.width):
            cell = maze.cells[y][x]
            cx = x0 + x * cs
            cy = y0 - (y + 1) * cs

            if cell.cell_type == CellType.WALL:
                c.setFillColorRGB(0, 0, 0)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)
            elif cell.cell_type == CellType.DOOR:
                c.setFillColorRGB(0.71, 0.4, 0.11)
                c.rect(cx, cy, cs, cs, fill=1, stroke=0)

    # Outer border
    c.setStrokeColorRGB(0, 0, 0)
    c.setLineWidth(1.5)
    c.rect(x0, y0 - layout.maze_h, layout.maze_w, layout.maze_h, fill=0, stroke=1)
