#!/usr/bin/env python3
"""CLI entry point for maze generation.

Builds the room/wall lattice, carves it with the chosen strategy, prints the
text maze to stdout and optionally writes SVG, PDF and XLSX renderings.
"""

from __future__ import annotations

import argparse
import random
import sys
import time

from models import Maze, MazeError


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a perfect maze with a depth-first carver."
    )
    p.add_argument("--width", type=int, default=41,
                   help="Maze width in cells (default: 41, odd recommended)")
    p.add_argument("--height", type=int, default=29,
                   help="Maze height in cells (default: 29, odd recommended)")
    p.add_argument("--strategy", default="dfs",
                   help='Carving strategy: "dfs" or "homemade" (default: dfs)')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--svg", default=None, help="Also write an SVG to this path")
    p.add_argument("--pdf", default=None, help="Also write a PDF to this path")
    p.add_argument("--xlsx", default=None, help="Also write an XLSX to this path")
    p.add_argument("--title", default="MAZE",
                   help='PDF banner text (default: "MAZE")')
    p.add_argument("--quiet", action="store_true",
                   help="Do not print the text maze to stdout")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error("--width and --height must be positive")

    seed = args.seed if args.seed is not None else random.randint(0, 2**31)
    t0 = time.time()

    try:
        maze = _generate(args, seed)
    except MazeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if not args.quiet:
        from text_renderer import print_maze
        print_maze(maze)

    _output_all(maze, args)
    _report(maze, t0)


def _generate(args, seed: int) -> Maze:
    from carving import get_strategy
    from grid_builder import new_maze

    strategy = get_strategy(args.strategy)
    print(f"Carving {args.width}x{args.height} maze "
          f"(strategy={args.strategy}, seed={seed})...", file=sys.stderr)
    return new_maze(args.width, args.height, strategy, random.Random(seed))


def _output_all(maze: Maze, args) -> None:
    """Write each optional rendering that was requested."""
    if args.svg:
        from svg_renderer import render_svg
        render_svg(maze, args.svg)
        print(f"Output: {args.svg}", file=sys.stderr)

    if args.pdf:
        from pdf_renderer import render_pdf
        render_pdf(maze, args.title, args.pdf)
        print(f"Output: {args.pdf}", file=sys.stderr)

    if args.xlsx:
        from xlsx_writer import write_maze_xlsx
        write_maze_xlsx(maze, args.xlsx)
        print(f"Output: {args.xlsx}", file=sys.stderr)


def _report(maze: Maze, t0: float) -> None:
    from connectivity import is_perfect, opened_walls, room_cells

    elapsed = time.time() - t0
    perfect = "yes" if is_perfect(maze) else "no"
    print(
        f"Carved {len(room_cells(maze))} rooms, "
        f"{len(opened_walls(maze))} passages, "
        f"perfect {perfect}, "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


if __name__ == "__main__":
    main()
