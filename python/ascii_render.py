"""
ASCII rendering for Sokoban boards.

Two variants share the same layout (one character per tile, rows joined by
newlines):
1. Plain text - the level symbols, suitable for logs and tests
2. Coloured text - the same symbols wrapped in ANSI colours
"""

from __future__ import annotations

from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from sokoban import Board
from sokoban_types import Tile


def tile_color(tile: Tile) -> Callable[[str], str]:
    """Colour function for a tile kind."""
    match tile:
        case Tile.WALL:
            return chalk.blue
        case Tile.STORAGE:
            return chalk.red
        case Tile.CRATE:
            return chalk.yellow
        case Tile.CRATE_ON_STORAGE:
            return chalk.green
        case Tile.MAN | Tile.MAN_ON_STORAGE:
            return chalk.white
        case Tile.FLOOR:
            return lambda s: s
        case _:
            raise ValueError(f"Unknown tile: {tile}")


def render_plain(board: Board) -> str:
    """Render the board as level text."""
    return "\n".join(board.to_symbols())


def render(board: Board) -> str:
    """
    Render the board with ANSI colours.

    Args:
        board: The board to render

    Returns:
        Rendered string; stripping the ANSI codes gives render_plain(board)
    """
    lines = []
    for row in board.rows:
        lines.append("".join(tile_color(tile)(tile.symbol) for tile in row))
    return "\n".join(lines)
