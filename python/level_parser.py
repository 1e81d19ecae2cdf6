"""
Level parsing utilities.

Level text uses one character per cell:
  '#' wall, ' ' floor, '.' storage, 'o' crate, '*' crate on storage,
  '@' player, '+' player on storage.
"""

from __future__ import annotations

import logging
from pathlib import Path

from sokoban import Board
from sokoban_types import Tile, TileGrid

__all__ = ["LevelParseError", "parse_level", "load_level", "board_from_text", "load_board"]

logger = logging.getLogger(__name__)


class LevelParseError(ValueError):
    """Level text contains something other than tile symbols."""


def _valid_symbols() -> str:
    return "\n".join(f"    - {tile.symbol!r}: {tile.name}" for tile in Tile)


def parse_level(text: str) -> TileGrid:
    """
    Parse level text into rows of tiles.

    Empty lines are skipped; rows keep their own length (no padding).

    Raises:
        LevelParseError: empty text or an unknown symbol
    """
    grid: TileGrid = []

    for line_idx, line in enumerate(text.split("\n")):
        line = line.rstrip("\r")
        if not line:
            continue

        row: list[Tile] = []
        for col_idx, char in enumerate(line):
            try:
                row.append(Tile.from_symbol(char))
            except ValueError:
                error_msg = (
                    f"Invalid tile symbol: {char!r}\n"
                    f"  Line {line_idx + 1}: \"{line}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid symbols:\n"
                    f"{_valid_symbols()}"
                )
                raise LevelParseError(error_msg) from None
        grid.append(row)

    if not grid:
        raise LevelParseError("Empty level")

    return grid


def load_level(path: str | Path) -> TileGrid:
    """Read and parse a UTF-8 level file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise LevelParseError(f"Level {path} is not valid UTF-8: {exc}") from None
    grid = parse_level(text)
    logger.info("Loaded level %s (%d rows)", path, len(grid))
    return grid


def board_from_text(text: str) -> Board:
    return Board.create(parse_level(text))


def load_board(path: str | Path) -> Board:
    return Board.create(load_level(path))
