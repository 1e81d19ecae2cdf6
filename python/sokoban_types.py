"""
Shared type definitions for the Sokoban engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Coordinate:
    """An integer (x, y) vector: a grid position or a unit step."""

    x: int
    y: int

    def add(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y)


class Direction(Enum):
    """Cardinal direction of a move."""

    UP = Coordinate(0, -1)  # decreasing y
    DOWN = Coordinate(0, 1)  # increasing y
    RIGHT = Coordinate(1, 0)  # increasing x
    LEFT = Coordinate(-1, 0)  # decreasing x

    @property
    def delta(self) -> Coordinate:
        return self.value


# =============================================================================
# Tiles
# =============================================================================


class Tile(Enum):
    """Kind of a grid cell. The value is the symbol used in level files."""

    WALL = "#"
    FLOOR = " "
    STORAGE = "."
    CRATE = "o"
    CRATE_ON_STORAGE = "*"
    MAN = "@"
    MAN_ON_STORAGE = "+"

    @classmethod
    def from_symbol(cls, symbol: str) -> Tile:
        """Map a level symbol to its tile, raising ValueError if unknown."""
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Unknown tile symbol: {symbol!r}") from None

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_crate_like(self) -> bool:
        match self:
            case Tile.CRATE | Tile.CRATE_ON_STORAGE:
                return True
            case Tile.WALL | Tile.FLOOR | Tile.STORAGE | Tile.MAN | Tile.MAN_ON_STORAGE:
                return False
            case _:
                raise ValueError(f"Unknown tile: {self}")

    @property
    def is_storage_like(self) -> bool:
        match self:
            case Tile.STORAGE | Tile.CRATE_ON_STORAGE | Tile.MAN_ON_STORAGE:
                return True
            case Tile.WALL | Tile.FLOOR | Tile.CRATE | Tile.MAN:
                return False
            case _:
                raise ValueError(f"Unknown tile: {self}")

    @property
    def is_player(self) -> bool:
        match self:
            case Tile.MAN | Tile.MAN_ON_STORAGE:
                return True
            case Tile.WALL | Tile.FLOOR | Tile.STORAGE | Tile.CRATE | Tile.CRATE_ON_STORAGE:
                return False
            case _:
                raise ValueError(f"Unknown tile: {self}")

    @property
    def blocks_movement(self) -> bool:
        match self:
            case Tile.WALL:
                return True
            case (
                Tile.FLOOR
                | Tile.STORAGE
                | Tile.CRATE
                | Tile.CRATE_ON_STORAGE
                | Tile.MAN
                | Tile.MAN_ON_STORAGE
            ):
                return False
            case _:
                raise ValueError(f"Unknown tile: {self}")


TileGrid = list[list[Tile]]
