"""
Board state machine for a crate-pushing grid puzzle.
A move mutates at most three cells: origin, destination and the cell beyond.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sokoban_types import Coordinate, Direction, Tile, TileGrid

logger = logging.getLogger(__name__)

MIN_ROWS = 3
MIN_COLS = 3


class ValidationError(ValueError):
    """The initial grid is structurally unusable (too small)."""


class InvariantViolation(RuntimeError):
    """The board does not hold exactly one player tile."""


# =============================================================================
# Tile transitions
# =============================================================================


def vacated_tile(origin: Tile) -> Tile:
    """What the player leaves behind."""
    match origin:
        case Tile.MAN_ON_STORAGE:
            return Tile.STORAGE
        case Tile.MAN:
            return Tile.FLOOR
        case Tile.WALL | Tile.FLOOR | Tile.STORAGE | Tile.CRATE | Tile.CRATE_ON_STORAGE:
            raise InvariantViolation(f"Origin cell holds no player: {origin}")
        case _:
            raise ValueError(f"Unknown tile: {origin}")


def entered_tile(destination: Tile) -> Tile:
    """The player standing on the destination cell."""
    match destination:
        case Tile.STORAGE | Tile.CRATE_ON_STORAGE:
            return Tile.MAN_ON_STORAGE
        case Tile.FLOOR | Tile.CRATE:
            return Tile.MAN
        case Tile.WALL | Tile.MAN | Tile.MAN_ON_STORAGE:
            raise ValueError(f"Destination cannot be entered: {destination}")
        case _:
            raise ValueError(f"Unknown tile: {destination}")


def pushed_crate_tile(beyond: Tile) -> Tile:
    """A crate landing on the cell beyond the destination."""
    match beyond:
        case Tile.STORAGE:
            return Tile.CRATE_ON_STORAGE
        case Tile.FLOOR:
            return Tile.CRATE
        case Tile.WALL | Tile.CRATE | Tile.CRATE_ON_STORAGE | Tile.MAN | Tile.MAN_ON_STORAGE:
            raise ValueError(f"Crate cannot be pushed onto: {beyond}")
        case _:
            raise ValueError(f"Unknown tile: {beyond}")


# =============================================================================
# Board
# =============================================================================


class Board:
    """
    Owned, mutable grid of tiles.

    Cells are addressed by Coordinate(x, y) with the origin at the top-left
    and y increasing downward; storage is row-major (``cells[y][x]``). Rows may
    differ in length.
    """

    def __init__(self, cells: TileGrid) -> None:
        self._cells = cells

    @classmethod
    def create(cls, grid: Iterable[Sequence[Tile]]) -> Board:
        """
        Build a board from an initial grid, validating it.

        The grid is copied, so later changes to the caller's rows do not
        reach the board.

        Raises:
            ValidationError: fewer than 3 rows, or a row shorter than 3 cells
            InvariantViolation: not exactly one player tile
        """
        cells = [list(row) for row in grid]
        if len(cells) < MIN_ROWS:
            raise ValidationError("too few rows")
        if any(len(row) < MIN_COLS for row in cells):
            raise ValidationError("too few columns")

        board = cls(cells)
        player = board.locate_player()
        logger.debug(
            "Board created: %d rows, %d crates, player at (%d, %d)",
            board.height,
            board.crate_count(),
            player.x,
            player.y,
        )
        return board

    # ---- grid access

    @property
    def height(self) -> int:
        return len(self._cells)

    @property
    def width(self) -> int:
        return max((len(row) for row in self._cells), default=0)

    @property
    def rows(self) -> tuple[tuple[Tile, ...], ...]:
        """Read-only snapshot of the grid."""
        return tuple(tuple(row) for row in self._cells)

    def in_bounds(self, pos: Coordinate) -> bool:
        return 0 <= pos.y < len(self._cells) and 0 <= pos.x < len(self._cells[pos.y])

    def tile_at(self, pos: Coordinate) -> Tile | None:
        """Tile at pos, or None when pos lies outside the grid."""
        if not self.in_bounds(pos):
            return None
        return self._cells[pos.y][pos.x]

    def _set(self, pos: Coordinate, tile: Tile) -> None:
        self._cells[pos.y][pos.x] = tile

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self._cells)

    def crate_count(self) -> int:
        return self.count(Tile.CRATE) + self.count(Tile.CRATE_ON_STORAGE)

    def storage_count(self) -> int:
        return sum(1 for row in self._cells for tile in row if tile.is_storage_like)

    def to_symbols(self) -> list[str]:
        return ["".join(tile.symbol for tile in row) for row in self._cells]

    # ---- queries

    def locate_player(self) -> Coordinate:
        """
        Find the unique player cell, scanning rows by y and columns by x.

        Raises:
            InvariantViolation: zero or several player cells
        """
        found = [
            Coordinate(x, y)
            for y, row in enumerate(self._cells)
            for x, tile in enumerate(row)
            if tile.is_player
        ]
        if not found:
            raise InvariantViolation("no player tile on the board")
        if len(found) > 1:
            positions = ", ".join(f"({p.x}, {p.y})" for p in found)
            raise InvariantViolation(f"{len(found)} player tiles on the board: {positions}")
        return found[0]

    def can_move(self, direction: Direction) -> bool:
        """
        Check whether the player may step in direction.

        Blocked by a wall (or the grid edge) directly ahead, or by a crate
        that cannot itself advance one more cell: the cell beyond it is a
        wall, another crate, or off the grid.
        """
        destination = self.locate_player().add(direction.delta)
        dest_tile = self.tile_at(destination)
        if dest_tile is None or dest_tile.blocks_movement:
            return False

        if dest_tile.is_crate_like:
            beyond_tile = self.tile_at(destination.add(direction.delta))
            if beyond_tile is None or beyond_tile.blocks_movement or beyond_tile.is_crate_like:
                return False

        return True

    def is_complete(self) -> bool:
        """True when no crate is left off storage."""
        return all(tile != Tile.CRATE for row in self._cells for tile in row)

    # ---- mutation

    def move(self, direction: Direction) -> bool:
        """
        Step the player in direction, pushing a crate if one is ahead.

        An illegal move leaves the grid untouched and returns False. A legal
        one computes all new tiles from the pre-move grid, then writes them.
        """
        if not self.can_move(direction):
            logger.debug("Move %s blocked", direction.name)
            return False

        origin = self.locate_player()
        destination = origin.add(direction.delta)
        beyond = destination.add(direction.delta)

        origin_before = self._cells[origin.y][origin.x]
        dest_before = self._cells[destination.y][destination.x]

        updates: list[tuple[Coordinate, Tile]] = [
            (origin, vacated_tile(origin_before)),
            (destination, entered_tile(dest_before)),
        ]
        if dest_before.is_crate_like:
            # can_move keeps beyond on the grid when pushing
            beyond_before = self._cells[beyond.y][beyond.x]
            updates.append((beyond, pushed_crate_tile(beyond_before)))

        for pos, tile in updates:
            self._set(pos, tile)

        logger.debug(
            "Moved %s to (%d, %d)%s",
            direction.name,
            destination.x,
            destination.y,
            " pushing crate" if dest_before.is_crate_like else "",
        )
        return True

    def __repr__(self) -> str:
        return f"Board({self.to_symbols()!r})"
