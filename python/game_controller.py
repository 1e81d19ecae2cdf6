"""
Game controller: turns decoded player intents into board operations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from sokoban import Board
from sokoban_types import Direction

logger = logging.getLogger(__name__)


# =============================================================================
# Intents
# =============================================================================


@dataclass(frozen=True)
class Move:
    """Step (or push) in a direction."""

    direction: Direction


@dataclass(frozen=True)
class Quit:
    """End the session."""

    pass


@dataclass(frozen=True)
class Unknown:
    """Input that maps to no action."""

    raw: str


Intent = Move | Quit | Unknown

MOVE_UP = Move(Direction.UP)
MOVE_DOWN = Move(Direction.DOWN)
MOVE_LEFT = Move(Direction.LEFT)
MOVE_RIGHT = Move(Direction.RIGHT)


class GameStatus(Enum):
    """Overall state of a play session."""

    PLAYING = "playing"
    COMPLETE = "complete"  # every crate on storage; no further moves
    QUIT = "quit"


class MoveOutcome(Enum):
    """What handling one intent did."""

    MOVED = "moved"
    BLOCKED = "blocked"  # move was illegal, board unchanged
    COMPLETED = "completed"  # move placed the last crate
    IGNORED = "ignored"  # game is no longer playing
    QUIT = "quit"
    UNKNOWN = "unknown"


# =============================================================================
# Controller
# =============================================================================


class GameController:
    """Owns the board for one session and tracks its status."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.status = GameStatus.COMPLETE if board.is_complete() else GameStatus.PLAYING

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def handle(self, intent: Intent) -> MoveOutcome:
        """Apply one intent and report what happened."""
        match intent:
            case Move(direction=direction):
                return self._try_move(direction)
            case Quit():
                logger.info("Quit requested (status was %s)", self.status.value)
                self.status = GameStatus.QUIT
                return MoveOutcome.QUIT
            case Unknown(raw=raw):
                logger.info("Unknown input: %r", raw)
                return MoveOutcome.UNKNOWN
            case _:
                raise ValueError(f"Unknown intent type: {intent}")

    def _try_move(self, direction: Direction) -> MoveOutcome:
        if self.status != GameStatus.PLAYING:
            return MoveOutcome.IGNORED

        if not self.board.can_move(direction):
            return MoveOutcome.BLOCKED

        self.board.move(direction)
        if self.board.is_complete():
            logger.info("All crates stored")
            self.status = GameStatus.COMPLETE
            return MoveOutcome.COMPLETED
        return MoveOutcome.MOVED
