"""
Interactive terminal session for a Sokoban level.
Display the board and move the player with the keyboard.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from ascii_render import render
from game_controller import GameController, GameStatus, Intent, Move, MoveOutcome, Unknown
from key_input import read_intent
from level_parser import LevelParseError, load_board
from sokoban import InvariantViolation, ValidationError
from sokoban_types import Tile

logger = logging.getLogger(__name__)


class InteractiveGame:
    """One play session: a controller plus its on-screen state."""

    def __init__(self, controller: GameController, console: Console | None = None) -> None:
        self.controller = controller
        self.console = console or Console()
        self.status_message = "Complete!" if controller.is_over else "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with board, help and status."""
        board = self.controller.board

        content = Text()
        content.append(Text.from_ansi(render(board)))
        content.append("\n\n")

        status = self.controller.status
        if status == GameStatus.PLAYING:
            content.append("Keys:\n", style="bold cyan")
            content.append("  Arrows / WASD - Move\n")
            content.append("  X / Q - Quit\n\n")

        crates = board.crate_count()
        stored = board.count(Tile.CRATE_ON_STORAGE)
        content.append("Crates stored: ", style="bold")
        content.append(f"{stored}/{crates}\n")

        content.append("─" * 40 + "\n", style="dim")
        content.append("Status: ", style="bold")
        content.append(self.status_message)

        border = "green" if status == GameStatus.COMPLETE else "blue"
        return Panel(content, title="Sokoban", border_style=border, width=80)

    def apply(self, intent: Intent) -> MoveOutcome:
        """Hand an intent to the controller and update the status line."""
        outcome = self.controller.handle(intent)

        match outcome:
            case MoveOutcome.MOVED:
                self.status_message = f"Moved {_direction_name(intent)}"
            case MoveOutcome.BLOCKED:
                self.status_message = f"✗ Can't move {_direction_name(intent)}"
            case MoveOutcome.COMPLETED:
                self.status_message = "✓ Complete!"
            case MoveOutcome.IGNORED:
                self.status_message = "Level already finished"
            case MoveOutcome.QUIT:
                self.status_message = "Quitting..."
            case MoveOutcome.UNKNOWN:
                raw = intent.raw if isinstance(intent, Unknown) else ""
                self.status_message = f"Unknown input: {raw!r}"
            case _:
                raise ValueError(f"Unknown outcome: {outcome}")

        return outcome

    def run(self, read: Callable[[], Intent] | None = None) -> GameStatus:
        """Run the session until the level is finished or the player quits."""
        read = read or read_intent
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while not self.controller.is_over:
                    live.update(self.generate_display())
                    self.apply(read())
                live.update(self.generate_display())

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())

        return self.controller.status


def _direction_name(intent: Intent) -> str:
    return intent.direction.name.lower() if isinstance(intent, Move) else "?"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play a Sokoban level in the terminal.")
    parser.add_argument("level", help="path to a level text file")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        board = load_board(args.level)
    except (OSError, LevelParseError, ValidationError, InvariantViolation) as exc:
        Console(stderr=True).print(f"[bold red]Cannot load level {escape(args.level)}:[/]\n{escape(str(exc))}")
        return 1

    console.print("Game file parsed")
    game = InteractiveGame(GameController(board), console=console)
    status = game.run()
    logger.info("Session ended: %s", status.value)
    if status == GameStatus.COMPLETE:
        console.print("Complete!")
    console.print("Game ending")
    return 0


if __name__ == "__main__":
    sys.exit(main())
