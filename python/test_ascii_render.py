"""Tests for the ascii_render module."""

import re

from ascii_render import render, render_plain, tile_color
from level_parser import board_from_text
from sokoban_types import Direction, Tile

ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")

LVL = """
#####
#@o.#
# * #
#####
"""


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class TestRenderPlain:
    """Tests for uncoloured rendering."""

    def test_level_text_round_trips(self) -> None:
        board = board_from_text(LVL)
        assert render_plain(board) == "#####\n#@o.#\n# * #\n#####"

    def test_reflects_moves(self) -> None:
        board = board_from_text(LVL)
        board.move(Direction.RIGHT)
        assert render_plain(board).splitlines()[1] == "# @*#"

    def test_ragged_rows(self) -> None:
        board = board_from_text("#####\n#@o.\n###")
        assert render_plain(board).splitlines() == ["#####", "#@o.", "###"]


class TestRenderColored:
    """Tests for ANSI rendering."""

    def test_same_layout_as_plain(self) -> None:
        """Stripping colour codes gives the plain rendering."""
        board = board_from_text(LVL)
        assert strip_ansi(render(board)) == render_plain(board)

    def test_every_tile_has_a_color_function(self) -> None:
        for tile in Tile:
            colorize = tile_color(tile)
            assert strip_ansi(colorize(tile.symbol)) == tile.symbol

    def test_floor_is_uncolored(self) -> None:
        assert tile_color(Tile.FLOOR)(" ") == " "
