"""Tests for key decoding."""

import pytest
import readchar

import key_input
from game_controller import MOVE_DOWN, MOVE_LEFT, MOVE_RIGHT, MOVE_UP, Quit, Unknown
from key_input import decode_key, read_intent


class TestDecodeKey:
    """Tests for decode_key."""

    @pytest.mark.parametrize(
        "key, intent",
        [
            (readchar.key.UP, MOVE_UP),
            (readchar.key.DOWN, MOVE_DOWN),
            (readchar.key.LEFT, MOVE_LEFT),
            (readchar.key.RIGHT, MOVE_RIGHT),
            ("\x1b[A", MOVE_UP),
            ("\x1b[D", MOVE_LEFT),
        ],
    )
    def test_arrow_keys(self, key: str, intent: object) -> None:
        assert decode_key(key) == intent

    @pytest.mark.parametrize(
        "key, intent",
        [("w", MOVE_UP), ("s", MOVE_DOWN), ("a", MOVE_LEFT), ("d", MOVE_RIGHT), ("W", MOVE_UP), ("D", MOVE_RIGHT)],
    )
    def test_wasd(self, key: str, intent: object) -> None:
        assert decode_key(key) == intent

    @pytest.mark.parametrize("key", ["x", "X", "q", "Q"])
    def test_quit_keys(self, key: str) -> None:
        assert decode_key(key) == Quit()

    @pytest.mark.parametrize("key", [readchar.key.CTRL_C, readchar.key.ESC])
    def test_control_keys_do_not_quit(self, key: str) -> None:
        """Ctrl-C arrives as KeyboardInterrupt and Esc is not a quit key."""
        assert decode_key(key) == Unknown(key)

    @pytest.mark.parametrize("key", ["z", "1", " ", "\x1b[5~"])
    def test_unknown_keeps_raw_key(self, key: str) -> None:
        assert decode_key(key) == Unknown(key)


class TestReadIntent:
    """Tests for read_intent."""

    def test_reads_one_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(key_input.readchar, "readkey", lambda: readchar.key.RIGHT)
        assert read_intent() == MOVE_RIGHT

    def test_interrupt_propagates(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def interrupted() -> str:
            raise KeyboardInterrupt

        monkeypatch.setattr(key_input.readchar, "readkey", interrupted)
        with pytest.raises(KeyboardInterrupt):
            read_intent()
