"""Tests for mystic.ui.console – terminal I/O and formatting."""

from __future__ import annotations

import io

import pytest

from mystic.core.errors import InputClosed
from mystic.core.levels import Level
from mystic.core.progress import SessionState
from mystic.ui.console import BANNER_WIDTH, Console, boxed


def _console(text: str = "") -> tuple[Console, io.StringIO]:
    out = io.StringIO()
    return Console(stdin=io.StringIO(text), stdout=out), out


class TestBoxed:
    def test_lines_have_equal_width(self):
        lines = boxed("TITLE", "subtitle").splitlines()
        assert len(lines) == 4
        assert {len(line) for line in lines} == {BANNER_WIDTH + 2}

    def test_text_centered(self):
        assert "TITLE".center(BANNER_WIDTH) in boxed("TITLE")


class TestReadLine:
    def test_strips_newline_only(self):
        console, _ = _console("  hi  \r\n")
        assert console.read_line("> ") == "  hi  "

    def test_writes_prompt(self):
        console, out = _console("x\n")
        console.read_line("prompt> ")
        assert out.getvalue() == "prompt> "

    def test_eof_raises(self):
        console, _ = _console("")
        with pytest.raises(InputClosed):
            console.read_line("> ")

    def test_input_closed_is_eof_error(self):
        assert issubclass(InputClosed, EOFError)

    def test_blank_line_is_not_eof(self):
        console, _ = _console("\n")
        assert console.read_line("> ") == ""


class TestPrompts:
    def test_name_trimmed(self):
        console, _ = _console("   Ana  \n")
        assert console.ask_name() == "Ana"

    def test_guess_raw(self):
        console, _ = _console(" 42 \n")
        assert console.ask_guess() == " 42 "


class TestFeedback:
    def test_hint_without_proximity(self):
        console, out = _console()
        console.show_hint("go up")
        assert out.getvalue() == "\ngo up\n"

    def test_hint_with_proximity(self):
        console, out = _console()
        console.show_hint("go up", "close!")
        assert out.getvalue() == "\ngo up\nclose!\n"

    def test_remaining_circles(self):
        console, out = _console()
        console.show_remaining(3)
        assert "○ ○ ○ (3 left)" in out.getvalue()

    def test_summary(self):
        console, out = _console()
        state = SessionState(level=2, total_points=1234, consecutive_wins=1, best_streak=4, rounds_played=6)
        console.show_summary("Ana", Level(name="Detective"), state)
        text = out.getvalue()
        assert "Mystic: Ana" in text
        assert "Final Level: Detective" in text
        assert "Total Points: 1234" in text
        assert "Final Streak: 1" in text
        assert "Best Streak: 4" in text
        assert "Rounds Played: 6" in text
