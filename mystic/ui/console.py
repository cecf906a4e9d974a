"""Terminal presentation: every line the player reads or types goes through here."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from mystic.core.errors import InputClosed
from mystic.core.levels import Level
from mystic.core.progress import SessionState
from mystic.core.rounds import RoundOutcome
from mystic.core.rules import MAX_ATTEMPTS, MAX_NUMBER, MIN_NUMBER

BANNER_WIDTH = 40


def boxed(*lines: str) -> str:
    """Center lines inside a double-line box."""
    top = "╔" + "═" * BANNER_WIDTH + "╗"
    bottom = "╚" + "═" * BANNER_WIDTH + "╝"
    body = ["║" + line.center(BANNER_WIDTH) + "║" for line in lines]
    return "\n".join([top, *body, bottom])


class Console:
    """Owns the input/output stream pair for one game."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    # -- raw I/O -----------------------------------------------------------

    def write(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and block for one line; raises InputClosed at EOF."""
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            raise InputClosed(prompt.strip())
        return line.rstrip("\r\n")

    # -- prompts -----------------------------------------------------------

    def ask_name(self) -> str:
        return self.read_line("\n🎮 Enter your challenger name: ").strip()

    def ask_guess(self) -> str:
        return self.read_line("🔮 Focus your mind and enter your guess: ")

    def ask_next_round(self) -> str:
        return self.read_line("\n🎯 Shall we consult the crystal ball again? (Y/N): ")

    # -- round feedback ----------------------------------------------------

    def show_welcome(self) -> None:
        self.write(boxed("MYSTERIOUS NUMBER CHALLENGE", "Can you read the computer's mind?"))

    def show_round_banner(self, round_number: int, level: Level) -> None:
        self.write(f"\n🌟 ROUND {round_number} - {level.name} LEVEL 🌟")
        if level.motto:
            self.write(f"📜 {level.motto}")
        self.write(f"💭 I'm thinking of a number between {MIN_NUMBER} and {MAX_NUMBER}")
        self.write(f"🎯 You have {MAX_ATTEMPTS} crystal ball gazes to find it!")

    def show_remaining(self, remaining: int) -> None:
        self.write(f"\n💫 Crystal ball charges: {'○ ' * remaining}({remaining} left)")

    def warn_not_a_number(self) -> None:
        self.write("⚠️ That's not a number! Focus harder!")

    def warn_out_of_range(self, low: int, high: int) -> None:
        self.write(f"⚠️ Your mind wandered! Stay between {low} and {high}")

    def show_hint(self, phrase: str, proximity: Optional[str] = None) -> None:
        self.write(f"\n{phrase}")
        if proximity:
            self.write(proximity)

    def show_win(
        self,
        player_name: str,
        outcome: RoundOutcome,
        points: int,
        state: SessionState,
        level: Level,
    ) -> None:
        self.write(f"\n🎉 EXTRAORDINARY MENTAL POWERS, {player_name.upper()}! 🎉")
        self.write(f"✨ You unveiled the mystery in {outcome.attempts} attempts!")
        self.write(f"💫 Round Points: {points}")
        self.write(f"🏆 Total Points: {state.total_points}")
        self.write(f"⭐ Consecutive Wins: {state.consecutive_wins}")
        self.write(f"📈 Current Level: {level.name}")

    def show_loss(self, player_name: str, outcome: RoundOutcome, level: Level) -> None:
        self.write(f"\n💔 The crystal ball has gone dark, {player_name}!")
        self.write(f"🎲 The mystery number was: {outcome.secret}")
        self.write(f"📉 You've been demoted to {level.name} level")

    # -- session end -------------------------------------------------------

    def show_input_closed(self) -> None:
        self.write("\n\n🌙 The connection to the spirit world was lost.")

    def show_summary(self, player_name: str, level: Level, state: SessionState) -> None:
        self.write("\n" + boxed("FINAL PROPHECY"))
        self.write(f"🌟 Mystic: {player_name}")
        self.write(f"🏆 Final Level: {level.name}")
        self.write(f"💫 Total Points: {state.total_points}")
        self.write(f"✨ Final Streak: {state.consecutive_wins}")
        self.write(f"🔥 Best Streak: {state.best_streak}")
        self.write(f"🎲 Rounds Played: {state.rounds_played}")
        self.write("\nThe crystal ball awaits your return...")
