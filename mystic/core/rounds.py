from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from mystic.core.hints import Direction, HintPicker, Proximity, PROXIMITY_THRESHOLD, direction_for, proximity_for
from mystic.core.rules import MAX_ATTEMPTS, MAX_NUMBER, MIN_NUMBER, in_range

if TYPE_CHECKING:
    from mystic.core.levels import LevelRepository
    from mystic.ui.console import Console

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundOutcome:
    """How a finished round went."""

    solved: bool
    attempts: int
    secret: int


@dataclass(frozen=True)
class GuessFeedback:
    """Result of one valid guess. ``direction`` is None for a correct guess."""

    correct: bool
    attempts_used: int
    direction: Optional[Direction] = None
    proximity: Optional[Proximity] = None


_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_guess(text: str) -> Optional[int]:
    """Parse a line of player input as a plain decimal integer, or None."""
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


class Round:
    """One secret number and the guesses made against it.

    The round is over once a guess matches the secret or ``max_attempts``
    valid guesses have been made, whichever comes first.
    """

    def __init__(self, secret: int, max_attempts: int = MAX_ATTEMPTS) -> None:
        self._secret = secret
        self._max_attempts = max_attempts
        self._attempts_used = 0
        self._solved = False

    @property
    def secret(self) -> int:
        return self._secret

    @property
    def attempts_used(self) -> int:
        return self._attempts_used

    @property
    def remaining(self) -> int:
        return self._max_attempts - self._attempts_used

    @property
    def solved(self) -> bool:
        return self._solved

    def is_over(self) -> bool:
        return self._solved or self._attempts_used >= self._max_attempts

    def submit(self, guess: int) -> GuessFeedback:
        """Record a valid guess and advance the attempt counter."""
        if self.is_over():
            raise RuntimeError("Round is already over")
        if not in_range(guess):
            raise ValueError(f"Guess {guess} outside {MIN_NUMBER}..{MAX_NUMBER}")

        remaining_before = self.remaining
        self._attempts_used += 1
        if guess == self._secret:
            self._solved = True
            return GuessFeedback(correct=True, attempts_used=self._attempts_used)

        proximity = None
        if remaining_before <= PROXIMITY_THRESHOLD:
            proximity = proximity_for(guess, self._secret)
        return GuessFeedback(
            correct=False,
            attempts_used=self._attempts_used,
            direction=direction_for(guess, self._secret),
            proximity=proximity,
        )

    def outcome(self) -> RoundOutcome:
        return RoundOutcome(solved=self._solved, attempts=self._attempts_used, secret=self._secret)


class RoundEngine:
    """Plays rounds against the console using an injectable random source."""

    def __init__(
        self,
        console: Console,
        levels: LevelRepository,
        rng: Optional[random.Random] = None,
        hints: Optional[HintPicker] = None,
    ) -> None:
        self._console = console
        self._levels = levels
        self._rng = rng if rng is not None else random.Random()
        self._hints = hints if hints is not None else HintPicker(self._rng)

    def draw_secret(self) -> int:
        return self._rng.randint(MIN_NUMBER, MAX_NUMBER)

    def play_round(self, level: int) -> RoundOutcome:
        current = Round(self.draw_secret())
        logger.debug("New round at level %d", level)
        self._console.show_round_banner(level + 1, self._levels.at(level))

        while not current.is_over():
            self._console.show_remaining(current.remaining)
            feedback = current.submit(self.read_guess())
            if feedback.correct:
                break
            proximity_text = None
            if feedback.proximity is not None:
                proximity_text = self._hints.proximity_phrase(feedback.proximity)
            self._console.show_hint(self._hints.phrase(feedback.direction), proximity_text)

        return current.outcome()

    def read_guess(self) -> int:
        """Prompt until the player enters an integer within range."""
        while True:
            guess = parse_guess(self._console.ask_guess())
            if guess is None:
                self._console.warn_not_a_number()
            elif not in_range(guess):
                self._console.warn_out_of_range(MIN_NUMBER, MAX_NUMBER)
            else:
                return guess
