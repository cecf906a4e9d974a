from __future__ import annotations

import random
from enum import Enum
from typing import Optional

HIGHER_PHRASES = (
    "The spirits whisper of higher numbers... 📈",
    "Your guess needs to ascend further! ⬆️",
    "The mystical forces point upward! 🔝",
)

LOWER_PHRASES = (
    "The spirits speak of lower numbers... 📉",
    "Your guess must descend! ⬇️",
    "The mystical forces point downward! 🔽",
)

# Proximity hints only appear once this few attempts (or fewer) remain.
PROXIMITY_THRESHOLD = 2
FAR_DISTANCE = 20
WARM_DISTANCE = 10


class Direction(Enum):
    HIGHER = "higher"
    LOWER = "lower"


class Proximity(Enum):
    FAR = "far"
    WARMER = "warmer"
    VERY_CLOSE = "very close"


PROXIMITY_PHRASES = {
    Proximity.FAR: "💫 You're quite far from the truth...",
    Proximity.WARMER: "💫 You're getting warmer...",
    Proximity.VERY_CLOSE: "💫 You're very close to enlightenment!",
}


def direction_for(guess: int, secret: int) -> Direction:
    return Direction.HIGHER if guess < secret else Direction.LOWER


def proximity_for(guess: int, secret: int) -> Proximity:
    difference = abs(guess - secret)
    if difference > FAR_DISTANCE:
        return Proximity.FAR
    if difference > WARM_DISTANCE:
        return Proximity.WARMER
    return Proximity.VERY_CLOSE


class HintPicker:
    """Chooses hint phrasings from a seedable random source."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random()

    def phrase(self, direction: Direction) -> str:
        pool = HIGHER_PHRASES if direction is Direction.HIGHER else LOWER_PHRASES
        return self._rng.choice(pool)

    @staticmethod
    def proximity_phrase(proximity: Proximity) -> str:
        return PROXIMITY_PHRASES[proximity]
