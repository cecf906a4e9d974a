from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Tuple

from mystic.core.rounds import RoundOutcome
from mystic.core.rules import round_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionState:
    """Progression for one play session. Never written to disk."""

    level: int = 0
    total_points: int = 0
    consecutive_wins: int = 0
    best_streak: int = 0
    rounds_played: int = 0


def record_win(state: SessionState, attempts: int, last_level: int) -> Tuple[SessionState, int]:
    """Return (new state, points earned) after a solved round."""
    points = round_points(attempts, state.level, state.consecutive_wins)
    streak = state.consecutive_wins + 1
    new_state = replace(
        state,
        level=min(state.level + 1, last_level),
        total_points=state.total_points + points,
        consecutive_wins=streak,
        best_streak=max(state.best_streak, streak),
        rounds_played=state.rounds_played + 1,
    )
    logger.info("Round won in %d attempts for %d points", attempts, points)
    return new_state, points


def record_loss(state: SessionState) -> SessionState:
    logger.info("Round lost; streak of %d reset", state.consecutive_wins)
    return replace(
        state,
        level=max(state.level - 1, 0),
        consecutive_wins=0,
        rounds_played=state.rounds_played + 1,
    )


def apply_outcome(state: SessionState, outcome: RoundOutcome, last_level: int) -> Tuple[SessionState, int]:
    if outcome.solved:
        return record_win(state, outcome.attempts, last_level)
    return record_loss(state), 0
