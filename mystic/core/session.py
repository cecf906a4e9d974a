from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from mystic.core.errors import InputClosed
from mystic.core.progress import SessionState, apply_outcome
from mystic.core.rounds import RoundEngine, RoundOutcome

if TYPE_CHECKING:
    from mystic.core.levels import LevelRepository
    from mystic.ui.console import Console

logger = logging.getLogger(__name__)


def should_continue(response: str) -> bool:
    """True when the trimmed, lower-cased answer starts with "y"."""
    return response.strip().lower().startswith("y")


class GameSession:
    """Runs rounds for one player until they decline another.

    Progression is held as a single ``SessionState`` value that is replaced
    after every round; nothing outlives the session.
    """

    def __init__(
        self,
        console: Console,
        engine: RoundEngine,
        levels: LevelRepository,
        state: Optional[SessionState] = None,
    ) -> None:
        self._console = console
        self._engine = engine
        self._levels = levels
        self._state = state if state is not None else SessionState()
        self._player_name = ""

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def player_name(self) -> str:
        return self._player_name

    def start(self) -> SessionState:
        """Greet the player, play until they stop, then print the summary.

        A closed input stream ends the session early but still shows the
        summary for the rounds already resolved.
        """
        self._console.show_welcome()
        try:
            self._player_name = self._console.ask_name()
            self._play_until_declined()
        except InputClosed:
            logger.warning("Input closed; ending session after %d rounds", self._state.rounds_played)
            self._console.show_input_closed()
        self._console.show_summary(self._player_name, self._levels.at(self._state.level), self._state)
        return self._state

    def play_round(self) -> RoundOutcome:
        """Play one round and fold its outcome into the session state."""
        previous = self._state
        outcome = self._engine.play_round(previous.level)
        self._state, points = apply_outcome(previous, outcome, self._levels.last_index)
        new_level = self._levels.at(self._state.level)
        if outcome.solved:
            self._console.show_win(self._player_name, outcome, points, self._state, new_level)
        else:
            self._console.show_loss(self._player_name, outcome, new_level)
        return outcome

    def _play_until_declined(self) -> None:
        while True:
            self.play_round()
            if not should_continue(self._console.ask_next_round()):
                logger.info("Player ended the session")
                return
