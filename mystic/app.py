"""Application entry point and setup for the Mystic Number game."""

import logging
import random
import sys

from mystic.core.levels import LevelRepository
from mystic.core.rounds import RoundEngine
from mystic.core.session import GameSession
from mystic.ui.console import Console

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure application-wide logging with a standard format.

    Records go to stderr at WARNING so they stay out of the game text.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load the level table, wire the game together and play one session."""
    configure_logging()

    levels = LevelRepository()
    console = Console()
    engine = RoundEngine(console=console, levels=levels, rng=random.Random())
    session = GameSession(console=console, engine=engine, levels=levels)

    state = session.start()
    logger.info("Session finished after %d rounds", state.rounds_played)

    sys.exit(0)
