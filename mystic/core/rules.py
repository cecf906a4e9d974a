"""Fixed game constants and the scoring formula."""

MIN_NUMBER = 1
MAX_NUMBER = 100
MAX_ATTEMPTS = 7

POINTS_PER_SPARE_ATTEMPT = 100
LEVEL_BONUS = 50
STREAK_BONUS = 25


def in_range(value: int) -> bool:
    return MIN_NUMBER <= value <= MAX_NUMBER


def round_points(attempts: int, level: int, consecutive_wins: int) -> int:
    """Points for a solved round.

    ``level`` and ``consecutive_wins`` are the values held *before* the win
    is applied.
    """
    base_points = (MAX_ATTEMPTS - attempts + 1) * POINTS_PER_SPARE_ATTEMPT
    return base_points + level * LEVEL_BONUS + consecutive_wins * STREAK_BONUS
