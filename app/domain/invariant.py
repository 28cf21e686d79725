"""Validation guards for score submissions. Run before any mutation."""
import math

from app.domain.errors import ScoreValidationError

PLAYER_NAME_ERROR = "Player name must be a non-empty string"
SCORE_ERROR = "Score must be a valid positive number"


def validate_player_name(player) -> str:
    """Raises unless player is a string with visible content. Returns it trimmed."""
    if not isinstance(player, str) or not player.strip():
        raise ScoreValidationError(PLAYER_NAME_ERROR)
    return player.strip()


def validate_score(score) -> int | float:
    """Raises unless score is a finite, non-negative number."""
    # bool is an int subclass but never a score.
    if isinstance(score, bool) or not isinstance(score, (int, float)):
        raise ScoreValidationError(SCORE_ERROR)
    if isinstance(score, float) and (math.isnan(score) or math.isinf(score)):
        raise ScoreValidationError(SCORE_ERROR)
    if score < 0:
        raise ScoreValidationError(SCORE_ERROR)
    return score
