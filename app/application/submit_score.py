"""Use case: validate a candidate score and merge it into the leaderboard."""
import logging
from typing import List

from app.domain.invariant import validate_player_name, validate_score
from app.domain.score_entry import ScoreEntry
from app.domain.scoring import RankingRules

log = logging.getLogger("highscores.api")


def submit_score(repo, player, score) -> List[dict]:
    """
    Validate (player, score) and merge it into the persisted top ten.
    Validation happens before the store is touched; a rejected submission
    raises ScoreValidationError and never reaches the repository.
    Returns the new leaderboard.
    """
    name = validate_player_name(player)
    value = validate_score(score)
    entry = ScoreEntry(name, value).to_dict()

    top = repo.update(lambda entries: RankingRules.rank(entries, entry))

    log.info("Accepted score %s for %r (ranked: %s)", value, name, entry in top)
    return top
