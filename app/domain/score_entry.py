"""ScoreEntry value object and the seed leaderboard."""
from typing import List


class ScoreEntry:
    """One ranked row. Immutable; no identity beyond its list position."""

    def __init__(self, player: str, score: int | float):
        self._player = player
        self._score = score

    @property
    def player(self) -> str:
        return self._player

    @property
    def score(self) -> int | float:
        return self._score

    def to_dict(self) -> dict:
        return {"player": self._player, "score": self._score}

    @classmethod
    def from_dict(cls, data: dict) -> "ScoreEntry":
        return cls(player=data["player"], score=data["score"])

    def __eq__(self, other) -> bool:
        if not isinstance(other, ScoreEntry):
            return NotImplemented
        return self._player == other._player and self._score == other._score

    def __repr__(self) -> str:
        return f"ScoreEntry(player={self._player!r}, score={self._score!r})"


DEFAULT_PLAYERS = (
    "ACE", "HERO", "PILOT", "STAR", "FLYER",
    "SHOOTER", "WARRIOR", "CHAMPION", "LEGEND", "MASTER",
)


def default_scores() -> List[dict]:
    """Seed written on first run: 10000 down to 1000 in steps of 1000."""
    return [
        ScoreEntry(name, 10000 - i * 1000).to_dict()
        for i, name in enumerate(DEFAULT_PLAYERS)
    ]
