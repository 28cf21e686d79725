"""Ranking rules for the bounded leaderboard."""
from typing import List


class RankingRules:
    """Merge-and-truncate ranking."""

    MAX_ENTRIES = 10

    @staticmethod
    def rank(entries: List[dict], new_entry: dict, limit: int = MAX_ENTRIES) -> List[dict]:
        """
        Append new_entry, sort by score descending and keep the top `limit`.
        The sort is stable, so existing entries stay ahead of a new entry
        with the same score.
        """
        merged = list(entries)
        merged.append(new_entry)
        merged.sort(key=lambda e: e["score"], reverse=True)
        return merged[:limit]

    @staticmethod
    def is_ranked(entries: List[dict]) -> bool:
        """True when entries are in descending score order and within the cap."""
        if len(entries) > RankingRules.MAX_ENTRIES:
            return False
        return all(
            entries[i]["score"] >= entries[i + 1]["score"]
            for i in range(len(entries) - 1)
        )
