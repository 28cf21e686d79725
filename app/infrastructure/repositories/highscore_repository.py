"""Leaderboard persistence (single JSON file, atomic replace)."""
import json
import logging
import os
import threading
from typing import Callable, List

from app.domain.errors import StartupError, StorageReadError, StorageWriteError
from app.domain.invariant import validate_player_name, validate_score
from app.domain.score_entry import ScoreEntry, default_scores
from app.domain.scoring import RankingRules

log = logging.getLogger("highscores.storage")


def _parse_entries(document) -> List[dict]:
    """Rebuild each stored row through the submission guards. Raises on the first bad one."""
    if not isinstance(document, list):
        raise ValueError(f"expected a JSON array, got {type(document).__name__}")
    entries = []
    for raw in document:
        entry = ScoreEntry.from_dict(raw)
        validate_player_name(entry.player)
        validate_score(entry.score)
        entries.append(entry.to_dict())
    return entries


class HighscoreRepository:
    """
    File-based leaderboard storage.

    The whole leaderboard lives in one pretty-printed JSON array. Every save
    replaces the record in full via a temp file and os.replace, so readers
    never observe a partially written document. Writers go through update(),
    which serializes load-modify-save behind a lock.
    """

    def __init__(self, data_path: str = "data/highscores.json", strict_reads: bool = False):
        self._data_path = data_path
        self._strict_reads = strict_reads
        self._lock = threading.Lock()

    @property
    def data_path(self) -> str:
        return self._data_path

    def ensure_initialized(self) -> bool:
        """Write the seed if no record exists. Returns True if it was created."""
        if os.path.exists(self._data_path):
            return False
        try:
            self.save(default_scores())
        except StorageWriteError as exc:
            raise StartupError(f"Could not create {self._data_path}: {exc}") from exc
        log.info("Created %s with default scores", self._data_path)
        return True

    def load(self, strict: bool | None = None) -> List[dict]:
        """
        Read the leaderboard. Read or parse failures, including entries that
        are not valid scores, yield [] unless strict, in which case they
        raise StorageReadError.
        """
        strict = self._strict_reads if strict is None else strict
        try:
            with open(self._data_path, "r", encoding="utf-8") as f:
                document = json.load(f)
            entries = _parse_entries(document)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            log.error("Error reading %s: %s", self._data_path, exc)
            if strict:
                raise StorageReadError(str(exc)) from exc
            return []

        if not RankingRules.is_ranked(entries):
            log.warning("%s is not a ranked top-%d list", self._data_path, RankingRules.MAX_ENTRIES)
        return entries

    def save(self, entries: List[dict]) -> None:
        """Replace the record with entries. Raises StorageWriteError on failure."""
        tmp_path = f"{self._data_path}.tmp"
        try:
            directory = os.path.dirname(self._data_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            payload = json.dumps(entries, indent=2, ensure_ascii=False, allow_nan=False)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._data_path)
        except (OSError, TypeError, ValueError) as exc:
            log.exception("Error writing %s", self._data_path)
            if os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    log.warning("Could not remove %s", tmp_path)
            raise StorageWriteError(str(exc)) from exc

    def update(self, mutate: Callable[[List[dict]], List[dict]]) -> List[dict]:
        """Load, apply mutate, save and return the result as one locked step."""
        with self._lock:
            entries = self.load()
            updated = mutate(entries)
            self.save(updated)
            return updated
