"""
Shared pytest fixtures for the high-score test suite.

Strategy:
- Domain tests: pure in-memory, zero I/O.
- Repository/API tests: JSON record in pytest's tmp_path, FastAPI TestClient
  driving the real app (lifespan included, so the seed is written on entry).
"""
import json
import os

import pytest

# ---------------------------------------------------------------------------
# Keep the developer's environment out of the test run
# ---------------------------------------------------------------------------
for _var in ("PORT", "HOST", "HIGHSCORES_FILE", "STATIC_DIR", "ALLOWED_ORIGIN",
             "HIGHSCORES_STRICT_READS", "LOG_LEVEL"):
    os.environ.pop(_var, None)

from app.config import Settings
from app.domain.score_entry import default_scores
from app.infrastructure.repositories.highscore_repository import HighscoreRepository


def make_entries(*pairs) -> list:
    """make_entries(("A", 300), ("B", 200)) -> list of entry dicts."""
    return [{"player": p, "score": s} for p, s in pairs]


def read_record(path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_record(path, entries) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(entries, f, indent=2)


# ---------------------------------------------------------------------------
# Store fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def record_path(tmp_path):
    return str(tmp_path / "data" / "highscores.json")


@pytest.fixture
def repo(record_path):
    return HighscoreRepository(data_path=record_path)


@pytest.fixture
def seeded_repo(repo):
    repo.ensure_initialized()
    return repo


@pytest.fixture
def seed():
    return default_scores()


# ---------------------------------------------------------------------------
# FastAPI TestClient over a fresh record per test
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path, record_path):
    return Settings(
        highscores_file=record_path,
        static_dir=str(tmp_path / "no-static"),
    )


@pytest.fixture
def test_app(settings):
    from app.main import create_app
    return create_app(settings)


@pytest.fixture
def client(test_app):
    from fastapi.testclient import TestClient
    with TestClient(test_app) as c:
        yield c
