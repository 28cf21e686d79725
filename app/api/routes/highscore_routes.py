"""Leaderboard API routes -- list and submit high scores."""
import logging
from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from app.application.submit_score import submit_score
from app.domain.errors import ScoreValidationError

log = logging.getLogger("highscores.api")

router = APIRouter(tags=["highscores"])


class SubmitScoreRequest(BaseModel):
    """Raw submission body. Field types are checked by the domain guards."""

    model_config = ConfigDict(extra="ignore")

    player: Any = None
    score: Any = None


_highscore_repo = None


def init_routes(highscore_repo):
    global _highscore_repo
    _highscore_repo = highscore_repo


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get("/highscores")
def api_get_highscores():
    """Current top ten, highest first. Public."""
    try:
        return _highscore_repo.load()
    except Exception:
        log.exception("Error getting high scores")
        return error_response(500, "Failed to retrieve high scores")


@router.post("/highscores")
def api_submit_highscore(req: SubmitScoreRequest):
    """Submit a score and return the new top ten."""
    try:
        return submit_score(_highscore_repo, req.player, req.score)
    except ScoreValidationError as e:
        return error_response(400, str(e))
    except Exception:
        log.exception("Error adding high score")
        return error_response(500, "Failed to add high score")
