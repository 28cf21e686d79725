"""Entry point. Wires the leaderboard store into routes and serves the API.

Persistence: a single JSON file (HIGHSCORES_FILE), seeded with the default
top ten on first start. Settings come from the environment; see app/config.py.
"""
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from dotenv import load_dotenv

from app.config import PROJECT_DIR, Settings

load_dotenv(os.path.join(PROJECT_DIR, ".env"))

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.concurrency import run_in_threadpool
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.routes.highscore_routes import router as highscore_router, init_routes
from app.infrastructure.repositories.highscore_repository import HighscoreRepository

log = logging.getLogger("highscores.startup")

ALLOWED_METHODS = "GET, POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


def cors_headers(allow_origin: str = "*") -> dict:
    return {
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }


class CorsMiddleware(BaseHTTPMiddleware):
    """Add CORS headers to every response. OPTIONS requests stop here with a bare 200."""

    def __init__(self, app, allow_origin: str = "*"):
        super().__init__(app)
        self._headers = cors_headers(allow_origin)

    async def dispatch(self, request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=self._headers)
        response = await call_next(request)
        response.headers.update(self._headers)
        return response


# ---------------------------------------------------------------------------
# Error bodies: always {"error": message}, never a traceback
# ---------------------------------------------------------------------------

async def _http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Request body must be a JSON object with player and score"},
    )


@asynccontextmanager
async def _lifespan(app: FastAPI):
    settings = app.state.settings
    # StartupError propagates: uvicorn aborts startup and exits non-zero.
    await run_in_threadpool(app.state.highscore_repo.ensure_initialized)
    log.info("High scores server running on port %s", settings.port)
    log.info("GET /highscores - Retrieve high scores")
    log.info("POST /highscores - Add new score")
    log.info("Health check: /health")
    yield


def health():
    """Liveness probe. Does not touch the store."""
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return {"status": "OK", "timestamp": now.replace("+00:00", "Z")}


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    highscore_repo = HighscoreRepository(
        data_path=settings.highscores_file,
        strict_reads=settings.strict_reads,
    )

    app = FastAPI(
        title="High Scores",
        description="Persistent top-ten leaderboard.",
        version="1.0.0",
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.highscore_repo = highscore_repo

    app.add_middleware(CorsMiddleware, allow_origin=settings.allowed_origin)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)

    init_routes(highscore_repo)
    app.include_router(highscore_router)
    app.add_api_route("/health", health, methods=["GET"])

    # Static files go last so they never shadow the API routes.
    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


_settings = Settings.from_env()
logging.basicConfig(
    level=_settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
app = create_app(_settings)


def main() -> None:
    import uvicorn
    uvicorn.run(
        app,
        host=_settings.host,
        port=_settings.port,
        log_level=_settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
