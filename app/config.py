"""Runtime settings read from the environment (.env is loaded by main)."""
import os
from dataclasses import dataclass

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_DIR = os.path.dirname(BASE_DIR)


@dataclass
class Settings:
    host: str = "0.0.0.0"
    port: int = 3000
    highscores_file: str = os.path.join(PROJECT_DIR, "data", "highscores.json")
    static_dir: str = os.path.join(PROJECT_DIR, "public")
    allowed_origin: str = "*"
    strict_reads: bool = False
    log_level: str = "INFO"

    @staticmethod
    def _parse_bool(v: str | None, default: bool) -> bool:
        if v is None:
            return default
        return v.strip().lower() in ("1", "true", "yes", "on")

    @classmethod
    def from_env(cls) -> "Settings":
        cfg = cls()
        cfg.host = os.environ.get("HOST", cfg.host)
        port = os.environ.get("PORT", "").strip()
        if port:
            cfg.port = int(port)
            if not 0 < cfg.port < 65536:
                raise ValueError(f"PORT out of range: {port}")
        cfg.highscores_file = os.environ.get("HIGHSCORES_FILE", cfg.highscores_file)
        cfg.static_dir = os.environ.get("STATIC_DIR", cfg.static_dir)
        cfg.allowed_origin = os.environ.get("ALLOWED_ORIGIN", "").strip() or cfg.allowed_origin
        cfg.strict_reads = cls._parse_bool(os.environ.get("HIGHSCORES_STRICT_READS"), cfg.strict_reads)
        cfg.log_level = os.environ.get("LOG_LEVEL", cfg.log_level).upper()
        return cfg
