"""Error taxonomy for the high-score service."""


class ScoreValidationError(ValueError):
    """Submission rejected by a domain guard. Maps to HTTP 400."""


class StorageReadError(RuntimeError):
    """Backing record missing, unreadable or corrupt."""


class StorageWriteError(RuntimeError):
    """Backing record could not be replaced. Maps to HTTP 500."""


class StartupError(RuntimeError):
    """Default content could not be created. The service must not start."""
