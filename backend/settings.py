import os
from pathlib import Path

# Basic settings helper to read environment configuration.

BACKEND_ROOT = Path(__file__).resolve().parent


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.lower() in ("1", "true", "yes", "on")


def _as_int(val: str | None, default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


class Settings:
    def __init__(self) -> None:
        self.HOST: str = os.getenv("BOOKS_API_HOST", "0.0.0.0")
        self.PORT: int = _as_int(os.getenv("BOOKS_API_PORT"), 3000)
        self.STATIC_DIR: Path = Path(os.getenv("BOOKS_API_STATIC_DIR") or BACKEND_ROOT / "static")
        self.LOG_LEVEL: str = os.getenv("BOOKS_API_LOG_LEVEL", "INFO").upper()
        self.RELOAD: bool = _as_bool(os.getenv("BOOKS_API_RELOAD"), False)
        self.SMOKE_BASE_URL: str = os.getenv("SMOKE_BASE_URL", "http://localhost:3000").rstrip("/")


settings = Settings()
