from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _load_dotenv() -> None:
    if os.getenv("SAFE_SKIP_DOTENV") == "1":
        return

    env_path = Path(__file__).resolve().parents[2] / ".env"
    if not env_path.exists():
        return

    from dotenv import load_dotenv

    load_dotenv(env_path, override=True)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_port(value: str | None, default: int = 8000) -> int:
    if value is None:
        return default
    raw = value.strip()
    if not raw:
        return default
    try:
        port = int(raw)
    except ValueError:
        return default
    return port if 0 < port < 65536 else default


@dataclass(frozen=True)
class Settings:
    env: str
    app_name: str
    cors_origins: list[str]
    storage_backend: str
    host: str
    port: int
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()

    env = os.getenv("SAFE_ENV", "development")
    cors = os.getenv("SAFE_CORS_ORIGINS", "http://localhost:3000")
    storage_backend = os.getenv("SAFE_STORAGE_BACKEND", "memory").strip().lower() or "memory"
    host = os.getenv("SAFE_HOST", "127.0.0.1").strip() or "127.0.0.1"
    log_level = os.getenv("SAFE_LOG_LEVEL", "INFO").strip().upper() or "INFO"

    return Settings(
        env=env,
        app_name="Safe API",
        cors_origins=_split_csv(cors),
        storage_backend=storage_backend,
        host=host,
        port=_parse_port(os.getenv("SAFE_PORT")),
        log_level=log_level,
    )
