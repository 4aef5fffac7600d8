from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env() -> None:
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"
    log_dir: str = "logs"
    seed_demo_tasks: bool = True


load_env()

try:
    PORT = int(os.getenv("PORT", "3000"))
except ValueError:
    raise RuntimeError("PORT must be an integer. Check your .env file.") from None

SETTINGS = Settings(
    host=os.getenv("HOST", "127.0.0.1").strip() or "127.0.0.1",
    port=PORT,
    log_level=os.getenv("LOG_LEVEL", "INFO"),
    log_dir=os.getenv("LOG_DIR", "logs"),
    seed_demo_tasks=_env_flag("SEED_DEMO_TASKS", True),
)
