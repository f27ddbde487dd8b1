from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .constants import DEBUG_ENV_KEY, LOGGER, SECRET_ENV_KEY, TEXT_ENCODING


def is_truthy(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_env(path: str | Path | None = None) -> bool:
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=True)


def setup_logging() -> bool:
    debug_enabled = is_truthy(os.getenv(DEBUG_ENV_KEY))
    if debug_enabled:
        logging.basicConfig(level=logging.INFO)
        LOGGER.setLevel(logging.DEBUG)
    return debug_enabled


def load_secret(key: str = SECRET_ENV_KEY) -> bytes:
    raw = os.getenv(key, "")
    if not raw.strip():
        raise RuntimeError(f"Missing required environment variable: {key}")
    return raw.encode(TEXT_ENCODING)
