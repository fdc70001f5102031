"""Runtime configuration for the fitness tracker.

All values are constants imported by the rest of the package. Settings may
be overridden through environment variables (optionally via a local
`.env`). Formula constants live in :mod:`fitness_tracker.constants` and are
not configured here.
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv


def _env_str(key: str, default: str) -> str:
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _env_log_level(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().upper()
    if normalized.isdigit():
        return int(normalized)
    level = logging.getLevelName(normalized)
    if isinstance(level, int):
        return level
    return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
# Root level applied by the demo entry point. Accepts names (DEBUG, INFO)
# or numeric levels.
LOG_LEVEL = _env_log_level("FITNESS_LOG_LEVEL", logging.INFO)

# Record layout used when the entry point installs a handler.
LOG_FORMAT = _env_str(
    "FITNESS_LOG_FORMAT", "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
)
