"""Runtime settings resolved from the environment.

A ``.env`` file in the current working directory is loaded first (without
overriding variables that are already set), then the following variables are
read:

- ``TRANSACTION_LEDGER_DATA_PATH``: transactions document used when the CLI is
  not given ``--data-path`` (default ``transactions.json``).
- ``TRANSACTION_LEDGER_LOG_LEVEL``: log level name or number (default
  ``INFO``).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .logging_setup import parse_level

DATA_PATH_ENV_VAR = "TRANSACTION_LEDGER_DATA_PATH"
LOG_LEVEL_ENV_VAR = "TRANSACTION_LEDGER_LOG_LEVEL"
DEFAULT_DATA_PATH = Path("transactions.json")


@dataclass(frozen=True, slots=True)
class Settings:
    data_path: Path
    log_level: int


def load_settings(*, load_env_file: bool = True) -> Settings:
    """Resolve :class:`Settings` from ``.env`` and the process environment."""

    if load_env_file:
        load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    raw_path = os.getenv(DATA_PATH_ENV_VAR, "").strip()
    return Settings(
        data_path=Path(raw_path) if raw_path else DEFAULT_DATA_PATH,
        log_level=parse_level(os.getenv(LOG_LEVEL_ENV_VAR)),
    )


__all__ = [
    "DATA_PATH_ENV_VAR",
    "DEFAULT_DATA_PATH",
    "LOG_LEVEL_ENV_VAR",
    "Settings",
    "load_settings",
]
