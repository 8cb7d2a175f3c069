"""
Application configuration, read from the environment once at startup.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from webstore.domain.exceptions import ValidationError

# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[2] / "data"

DEFAULT_DATABASE_URL = f"sqlite:///{_DATA_DIR / 'webstore.db'}"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> Settings:
        env = os.environ if environ is None else environ
        level = env.get("WEBSTORE_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValidationError(f"Unknown log level: {level!r}")
        return Settings(
            database_url=env.get("WEBSTORE_DATABASE_URL", DEFAULT_DATABASE_URL),
            sql_echo=env.get("WEBSTORE_SQL_ECHO", "0") == "1",
            log_level=level,
        )
