from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOG_LEVEL_ENV = "TABLEKEYS_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, *, dotenv_path: Path | None = None) -> "Settings":
        """Read settings from the environment (and a .env file, if present).

        dotenv_path defaults to the nearest .env found by python-dotenv.
        """
        load_dotenv(dotenv_path=dotenv_path)
        level = os.environ.get(LOG_LEVEL_ENV, "").strip().upper() or cls.log_level
        if not isinstance(logging.getLevelName(level), int):
            raise RuntimeError(f"Invalid {LOG_LEVEL_ENV}={level!r} (use DEBUG, INFO, WARNING, ERROR or CRITICAL)")
        return cls(log_level=level)


def configure_logging(settings: Settings) -> None:
    """Only scripts call this; the library never installs handlers."""
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
