from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from seednames.core.logging_config import setup_logging


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"SEEDNAMES_SEED must be an integer, got {raw!r}") from None


@dataclass
class Settings:
    log_level: str
    log_dir: str | None
    seed: int | None

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            log_level=os.getenv("SEEDNAMES_LOG_LEVEL", "warning"),
            log_dir=os.getenv("SEEDNAMES_LOG_DIR") or None,
            seed=_parse_seed(os.getenv("SEEDNAMES_SEED")),
        )


def load_env() -> None:
    load_dotenv(find_dotenv(usecwd=True))


def bootstrap() -> Settings:
    """Load ``.env``, read settings and configure logging.

    Optional for library users; handy at the top of scripts and tests
    that want reproducible names driven by ``SEEDNAMES_SEED``.
    """
    load_env()
    settings = Settings.from_env()
    setup_logging(log_dir=settings.log_dir, log_level=settings.log_level)
    return settings
