from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import dotenv

# Values already present in the environment win over .env entries.
dotenv.load_dotenv(".env")

ENV_LOG_LEVEL = "SHARED_CONTRACTS_LOG_LEVEL"
ENV_LOG_DIR = "SHARED_CONTRACTS_LOG_DIR"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_dir: Optional[str] = None


def _parse_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{ENV_LOG_LEVEL} must be a logging level name, got {raw!r}")
    return level


def load_settings() -> Settings:
    """Read settings from the environment.

    Only ambient concerns are configurable here; schemas, ports and service
    URLs are fixed in code.
    """
    log_dir = os.getenv(ENV_LOG_DIR) or None
    return Settings(
        log_level=_parse_level(os.getenv(ENV_LOG_LEVEL, "INFO")),
        log_dir=log_dir,
    )
