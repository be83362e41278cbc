"""Project-level configuration and path helpers."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_LOG_LEVEL = "INFO"

PathLike = Union[str, Path]


@dataclass
class Settings:
    """Runtime settings read from the environment."""

    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Path | None = None  # console only when unset


def resolve_log_path(env_value: PathLike | None = None) -> Path | None:
    """Resolve LOG_FILE to an absolute path, or None when not configured."""
    if not env_value:
        return None

    candidate = Path(env_value)
    return candidate if candidate.is_absolute() else PROJECT_ROOT / candidate


def load_settings(env_file: PathLike | None = None) -> Settings:
    """
    Load settings from environment variables.

    Args:
        env_file: Optional .env file loaded first. Variables already set
                  in the environment take precedence over it.

    Returns:
        Settings instance
    """
    if env_file is not None:
        load_dotenv(env_file)

    return Settings(
        log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        log_file=resolve_log_path(os.getenv("LOG_FILE")),
    )
