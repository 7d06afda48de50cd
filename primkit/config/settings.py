"""
Configuration settings for primkit.

**Conceptual**: The pure helpers need no configuration at all. The platform
wrappers do: where the persistent flag store lives, how many background
workers the dispatch pool gets, and how loud logging should be. These values
are read from environment variables (optionally via a .env file at the repo
root) into a frozen dataclass that is validated once, at construction.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root if present; existing environment variables win
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / ".env")

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Settings for the primkit platform wrappers.

    **Environment variables**:
      - PRIMKIT_LOG_LEVEL (optional): One of DEBUG, INFO, WARNING, ERROR,
        CRITICAL. Defaults to INFO.
      - PRIMKIT_LOG_FILE (optional): Extra file to write logs to.
      - PRIMKIT_FLAG_STORE_PATH (optional): JSON file backing flag_once /
        reset_flag. Unset means flags live in memory for the process lifetime.
      - PRIMKIT_DISPATCH_WORKERS (optional): Worker threads for dispatch().
        Defaults to 4.

    Attributes:
        log_level: Upper-case logging level name.
        log_file: Optional log file path.
        flag_store_path: Optional JSON file for persistent flags.
        dispatch_workers: Positive worker count for the background pool.
    """
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    flag_store_path: Optional[Path] = None
    dispatch_workers: int = 4

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.log_level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"PRIMKIT_LOG_LEVEL must be one of {', '.join(_VALID_LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )
        if self.dispatch_workers < 1:
            raise ValueError(
                f"PRIMKIT_DISPATCH_WORKERS must be a positive integer, got: {self.dispatch_workers}"
            )

    @property
    def log_level_value(self) -> int:
        """Numeric logging level matching log_level."""
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If PRIMKIT_DISPATCH_WORKERS is not an integer, or any
                value fails validation.

        Usage example:
            >>> # In .env file:
            >>> # PRIMKIT_FLAG_STORE_PATH=~/.primkit/flags.json
            >>> settings = Settings.from_env()
            >>> settings.flag_store_path
        """
        log_level = os.getenv("PRIMKIT_LOG_LEVEL", "INFO").strip().upper()
        log_file = os.getenv("PRIMKIT_LOG_FILE", "").strip()
        flag_store_path = os.getenv("PRIMKIT_FLAG_STORE_PATH", "").strip()
        workers_str = os.getenv("PRIMKIT_DISPATCH_WORKERS", "4")

        try:
            dispatch_workers = int(workers_str)
        except ValueError:
            raise ValueError(
                f"PRIMKIT_DISPATCH_WORKERS must be an integer, got: {workers_str}"
            )

        return cls(
            log_level=log_level,
            log_file=Path(log_file).expanduser() if log_file else None,
            flag_store_path=Path(flag_store_path).expanduser() if flag_store_path else None,
            dispatch_workers=dispatch_workers,
        )


# Lazily loaded on first get_settings() call. Tests construct Settings directly
# or call reset_settings() after changing the environment.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the process-wide settings, loading them from the environment on first use.

    Returns:
        Cached Settings instance.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()
    return _default_settings


def reset_settings() -> None:
    """Clear the cached settings so the next get_settings() re-reads the environment."""
    global _default_settings
    _default_settings = None
