"""
Roomwalk Configuration

Loads configuration from environment variables with sensible defaults.
Command-line flags take precedence over everything here.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .names import DEFAULT_ROOM_NAMES

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Randomness (unset means a fresh seed every run)
    SEED: Optional[str] = os.getenv("ROOMWALK_SEED")

    # Room mirror on disk: <ROOMS_ROOT>/<ROOMS_PREFIX>.rooms.<pid>/
    ROOMS_ROOT: Path = Path(os.getenv("ROOMWALK_ROOMS_ROOT", "."))
    ROOMS_PREFIX: str = os.getenv("ROOMWALK_ROOMS_PREFIX", "roomwalk")
    PERSIST: bool = _env_flag("ROOMWALK_PERSIST", "true")
    KEEP_ROOMS: bool = _env_flag("ROOMWALK_KEEP_ROOMS", "true")

    # Comma separated override for the name pool
    ROOM_NAMES: Optional[str] = os.getenv("ROOMWALK_ROOM_NAMES")

    # Logging
    VERBOSE: bool = _env_flag("ROOMWALK_VERBOSE", "false")

    @classmethod
    def seed(cls) -> Optional[int]:
        """Return the configured seed as an int, or None when unset."""
        if cls.SEED is None or not cls.SEED.strip():
            return None
        return int(cls.SEED)

    @classmethod
    def room_names(cls) -> List[str]:
        """Return the effective name pool (override or the built-in list)."""
        if cls.ROOM_NAMES:
            return [name.strip() for name in cls.ROOM_NAMES.split(",") if name.strip()]
        return list(DEFAULT_ROOM_NAMES)

    @classmethod
    def rooms_dir(cls, pid: Optional[int] = None) -> Path:
        """Directory for this process's room files."""
        pid = os.getpid() if pid is None else pid
        return cls.ROOMS_ROOT / f"{cls.ROOMS_PREFIX}.rooms.{pid}"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are malformed."""
        if cls.SEED is not None and cls.SEED.strip():
            try:
                int(cls.SEED)
            except ValueError:
                raise ValueError(
                    f"ROOMWALK_SEED must be an integer, got {cls.SEED!r}"
                ) from None

        if not cls.ROOMS_PREFIX or os.sep in cls.ROOMS_PREFIX:
            raise ValueError(
                "ROOMWALK_ROOMS_PREFIX must be a plain, non-empty directory name prefix"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Roomwalk Configuration:",
            f"  Seed: {cls.SEED or 'random'}",
            f"  Rooms Dir: {cls.rooms_dir()}",
            f"  Persist Rooms: {cls.PERSIST}",
            f"  Keep Rooms: {cls.KEEP_ROOMS}",
            f"  Name Pool: {len(cls.room_names())} names",
        ]
        return "\n".join(lines)
