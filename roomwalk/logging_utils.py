"""Console logging for Roomwalk.

Color-coded, marker-prefixed lines on stderr. The game transcript owns
stdout, so nothing here ever writes there.
"""

import os
import sys
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Maze construction
    RED = "\033[91m"       # Errors and retries
    GREEN = "\033[92m"     # Session finished
    CYAN = "\033[96m"      # Setup info (seed, rooms dir)

    BOLD = "\033[1m"
    RESET = "\033[0m"


# Markers for line types (readable without color)
EMOJI_DETERMINISTIC = "[•]"
EMOJI_ERROR = "[!]"
EMOJI_SUCCESS = "[✓]"
EMOJI_INFO = "[i]"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes unless ROOMWALK_NO_COLOR is set.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold
    """
    if os.getenv("ROOMWALK_NO_COLOR"):
        return text

    prefix = Color.BOLD.value + color.value if bold else color.value
    return f"{prefix}{text}{Color.RESET.value}"


def _emit(marker: str, message: str, color: Color) -> None:
    # sys.stderr is resolved per call so a redirected stream is honoured
    print(colored(f"{marker} {message}", color), file=sys.stderr)


def log_deterministic(message: str) -> None:
    """Log a maze construction step (blue)."""
    _emit(EMOJI_DETERMINISTIC, message, Color.BLUE)


def log_error(message: str) -> None:
    """Log an error or retry (red)."""
    _emit(EMOJI_ERROR, message, Color.RED)


def log_success(message: str) -> None:
    """Log a finished session (green)."""
    _emit(EMOJI_SUCCESS, message, Color.GREEN)


def log_info(message: str) -> None:
    """Log setup info (cyan)."""
    _emit(EMOJI_INFO, message, Color.CYAN)
