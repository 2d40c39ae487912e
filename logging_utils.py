"""Console logging for town games and the scoring runners.

Colour-coded lines with text markers; set ``TOWN_NO_COLOR`` to print plain text.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"  # Board mutations
    RED = "\033[91m"  # Rejected actions
    GREEN = "\033[92m"  # Constructions, finished runs
    CYAN = "\033[96m"  # Info

    BOLD = "\033[1m"
    RESET = "\033[0m"


MARK_BOARD = "[•]"
MARK_ERROR = "[!]"
MARK_SUCCESS = "[✓]"
MARK_INFO = "[i]"


def colored(text: str, color: Color, bold: bool = False) -> str:
    if os.getenv("TOWN_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_board(message: str) -> None:
    """Log a change to a town board (blue)."""
    print(colored(f"{MARK_BOARD} {message}", Color.BLUE))


def log_error(message: str) -> None:
    """Log a rejected action (red)."""
    print(colored(f"{MARK_ERROR} {message}", Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(f"{MARK_SUCCESS} {message}", Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(f"{MARK_INFO} {message}", Color.CYAN))
