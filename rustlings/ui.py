"""Coloured status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True)


def _emit(symbol: str, message: str, style: str) -> None:
    _console().print(Text.assemble((symbol, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a warning in red, prefixed by a warning sign."""
    _emit("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a success message in green, prefixed by a check mark."""
    _emit("✓" if no_emoji() else "✅", message, "green")