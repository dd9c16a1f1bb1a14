"""Helpers for interactive, coloured terminal output."""

from __future__ import annotations

from typing import Callable

from termcolor import colored


def ask_for_confirmation(message: str, input_func: Callable[[str], str] = input) -> bool:
    """Ask a yes/no question; only 'y' or 'Y' counts as yes."""
    try:
        words = input_func(colored(f"{message} (y/n): ", "yellow")).split()
    except EOFError:
        return False
    return words[:1] in (["y"], ["Y"])


def print_colored(text: object, color: str) -> None:
    """Print text on its own line in the given colour."""
    print(colored(str(text), color))