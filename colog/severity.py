"""Severity levels: console tags, colors & sink filenames.

Provides:
  Severity: the fixed level enumeration (ERROR / INFO / WARN)
  helpers for colorized terminal output.

Console colors (the only mapping used anywhere):
  ERROR -> yellow, INFO -> green, WARN -> red
"""
from __future__ import annotations
from enum import Enum
from typing import Dict

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

RESET = Style.RESET_ALL
MAGENTA = Fore.MAGENTA
BLUE = Fore.BLUE
RED = Fore.RED
UNDERLINE = "\033[4m"  # colorama has no underline style


class Severity(Enum):
    ERROR = "ERROR"
    INFO = "INFO"
    WARN = "WARN"

    @property
    def tag(self) -> str:
        return f"[{self.value}]"

    @property
    def color(self) -> str:
        return _COLORS[self]

    @property
    def filename(self) -> str:
        return _FILENAMES[self]


_COLORS: Dict[Severity, str] = {
    Severity.ERROR: Fore.YELLOW,
    Severity.INFO: Fore.GREEN,
    Severity.WARN: Fore.RED,
}

_FILENAMES: Dict[Severity, str] = {
    Severity.ERROR: "error.log",
    Severity.INFO: "info.log",
    Severity.WARN: "warn.log",
}


def colored_text(text: str, *codes: str) -> str:
    """Wrap text in the given escape codes followed by a reset."""
    if not codes:
        return text
    return f"{''.join(codes)}{text}{RESET}"


__all__ = ['Severity', 'colored_text', 'RESET', 'MAGENTA', 'BLUE', 'RED', 'UNDERLINE']
