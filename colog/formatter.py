"""Renders log entries for the console and for sink files.

Console line:
  [TAG] <timestamp> <file> line <n>: "<message>"
with the tag colored per severity, the timestamp magenta and the file path
blue & underlined. File line:
  <timestamp> <file> line <n>: <message>
"""
from __future__ import annotations
import inspect
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Tuple

from .severity import Severity, colored_text, MAGENTA, BLUE, RED, UNDERLINE

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
UNKNOWN_LOCATION: Tuple[str, int] = ("?", 0)

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(s: str) -> str:
    return ANSI_ESCAPE_RE.sub('', s)


def join_message(args: Iterable[object]) -> str:
    return " ".join(str(a) for a in args)


def caller_location(stacklevel: int) -> Tuple[str, int]:
    """Source file & line `stacklevel` frames above the function calling this one.

    stacklevel=1 is the direct caller of that function. Each public wrapper
    between the application and the capture point adds one.
    """
    frame = inspect.currentframe()
    try:
        frame = frame.f_back if frame is not None else None
        for _ in range(stacklevel):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return UNKNOWN_LOCATION
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame


@dataclass
class LogEntry:
    timestamp: datetime
    severity: Severity
    file: str
    line: int
    message: str

    @property
    def stamp(self) -> str:
        return self.timestamp.strftime(TIME_FORMAT)


class Formatter:
    def __init__(self, color: bool = True, clock: Callable[[], datetime] = datetime.now):
        self.color = color
        self.clock = clock

    def entry(self, severity: Severity, message: str, location: Tuple[str, int]) -> LogEntry:
        file, line = location
        return LogEntry(self.clock(), severity, file, line, message)

    def _paint(self, text: str, *codes: str) -> str:
        return colored_text(text, *codes) if self.color else text

    def console_line(self, e: LogEntry) -> str:
        tag = self._paint(e.severity.tag, e.severity.color)
        stamp = self._paint(e.stamp, MAGENTA)
        file = self._paint(e.file, BLUE, UNDERLINE)
        return f'{tag} {stamp} {file} line {e.line}: "{e.message}"'

    def file_line(self, e: LogEntry) -> str:
        # one entry, one line
        msg = e.message.replace("\r", "\\r").replace("\n", "\\n")
        return f"{e.stamp} {e.file} line {e.line}: {msg}"

    def failure_line(self, text: str) -> str:
        """Visibly marked line for the logger's own failures."""
        return self._paint(text, RED)
