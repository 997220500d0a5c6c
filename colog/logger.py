"""
Leveled logger: colored console lines plus optional per-severity files.
Logging calls never raise into the application; failures are printed.
"""
from __future__ import annotations
import sys
from pathlib import Path
from collections.abc import Mapping
from typing import Any, Optional, TextIO, Tuple, Union, TYPE_CHECKING

from .formatter import Formatter, caller_location, join_message
from .severity import Severity
from .sinks import SinkManager

if TYPE_CHECKING:
    from .config import LoggerConfig


class Logger:
    def __init__(self, color: bool = True, stream: Optional[TextIO] = None):
        self.formatter = Formatter(color=color)
        self.sinks = SinkManager()
        self._stream = stream

    @classmethod
    def from_config(cls, config: "LoggerConfig", stream: Optional[TextIO] = None) -> "Logger":
        config.normalize()
        log = cls(color=config.color, stream=stream)
        if config.directory:
            log.open(config.directory)
        return log

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def recording(self) -> bool:
        return self.sinks.recording

    @property
    def directory(self) -> Optional[Path]:
        return self.sinks.directory

    def open(self, directory: Union[str, Path]) -> None:
        """Start recording to <directory>/{error,info,warn}.log. Raises SinkOpenError."""
        self.sinks.open(directory)

    def close(self) -> None:
        self.sinks.close()

    def _print(self, line: str):
        self.stream.write(line + "\n")

    def _fail(self, text: str):
        try:
            self._print(self.formatter.failure_line(text))
        except Exception:
            # console itself is unusable; nowhere left to report
            pass

    # stacklevel counts frames between _put and the application's call site
    def _put(self, severity: Severity, msg: Tuple[Any, ...], stacklevel: int):
        try:
            text = join_message(msg)
            entry = self.formatter.entry(severity, text, caller_location(stacklevel))
            self._print(self.formatter.console_line(entry))
            line = self.formatter.file_line(entry)
        except Exception as e:
            self._fail(repr(e))
            return
        try:
            self.sinks.write(severity, line)
        except (OSError, ValueError) as e:
            self._fail(f"Failed to write log to file: {e}")

    def _sprintf(self, fmt: str, args: Tuple[Any, ...]) -> Optional[str]:
        try:
            if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
                args = args[0]
            return fmt % args if args else str(fmt)
        except Exception as e:
            self._fail(repr(e))
            return None

    def error(self, *msg: Any, stacklevel: int = 1): self._put(Severity.ERROR, msg, stacklevel + 1)
    def info(self, *msg: Any, stacklevel: int = 1): self._put(Severity.INFO, msg, stacklevel + 1)
    def warn(self, *msg: Any, stacklevel: int = 1): self._put(Severity.WARN, msg, stacklevel + 1)

    def errorf(self, fmt: str, *args: Any, stacklevel: int = 1):
        text = self._sprintf(fmt, args)
        if text is not None:
            self.error(text, stacklevel=stacklevel + 1)

    def infof(self, fmt: str, *args: Any, stacklevel: int = 1):
        text = self._sprintf(fmt, args)
        if text is not None:
            self.info(text, stacklevel=stacklevel + 1)

    def warnf(self, fmt: str, *args: Any, stacklevel: int = 1):
        text = self._sprintf(fmt, args)
        if text is not None:
            self.warn(text, stacklevel=stacklevel + 1)


logger = Logger()
