"""colog: leveled logger with colored console output and per-severity log files.

The module-level functions are bound methods of the default ``logger``
instance, so call-site locations stay exact:

    import colog
    colog.open_log("logs")
    colog.info("hello", "world")
    colog.warnf("retry %d of %d", 2, 5)
"""
from __future__ import annotations

from .config import LoggerConfig
from .errors import CologError, SinkOpenError
from .formatter import Formatter, LogEntry, strip_ansi
from .logger import Logger, logger
from .severity import Severity
from .sinks import SinkManager

open_log = logger.open
error = logger.error
errorf = logger.errorf
info = logger.info
infof = logger.infof
warn = logger.warn
warnf = logger.warnf

__all__ = [
    'Logger', 'LoggerConfig', 'Formatter', 'LogEntry', 'SinkManager', 'Severity',
    'CologError', 'SinkOpenError', 'strip_ansi',
    'logger', 'open_log', 'error', 'errorf', 'info', 'infof', 'warn', 'warnf',
]
