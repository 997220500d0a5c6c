"""Per-severity append-only log files.

One file and one lock per Severity. Writes to different severities never
contend; writes to the same severity are serialized so lines never interleave.
"""
from __future__ import annotations
import threading
from pathlib import Path
from typing import Dict, Optional, TextIO, Union

from .errors import SinkOpenError
from .severity import Severity


class SinkManager:
    def __init__(self):
        self._files: Dict[Severity, TextIO] = {}
        self._locks: Dict[Severity, threading.Lock] = {s: threading.Lock() for s in Severity}
        self._init_lock = threading.Lock()
        self._directory: Optional[Path] = None
        self._recording = False

    @property
    def recording(self) -> bool:
        return self._recording

    @property
    def directory(self) -> Optional[Path]:
        return self._directory

    def path_for(self, severity: Severity, directory: Union[str, Path, None] = None) -> Path:
        base = Path(directory) if directory is not None else self._directory
        if base is None:
            raise ValueError("no sink directory; call open() first")
        return base / severity.filename

    def open(self, directory: Union[str, Path]) -> None:
        """Create the directory tree and open every sink, all or nothing.

        Returns immediately if already recording. Raises SinkOpenError.
        """
        with self._init_lock:
            if self._recording:
                return
            base = Path(directory)
            try:
                base.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SinkOpenError(str(base), str(e)) from e
            opened: Dict[Severity, TextIO] = {}
            for severity in Severity:
                path = self.path_for(severity, base)
                try:
                    opened[severity] = open(path, "a", encoding="utf-8")
                except OSError as e:
                    for fh in opened.values():
                        fh.close()
                    raise SinkOpenError(str(path), str(e)) from e
            self._files = opened
            self._directory = base
            self._recording = True

    def write(self, severity: Severity, line: str) -> None:
        """Append one line to the severity's file; no-op when not recording.

        OSError (or ValueError for a handle closed elsewhere) propagates.
        """
        if not self._recording:
            return
        with self._locks[severity]:
            fh = self._files.get(severity)
            if fh is None:
                return
            fh.write(line + "\n")
            fh.flush()

    def close(self) -> None:
        with self._init_lock:
            self._recording = False
            for severity in list(self._files):
                with self._locks[severity]:
                    fh = self._files.pop(severity)
                    fh.close()
