from __future__ import annotations

class CologError(Exception):
    """Base for internal errors."""

class SinkOpenError(CologError):
    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed opening log sink '{path}': {detail}")
        self.path = path
        self.detail = detail
