from __future__ import annotations
import json
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .logger import logger

@dataclass
class LoggerConfig:
    directory: Optional[str] = None   # sink directory; None = console only
    color: bool = True                # ANSI escapes on the console

    def normalize(self):
        if isinstance(self.directory, str) and not self.directory.strip():
            self.directory = None
        if self.directory is not None:
            self.directory = str(self.directory)
        if not isinstance(self.color, bool):
            self.color = True

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "LoggerConfig":
        path = Path(path)
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                if not isinstance(raw, dict):
                    raise ValueError("expected a JSON object")
                # Backfill missing fields, drop unknown keys
                field_names = {f.name for f in fields(cls)}
                data = cls(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                return data
            except (OSError, ValueError, TypeError) as e:
                logger.warn("ConfigParseFailedUsingDefaults", str(path), e)
        data = cls()
        data.normalize()
        return data
