"""Error types."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when a configuration file or value cannot be used."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(self.format())

    def format(self) -> str:
        if self.path is None:
            return f"config error: {self.message}"
        return f"config error: {self.path}: {self.message}"
