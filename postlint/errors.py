"""Exceptions raised by postlint"""

from pathlib import Path


class PostlintError(Exception):
    """Base class for all postlint errors."""


class ContentReadError(PostlintError):
    """A content artifact could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class ConfigError(PostlintError):
    """The validator configuration is invalid."""
