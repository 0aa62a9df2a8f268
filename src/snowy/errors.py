# src/snowy/errors.py

"""Exception hierarchy shared by storage, tasks and the CLI."""

from __future__ import annotations

from pathlib import Path


class SnowyError(Exception):
    """Base class for all application errors."""


class StorageError(SnowyError):
    """A storage operation failed on the task file."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class StorageSetupError(StorageError):
    """Data directory or task file could not be created."""


class StorageWriteError(StorageError):
    """Appending to (or clearing) the task file failed."""


class StorageRewriteError(StorageError):
    """Delete/edit could not stream or swap the staging file."""


class StorageReadError(StorageError):
    """Task file could not be opened or read."""


class TaskDecodeError(SnowyError):
    """A stored line is not a valid serialized task."""

    def __init__(self, message: str, line: str = "") -> None:
        super().__init__(message)
        self.line = line


class CommandError(SnowyError):
    """User input could not be turned into a command."""
