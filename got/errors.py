"""Custom exceptions for got."""

from __future__ import annotations

from pathlib import Path


class GotError(Exception):
    """Base exception for got."""

    pass


class NotARepositoryError(GotError):
    """Raised when not in a got repository."""

    pass


class InvalidRefError(GotError):
    """Raised when a ref name cannot be used as a symbolic ref."""

    pass


class AlreadyInitializedError(GotError):
    """Raised when the root marker already exists at the target path."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        super().__init__("repository already initialized")


class InitStepError(GotError):
    """A single init step was rejected by the filesystem.

    ``step`` names what was being created (``objects``, ``HEAD``, ...),
    ``path`` is where, and ``cause`` is the OSError that stopped it.
    """

    kind = "entry"

    def __init__(self, step: str, path: Path, cause: OSError) -> None:
        self.step = step
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"failed to create {step} {self.kind}: {cause}")


class DirectoryCreationError(InitStepError):
    """Raised when a directory of the repository layout cannot be created."""

    kind = "directory"


class FileWriteError(InitStepError):
    """Raised when HEAD or the index cannot be written."""

    kind = "file"
