"""got: a minimal version control system (repository layout and init)."""

from .repo import Repository
from .errors import AlreadyInitializedError, GotError, NotARepositoryError

__all__ = ["Repository", "GotError", "NotARepositoryError", "AlreadyInitializedError"]
