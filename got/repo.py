"""Repository: the .got layout and its initialization."""

from __future__ import annotations

import shutil
from pathlib import Path

from .constants import (
    DEFAULT_BRANCH,
    GOT_DIR,
    HEAD_FILE,
    HEADS_DIR,
    INDEX_FILENAME,
    OBJECTS_DIR,
    REF_HEADS_PREFIX,
    REFS_DIR,
)
from .errors import (
    AlreadyInitializedError,
    DirectoryCreationError,
    FileWriteError,
    NotARepositoryError,
)
from .log import get_logger
from .refs import write_head_ref
from .util import make_dir, write_file

logger = get_logger("repo")


class Repository:
    """got repository rooted at an explicit path: .got dir, objects, refs, HEAD, index."""

    def __init__(self, path: str | Path = ".") -> None:
        self.path = Path(path).resolve()
        self.got_dir = self.path / GOT_DIR
        self.objects_dir = self.got_dir / OBJECTS_DIR
        self.refs_dir = self.got_dir / REFS_DIR
        self.heads_dir = self.refs_dir / HEADS_DIR
        self.head_file = self.got_dir / HEAD_FILE
        self.index_file = self.got_dir / INDEX_FILENAME

    def exists(self) -> bool:
        """True if anything occupies the root marker path."""
        return self.got_dir.exists() or self.got_dir.is_symlink()

    def require_repo(self) -> None:
        """Raise NotARepositoryError if not a got repo."""
        if not self.got_dir.is_dir():
            raise NotARepositoryError(f"not a got repository: {self.path}")

    def init(self) -> Path:
        """Create a new repository and return its .got directory.

        The root marker is created with an exclusive mkdir, so an existing
        entry of any type (or a concurrent init that got there first) raises
        AlreadyInitializedError without touching the filesystem. Every later
        step runs in a fixed order; if one fails, the .got tree this call
        created is removed and the step's error is raised.
        """
        try:
            make_dir(self.got_dir)
        except FileExistsError as e:
            raise AlreadyInitializedError(self.got_dir) from e
        except OSError as e:
            raise DirectoryCreationError(GOT_DIR, self.got_dir, e) from e
        logger.debug("created %s", self.got_dir)

        try:
            self._populate()
        except (DirectoryCreationError, FileWriteError) as e:
            logger.warning("init failed at %s, removing %s", e.step, self.got_dir)
            self._rollback()
            raise

        logger.info("initialized repository in %s", self.got_dir)
        return self.got_dir

    def _populate(self) -> None:
        try:
            make_dir(self.objects_dir)
        except OSError as e:
            raise DirectoryCreationError(OBJECTS_DIR, self.objects_dir, e) from e
        logger.debug("created %s", self.objects_dir)

        try:
            make_dir(self.heads_dir, parents=True)
        except OSError as e:
            raise DirectoryCreationError(f"{REFS_DIR}/{HEADS_DIR}", self.heads_dir, e) from e
        logger.debug("created %s", self.heads_dir)

        try:
            write_head_ref(self.got_dir, f"{REF_HEADS_PREFIX}{DEFAULT_BRANCH}")
        except OSError as e:
            raise FileWriteError(HEAD_FILE, self.head_file, e) from e
        logger.debug("wrote %s", self.head_file)

        try:
            write_file(self.index_file, b"")
        except OSError as e:
            raise FileWriteError(INDEX_FILENAME, self.index_file, e) from e
        logger.debug("wrote %s", self.index_file)

    def _rollback(self) -> None:
        try:
            shutil.rmtree(self.got_dir)
        except OSError as e:
            logger.warning("could not remove partial repository %s: %s", self.got_dir, e)
