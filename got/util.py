"""Helper functions: directory creation and exclusive file writes."""

from __future__ import annotations

import os
from pathlib import Path

from .constants import DIR_MODE, FILE_MODE


def make_dir(path: Path, mode: int = DIR_MODE, parents: bool = False) -> None:
    """Create directory. Without parents, an existing path raises FileExistsError."""
    path = Path(path)
    if parents:
        os.makedirs(path, mode=mode, exist_ok=True)
    else:
        path.mkdir(mode=mode)


def write_file(path: Path, data: bytes, mode: int = FILE_MODE) -> None:
    """Create a new file and write data. Never overwrites an existing file."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, mode)
    try:
        view = memoryview(data)
        while view:
            written = os.write(fd, view)
            view = view[written:]
    finally:
        os.close(fd)
