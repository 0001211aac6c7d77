"""Constants for got: repository layout, default branch, permissions."""

from __future__ import annotations

# Root marker: its presence is what makes a directory a repository
GOT_DIR = ".got"

# Layout under the root marker
OBJECTS_DIR = "objects"
REFS_DIR = "refs"
HEADS_DIR = "heads"
HEAD_FILE = "HEAD"
INDEX_FILENAME = "index"

# Default branch name
DEFAULT_BRANCH = "main"

# Ref paths under .got
REF_HEADS_PREFIX = "refs/heads/"
SYMREF_PREFIX = "ref: "

# rwxr-xr-x / rw-r--r-- (umask still applies)
DIR_MODE = 0o755
FILE_MODE = 0o644
