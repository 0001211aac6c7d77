"""HEAD management: symbolic ref to the current branch."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

from .constants import HEAD_FILE, REF_HEADS_PREFIX, SYMREF_PREFIX
from .errors import InvalidRefError
from .util import write_file


@dataclass
class HeadState:
    """HEAD state. Only symbolic refs exist until commits do."""
    kind: Literal["ref"]
    value: str  # refs/heads/main


def _head_file(got_dir: Path) -> Path:
    return got_dir / HEAD_FILE


def head_content(refname: str) -> bytes:
    """Bytes stored in HEAD for a symbolic ref. No trailing newline."""
    if not refname.startswith(REF_HEADS_PREFIX) or refname == REF_HEADS_PREFIX:
        raise InvalidRefError(f"symbolic ref must be refs/heads/... (got {refname})")
    return (SYMREF_PREFIX + refname).encode("utf-8")


def write_head_ref(got_dir: Path, refname: str) -> None:
    """Create HEAD pointing at refname (e.g. refs/heads/main)."""
    write_file(_head_file(got_dir), head_content(refname))


def read_head(got_dir: Path) -> Optional[HeadState]:
    """Read HEAD; return HeadState or None if missing or not a symbolic ref."""
    try:
        raw = _head_file(got_dir).read_text(encoding="utf-8")
    except (FileNotFoundError, NotADirectoryError):
        return None
    raw = raw.strip()
    if raw.startswith(SYMREF_PREFIX):
        return HeadState("ref", raw[len(SYMREF_PREFIX):].strip())
    return None


def current_branch_name(got_dir: Path) -> Optional[str]:
    """Branch name HEAD points at (e.g. main), or None."""
    state = read_head(got_dir)
    if state is None or not state.value.startswith(REF_HEADS_PREFIX):
        return None
    return state.value[len(REF_HEADS_PREFIX):]
