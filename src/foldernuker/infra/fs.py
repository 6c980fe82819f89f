from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over the 'os' module used by the scanner: path normalization,
single-pass directory listing and non-recursive directory removal.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# DATA STRUCTURES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DirEntry:
    """
    Snapshot of one directory entry taken at listing time.

    Attributes:
        name: Base name of the entry.
        path: Absolute path of the entry.
        is_dir: True only for real directories (symlinks are never followed).
    """
    name: str
    path: str
    is_dir: bool


# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str]) -> str:
    """
    Normalize a raw path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Empty input yields an empty string.

    Args:
        path: Raw input path string.

    Returns:
        str: Normalized absolute path, or "" when nothing was given.
    """
    p = (path or "").strip()
    if not p:
        return ""
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def path_exists(path: str) -> bool:
    """Return True if anything (including a dangling symlink) is at path."""
    return os.path.lexists(path)


def is_directory(path: str) -> bool:
    """Return True if the path currently exists and is a directory."""
    return os.path.isdir(path)


# -----------------------------------------------------------------------------
# DIRECTORY OPERATIONS API
# -----------------------------------------------------------------------------

def list_entries(path: str) -> List[DirEntry]:
    """
    Enumerate the immediate children of a directory in name order.

    The listing is fully materialized before returning so that callers can
    mutate the directory afterwards without disturbing the iteration.

    Args:
        path: Directory to list.

    Returns:
        List[DirEntry]: Entries sorted by name.

    Raises:
        OSError: If the directory cannot be opened or an entry cannot be
                 inspected (permission denied, vanished, I/O error).
    """
    entries: List[DirEntry] = []
    with os.scandir(path) as it:
        for entry in it:
            entries.append(
                DirEntry(
                    name=entry.name,
                    path=os.path.join(path, entry.name),
                    is_dir=entry.is_dir(follow_symlinks=False),
                )
            )
    entries.sort(key=lambda e: e.name)
    return entries


def safe_rmdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Remove a single empty directory without touching its contents.

    Args:
        path: Target directory path.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, Error message if applicable).
    """
    try:
        os.rmdir(path)
        return True, None
    except OSError as e:
        return False, str(e)
