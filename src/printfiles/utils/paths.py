# src/printfiles/utils/paths.py
"""
paths – Small, centralized path helpers for printfiles.

Provides:
  • strip_dot_slash(str)         – drop leading './' segments
  • has_glob_magic(str)          – glob metacharacter detection
  • lexical_relative_to(p, base) – containment without touching the disk
  • fs_path(cwd, path)           – filesystem location under an injected root
"""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Optional

from printfiles.constants import GLOB_METACHARS


def strip_dot_slash(p: str | PurePath) -> str:
    """Return *p* as a string without any leading './' prefix."""
    s = str(p)
    while s.startswith('./'):
        s = s[2:]
    return s


def has_glob_magic(token: str) -> bool:
    return any(ch in token for ch in GLOB_METACHARS)


def lexical_relative_to(path: PurePath, base: PurePath) -> Optional[str]:
    """Return *path* relative to *base* if it lies under it, else None.

    Purely lexical: symlinks are not resolved and no filesystem access
    happens, so permission-restricted parents cannot make this fail.
    """
    try:
        rel = path.relative_to(base)
    except ValueError:
        return None
    return rel.as_posix()


def fs_path(cwd: PurePath, path: str) -> str:
    """Return the filesystem location of *path* as seen from the working root."""
    if os.path.isabs(path):
        return path
    return os.path.join(str(cwd), path)
