from __future__ import annotations
"""
Display-path computation.

The working root is injected rather than read from the process so output is
deterministic under test. Resolution order for a discovered path:

  1. relative to `relative_from` when the absolute path lies under it;
  2. relative to the working root when it lies under that;
  3. the path as discovered.

A leading './' is stripped in every case. Containment is lexical: symlinks
are never resolved.
"""

from pathlib import Path, PurePath
from typing import Optional

from printfiles.core.interfaces.fs import DisplayPathResolverProtocol
from printfiles.utils.paths import lexical_relative_to, strip_dot_slash


class DisplayPathResolver(DisplayPathResolverProtocol):
    def __init__(self, *, cwd: Path, relative_from: Optional[Path] = None) -> None:
        self._cwd = cwd
        self._base: Optional[Path] = None
        if relative_from is not None:
            self._base = relative_from if relative_from.is_absolute() else cwd / relative_from

    def display(self, path: str | PurePath) -> str:
        p = PurePath(path)
        absolute = p if p.is_absolute() else PurePath(self._cwd) / p

        for root in (self._base, self._cwd):
            if root is None:
                continue
            rel = lexical_relative_to(absolute, PurePath(root))
            if rel is not None:
                return strip_dot_slash(rel)
        return strip_dot_slash(str(path))
