from __future__ import annotations

"""
Cycle-safe recursive directory walker.

`os.walk(followlinks=True)` happily re-enters a directory reached through a
symlink that points at one of its ancestors. The walker keeps the set of
(st_dev, st_ino) identities it has already descended into and prunes any
directory seen before, so traversal always terminates.

Paths are yielded exactly as built by joining the root with entry names;
they are never resolved.
"""

import logging
import os
from typing import Callable, Iterator, Optional, Set, Tuple

from printfiles.core.interfaces.fs import WalkerProtocol
from printfiles.logging.helpers import get_logger

DirFilter = Callable[[str, int], bool]


class FileWalker(WalkerProtocol):
    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._log = logger or get_logger('discovery.walker')

    @staticmethod
    def _identity(path: str) -> Optional[Tuple[int, int]]:
        try:
            st = os.stat(path)
        except OSError:
            return None
        return (st.st_dev, st.st_ino)

    def iter_files(
        self,
        root: str,
        *,
        follow_links: bool,
        descend: Optional[DirFilter] = None,
    ) -> Iterator[str]:
        """Yield every regular file below *root* (recursively).

        Args:
            root: Directory to walk; joined verbatim into yielded paths.
            follow_links: Whether symlinked directories are entered. Symlinked
                files are yielded either way if they point at a file.
            descend: Optional predicate `(dir_path, depth)` used to prune
                subdirectories; depth is 1 for direct children of *root*.
        """
        visited: Set[Tuple[int, int]] = set()
        root_id = self._identity(root)
        if root_id is not None:
            visited.add(root_id)

        def _on_error(exc: OSError) -> None:
            self._log.warning('⚠  cannot list %s (%s)', exc.filename, exc.strerror or exc)

        base_depth = root.rstrip(os.sep).count(os.sep)
        for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error, followlinks=follow_links):
            depth = dirpath.rstrip(os.sep).count(os.sep) - base_depth + 1
            kept = []
            for d in sorted(dirnames):
                full = os.path.join(dirpath, d)
                if descend is not None and not descend(full, depth):
                    continue
                if follow_links:
                    ident = self._identity(full)
                    if ident is None or ident in visited:
                        self._log.debug('skipping already visited directory %s', full)
                        continue
                    visited.add(ident)
                kept.append(d)
            dirnames[:] = kept

            for fn in sorted(filenames):
                full = os.path.join(dirpath, fn)
                if os.path.isfile(full):
                    yield full
