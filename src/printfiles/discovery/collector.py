from __future__ import annotations

"""
Deduplicating collector with a total order.

Paths from every token are keyed by their normalized spelling (leading './'
stripped, nothing else touched) so the same file reached by two tokens is
emitted once. `ordered()` stats each path and sorts by the configured key
with the path string as the universal tie-break.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from printfiles.core.interfaces.fs import CollectorProtocol
from printfiles.core.models import FileRecord, SortKey
from printfiles.logging.helpers import get_logger
from printfiles.utils.extensions import extension_of
from printfiles.utils.paths import fs_path, strip_dot_slash

_SORT_KEYS: Dict[SortKey, Callable[[FileRecord], Tuple]] = {
    SortKey.NAME: lambda r: (r.path,),
    SortKey.SIZE: lambda r: (r.size, r.path),
    SortKey.MTIME: lambda r: (r.mtime, r.path),
}


def normalize_path(path: str) -> str:
    return strip_dot_slash(path)


class FileCollector(CollectorProtocol):
    def __init__(self, *, cwd: Path, sort: SortKey = SortKey.NAME, logger: Optional[logging.Logger] = None) -> None:
        self._cwd = cwd
        self._sort = sort
        self._seen: Dict[str, None] = {}
        self._log = logger or get_logger('discovery.collector')

    def add(self, paths: Iterable[str]) -> None:
        for p in paths:
            key = normalize_path(p)
            if key in self._seen:
                self._log.debug('duplicate match ignored: %s', key)
                continue
            self._seen[key] = None

    def __len__(self) -> int:
        return len(self._seen)

    def _record(self, path: str) -> FileRecord:
        # Missing metadata sorts first (size 0, epoch) instead of failing here;
        # the read stage reports the real error.
        try:
            st = os.stat(fs_path(self._cwd, path))
            size, mtime = st.st_size, st.st_mtime
        except OSError as exc:
            self._log.debug('stat failed for %s (%s)', path, exc)
            size, mtime = 0, 0.0
        return FileRecord(path=path, size=size, mtime=mtime, ext=extension_of(path))

    def ordered(self) -> List[FileRecord]:
        records = [self._record(p) for p in self._seen]
        records.sort(key=_SORT_KEYS[self._sort])
        return records
