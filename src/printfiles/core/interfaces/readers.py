from __future__ import annotations

from typing import Protocol, runtime_checkable

from printfiles.core.models import FileRecord, ReadOutcome


@runtime_checkable
class ReaderDispatcherProtocol(Protocol):
    def read(self, record: FileRecord) -> ReadOutcome:
        ...
