from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Protocol, runtime_checkable

from printfiles.core.models import FileRecord


@runtime_checkable
class MatcherProtocol(Protocol):
    def match(self, token: str) -> list[str]:
        ...


@runtime_checkable
class CollectorProtocol(Protocol):
    def add(self, paths: Iterable[str]) -> None:
        ...

    def ordered(self) -> list[FileRecord]:
        ...

    def __len__(self) -> int:
        ...


@runtime_checkable
class DisplayPathResolverProtocol(Protocol):
    def display(self, path: str | Path) -> str:
        ...


@runtime_checkable
class WalkerProtocol(Protocol):
    def iter_files(
        self,
        root: str,
        *,
        follow_links: bool,
        descend: Optional[Callable[[str, int], bool]] = None,
    ) -> Iterator[str]:
        ...
