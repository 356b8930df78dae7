from __future__ import annotations

from typing import Protocol, runtime_checkable

from printfiles.core.models import ReadOutcome


@runtime_checkable
class DividerProtocol(Protocol):
    """Pure wrapper: (display path, content) → delimited region."""

    def header(self, rel: str, body: str) -> str:
        ...

    def footer(self, rel: str, body: str) -> str:
        ...

    def wrap(self, rel: str, body: str) -> str:
        ...


@runtime_checkable
class FormatterProtocol(Protocol):
    def emit(self, outcome: ReadOutcome) -> int:
        ...

    def flush(self) -> None:
        ...
