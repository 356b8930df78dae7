from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TranscoderProtocol(Protocol):
    """Capability-probed converter from rich documents to plain text.

    `convert` returns the converted text or raises TranscoderUnavailable /
    TranscoderFailed; callers own the fallback decision.
    """

    def is_available(self) -> bool:
        ...

    def convert(self, path: Path) -> str:
        ...
