from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional, Tuple


class ReaderBackend(str, enum.Enum):
    TEXT = 'text'
    TEXTUTIL = 'textutil'
    AUTO = 'auto'


class BinaryPolicy(str, enum.Enum):
    SKIP = 'skip'
    HEX = 'hex'
    BASE64 = 'base64'
    FORCE_TEXT = 'print'


class SortKey(str, enum.Enum):
    NAME = 'name'
    SIZE = 'size'
    MTIME = 'mtime'


class DividerScheme(str, enum.Enum):
    EQUALS = 'equals'
    TRIPLE_BACKTICK = 'triple-backtick'
    XML_TAG = 'xml-tag'


@dataclass(frozen=True)
class FileRecord:
    """A discovered file; identity is the normalized path string."""
    path: str
    size: int = 0
    mtime: float = 0.0
    ext: str | None = None


@dataclass(frozen=True)
class ClipSpec:
    head: int
    tail: int


@dataclass(frozen=True)
class RunConfig:
    """Fully resolved configuration consumed by the pipeline."""
    tokens: Tuple[str, ...]
    cwd: Path
    reader: ReaderBackend = ReaderBackend.TEXT
    extensions: FrozenSet[str] = field(default_factory=frozenset)
    relative_from: Optional[Path] = None
    max_size: Optional[int] = None
    binary: BinaryPolicy = BinaryPolicy.SKIP
    sort: SortKey = SortKey.NAME
    follow_links: bool = True
    clip: Optional[ClipSpec] = None
    divider: DividerScheme = DividerScheme.EQUALS
    jobs: int = 1
    timeout: Optional[float] = None
    verbose: bool = False
    quiet: bool = False


@dataclass(frozen=True)
class ReadOutcome:
    """What the dispatcher decided to show for one file.

    `body` is always wrapped by the divider, whether it holds decoded text,
    an encoded binary payload or a placeholder. `error` is set only for
    read failures and marks the run as a partial failure.
    """
    record: FileRecord
    body: str
    error: str | None = None
    oversize: bool = False
    binary: bool = False
    converted: bool = False
    fallback: bool = False
