from __future__ import annotations

from printfiles.cli import PrintFiles, main
from printfiles.core.models import (
    BinaryPolicy,
    DividerScheme,
    FileRecord,
    ReaderBackend,
    ReadOutcome,
    RunConfig,
    SortKey,
)
from printfiles.core.report import RunReport
from printfiles.parsing.parser import _build_parser
from printfiles.runtime.pipeline import Pipeline

__version__ = '0.3.0'

__all__ = [
    'PrintFiles',
    'main',
    'BinaryPolicy',
    'DividerScheme',
    'FileRecord',
    'ReaderBackend',
    'ReadOutcome',
    'RunConfig',
    'RunReport',
    'SortKey',
    'Pipeline',
    '_build_parser',
]
