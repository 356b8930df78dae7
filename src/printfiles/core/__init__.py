from printfiles.core.errors import (
    ConfigError,
    PrintFilesError,
    TranscodeError,
    TranscoderFailed,
    TranscoderUnavailable,
)
from printfiles.core.models import (
    BinaryPolicy,
    ClipSpec,
    DividerScheme,
    FileRecord,
    ReaderBackend,
    ReadOutcome,
    RunConfig,
    SortKey,
)
from printfiles.core.report import RunReport

__all__ = [
    'BinaryPolicy',
    'ClipSpec',
    'ConfigError',
    'DividerScheme',
    'FileRecord',
    'PrintFilesError',
    'ReaderBackend',
    'ReadOutcome',
    'RunConfig',
    'RunReport',
    'SortKey',
    'TranscodeError',
    'TranscoderFailed',
    'TranscoderUnavailable',
]
