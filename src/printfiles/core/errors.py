from __future__ import annotations


class PrintFilesError(Exception):
    """Base class for printfiles errors."""


class ConfigError(PrintFilesError):
    """Raised when CLI values cannot be resolved into a RunConfig."""


class TranscodeError(PrintFilesError):
    """Base class for external conversion problems (always recoverable)."""


class TranscoderUnavailable(TranscodeError):
    pass


class TranscoderFailed(TranscodeError):
    pass
