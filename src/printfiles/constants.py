from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates fixed values to reduce cross-module coupling.
"""

# Extensions that the `auto` reader hands to the external converter.
RICH_DOCUMENT_EXTENSIONS: frozenset[str] = frozenset(
    {'rtf', 'rtfd', 'doc', 'docx', 'html', 'htm', 'odt', 'webarchive'}
)

# OS-provided document converter (macOS).
TEXTUTIL_COMMAND: str = 'textutil'

GLOB_METACHARS: str = '*?['

# Placeholders emitted inside the divider instead of file content.
OVERSIZE_PLACEHOLDER: str = '(skipped: file exceeds max size)'
BINARY_PLACEHOLDER: str = '(skipped binary file)'
READ_ERROR_PLACEHOLDER: str = '(error: could not read file: {cause})'
SNIPPED_LINE: str = '... (snipped {count} lines) ...'

DEFAULT_CLIP_HEAD: int = 5
DEFAULT_CLIP_TAIL: int = 3

# Binary heuristic: NUL anywhere in the sample, or too many control bytes.
BINARY_SAMPLE_SIZE: int = 8192
BINARY_CONTROL_RATIO: float = 0.30

# Conversion timeout applied when reads run in parallel and none was given.
PARALLEL_DEFAULT_TIMEOUT: float = 60.0
