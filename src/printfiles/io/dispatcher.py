from __future__ import annotations

"""
Reader dispatcher – decides how each file's displayable text is obtained.

Per file, every branch is terminal:

  1. size cap      → placeholder, nothing read;
  2. backend       → `text` reads directly, `textutil` converts, `auto`
                     converts only rich-document extensions;
  3. conversion    → converter output on success; when the converter is
                     missing or fails, warn and fall through to 4;
  4. direct read   → lossy UTF-8 text, unless the bytes look binary and the
                     policy is not `print`: then skip / hex / base64.

A read failure never raises: it becomes an outcome carrying `error` and an
error placeholder body, so the formatter still emits a matched header and
footer pair.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from printfiles.constants import (
    BINARY_PLACEHOLDER,
    OVERSIZE_PLACEHOLDER,
    READ_ERROR_PLACEHOLDER,
    RICH_DOCUMENT_EXTENSIONS,
)
from printfiles.core.errors import TranscoderFailed, TranscoderUnavailable
from printfiles.core.interfaces.readers import ReaderDispatcherProtocol
from printfiles.core.interfaces.transcoder import TranscoderProtocol
from printfiles.core.models import BinaryPolicy, ClipSpec, FileRecord, ReadOutcome, ReaderBackend
from printfiles.io.binary import ENCODERS, decode_lossy, is_probably_binary
from printfiles.io.transcoder import TextutilTranscoder
from printfiles.logging.helpers import get_logger
from printfiles.processing.line_ops import clip_text
from printfiles.utils.paths import fs_path


def is_rich_document(record: FileRecord) -> bool:
    return record.ext is not None and record.ext in RICH_DOCUMENT_EXTENSIONS


_CONVERSION_POLICY: Dict[ReaderBackend, Callable[[FileRecord], bool]] = {
    ReaderBackend.TEXT: lambda r: False,
    ReaderBackend.TEXTUTIL: lambda r: True,
    ReaderBackend.AUTO: is_rich_document,
}


class ReaderDispatcher(ReaderDispatcherProtocol):
    def __init__(
        self,
        *,
        cwd: Path,
        reader: ReaderBackend = ReaderBackend.TEXT,
        binary: BinaryPolicy = BinaryPolicy.SKIP,
        max_size: Optional[int] = None,
        clip: Optional[ClipSpec] = None,
        transcoder: Optional[TranscoderProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cwd = cwd
        self._wants_conversion = _CONVERSION_POLICY[reader]
        self._binary = binary
        self._max_size = max_size
        self._clip = clip
        self._log = logger or get_logger('io.dispatcher')
        self._transcoder = transcoder or TextutilTranscoder(logger=self._log)

    def read(self, record: FileRecord) -> ReadOutcome:
        self._log.info('processing file: %s', record.path)

        if self._max_size is not None and record.size > self._max_size:
            self._log.warning(
                '⚠  skipped %s (size=%d > max_size=%d)', record.path, record.size, self._max_size
            )
            return ReadOutcome(record=record, body=OVERSIZE_PLACEHOLDER + '\n', oversize=True)

        fallback = False
        if self._wants_conversion(record):
            try:
                text = self._transcoder.convert(Path(fs_path(self._cwd, record.path)))
                return ReadOutcome(record=record, body=self._clipped(text), converted=True)
            except TranscoderUnavailable as exc:
                self._log.warning('⚠  %s; falling back to text read: %s', exc, record.path)
            except TranscoderFailed as exc:
                self._log.warning('⚠  conversion failed (%s); falling back to text read: %s', exc, record.path)
            fallback = True

        return self._read_direct(record, fallback=fallback)

    def _clipped(self, text: str) -> str:
        return clip_text(text, self._clip) if self._clip is not None else text

    def _read_direct(self, record: FileRecord, *, fallback: bool) -> ReadOutcome:
        try:
            data = Path(fs_path(self._cwd, record.path)).read_bytes()
        except OSError as exc:
            cause = exc.strerror or str(exc)
            self._log.error('✘ could not read %s (%s)', record.path, cause)
            return ReadOutcome(
                record=record,
                body=READ_ERROR_PLACEHOLDER.format(cause=cause) + '\n',
                error=cause,
                fallback=fallback,
            )

        if self._binary is not BinaryPolicy.FORCE_TEXT and is_probably_binary(data):
            self._log.warning('⚠  binary file handled as %s: %s', self._binary.value, record.path)
            encoder = ENCODERS.get(self._binary)
            body = encoder(data) if encoder is not None else BINARY_PLACEHOLDER + '\n'
            return ReadOutcome(record=record, body=body, binary=True, fallback=fallback)

        return ReadOutcome(record=record, body=self._clipped(decode_lossy(data)), fallback=fallback)
