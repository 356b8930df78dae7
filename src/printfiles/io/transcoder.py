from __future__ import annotations

"""
External document converter (macOS `textutil`).

`TextutilTranscoder.convert(path)` runs

    textutil -convert txt -stdout <path>

and returns its standard output decoded as (lossy) UTF-8. The command is
probed once with `shutil.which`; absence raises `TranscoderUnavailable`,
a non-zero exit, an invocation error or an expired timeout raise
`TranscoderFailed`. Both are recoverable: the dispatcher falls back to a
direct read.
"""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Callable, Optional

from printfiles.constants import TEXTUTIL_COMMAND
from printfiles.core.errors import TranscoderFailed, TranscoderUnavailable
from printfiles.core.interfaces.transcoder import TranscoderProtocol
from printfiles.io.binary import decode_lossy
from printfiles.logging.helpers import get_logger, trace_io


class TextutilTranscoder(TranscoderProtocol):
    def __init__(
        self,
        *,
        command: str = TEXTUTIL_COMMAND,
        timeout: Optional[float] = None,
        which: Callable[[str], Optional[str]] = shutil.which,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._command = command
        self._timeout = timeout
        self._which = which
        self._resolved: Optional[str] = None
        self._probed = False
        self._log = logger or get_logger('io.transcoder')

    def is_available(self) -> bool:
        if not self._probed:
            self._resolved = self._which(self._command)
            self._probed = True
            self._log.debug('probe %s → %s', self._command, self._resolved or 'not found')
        return self._resolved is not None

    def convert(self, path: Path) -> str:
        if not self.is_available():
            raise TranscoderUnavailable(f'{self._command} not found')

        argv = [self._resolved or self._command, '-convert', 'txt', '-stdout', str(path)]
        trace_io(self._log, 'invoking converter', argv=argv, timeout=self._timeout)
        try:
            proc = subprocess.run(argv, capture_output=True, timeout=self._timeout, check=False)
        except subprocess.TimeoutExpired as exc:
            raise TranscoderFailed(f'timed out after {exc.timeout}s') from exc
        except OSError as exc:
            raise TranscoderFailed(f'invocation error: {exc}') from exc

        if proc.returncode != 0:
            detail = decode_lossy(proc.stderr or b'').strip()
            msg = f'exit status {proc.returncode}'
            raise TranscoderFailed(f'{msg}: {detail}' if detail else msg)

        trace_io(self._log, 'converter finished', path=str(path), bytes=len(proc.stdout))
        return decode_lossy(proc.stdout)
