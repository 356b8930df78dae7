"""
Formatter – writes divider-wrapped regions to a byte sink.

Text is encoded as UTF-8 (`errors="replace"` guards lone surrogates) and
written to the sink without intermediate flushes; the pipeline calls
`flush()` once when the whole run is done.
"""
from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from printfiles.core.interfaces.fs import DisplayPathResolverProtocol
from printfiles.core.interfaces.render import DividerProtocol, FormatterProtocol
from printfiles.core.models import ReadOutcome
from printfiles.logging.helpers import get_logger


class Formatter(FormatterProtocol):
    def __init__(
        self,
        *,
        sink: BinaryIO,
        divider: DividerProtocol,
        resolver: DisplayPathResolverProtocol,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._sink = sink
        self._divider = divider
        self._resolver = resolver
        self._log = logger or get_logger('render.formatter')

    def emit(self, outcome: ReadOutcome) -> int:
        """Write one region and return the number of bytes written."""
        rel = self._resolver.display(outcome.record.path)
        data = self._divider.wrap(rel, outcome.body).encode('utf-8', errors='replace')
        self._sink.write(data)
        self._log.debug('emitted %s (%d bytes)', rel, len(data))
        return len(data)

    def flush(self) -> None:
        self._sink.flush()
