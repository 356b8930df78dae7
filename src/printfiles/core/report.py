from __future__ import annotations

"""
Per-run execution report.

The report is the single place where the process-level outcome is derived:
  * 2 – no file matched any token,
  * 1 – at least one file failed to read,
  * 0 – everything discovered was emitted.
"""

import json
import time
from dataclasses import dataclass, field
from typing import List

from printfiles.core.models import ReadOutcome

EXIT_OK = 0
EXIT_PARTIAL_FAILURE = 1
EXIT_NO_MATCH = 2


@dataclass
class RunReport:
    started_at: float = field(default_factory=time.perf_counter)
    finished_at: float | None = None
    duration_s: float | None = None

    files_matched: int = 0
    files_emitted: int = 0
    bytes_emitted: int = 0
    oversize_skipped: int = 0
    binary_handled: int = 0
    converted: int = 0
    fallbacks: int = 0

    errors: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    def record_outcome(self, outcome: ReadOutcome, *, written: int) -> None:
        self.files_emitted += 1
        self.bytes_emitted += written
        if outcome.oversize:
            self.oversize_skipped += 1
        if outcome.binary:
            self.binary_handled += 1
        if outcome.converted:
            self.converted += 1
        if outcome.fallback:
            self.fallbacks += 1
        if outcome.error is not None:
            self.add_error(f'{outcome.record.path}: {outcome.error}')

    @property
    def exit_code(self) -> int:
        if self.files_matched == 0:
            return EXIT_NO_MATCH
        if self.errors:
            return EXIT_PARTIAL_FAILURE
        return EXIT_OK

    def finish(self) -> None:
        self.finished_at = time.perf_counter()
        self.duration_s = self.finished_at - self.started_at

    def summary(self) -> str:
        return (
            f'{self.files_emitted}/{self.files_matched} files emitted, '
            f'{self.bytes_emitted} bytes, {self.oversize_skipped} oversize, '
            f'{self.binary_handled} binary, {self.converted} converted, '
            f'{self.fallbacks} fallbacks, {len(self.errors)} errors'
        )

    def to_json(self, *, indent: int = 2) -> str:
        return json.dumps(
            {
                "duration_s": self.duration_s,
                "files_matched": self.files_matched,
                "files_emitted": self.files_emitted,
                "bytes_emitted": self.bytes_emitted,
                "oversize_skipped": self.oversize_skipped,
                "binary_handled": self.binary_handled,
                "converted": self.converted,
                "fallbacks": self.fallbacks,
                "errors": self.errors,
                "exit_code": self.exit_code,
            },
            indent=indent,
        )
