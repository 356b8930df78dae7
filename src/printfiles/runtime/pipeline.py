from __future__ import annotations

"""
Pipeline driver: tokens → matches → ordered records → read → emit.

Reads run sequentially by default. With `jobs > 1` the dispatcher runs on a
thread pool, but outcomes are consumed in collector order through
`Executor.map`, so the emitted bytes never depend on scheduling.
The sink is flushed exactly once, after the last region.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import BinaryIO, Iterator, List, Optional

from printfiles.core.interfaces.transcoder import TranscoderProtocol
from printfiles.core.models import FileRecord, ReadOutcome, RunConfig
from printfiles.core.report import RunReport
from printfiles.logging.helpers import get_logger
from printfiles.runtime.wiring import Components, build_components


class Pipeline:
    def __init__(self, components: Components, *, jobs: int = 1, logger: Optional[logging.Logger] = None) -> None:
        self._c = components
        self._jobs = jobs
        self._log = logger or get_logger('pipeline')

    @classmethod
    def from_config(
        cls,
        cfg: RunConfig,
        *,
        sink: BinaryIO,
        transcoder: Optional[TranscoderProtocol] = None,
    ) -> 'Pipeline':
        return cls(build_components(cfg, sink=sink, transcoder=transcoder), jobs=cfg.jobs)

    def discover(self, tokens: List[str]) -> List[FileRecord]:
        for token in tokens:
            self._c.collector.add(self._c.matcher.match(token))
        self._log.debug('%d unique files from %d tokens', len(self._c.collector), len(tokens))
        return self._c.collector.ordered()

    def _outcomes(self, records: List[FileRecord]) -> Iterator[ReadOutcome]:
        if self._jobs <= 1 or len(records) <= 1:
            for record in records:
                yield self._c.dispatcher.read(record)
            return
        with ThreadPoolExecutor(max_workers=self._jobs, thread_name_prefix='printfiles-read') as pool:
            yield from pool.map(self._c.dispatcher.read, records)

    def run(self, tokens: List[str]) -> RunReport:
        report = RunReport()
        records = self.discover(tokens)
        report.files_matched = len(records)

        if not records:
            self._log.error('no files matched any pattern')
            report.finish()
            return report

        for outcome in self._outcomes(records):
            written = self._c.formatter.emit(outcome)
            report.record_outcome(outcome, written=written)

        self._c.formatter.flush()
        report.finish()
        self._log.info('done: %s', report.summary())
        if self._log.isEnabledFor(logging.DEBUG):
            self._log.debug('report: %s', report.to_json(indent=None))
        return report
