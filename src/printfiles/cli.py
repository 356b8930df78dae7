from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import BinaryIO, NoReturn, Optional, Sequence, TextIO

from printfiles.core.errors import ConfigError
from printfiles.core.interfaces.transcoder import TranscoderProtocol
from printfiles.core.report import RunReport
from printfiles.logging.helpers import get_logger, level_for, setup_base_logger
from printfiles.parsing.parser import _build_parser
from printfiles.runtime.pipeline import Pipeline
from printfiles.runtime.wiring import build_run_config


logger = get_logger('printfiles')


def _configure_logging(*, json_logs: bool, level: int, stream: Optional[TextIO]) -> None:
    """(Re)configure the side-channel logger for one run."""
    setup_base_logger(json_logs=json_logs, level=level, stream=stream)


class PrintFiles:
    """Top-level façade for command-style execution."""

    @staticmethod
    def run(
        argv: Sequence[str],
        *,
        stdout: Optional[BinaryIO] = None,
        stderr: Optional[TextIO] = None,
        cwd: Optional[Path] = None,
        transcoder: Optional[TranscoderProtocol] = None,
    ) -> RunReport:
        """Run the tool with an argv-like sequence and return the run report.

        Args:
            argv: Arguments without the program name.
            stdout: Binary sink for the primary output (default: stdout).
            stderr: Text stream for diagnostics (default: stderr).
            cwd: Working root for pattern expansion and display paths
                (default: the process working directory).
            transcoder: Optional converter override (tests inject fakes).
        """
        parser = _build_parser()
        ns = parser.parse_args(list(argv))

        json_logs = ns.json_logs or os.getenv('PRINTFILES_JSON_LOGS') == '1'
        _configure_logging(
            json_logs=json_logs,
            level=level_for(verbose=ns.verbose, quiet=ns.quiet),
            stream=stderr,
        )

        root = Path(cwd) if cwd is not None else Path.cwd()
        try:
            cfg = build_run_config(ns, cwd=root)
        except ConfigError as exc:
            parser.error(str(exc))

        sink = stdout if stdout is not None else sys.stdout.buffer
        pipeline = Pipeline.from_config(cfg, sink=sink, transcoder=transcoder)
        return pipeline.run(list(cfg.tokens))


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Entry point for the `printfiles` console script."""
    try:
        report = PrintFiles.run(sys.argv[1:] if argv is None else argv)
        raise SystemExit(report.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        # Downstream closed the pipe (e.g. `| head`); silence the final flush.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('traceback', exc_info=True)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
