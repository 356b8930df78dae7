from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional

from printfiles.constants import PARALLEL_DEFAULT_TIMEOUT
from printfiles.core.interfaces.transcoder import TranscoderProtocol
from printfiles.core.models import BinaryPolicy, DividerScheme, ReaderBackend, RunConfig, SortKey
from printfiles.discovery.collector import FileCollector
from printfiles.discovery.matcher import PatternMatcher
from printfiles.io.dispatcher import ReaderDispatcher
from printfiles.io.transcoder import TextutilTranscoder
from printfiles.logging.helpers import get_logger
from printfiles.parsing.tokenizer import split_tokens
from printfiles.processing.line_ops import parse_clip_spec
from printfiles.rendering.dividers import divider_for
from printfiles.rendering.formatter import Formatter
from printfiles.rendering.path_resolver import DisplayPathResolver
from printfiles.utils.extensions import parse_extensions


def build_run_config(ns: argparse.Namespace, *, cwd: Path) -> RunConfig:
    """Resolve a parsed Namespace into an immutable RunConfig.

    Raises:
        ConfigError: when a value cannot be interpreted (e.g. --clip).
    """
    clip = parse_clip_spec(ns.clip) if ns.clip is not None else None
    timeout = ns.timeout
    if timeout is None and ns.jobs > 1:
        timeout = PARALLEL_DEFAULT_TIMEOUT

    return RunConfig(
        tokens=tuple(split_tokens(ns.items)),
        cwd=cwd,
        reader=ReaderBackend(ns.reader),
        extensions=parse_extensions(ns.ext),
        relative_from=Path(ns.relative_from).expanduser() if ns.relative_from else None,
        max_size=ns.max_size,
        binary=BinaryPolicy(ns.binary),
        sort=SortKey(ns.sort),
        follow_links=ns.follow_links,
        clip=clip,
        divider=DividerScheme(ns.divider),
        jobs=ns.jobs,
        timeout=timeout,
        verbose=ns.verbose,
        quiet=ns.quiet,
    )


@dataclass
class Components:
    """Concrete collaborators for one run, wired from a RunConfig."""
    matcher: PatternMatcher
    collector: FileCollector
    dispatcher: ReaderDispatcher
    formatter: Formatter


def build_components(
    cfg: RunConfig,
    *,
    sink: BinaryIO,
    transcoder: Optional[TranscoderProtocol] = None,
) -> Components:
    transcoder = transcoder or TextutilTranscoder(timeout=cfg.timeout, logger=get_logger('io.transcoder'))
    return Components(
        matcher=PatternMatcher(
            cwd=cfg.cwd,
            extensions=cfg.extensions,
            follow_links=cfg.follow_links,
            logger=get_logger('discovery.matcher'),
        ),
        collector=FileCollector(cwd=cfg.cwd, sort=cfg.sort, logger=get_logger('discovery.collector')),
        dispatcher=ReaderDispatcher(
            cwd=cfg.cwd,
            reader=cfg.reader,
            binary=cfg.binary,
            max_size=cfg.max_size,
            clip=cfg.clip,
            transcoder=transcoder,
            logger=get_logger('io.dispatcher'),
        ),
        formatter=Formatter(
            sink=sink,
            divider=divider_for(cfg.divider),
            resolver=DisplayPathResolver(cwd=cfg.cwd, relative_from=cfg.relative_from),
            logger=get_logger('render.formatter'),
        ),
    )
