from __future__ import annotations

"""Small logging helpers to standardize printfiles logger names, configuration and tracing.

This module provides:
    - JsonLogFormatter: JSON log formatter with stable fields and optional context.
    - setup_base_logger: Configuration of the 'printfiles' logger (stderr side-channel).
    - get_logger: Namespaced logger factory ('printfiles.*').
    - trace_io utilities gated by PRINTFILES_TRACE_IO.

Primary output never goes through logging; every diagnostic does.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Optional, TextIO

_HANDLER_ATTR = '_printfiles_handler'


class JsonLogFormatter(logging.Formatter):
    """One JSON object per diagnostic line.

    Keys: ts (UTC, millisecond ISO-8601 with a Z suffix), level, module (the
    logger name, e.g. 'printfiles.io.dispatcher'), msg, version, plus ctx
    when a `trace_io` call attached context and exc when exc_info is set.
    """

    def __init__(self, version: Optional[str] = None) -> None:
        super().__init__()
        self._version = version or _package_version()

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            "ts": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }
        ctx = getattr(record, "context", None)
        if ctx:
            payload["ctx"] = ctx
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _package_version() -> str:
    # Imported lazily: printfiles/__init__ imports the cli, which imports us.
    from printfiles import __version__

    return __version__


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Configure the base 'printfiles' logger and return it.

    Unlike a one-shot configuration, calling this again replaces the handler
    installed by a previous call so that each run can target its own stream
    (tests capture stderr per invocation).

    Args:
        json_logs: If True, configure a JSON formatter, else plain text.
        level: Logging level for the base logger.
        stream: Optional stream (stderr by default).

    Returns:
        The configured base logger.
    """
    import sys as _sys

    base = logging.getLogger("printfiles")
    for handler in list(base.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            base.removeHandler(handler)

    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    setattr(handler, _HANDLER_ATTR, True)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def level_for(*, verbose: bool, quiet: bool) -> int:
    """Map the --verbose/--quiet pair onto a logging level (quiet wins)."""
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a namespaced logger under 'printfiles'."""
    if not name or name == "printfiles":
        return logging.getLogger("printfiles")
    if name.startswith("printfiles"):
        return logging.getLogger(name)
    return logging.getLogger(f"printfiles.{name}")


def is_trace_io_enabled() -> bool:
    """Check if IO tracing is enabled via env flag."""
    return os.getenv("PRINTFILES_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Emit debug-verbosity IO trace messages only when enabled."""
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
