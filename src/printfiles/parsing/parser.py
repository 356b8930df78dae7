# printfiles/parsing/parser.py
from __future__ import annotations

import argparse

from printfiles.constants import DEFAULT_CLIP_HEAD, DEFAULT_CLIP_TAIL
from printfiles.core.models import BinaryPolicy, DividerScheme, ReaderBackend, SortKey


def _non_negative_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected an integer, got {raw!r}')
    if value < 0:
        raise argparse.ArgumentTypeError(f'expected a non-negative integer, got {raw!r}')
    return value


def _positive_int(raw: str) -> int:
    value = _non_negative_int(raw)
    if value == 0:
        raise argparse.ArgumentTypeError('expected a positive integer')
    return value


def _positive_float(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected a number of seconds, got {raw!r}')
    if value <= 0:
        raise argparse.ArgumentTypeError('expected a positive number of seconds')
    return value


def _choices(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Enum-valued flags keep their raw string value here; conversion to
          the model enums happens in `runtime.wiring.build_run_config`.
        - Usage errors exit with status 2, the same status as "no matches".
    """
    p = argparse.ArgumentParser(
        prog="printfiles",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "printfiles – print files matched by globs/dirs with ===header=== "
            "and ===end of 'file'=== markers"
        ),
    )

    g_loc = p.add_argument_group("Discovery")
    g_read = p.add_argument_group("Reading")
    g_out = p.add_argument_group("Output")
    g_misc = p.add_argument_group("Miscellaneous")

    p.add_argument(
        "items",
        nargs="+",
        metavar="PATTERN",
        help=(
            "Glob patterns, files or directories. Each item may hold several "
            "comma-separated entries ('src/**/*.py,docs')."
        ),
    )

    # -----------------------
    # Discovery
    # -----------------------
    g_loc.add_argument(
        "--ext",
        metavar="CSV",
        dest="ext",
        help=(
            "Only keep these extensions (e.g. 'md,txt') for files found by walking "
            "a directory. Explicit files and glob matches are never filtered."
        ),
    )
    g_loc.add_argument(
        "--sort",
        choices=_choices(SortKey),
        default=SortKey.NAME.value,
        help="Ordering of the emitted files; ties are broken by path (default: name).",
    )
    g_loc.add_argument(
        "--follow-links",
        dest="follow_links",
        action="store_true",
        default=True,
        help="Follow symbolic links while walking directories (default).",
    )
    g_loc.add_argument(
        "--no-follow-links",
        dest="follow_links",
        action="store_false",
        help="Do not descend into symlinked directories.",
    )

    # -----------------------
    # Reading
    # -----------------------
    g_read.add_argument(
        "--reader",
        choices=_choices(ReaderBackend),
        default=ReaderBackend.TEXT.value,
        help=(
            "text: read bytes directly (default)\n"
            "textutil: convert with macOS textutil, falling back to text\n"
            "auto: textutil for rtf/doc/docx/html/odt…, text otherwise"
        ),
    )
    g_read.add_argument(
        "--max-size",
        metavar="BYTES",
        type=_non_negative_int,
        dest="max_size",
        help="Files larger than this are not read; a placeholder is printed instead.",
    )
    g_read.add_argument(
        "--binary",
        choices=_choices(BinaryPolicy),
        default=BinaryPolicy.SKIP.value,
        help="What to do with files that look binary: skip (default), hex, base64 or print as text.",
    )
    g_read.add_argument(
        "-j",
        "--jobs",
        metavar="N",
        type=_positive_int,
        default=1,
        help="Read files with N parallel workers; output order is unchanged (default: 1).",
    )
    g_read.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=_positive_float,
        help="Abort a textutil conversion after SECONDS and fall back to text (default: none, 60 with -j > 1).",
    )

    # -----------------------
    # Output
    # -----------------------
    g_out.add_argument(
        "--divider",
        choices=_choices(DividerScheme),
        default=DividerScheme.EQUALS.value,
        help="Delimiter style around each file (default: equals).",
    )
    g_out.add_argument(
        "--relative-from",
        metavar="DIR",
        dest="relative_from",
        help="Show paths relative to DIR when files lie under it.",
    )
    g_out.add_argument(
        "-c",
        "--clip",
        metavar="N[:M]",
        nargs="?",
        const="",
        default=None,
        help=(
            "Only print the first N and last M lines of each file "
            f"(bare -c means {DEFAULT_CLIP_HEAD}:{DEFAULT_CLIP_TAIL})."
        ),
    )

    # -----------------------
    # Miscellaneous
    # -----------------------
    g_misc.add_argument("--verbose", action="store_true", help="Log every processed file to stderr.")
    g_misc.add_argument("--quiet", action="store_true", help="Only log errors.")
    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit diagnostics as JSON lines (also PRINTFILES_JSON_LOGS=1).",
    )
    return p
