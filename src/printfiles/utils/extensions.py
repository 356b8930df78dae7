from __future__ import annotations
"""Extension utilities for the `--ext` allow-list.

Semantics:
    * The flag value is a comma-separated list; items are trimmed, lower-cased
      and stripped of leading dots. Example: "MD, .txt" -> {"md", "txt"}.
    * Matching compares the lower-cased final extension of the file name
      (`Path.suffix` without the dot). Files without extension never match.
    * An empty allow-list allows everything.

The filter only ever applies to files found by walking a directory token.
"""

from pathlib import PurePath
from typing import FrozenSet, Optional


def parse_extensions(csv: Optional[str]) -> FrozenSet[str]:
    """Normalize an `--ext` value into a set of bare lower-case extensions."""
    if not csv:
        return frozenset()
    out = set()
    for raw in csv.split(','):
        ext = raw.strip().lstrip('.').lower()
        if ext:
            out.add(ext)
    return frozenset(out)


def extension_of(path: str | PurePath) -> str | None:
    """Return the lower-case extension of *path* without the dot, or None."""
    suffix = PurePath(path).suffix
    if not suffix:
        return None
    return suffix[1:].lower()


def is_extension_allowed(path: str | PurePath, allowed: FrozenSet[str]) -> bool:
    if not allowed:
        return True
    ext = extension_of(path)
    return ext is not None and ext in allowed
