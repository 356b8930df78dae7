from __future__ import annotations

"""
Segment-based glob matching with recursive `**`.

A pattern is split on '/' into a static prefix (leading segments without
metacharacters) and the remaining segments. Only the directory named by the
prefix is walked; every file below it is matched segment by segment:

  * `**` (a whole segment) matches zero or more directory levels,
  * any other segment is matched with `fnmatch.fnmatchcase` (`*`, `?`, `[..]`),
    so wildcards never cross a '/',
  * leading-dot names get no special treatment: `*` matches `.env` and `**`
    descends into hidden directories,
  * a trailing '/' selects directories only and is rejected, since only
    files are ever matched.
"""

import re
from dataclasses import dataclass
from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Sequence, Tuple

from printfiles.utils.paths import has_glob_magic

_UNCLOSED_CLASS_RE = re.compile(r'\[(?![^\]]*\])')


class InvalidPattern(ValueError):
    pass


@dataclass(frozen=True)
class GlobPattern:
    raw: str
    prefix: str
    segments: Tuple[str, ...]

    @property
    def recursive(self) -> bool:
        return '**' in self.segments

    def may_contain(self, depth: int) -> bool:
        """Whether a directory *depth* levels below the prefix can hold matches."""
        return self.recursive or depth < len(self.segments)

    def matches(self, rel_parts: Sequence[str]) -> bool:
        return _match(self.segments, tuple(rel_parts))


def compile_pattern(raw: str) -> GlobPattern:
    """Split *raw* into static prefix and wildcard segments.

    Raises:
        InvalidPattern: for empty patterns, a trailing '/' or an unterminated
            `[` class.
    """
    text = raw
    if not text.strip():
        raise InvalidPattern('empty pattern')

    if text.endswith('/'):
        raise InvalidPattern('trailing "/" selects directories, only files are matched')

    absolute = text.startswith('/')
    parts = [p for p in text.split('/') if p != '']
    prefix_parts = []
    idx = 0
    while idx < len(parts) and not has_glob_magic(parts[idx]):
        prefix_parts.append(parts[idx])
        idx += 1
    segments = tuple(parts[idx:])
    if not segments:
        raise InvalidPattern(f'no wildcard in {raw!r}')
    for seg in segments:
        if _UNCLOSED_CLASS_RE.search(seg):
            raise InvalidPattern(f'unterminated character class in {raw!r}')

    prefix = '/'.join(prefix_parts)
    if absolute:
        prefix = '/' + prefix
    return GlobPattern(raw=raw, prefix=prefix, segments=segments)


@lru_cache(maxsize=4096)
def _match(segments: Tuple[str, ...], parts: Tuple[str, ...]) -> bool:
    if not segments:
        return not parts
    head, rest = segments[0], segments[1:]
    if head == '**':
        for i in range(len(parts) + 1):
            if _match(rest, parts[i:]):
                return True
        return False
    if not parts:
        return False
    return fnmatchcase(parts[0], head) and _match(rest, parts[1:])
