# src/printfiles/processing/line_ops.py
from __future__ import annotations

from typing import Optional

from printfiles.constants import DEFAULT_CLIP_HEAD, DEFAULT_CLIP_TAIL, SNIPPED_LINE
from printfiles.core.errors import ConfigError
from printfiles.core.models import ClipSpec


def parse_clip_spec(raw: Optional[str]) -> ClipSpec:
    """Parse an `N[:M]` clip value.

    An empty value means the default `5:3`; `N` keeps only the head,
    `:M` only the tail. Both parts zero is rejected.

    Raises:
        ConfigError: on non-numeric parts or when both parts are zero.
    """
    s = (raw or '').strip()
    if not s:
        return ClipSpec(head=DEFAULT_CLIP_HEAD, tail=DEFAULT_CLIP_TAIL)

    head_str, sep, tail_str = s.partition(':')
    try:
        head = int(head_str.strip()) if head_str.strip() else 0
        tail = int(tail_str.strip()) if sep and tail_str.strip() else 0
    except ValueError as exc:
        raise ConfigError(f"invalid --clip value {raw!r}: {exc}") from exc
    if head < 0 or tail < 0:
        raise ConfigError(f"invalid --clip value {raw!r}: negative line count")
    if head == 0 and tail == 0:
        raise ConfigError(f"invalid --clip value {raw!r}: head and tail cannot both be 0")
    return ClipSpec(head=head, tail=tail)


def clip_text(content: str, clip: ClipSpec) -> str:
    """Keep the first `clip.head` and last `clip.tail` lines of *content*.

    The elided middle is replaced by a single `... (snipped K lines) ...`
    line. Content short enough to be shown whole is returned unchanged.
    """
    lines = content.splitlines(True)
    total = len(lines)
    if clip.head + clip.tail >= total:
        return content

    head = lines[:clip.head]
    tail = lines[total - clip.tail:] if clip.tail else []
    skipped = total - len(head) - len(tail)

    parts = list(head)
    parts.append(SNIPPED_LINE.format(count=skipped) + '\n')
    parts.extend(tail)
    return ''.join(parts)
