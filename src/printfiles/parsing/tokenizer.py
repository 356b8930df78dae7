from __future__ import annotations

"""
Positional-argument tokenizer.

Each raw CLI item may carry several comma-separated patterns
(`"src/*.py, docs"`). Tokens are trimmed and empties dropped; the relative
order of tokens is preserved.
"""

from typing import Iterable, List


def split_tokens(items: Iterable[str]) -> List[str]:
    """Flatten *items* into an ordered list of pattern/directory tokens.

    Examples:
        split_tokens(["a.txt,b.txt", " docs "]) -> ["a.txt", "b.txt", "docs"]
        split_tokens([",,", ""])               -> []
    """
    out: List[str] = []
    for item in items:
        for piece in (item or '').split(','):
            tok = piece.strip()
            if tok:
                out.append(tok)
    return out
