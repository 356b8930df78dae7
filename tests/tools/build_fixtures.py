#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – Creates the fixture tree used by the printfiles test-suite.

Idempotent and 100 % Python. Tests call `build_tree(root)` on a temporary
directory; running the script directly rebuilds `test-fixtures/` at the
repository root for manual experiments.
"""
from __future__ import annotations

import shutil
import textwrap
from pathlib import Path

ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()


# ────────────────────────── utilities ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


def _write_bytes(path: Path, data: bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


# ───────────────────── source files ─────────────────────
def _populate_sources(root: Path) -> None:
    _write(root / "a.txt", "alpha\n")
    _write(root / "docs/x.md", "# x\n")
    _write(root / "docs/y.txt", "y\n")

    _write(root / "src/lib.rs", "lib\n")
    _write(root / "src/bin/main.rs", "main\n")

    _write(root / "dir/a.txt", "A\n")
    _write(root / "dir/b.md", "B\n")
    _write(root / "dir/sub/c.txt", "C\n")
    _write(root / "dir/UPPER.TXT", "upper\n")

    _write_bytes(root / "notes/no_newline.txt", b"tail without newline")
    _write_bytes(root / "notes/latin1.txt", b"caf\xe9\n")
    _write_bytes(root / "bin/blob.bin", b"\x00\x01\x02binary\xff")
    # exactly 20 bytes
    _write_bytes(root / "big.txt", b"abcdefghijklmnopqrs\n")

    _write(root / "rich/doc.rtf", r"{\rtf1\ansi hello}" + "\n")
    _write(root / "rich/page.html", "<p>hi</p>\n")

    _write(root / ".hidden/secret.txt", "hidden\n")

    (root / "long.txt").write_text("".join(f"line {i}\n" for i in range(1, 21)), encoding="utf-8")

    _write(root / "fenced.md", """
        ```py
        x = 1
        ```
    """)


def build_tree(root: Path) -> Path:
    """Populate *root* with the fixture tree and return it."""
    root.mkdir(parents=True, exist_ok=True)
    _populate_sources(root)
    return root


# ──────────────────────────── main ────────────────────────────
def main() -> None:  # pragma: no cover
    if ROOT.exists():
        shutil.rmtree(ROOT)
    print(f"⚙️  Rebuilding fixture tree → {ROOT}")
    build_tree(ROOT)
    print("✅  Fixture tree READY")


if __name__ == "__main__":  # pragma: no cover
    main()
