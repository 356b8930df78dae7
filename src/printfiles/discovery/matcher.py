from __future__ import annotations

"""
Token → file paths resolution.

Three cases, checked in order for every token:

  1. an existing directory is walked recursively and filtered by the
     `--ext` allow-list;
  2. a token without glob metacharacters is a literal path and is kept only
     if it names an existing file (the allow-list does not apply);
  3. anything else is a glob evaluated relative to the working root
     (the allow-list does not apply either).

Returned paths are spelled relative to the working root exactly as the user
typed them (directory/prefix + walked names); nothing is resolved.
Zero-match and invalid tokens are reported as warnings and yield [].
"""

import logging
import os
from pathlib import Path
from typing import FrozenSet, List, Optional

from printfiles.core.interfaces.fs import MatcherProtocol, WalkerProtocol
from printfiles.discovery.globbing import InvalidPattern, compile_pattern
from printfiles.discovery.walker import FileWalker
from printfiles.logging.helpers import get_logger
from printfiles.utils.extensions import is_extension_allowed
from printfiles.utils.paths import fs_path, has_glob_magic


class PatternMatcher(MatcherProtocol):
    def __init__(
        self,
        *,
        cwd: Path,
        extensions: FrozenSet[str] = frozenset(),
        follow_links: bool = True,
        walker: Optional[WalkerProtocol] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cwd = cwd
        self._exts = extensions
        self._follow = follow_links
        self._log = logger or get_logger('discovery.matcher')
        self._walker = walker or FileWalker(logger=self._log)

    @staticmethod
    def _relative(token_root: str, root_fs: str, full: str) -> str:
        rel = os.path.relpath(full, root_fs)
        return os.path.join(token_root, rel) if token_root else rel

    def match(self, token: str) -> List[str]:
        token_fs = fs_path(self._cwd, token)
        if os.path.isdir(token_fs):
            return self._match_directory(token, token_fs)
        if not has_glob_magic(token):
            return self._match_literal(token, token_fs)
        return self._match_glob(token)

    def _match_directory(self, token: str, token_fs: str) -> List[str]:
        out: List[str] = []
        for full in self._walker.iter_files(token_fs, follow_links=self._follow):
            if not is_extension_allowed(full, self._exts):
                continue
            out.append(self._relative(token, token_fs, full))
        if not out:
            self._log.warning('⚠  directory %s contains no matching files', token)
        return out

    def _match_literal(self, token: str, token_fs: str) -> List[str]:
        if os.path.isfile(token_fs):
            return [token]
        self._log.warning('⚠  no such file: %s', token)
        return []

    def _match_glob(self, token: str) -> List[str]:
        try:
            pattern = compile_pattern(token)
        except InvalidPattern as exc:
            self._log.warning('⚠  invalid pattern %s: %s', token, exc)
            return []

        root_fs = fs_path(self._cwd, pattern.prefix or '.')
        if not os.path.isdir(root_fs):
            self._log.warning('⚠  pattern matched no files: %s', token)
            return []

        def _descend(dir_path: str, depth: int) -> bool:
            return pattern.may_contain(depth)

        out: List[str] = []
        for full in self._walker.iter_files(root_fs, follow_links=self._follow, descend=_descend):
            rel = os.path.relpath(full, root_fs)
            if pattern.matches(rel.split(os.sep)):
                out.append(os.path.join(pattern.prefix, rel) if pattern.prefix else rel)
        if not out:
            self._log.warning('⚠  pattern matched no files: %s', token)
        return out
