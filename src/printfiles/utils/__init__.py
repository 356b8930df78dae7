"""
printfiles.utils – Small shared utilities (extension filters, path helpers).
"""
from .extensions import extension_of, is_extension_allowed, parse_extensions
from .paths import fs_path, has_glob_magic, lexical_relative_to, strip_dot_slash

__all__ = [
    "extension_of",
    "is_extension_allowed",
    "parse_extensions",
    "fs_path",
    "has_glob_magic",
    "lexical_relative_to",
    "strip_dot_slash",
]
