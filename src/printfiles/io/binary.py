from __future__ import annotations

"""Binary-content heuristic and payload encoders.

A buffer is considered binary when its leading sample contains a NUL byte
or when more than BINARY_CONTROL_RATIO of the sample are control bytes other
than common whitespace/escape characters. Bytes >= 0x80 count as printable so
UTF-8 text is never misclassified.
"""

import base64
from typing import Callable, Dict

from printfiles.constants import BINARY_CONTROL_RATIO, BINARY_SAMPLE_SIZE
from printfiles.core.models import BinaryPolicy

_TEXT_CONTROLS = frozenset(b'\t\n\r\f\b\x0b\x1b')


def is_probably_binary(data: bytes, *, sample_size: int = BINARY_SAMPLE_SIZE) -> bool:
    sample = data[:sample_size]
    if not sample:
        return False
    if b'\x00' in sample:
        return True
    controls = sum(1 for b in sample if (b < 0x20 or b == 0x7f) and b not in _TEXT_CONTROLS)
    return controls / len(sample) > BINARY_CONTROL_RATIO


def decode_lossy(data: bytes) -> str:
    """UTF-8 decode replacing invalid sequences with U+FFFD."""
    return data.decode('utf-8', errors='replace')


def _hex(data: bytes) -> str:
    return data.hex() + '\n'


def _base64(data: bytes) -> str:
    return base64.b64encode(data).decode('ascii') + '\n'


ENCODERS: Dict[BinaryPolicy, Callable[[bytes], str]] = {
    BinaryPolicy.HEX: _hex,
    BinaryPolicy.BASE64: _base64,
}
