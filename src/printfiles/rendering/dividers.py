"""
Divider schemes wrapping each file region.

  • equals           ===<path>=== … ===end of '<path>'===
  • triple-backtick  ``` <path> … ```
  • xml-tag          <file path="<path>"> … </file>

Every scheme surfaces the display path, and `wrap` always places the footer
on its own line (a newline is inserted when the body does not end with one).
The backtick fence grows past the longest backtick run found in the body so
that a fenced body can never close the region early. For the same reason the
xml-tag scheme rewrites every `</file` in the body as `&lt;/file`, so the
only closing tag in a region is its footer.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Dict
from xml.sax.saxutils import escape

from printfiles.core.models import DividerScheme

_BACKTICK_RUN_RE = re.compile(r'`+')
_ATTR_ENTITIES = {'"': '&quot;'}
_CLOSING_TAG_RE = re.compile(r'</file')


class Divider(ABC):
    @abstractmethod
    def header(self, rel: str, body: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def footer(self, rel: str, body: str) -> str:
        raise NotImplementedError

    def escape_body(self, body: str) -> str:
        return body

    def wrap(self, rel: str, body: str) -> str:
        body = self.escape_body(body)
        sep = '' if body.endswith('\n') else '\n'
        return f'{self.header(rel, body)}\n{body}{sep}{self.footer(rel, body)}\n'


class EqualsDivider(Divider):
    def header(self, rel: str, body: str) -> str:
        return f'==={rel}==='

    def footer(self, rel: str, body: str) -> str:
        return f"===end of '{rel}'==="


class TripleBacktickDivider(Divider):
    @staticmethod
    def fence_for(body: str) -> str:
        longest = max((len(m.group(0)) for m in _BACKTICK_RUN_RE.finditer(body)), default=0)
        return '`' * max(3, longest + 1)

    def header(self, rel: str, body: str) -> str:
        return f'{self.fence_for(body)} {rel}'

    def footer(self, rel: str, body: str) -> str:
        return self.fence_for(body)


class XmlTagDivider(Divider):
    def header(self, rel: str, body: str) -> str:
        return f'<file path="{escape(rel, _ATTR_ENTITIES)}">'

    def escape_body(self, body: str) -> str:
        return _CLOSING_TAG_RE.sub('&lt;/file', body)

    def footer(self, rel: str, body: str) -> str:
        return '</file>'


DIVIDERS: Dict[DividerScheme, Divider] = {
    DividerScheme.EQUALS: EqualsDivider(),
    DividerScheme.TRIPLE_BACKTICK: TripleBacktickDivider(),
    DividerScheme.XML_TAG: XmlTagDivider(),
}


def divider_for(scheme: DividerScheme) -> Divider:
    return DIVIDERS[scheme]
