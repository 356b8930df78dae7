"""Unit tests for divider schemes, display paths and the formatter."""
from __future__ import annotations

import io
import re
import unittest
from pathlib import Path

import _support  # noqa: F401  (puts src/ on sys.path)

from printfiles.core.models import DividerScheme, FileRecord, ReadOutcome
from printfiles.rendering.dividers import (
    EqualsDivider,
    TripleBacktickDivider,
    XmlTagDivider,
    divider_for,
)
from printfiles.rendering.formatter import Formatter
from printfiles.rendering.path_resolver import DisplayPathResolver


class DividerTests(unittest.TestCase):
    def test_equals(self) -> None:
        self.assertEqual(EqualsDivider().wrap("a/b.txt", "x\n"), "===a/b.txt===\nx\n===end of 'a/b.txt'===\n")

    def test_newline_inserted_before_footer(self) -> None:
        self.assertEqual(EqualsDivider().wrap("f", "x"), "===f===\nx\n===end of 'f'===\n")
        self.assertEqual(EqualsDivider().wrap("f", ""), "===f===\n\n===end of 'f'===\n")

    def test_backtick_fence(self) -> None:
        d = TripleBacktickDivider()
        self.assertEqual(d.wrap("m.py", "pass\n"), "``` m.py\npass\n```\n")
        self.assertEqual(d.fence_for("a ````` b"), "``````")

    def test_xml_attribute_is_escaped(self) -> None:
        d = XmlTagDivider()
        self.assertEqual(d.header('a "q" & <b>.txt', ""), '<file path="a &quot;q&quot; &amp; &lt;b&gt;.txt">')
        self.assertEqual(d.footer("x", ""), "</file>")

    def test_xml_body_cannot_close_its_region(self) -> None:
        out = XmlTagDivider().wrap("a.xml", "<x>\n</file>\n<y/>\n")
        self.assertEqual(out, '<file path="a.xml">\n<x>\n&lt;/file>\n<y/>\n</file>\n')
        self.assertEqual(re.findall(r"(?m)^</file>$", out), ["</file>"])

    def test_every_scheme_has_a_divider(self) -> None:
        for scheme in DividerScheme:
            self.assertIn("p/q.txt", divider_for(scheme).wrap("p/q.txt", "body"))


class DisplayPathTests(unittest.TestCase):
    CWD = Path("/work/project")

    def test_relative_to_cwd(self) -> None:
        r = DisplayPathResolver(cwd=self.CWD)
        self.assertEqual(r.display("./src/a.py"), "src/a.py")
        self.assertEqual(r.display("/work/project/src/a.py"), "src/a.py")

    def test_relative_from_wins_when_containing(self) -> None:
        r = DisplayPathResolver(cwd=self.CWD, relative_from=Path("src"))
        self.assertEqual(r.display("src/pkg/a.py"), "pkg/a.py")
        self.assertEqual(r.display("docs/readme.md"), "docs/readme.md")

    def test_absolute_relative_from(self) -> None:
        r = DisplayPathResolver(cwd=self.CWD, relative_from=Path("/data"))
        self.assertEqual(r.display("/data/x/y.csv"), "x/y.csv")

    def test_outside_everything_is_shown_as_discovered(self) -> None:
        r = DisplayPathResolver(cwd=self.CWD)
        self.assertEqual(r.display("/etc/hosts"), "/etc/hosts")
        self.assertEqual(r.display("../sibling/file.txt"), "../sibling/file.txt")


class FormatterTests(unittest.TestCase):
    def test_emit_writes_utf8_and_counts_bytes(self) -> None:
        class _Sink(io.BytesIO):
            flushes = 0

            def flush(self) -> None:
                type(self).flushes += 1
                super().flush()

        sink = _Sink()
        fmt = Formatter(
            sink=sink,
            divider=divider_for(DividerScheme.EQUALS),
            resolver=DisplayPathResolver(cwd=Path("/w")),
        )
        n1 = fmt.emit(ReadOutcome(record=FileRecord(path="a.txt"), body="ü\n"))
        n2 = fmt.emit(ReadOutcome(record=FileRecord(path="./b.txt"), body="b"))
        self.assertEqual(_Sink.flushes, 0)
        fmt.flush()
        self.assertEqual(_Sink.flushes, 1)

        data = sink.getvalue()
        self.assertEqual(data, "===a.txt===\nü\n===end of 'a.txt'===\n===b.txt===\nb\n===end of 'b.txt'===\n".encode("utf-8"))
        self.assertEqual(n1 + n2, len(data))


if __name__ == "__main__":
    unittest.main()
