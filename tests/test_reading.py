"""Unit tests for the binary heuristic, clipping, the transcoder and the dispatcher."""
from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest.mock import patch

from _support import FakeTranscoder, fixture_tree

from printfiles.core.errors import ConfigError, TranscoderFailed, TranscoderUnavailable
from printfiles.core.models import BinaryPolicy, ClipSpec, FileRecord, ReaderBackend
from printfiles.io.binary import decode_lossy, is_probably_binary
from printfiles.io.dispatcher import ReaderDispatcher, is_rich_document
from printfiles.io.transcoder import TextutilTranscoder
from printfiles.processing.line_ops import clip_text, parse_clip_spec


class BinaryHeuristicTests(unittest.TestCase):
    def test_nul_byte_means_binary(self) -> None:
        self.assertTrue(is_probably_binary(b"abc\0def"))
        self.assertFalse(is_probably_binary(b"plain text\n"))
        self.assertFalse(is_probably_binary(b""))

    def test_control_byte_ratio(self) -> None:
        self.assertTrue(is_probably_binary(b"\x01\x02\x03\x04ab"))
        self.assertFalse(is_probably_binary(b"tabs\tand\r\nnewlines\x1b[0m"))

    def test_utf8_is_text(self) -> None:
        self.assertFalse(is_probably_binary("ünïcødé ✓\n".encode("utf-8")))

    def test_lossy_decode(self) -> None:
        self.assertEqual(decode_lossy(b"ok\xff"), "ok�")


class ClipTests(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertEqual(parse_clip_spec(""), ClipSpec(5, 3))
        self.assertEqual(parse_clip_spec(None), ClipSpec(5, 3))
        self.assertEqual(parse_clip_spec("4"), ClipSpec(4, 0))
        self.assertEqual(parse_clip_spec(":2"), ClipSpec(0, 2))
        self.assertEqual(parse_clip_spec(" 1 : 1 "), ClipSpec(1, 1))

    def test_parse_rejects_bad_values(self) -> None:
        for raw in ("0:0", "x", "1:y", "0"):
            with self.assertRaises(ConfigError, msg=raw):
                parse_clip_spec(raw)

    def test_clip_inserts_snipped_line(self) -> None:
        content = "line1\nline2\nline3\nline4\nline5\nline6\n"
        self.assertEqual(
            clip_text(content, ClipSpec(2, 2)),
            "line1\nline2\n... (snipped 2 lines) ...\nline5\nline6\n",
        )

    def test_short_content_is_unchanged(self) -> None:
        self.assertEqual(clip_text("a\nb", ClipSpec(1, 1)), "a\nb")
        self.assertEqual(clip_text("", ClipSpec(1, 1)), "")

    def test_head_only_and_tail_only(self) -> None:
        content = "1\n2\n3\n4\n"
        self.assertEqual(clip_text(content, ClipSpec(1, 0)), "1\n... (snipped 3 lines) ...\n")
        self.assertEqual(clip_text(content, ClipSpec(0, 1)), "... (snipped 3 lines) ...\n4\n")


class TranscoderTests(unittest.TestCase):
    def _transcoder(self, **kw) -> TextutilTranscoder:
        return TextutilTranscoder(which=lambda name: "/usr/bin/textutil", **kw)

    def test_missing_command_is_unavailable(self) -> None:
        t = TextutilTranscoder(which=lambda name: None)
        self.assertFalse(t.is_available())
        with self.assertRaises(TranscoderUnavailable):
            t.convert(Path("x.rtf"))

    def test_command_lookup_runs_once(self) -> None:
        calls = []

        def which(name):
            calls.append(name)
            return "/usr/bin/textutil"

        t = TextutilTranscoder(which=which)
        self.assertTrue(t.is_available())
        self.assertTrue(t.is_available())
        self.assertEqual(calls, ["textutil"])

    def test_successful_conversion(self) -> None:
        done = subprocess.CompletedProcess(args=[], returncode=0, stdout=b"hello\n", stderr=b"")
        with patch("printfiles.io.transcoder.subprocess.run", return_value=done) as mocked:
            text = self._transcoder(timeout=5).convert(Path("doc.rtf"))
        self.assertEqual(text, "hello\n")
        argv = mocked.call_args.args[0]
        self.assertEqual(argv, ["/usr/bin/textutil", "-convert", "txt", "-stdout", "doc.rtf"])
        self.assertEqual(mocked.call_args.kwargs["timeout"], 5)

    def test_non_zero_exit_fails(self) -> None:
        done = subprocess.CompletedProcess(args=[], returncode=1, stdout=b"", stderr=b"bad file\n")
        with patch("printfiles.io.transcoder.subprocess.run", return_value=done):
            with self.assertRaises(TranscoderFailed) as ctx:
                self._transcoder().convert(Path("doc.rtf"))
        self.assertEqual(str(ctx.exception), "exit status 1: bad file")

    def test_timeout_fails(self) -> None:
        exc = subprocess.TimeoutExpired(cmd="textutil", timeout=1.5)
        with patch("printfiles.io.transcoder.subprocess.run", side_effect=exc):
            with self.assertRaises(TranscoderFailed) as ctx:
                self._transcoder(timeout=1.5).convert(Path("doc.rtf"))
        self.assertIn("timed out after 1.5s", str(ctx.exception))

    def test_invocation_error_fails(self) -> None:
        with patch("printfiles.io.transcoder.subprocess.run", side_effect=FileNotFoundError(2, "gone")):
            with self.assertRaises(TranscoderFailed):
                self._transcoder().convert(Path("doc.rtf"))


class DispatcherTests(unittest.TestCase):
    @staticmethod
    def _record(root: Path, rel: str) -> FileRecord:
        p = root / rel
        return FileRecord(path=rel, size=p.stat().st_size if p.exists() else 0, ext=p.suffix[1:].lower() or None)

    def test_rich_document_detection(self) -> None:
        self.assertTrue(is_rich_document(FileRecord(path="a.DOCX", ext="docx")))
        self.assertTrue(is_rich_document(FileRecord(path="a.webarchive", ext="webarchive")))
        self.assertFalse(is_rich_document(FileRecord(path="a.txt", ext="txt")))
        self.assertFalse(is_rich_document(FileRecord(path="noext")))

    def test_text_backend_never_converts(self) -> None:
        fake = FakeTranscoder()
        with fixture_tree() as root:
            d = ReaderDispatcher(cwd=root, reader=ReaderBackend.TEXT, transcoder=fake)
            out = d.read(self._record(root, "rich/page.html"))
        self.assertEqual(out.body, "<p>hi</p>\n")
        self.assertEqual(fake.calls, [])

    def test_oversize_is_not_read(self) -> None:
        fake = FakeTranscoder()
        with fixture_tree() as root:
            d = ReaderDispatcher(cwd=root, reader=ReaderBackend.TEXTUTIL, max_size=1, transcoder=fake)
            out = d.read(self._record(root, "rich/doc.rtf"))
        self.assertTrue(out.oversize)
        self.assertEqual(out.body, "(skipped: file exceeds max size)\n")
        self.assertEqual(fake.calls, [])

    def test_conversion_output_is_clipped(self) -> None:
        fake = FakeTranscoder(text="1\n2\n3\n4\n")
        with fixture_tree() as root:
            d = ReaderDispatcher(cwd=root, reader=ReaderBackend.AUTO, clip=ClipSpec(1, 1), transcoder=fake)
            out = d.read(self._record(root, "rich/doc.rtf"))
        self.assertTrue(out.converted)
        self.assertEqual(out.body, "1\n... (snipped 2 lines) ...\n4\n")

    def test_fallback_applies_binary_policy(self) -> None:
        fake = FakeTranscoder(error=TranscoderFailed("boom"))
        with fixture_tree() as root:
            d = ReaderDispatcher(cwd=root, reader=ReaderBackend.TEXTUTIL, binary=BinaryPolicy.HEX, transcoder=fake)
            out = d.read(self._record(root, "bin/blob.bin"))
        self.assertTrue(out.fallback)
        self.assertTrue(out.binary)
        self.assertEqual(out.body, "00010262696e617279ff\n")

    def test_clip_never_touches_binary_payloads(self) -> None:
        with fixture_tree() as root:
            d = ReaderDispatcher(cwd=root, binary=BinaryPolicy.BASE64, clip=ClipSpec(0, 1))
            out = d.read(self._record(root, "bin/blob.bin"))
        self.assertEqual(out.body, "AAECYmluYXJ5/w==\n")

    def test_vanished_file_becomes_error_outcome(self) -> None:
        with fixture_tree() as root:
            record = self._record(root, "a.txt")
            (root / "a.txt").unlink()
            d = ReaderDispatcher(cwd=root)
            with self.assertLogs("printfiles.io.dispatcher", level="ERROR") as logs:
                out = d.read(record)
        self.assertIsNotNone(out.error)
        self.assertTrue(out.body.startswith("(error: could not read file: "))
        self.assertIn("a.txt", logs.output[0])


if __name__ == "__main__":
    unittest.main()
