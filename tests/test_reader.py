"""Tests for log_analyzer/reader.py"""

import os
import tempfile
import unittest
from unittest import mock

from log_analyzer.reader import read_log_file


class TestReadLogFile(unittest.TestCase):
    """Verify whole-file reading and path validation."""

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.filepath = os.path.join(self.tmpdir, "test.log")

    def _write(self, data: bytes):
        with open(self.filepath, "wb") as f:
            f.write(data)

    def test_reads_all_lines(self):
        self._write(b"line one\nline two\nline three\n")
        self.assertEqual(read_log_file(self.filepath), ["line one", "line two", "line three"])

    def test_empty_file(self):
        self._write(b"")
        self.assertEqual(read_log_file(self.filepath), [])

    def test_single_line_no_trailing_newline(self):
        self._write(b"only line")
        self.assertEqual(read_log_file(self.filepath), ["only line"])

    def test_crlf_line_endings(self):
        self._write(b"first\r\nsecond\r\n")
        self.assertEqual(read_log_file(self.filepath), ["first", "second"])

    def test_blank_lines_preserved(self):
        self._write(b"a\n\nb\n")
        self.assertEqual(read_log_file(self.filepath), ["a", "", "b"])

    def test_undecodable_bytes_replaced(self):
        self._write(b"ok \xff\xfe line\n")
        lines = read_log_file(self.filepath)
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("ok "))

    def test_nonexistent_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_log_file(os.path.join(self.tmpdir, "missing.log"))

    def test_unreadable_file_raises(self):
        self._write(b"2025-05-15 14:30:00 [INFO] secret\n")
        with mock.patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
            with self.assertRaises(PermissionError):
                read_log_file(self.filepath)

    def test_directory_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_log_file(self.tmpdir)


if __name__ == "__main__":
    unittest.main()
