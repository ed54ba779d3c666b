import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch, MagicMock
from foldean.errors import DirectoryReadError, FileTypeQueryError
from foldean.scanner import scan_directory, is_hidden, is_lock_file

class TestScanner(unittest.TestCase):
    def setUp(self):
        self.root = Path(tempfile.mkdtemp())

    def tearDown(self):
        shutil.rmtree(self.root)

    def names(self, **kwargs):
        return [e.path.relative_to(self.root).as_posix() for e in scan_directory(self.root, **kwargs)]

    def test_top_level_only_by_default(self):
        (self.root / "b.txt").touch()
        (self.root / "a.jpg").touch()
        (self.root / "sub").mkdir()
        (self.root / "sub" / "inner.txt").touch()

        self.assertEqual(self.names(), ["a.jpg", "b.txt"])

    def test_depth_budget(self):
        """Subdirectory files are yielded inline, and only down to max_depth."""
        (self.root / "a.txt").touch()
        (self.root / "m").mkdir()
        (self.root / "m" / "one.txt").touch()
        (self.root / "m" / "deeper").mkdir()
        (self.root / "m" / "deeper" / "two.txt").touch()
        (self.root / "z.txt").touch()

        self.assertEqual(self.names(max_depth=1), ["a.txt", "m/one.txt", "z.txt"])
        self.assertEqual(
            self.names(max_depth=2),
            ["a.txt", "m/deeper/two.txt", "m/one.txt", "z.txt"],
        )

    def test_hidden_entries(self):
        (self.root / ".env").touch()
        (self.root / ".cache").mkdir()
        (self.root / ".cache" / "blob.bin").touch()
        (self.root / "visible.txt").touch()

        self.assertEqual(self.names(max_depth=1), ["visible.txt"])
        self.assertEqual(
            self.names(max_depth=1, include_hidden=True),
            [".cache/blob.bin", ".env", "visible.txt"],
        )

    def test_lock_files_always_skipped(self):
        (self.root / "~$report.docx").touch()
        (self.root / "report.docx").touch()

        self.assertEqual(self.names(include_hidden=True), ["report.docx"])

    def test_symlinks_skipped(self):
        target = self.root / "real.txt"
        target.touch()
        os.symlink(target, self.root / "link.txt")
        (self.root / "dir").mkdir()
        os.symlink(self.root / "dir", self.root / "dirlink")

        self.assertEqual(self.names(max_depth=3), ["real.txt"])

    def test_entry_fields(self):
        (self.root / "Photo.JPG").touch()
        entry = next(scan_directory(self.root))
        self.assertEqual(entry.name, "Photo.JPG")
        self.assertEqual(entry.extension, "jpg")
        self.assertEqual(entry.path, self.root / "Photo.JPG")

    def test_missing_directory(self):
        with self.assertRaises(DirectoryReadError) as ctx:
            list(scan_directory(self.root / "nope"))
        self.assertIn("nope", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    @patch("foldean.scanner.os.scandir")
    def test_permission_denied(self, mock_scandir):
        mock_scandir.side_effect = PermissionError(13, "Permission denied")
        with self.assertRaises(DirectoryReadError) as ctx:
            list(scan_directory(self.root))
        self.assertIn("Permission denied", str(ctx.exception))

    @patch("foldean.scanner._list_entries")
    def test_type_query_failure(self, mock_list):
        entry = MagicMock()
        entry.name = "weird.bin"
        entry.is_dir.side_effect = OSError(5, "Input/output error")
        mock_list.return_value = [entry]

        with self.assertRaises(FileTypeQueryError) as ctx:
            list(scan_directory(self.root))
        self.assertEqual(ctx.exception.path, self.root / "weird.bin")

    def test_name_filters(self):
        self.assertTrue(is_hidden(".DS_Store"))
        self.assertFalse(is_hidden("file.txt"))
        self.assertTrue(is_lock_file("~$Budget.xlsx"))
        self.assertFalse(is_lock_file("~notes.txt"))

if __name__ == '__main__':
    unittest.main()
