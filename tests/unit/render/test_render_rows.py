"""Tests for size/date formatting and listing row rendering."""

from __future__ import annotations

import stat
import sys
import unittest
from pathlib import Path

from dirlist.listing import DirectoryEntry, EntryMetadata
from dirlist.render import (
    display_text,
    format_entry_line,
    format_mtime,
    format_size,
    format_total_line,
    human_readable_size,
    render_listing,
)
from dirlist.ui_theme import DEFAULT_THEME


class HumanReadableSizeTests(unittest.TestCase):
    def test_bytes_below_one_kilobyte_have_no_decimals(self) -> None:
        self.assertEqual(human_readable_size(0), "0 B")
        self.assertEqual(human_readable_size(512), "512 B")
        self.assertEqual(human_readable_size(1023), "1023 B")

    def test_rescales_to_largest_unit_with_one_decimal(self) -> None:
        self.assertEqual(human_readable_size(1024), "1.0 KB")
        self.assertEqual(human_readable_size(1536), "1.5 KB")
        self.assertEqual(human_readable_size(5 * 1024**2), "5.0 MB")
        self.assertEqual(human_readable_size(3 * 1024**3 // 2), "1.5 GB")

    def test_rounding_up_to_1024_moves_to_next_unit(self) -> None:
        self.assertEqual(human_readable_size(1024**2 - 1), "1.0 MB")

    def test_format_size_switches_on_flag(self) -> None:
        self.assertEqual(format_size(2048, human_readable=False), "2048")
        self.assertEqual(format_size(2048, human_readable=True), "2.0 KB")


class FormatMtimeTests(unittest.TestCase):
    def test_renders_utc_timestamp(self) -> None:
        self.assertEqual(format_mtime(0), "1970-01-01 00:00:00")
        self.assertEqual(format_mtime(86_400 * 1_000_000_000 + 61_000_000_000), "1970-01-02 00:01:01")

    def test_unknown_mtime_renders_placeholder(self) -> None:
        self.assertEqual(format_mtime(None), "N/A")


class FormatEntryLineTests(unittest.TestCase):
    def test_plain_row_has_name_size_and_date(self) -> None:
        entry = DirectoryEntry(name="notes.txt", path=Path("notes.txt"), is_dir=False, size=1536, mtime_ns=0)

        line = format_entry_line(entry)

        self.assertEqual(line.split(), ["notes.txt", "1536", "1970-01-01", "00:00:00"])

    def test_human_readable_row(self) -> None:
        entry = DirectoryEntry(name="notes.txt", path=Path("notes.txt"), is_dir=False, size=1536, mtime_ns=0)
        self.assertIn("1.5 KB", format_entry_line(entry, human_readable=True))

    def test_directory_size_renders_as_dash(self) -> None:
        entry = DirectoryEntry(name="docs", path=Path("docs"), is_dir=True, mtime_ns=0)
        self.assertEqual(format_entry_line(entry).split()[1], "-")

    def test_details_columns_show_permissions_owner_group(self) -> None:
        entry = DirectoryEntry(
            name="run.sh",
            path=Path("run.sh"),
            is_dir=False,
            size=10,
            mtime_ns=0,
            metadata=EntryMetadata(mode=stat.S_IFREG | 0o755, owner="alice", group="staff"),
        )

        line = format_entry_line(entry, details=True)

        self.assertEqual(line.split()[-3:], ["-rwxr-xr-x", "alice", "staff"])

    def test_missing_metadata_renders_unavailable_placeholders(self) -> None:
        entry = DirectoryEntry(name="run.sh", path=Path("run.sh"), is_dir=False, size=10, mtime_ns=0)

        line = format_entry_line(entry, details=True)

        self.assertEqual(line.split()[-3:], ["unavailable", "unavailable", "unavailable"])

    def test_details_flag_off_omits_metadata(self) -> None:
        entry = DirectoryEntry(
            name="run.sh",
            path=Path("run.sh"),
            is_dir=False,
            metadata=EntryMetadata(mode=stat.S_IFREG | 0o644, owner="alice", group="staff"),
        )
        self.assertNotIn("alice", format_entry_line(entry))

    def test_themed_directory_name_is_colored(self) -> None:
        entry = DirectoryEntry(name="docs", path=Path("docs"), is_dir=True, mtime_ns=0)

        line = format_entry_line(entry, theme=DEFAULT_THEME)

        self.assertTrue(line.startswith(DEFAULT_THEME.entry_dir + "docs"))


class DisplayTextTests(unittest.TestCase):
    @unittest.skipUnless(sys.getfilesystemencoding() == "utf-8", "surrogateescape names need a UTF-8 filesystem encoding")
    def test_undecodable_filename_bytes_are_escaped(self) -> None:
        entry = DirectoryEntry(name="bad\udcff.txt", path=Path("bad\udcff.txt"), is_dir=False, size=1, mtime_ns=0)

        line = format_entry_line(entry)

        self.assertTrue(line.startswith("bad\\xff.txt"))
        line.encode("utf-8")

    def test_valid_unicode_names_are_unchanged(self) -> None:
        self.assertEqual(display_text("caf\u00e9.txt"), "caf\u00e9.txt")


class RenderListingTests(unittest.TestCase):
    def test_total_line_is_last(self) -> None:
        entries = [
            DirectoryEntry(name="a", path=Path("a"), is_dir=False, size=1024, mtime_ns=0),
            DirectoryEntry(name="b", path=Path("b"), is_dir=False, size=1024, mtime_ns=0),
        ]

        lines = render_listing(entries, 2048, human_readable=True)

        self.assertEqual(len(lines), 3)
        self.assertEqual(lines[-1], "Total: 2.0 KB")

    def test_empty_listing_prints_zero_total(self) -> None:
        self.assertEqual(render_listing([], 0), ["Total: 0"])
        self.assertEqual(format_total_line(0, human_readable=True), "Total: 0 B")


if __name__ == "__main__":
    unittest.main()
