"""Tests for per-entry style resolution."""

from __future__ import annotations

import unittest

from colortree.colors import DEFAULT_STYLE, Color, StyleRule, Weight, extension_key, parse_color_rules, resolve_style
from colortree.tree import EntryKind


class ResolveStyleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.table = parse_color_rules("di=01;34:*.txt=00;32")

    def test_directory_uses_di_rule(self) -> None:
        self.assertEqual(resolve_style("src", EntryKind.DIRECTORY, self.table), StyleRule(Weight.BOLD, Color.BLUE))

    def test_directory_beats_extension_match(self) -> None:
        style = resolve_style("notes.txt", EntryKind.DIRECTORY, self.table)

        self.assertEqual(style, StyleRule(Weight.BOLD, Color.BLUE))

    def test_directory_without_di_rule_is_default(self) -> None:
        table = parse_color_rules("*.txt=00;32")

        self.assertEqual(resolve_style("src", EntryKind.DIRECTORY, table), DEFAULT_STYLE)

    def test_file_matches_last_four_bytes(self) -> None:
        expected = StyleRule(Weight.NORMAL, Color.GREEN)

        self.assertEqual(resolve_style("notes.txt", EntryKind.OTHER, self.table), expected)
        self.assertEqual(resolve_style("x.txt", EntryKind.OTHER, self.table), expected)

    def test_short_names_resolve_to_default(self) -> None:
        self.assertEqual(resolve_style("ab", EntryKind.OTHER, self.table), DEFAULT_STYLE)
        self.assertEqual(resolve_style(".txt", EntryKind.OTHER, self.table), DEFAULT_STYLE)

    def test_file_without_matching_key_is_default(self) -> None:
        self.assertEqual(resolve_style("b.md", EntryKind.OTHER, self.table), DEFAULT_STYLE)

    def test_di_rule_never_applies_to_files(self) -> None:
        table = parse_color_rules("di=01;34")

        self.assertEqual(resolve_style("xx.di", EntryKind.OTHER, table), DEFAULT_STYLE)

    def test_key_does_not_require_a_dot(self) -> None:
        table = parse_color_rules("ight=00;35")

        self.assertEqual(resolve_style("eight", EntryKind.OTHER, table), StyleRule(Weight.NORMAL, Color.MAGENTA))

    def test_empty_table_always_defaults(self) -> None:
        self.assertEqual(resolve_style("notes.txt", EntryKind.OTHER, {}), DEFAULT_STYLE)
        self.assertEqual(resolve_style("src", EntryKind.DIRECTORY, {}), DEFAULT_STYLE)


class ExtensionKeyTests(unittest.TestCase):
    def test_counts_bytes_not_characters(self) -> None:
        # "é" is two bytes in UTF-8.
        self.assertIsNone(extension_key("éé"))
        self.assertEqual(extension_key("xéé"), "éé")
        self.assertIsNone(extension_key("a.py"))

    def test_returns_trailing_four_bytes(self) -> None:
        self.assertEqual(extension_key("archive.tar.gz"), "r.gz")


if __name__ == "__main__":
    unittest.main()
