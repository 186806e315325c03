"""
Tests for Selection and Font Commands.

This module tests the document tidying done by SelectCommand, arrow
navigation, and the commands that replace or rename the document.
"""

import unittest

from segment_font_lib.clipboard import Clipboard, ClipboardEntry
from segment_font_lib.commands.font import LoadFontCommand, NewFontCommand, RenameFontCommand
from segment_font_lib.commands.selection import NavigateCommand, SelectCommand
from segment_font_lib.constants import ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, ARROW_UP
from segment_font_lib.selection import Selection
from segment_font_lib.slots import Character

from .fixtures import make_context


class TestSelectCommand(unittest.TestCase):
    """Tests for SelectCommand."""

    def test_click_creates_and_reverts(self):
        """Clicking away from an empty slot 0 onto an absent slot 5."""
        context = make_context()
        result = SelectCommand(5).execute(context)

        self.assertTrue(result.success)
        self.assertEqual(context.table[5], Character(0, None))
        self.assertIsNone(context.table[0])
        self.assertEqual(context.selection, Selection.single(5))
        self.assertEqual(result.data, {"reverted": [0], "created": True})

    def test_content_not_reverted(self):
        """Named or lit slots survive a click away."""
        context = make_context({3: (0, "SPACE"), 4: (1, None)}, selected=(3, 4))
        SelectCommand(9).execute(context)

        self.assertEqual(context.table[3], Character(0, "SPACE"))
        self.assertEqual(context.table[4], Character(1, None))

    def test_clicked_slot_not_reverted(self):
        """The clicked slot itself is never reverted."""
        context = make_context({0: None, 5: (0, None)}, selected=(5,))
        SelectCommand(5, ctrl=True).execute(context)

        self.assertEqual(context.table[5], Character(0, None))
        self.assertEqual(context.selection, Selection.single(5))

    def test_defined_slot_not_recreated(self):
        """Clicking a defined slot keeps its character."""
        context = make_context({7: (3, "S")})
        result = SelectCommand(7).execute(context)

        self.assertEqual(context.table[7], Character(3, "S"))
        self.assertFalse(result.data["created"])

    def test_shift_click_does_not_create(self):
        """Shift-click does not fill absent slots."""
        context = make_context({2: (1, "A")}, selected=(2,))
        SelectCommand(5, shift=True).execute(context)

        for index in (3, 4, 5):
            self.assertIsNone(context.table[index])
        self.assertEqual(context.selection.selected, (2, 3, 4, 5))
        self.assertEqual(context.selection.anchor, 2)

    def test_shift_click_reverts_empty_anchor(self):
        """Shift-click still reverts empty selected slots."""
        context = make_context(selected=(0,))
        SelectCommand(3, shift=True).execute(context)

        self.assertIsNone(context.table[0])
        self.assertEqual(context.selection.selected, (0, 1, 2, 3))

    def test_ctrl_click_creates(self):
        """Ctrl-click fills an absent clicked slot."""
        context = make_context({2: (1, "A")}, selected=(2,))
        SelectCommand(6, ctrl=True).execute(context)

        self.assertEqual(context.table[6], Character(0, None))
        self.assertEqual(context.selection.selected, (2, 6))

    def test_ctrl_deselect_reverts_others(self):
        """Ctrl-removing the anchor reverts empty leftovers."""
        context = make_context({2: (0, None), 6: (1, None)}, selected=(2, 6), anchor=6)
        SelectCommand(6, ctrl=True).execute(context)

        self.assertIsNone(context.table[2])
        self.assertEqual(context.selection, Selection.single(2))

    def test_ctrl_deselect_non_anchor_takes_anchor(self):
        """Ctrl-removing a non-anchor index makes it the anchor."""
        context = make_context({2: (1, "A"), 6: (1, "B")}, selected=(2, 6), anchor=6)
        result = SelectCommand(2, ctrl=True).execute(context)

        self.assertTrue(result.success)
        self.assertEqual(context.selection.anchor, 2)
        self.assertEqual(context.selection.selected, (6,))
        self.assertEqual(context.table[2], Character(1, "A"))
        self.assertEqual(context.anchor_character, Character(1, "A"))

    def test_bad_index(self):
        """A bad index raises on construction."""
        with self.assertRaises(IndexError):
            SelectCommand(256)


class TestNavigateCommand(unittest.TestCase):
    """Tests for NavigateCommand."""

    def test_moves_anchor_without_touching_document(self):
        """Navigation changes only the selection."""
        context = make_context({0x12: (1, "R")}, selected=(0x12,))
        before = context.table.copy()

        result = NavigateCommand(ARROW_UP).execute(context)

        self.assertTrue(result.success)
        self.assertEqual(context.selection, Selection.single(0x02))
        self.assertEqual(context.table, before)

    def test_shift_extends_from_anchor(self):
        """Shift-navigation extends a range from the anchor."""
        context = make_context(selected=(0x12,))
        NavigateCommand(ARROW_DOWN, shift=True).execute(context)

        self.assertEqual(context.selection.anchor, 0x12)
        self.assertEqual(context.selection.selected, tuple(range(0x12, 0x23)))

    def test_edge_rejected(self):
        """A step blocked by the grid edge is rejected."""
        context = make_context(selected=(0,))
        self.assertFalse(NavigateCommand(ARROW_LEFT).execute(context).success)
        self.assertEqual(context.selection, Selection.single(0))

    def test_right_crosses_row(self):
        """Right from the last column goes to the next row."""
        context = make_context(selected=(15,))
        NavigateCommand(ARROW_RIGHT).execute(context)
        self.assertEqual(context.anchor, 16)

    def test_unknown_direction(self):
        """An unknown direction raises ValueError."""
        context = make_context()
        with self.assertRaises(ValueError):
            NavigateCommand("sideways").execute(context)


class TestFontCommands(unittest.TestCase):
    """Tests for NewFontCommand, LoadFontCommand and RenameFontCommand."""

    def setUp(self):
        self.clipboard = Clipboard((ClipboardEntry(0, Character(1)),))
        self.context = make_context({9: (3, "N")}, selected=(9,), clipboard=self.clipboard)

    def test_new_font(self):
        """New font resets selection and keeps the clipboard."""
        NewFontCommand("Fresh").execute(self.context)

        self.assertEqual(self.context.document.name, "Fresh")
        self.assertEqual(list(self.context.table.defined_indices()), [0])
        self.assertEqual(self.context.selection, Selection.single(0))
        self.assertIs(self.context.clipboard, self.clipboard)

    def test_load_font(self):
        """Loaded font replaces the document and keeps the clipboard."""
        LoadFontCommand({"name": "L", "characters": [None, {"segments": 4}]}).execute(self.context)

        self.assertEqual(self.context.document.name, "L")
        self.assertEqual(self.context.table[1], Character(4, None))
        self.assertEqual(self.context.table[0], Character(0, None))
        self.assertEqual(self.context.selection, Selection.single(0))
        self.assertIs(self.context.clipboard, self.clipboard)

    def test_load_garbage(self):
        """Garbage input loads as an empty font."""
        result = LoadFontCommand("garbage").execute(self.context)

        self.assertTrue(result.success)
        self.assertEqual(self.context.document.name, "Loaded Font")

    def test_rename(self):
        """Rename changes only the font name."""
        RenameFontCommand("Renamed").execute(self.context)

        self.assertEqual(self.context.document.name, "Renamed")
        self.assertEqual(self.context.table[9], Character(3, "N"))


if __name__ == "__main__":
    unittest.main()
