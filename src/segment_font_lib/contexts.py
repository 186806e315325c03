"""
Edit Context Module.

This module provides the EditContext class which carries everything a
command needs: the document, the selection and the clipboard.

The editor hands each command a working context built from a copy of the
current document. The command mutates only that copy; the editor then
publishes document, selection and clipboard together, or discards the
context when the command is rejected. No observer ever sees a document
updated without its matching selection.

Example:
    >>> context = EditContext.initial()
    >>> context.anchor
    0
    >>> context.anchor_character
    Character(segments=0, name=None)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .clipboard import Clipboard
from .document import FontDocument
from .selection import Selection
from .slots import Character, SlotTable


@dataclass
class EditContext:
    """
    Working state for one command.

    Attributes:
        document: Document to read and modify.
        selection: Current selection. Commands assign a new one.
        clipboard: Current clipboard, or None if nothing was copied.
    """

    document: FontDocument
    selection: Selection
    clipboard: Clipboard | None = None

    @classmethod
    def initial(cls, document: FontDocument | None = None) -> EditContext:
        """
        Create a context for a fresh editing session.

        Args:
            document: Starting document. Defaults to an empty font.

        Returns:
            Context with the anchor on slot 0 and no clipboard.
        """
        if document is None:
            document = FontDocument.create_empty()
        return cls(document=document, selection=Selection.single(0))

    def working_copy(self) -> EditContext:
        """
        Return a context whose document can be mutated freely.

        Selection and clipboard are immutable and are shared.
        """
        return EditContext(
            document=self.document.copy(),
            selection=self.selection,
            clipboard=self.clipboard,
        )

    @property
    def table(self) -> SlotTable:
        """Slot table of the document."""
        return self.document.table

    @property
    def anchor(self) -> int:
        """Anchor index of the selection."""
        return self.selection.anchor

    @property
    def anchor_character(self) -> Character | None:
        """Character at the anchor, or None if the slot is absent."""
        return self.document.table[self.selection.anchor]

    def selected_characters(self) -> Iterator[tuple[int, Character]]:
        """
        Yield (index, character) for defined selected slots.

        Yields in insertion order of the selection.
        """
        for index in self.selection:
            character = self.document.table[index]
            if character is not None:
                yield index, character
