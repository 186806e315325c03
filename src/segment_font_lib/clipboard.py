"""
Clipboard Module.

The clipboard stores a selection as offsets relative to its anchor, so
a paste lands at the same relative positions around whatever anchor is
current at paste time. It is independent of any document instance and
is replaced wholesale on every copy.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .document import FontDocument
from .selection import Selection
from .slots import Character


@dataclass(frozen=True)
class ClipboardEntry:
    """
    One copied character.

    Attributes:
        offset: Signed distance from the anchor at copy time.
        character: The copied character.
    """

    offset: int
    character: Character


@dataclass(frozen=True)
class Clipboard:
    """
    Relative-offset snapshot of a selection.

    Attributes:
        entries: Copied characters in ascending index order.
    """

    entries: tuple[ClipboardEntry, ...] = ()

    @classmethod
    def from_selection(cls, document: FontDocument, selection: Selection) -> Clipboard:
        """
        Capture every defined character in the selection.

        Absent slots are skipped, so the result may be empty.
        """
        entries = []
        for index in selection.sorted_indices():
            character = document.table[index]
            if character is not None:
                entries.append(ClipboardEntry(index - selection.anchor, character))
        return cls(entries=tuple(entries))

    def destinations(self, anchor: int) -> list[int]:
        """Target indices for a paste at anchor (may be out of range)."""
        return [anchor + entry.offset for entry in self.entries]

    def __iter__(self) -> Iterator[ClipboardEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return len(self.entries) > 0
