"""
Slot Table Module.

This module defines the Character value type and the SlotTable class,
the fixed-length 256-entry table that backs every font document.

Each slot is identified only by its index (0x00-0xFF) and holds either
a Character or None (absent). The table is never resized.

Example:
    >>> table = SlotTable()
    >>> table[0x41] = Character(segments=0x0037, name="A")
    >>> table[0x41].name
    'A'
    >>> len(table)
    256
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, replace

from .constants import COPY_SUFFIX, SLOT_COUNT


def check_index(index: int) -> int:
    """
    Validate a slot index.

    Args:
        index: Index to validate.

    Returns:
        The index, unchanged.

    Raises:
        IndexError: If index is not an int in range 0-255.
    """
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexError(f"Slot index must be an int, got {index!r}")
    if not 0 <= index < SLOT_COUNT:
        raise IndexError(f"Slot index {index} out of range 0-{SLOT_COUNT - 1}")
    return index


def in_range(index: int) -> bool:
    """Check if an index addresses a slot (no exception)."""
    return 0 <= index < SLOT_COUNT


@dataclass(frozen=True)
class Character:
    """
    One character of the font.

    Characters are immutable values. Edits create new instances with
    dataclasses.replace(), so the same instance can safely live in
    several document copies at once.

    Attributes:
        segments: Segment bitmask (bits 0-14).
        name: Optional character name. None means unnamed.
    """

    segments: int = 0
    name: str | None = None

    @property
    def is_empty_content(self) -> bool:
        """True if the character has no segments and no name."""
        return self.segments == 0 and not self.name

    def with_segments(self, segments: int) -> Character:
        """Return a copy with different segments, same name."""
        return replace(self, segments=segments)

    def with_name(self, name: str | None) -> Character:
        """Return a copy with a different name, same segments."""
        return replace(self, name=name)

    def duplicate(self) -> Character:
        """
        Return a new character for a copy or paste destination.

        Segments are copied verbatim; a name gets the copy suffix,
        no name stays None.
        """
        name = f"{self.name}{COPY_SUFFIX}" if self.name else None
        return Character(segments=self.segments, name=name)


class SlotTable:
    """
    Fixed-length table of 256 optional characters.

    Supports both the explicit get()/set() contract and the sequence
    protocol (table[i], table[i] = c, len(), iteration).

    Attributes:
        None public; use get()/set() or indexing.

    Example:
        >>> table = SlotTable()
        >>> table.get(5) is None
        True
        >>> table.set(5, Character(segments=3))
        >>> list(table.defined_indices())
        [5]
    """

    __slots__ = ("_slots",)

    def __init__(self, entries: Iterable[Character | None] | None = None):
        """
        Initialize the table.

        Args:
            entries: Optional initial entries. Fewer than 256 are padded
                with None, anything past index 255 is ignored.
        """
        self._slots: list[Character | None] = [None] * SLOT_COUNT
        if entries is not None:
            for index, character in enumerate(entries):
                if index >= SLOT_COUNT:
                    break
                self._slots[index] = character

    def get(self, index: int) -> Character | None:
        """
        Get the character at index.

        Raises:
            IndexError: If index is outside 0-255.
        """
        return self._slots[check_index(index)]

    def set(self, index: int, character: Character | None) -> None:
        """
        Store a character (or None) at index.

        Raises:
            IndexError: If index is outside 0-255.
        """
        self._slots[check_index(index)] = character

    def clear(self, index: int) -> None:
        """Make a slot absent."""
        self.set(index, None)

    def is_defined(self, index: int) -> bool:
        """Check if a slot holds a character."""
        return self.get(index) is not None

    def defined_indices(self) -> Iterator[int]:
        """Yield indices of defined slots in ascending order."""
        for index, character in enumerate(self._slots):
            if character is not None:
                yield index

    def items(self) -> Iterator[tuple[int, Character]]:
        """Yield (index, character) for every defined slot."""
        for index, character in enumerate(self._slots):
            if character is not None:
                yield index, character

    def copy(self) -> SlotTable:
        """
        Return a shallow copy.

        Characters are immutable, so sharing them is safe.
        """
        return SlotTable(self._slots)

    def __getitem__(self, index: int) -> Character | None:
        return self.get(index)

    def __setitem__(self, index: int, character: Character | None) -> None:
        self.set(index, character)

    def __len__(self) -> int:
        return SLOT_COUNT

    def __iter__(self) -> Iterator[Character | None]:
        return iter(self._slots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SlotTable):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self) -> str:
        return f"SlotTable(defined={sum(1 for _ in self.defined_indices())})"
