"""
Font Document Module.

This module provides the FontDocument class - a named SlotTable - and
FontSnapshot, the read-only view handed to save and export collaborators.

Persisted representation:
    {
      "name": "My Font",
      "characters": [null | {"segments": 0..32767, "name": str | null}, ...]
    }

Loading is tolerant: malformed input is normalized, never rejected.

Example:
    >>> doc = FontDocument.create_empty()
    >>> doc.table[0]
    Character(segments=0, name=None)

    >>> doc = FontDocument.from_dict({"name": "Demo", "characters": [None, {"segments": 6}]})
    >>> doc.table[1].segments
    6
    >>> doc.table[0] is not None  # slot 0 forced on load
    True
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .constants import (
    DEFAULT_FONT_NAME,
    EXPORT_NAME_PREFIX,
    LOADED_FONT_NAME,
    SEGMENTS_MASK,
    SLOT_COUNT,
)
from .slots import Character, SlotTable

logger = logging.getLogger(__name__)

_UNSAFE_NAME_CHARS = re.compile(r"[^a-z0-9]", re.IGNORECASE)


def safe_file_stem(name: str) -> str:
    """
    Make a font name safe for file names and assembler labels.

    Every character outside A-Z, a-z, 0-9 becomes an underscore.

    Example:
        >>> safe_file_stem("My Font 2")
        'My_Font_2'
    """
    return _UNSAFE_NAME_CHARS.sub("_", name)


def _normalize_segments(value: Any) -> int | None:
    """Return a valid segments value, or None if malformed."""
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and 0 <= value <= SEGMENTS_MASK:
        return value
    return None


def _normalize_character(raw: Any) -> tuple[Character | None, bool]:
    """
    Normalize one raw entry.

    Returns:
        (character, defaulted) - character is None for absent or
        malformed entries; defaulted is True if a field was replaced.
    """
    if raw is None or not isinstance(raw, Mapping):
        return None, False

    defaulted = False
    segments = _normalize_segments(raw.get("segments", 0))
    if segments is None:
        segments = 0
        defaulted = True

    name = raw.get("name")
    if not isinstance(name, str) or not name:
        if name not in (None, ""):
            defaulted = True
        name = None

    return Character(segments=segments, name=name), defaulted


@dataclass(frozen=True)
class FontSnapshot:
    """
    Read-only view of a document.

    Attributes:
        name: Font name.
        characters: Tuple of exactly 256 entries (Character or None).
    """

    name: str
    characters: tuple[Character | None, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted representation."""
        return {
            "name": self.name,
            "characters": [
                None if char is None else {"segments": char.segments, "name": char.name}
                for char in self.characters
            ],
        }

    def template_context(self) -> dict[str, Any]:
        """
        Build the data feed for export templates.

        Every slot gets a row. Undefined slots report segments 0, and
        unnamed slots are labelled CHAR_XX with the index in hex.

        Returns:
            Dict with name, name_upper, name_lower and characters.
        """
        stem = safe_file_stem(self.name)
        rows = []
        for index, char in enumerate(self.characters):
            rows.append({
                "index": index,
                "defined": char is not None,
                "segments": char.segments if char is not None else 0,
                "name": (char.name if char is not None and char.name
                         else f"{EXPORT_NAME_PREFIX}{index:02X}"),
            })
        return {
            "name": self.name,
            "name_upper": stem.upper(),
            "name_lower": stem.lower(),
            "characters": rows,
        }


@dataclass
class FontDocument:
    """
    A named 256-slot font.

    Attributes:
        name: Font name.
        table: The SlotTable holding the characters.

    Note:
        Only create_empty() and from_dict() guarantee slot 0 is
        defined. Later edits may leave it absent.
    """

    name: str = DEFAULT_FONT_NAME
    table: SlotTable = field(default_factory=SlotTable)

    @classmethod
    def create_empty(cls, name: str = DEFAULT_FONT_NAME) -> FontDocument:
        """
        Create a font with every slot absent except slot 0.

        Slot 0 holds a blank character so there is something to edit.
        """
        table = SlotTable()
        table[0] = Character()
        return cls(name=name, table=table)

    @classmethod
    def from_dict(cls, raw: Any) -> FontDocument:
        """
        Load a document from its persisted representation.

        Normalization rules:
            - entries past index 255 are ignored, short lists are padded
            - null and non-object entries are absent
            - bad segments default to 0, bad names to None
            - slot 0 is forced to a blank character if absent
            - a missing or empty name becomes "Loaded Font"

        Args:
            raw: Parsed JSON (any shape).

        Returns:
            New FontDocument. Never raises for malformed input.
        """
        data = raw if isinstance(raw, Mapping) else {}

        table = SlotTable()
        dropped = 0
        defaulted = 0
        entries = data.get("characters")
        if isinstance(entries, list):
            for index, entry in enumerate(entries[:SLOT_COUNT]):
                character, was_defaulted = _normalize_character(entry)
                if character is None and entry is not None:
                    dropped += 1
                defaulted += was_defaulted
                table[index] = character
            dropped += max(0, len(entries) - SLOT_COUNT)

        if table[0] is None:
            table[0] = Character()

        name = data.get("name")
        if not isinstance(name, str) or not name:
            name = LOADED_FONT_NAME

        if dropped or defaulted:
            logger.debug(
                "Loaded %r: dropped %d entries, defaulted %d fields",
                name, dropped, defaulted,
            )
        return cls(name=name, table=table)

    def rename(self, name: str) -> None:
        """Set the font name."""
        self.name = name

    def copy(self) -> FontDocument:
        """Return a copy with its own slot list."""
        return FontDocument(name=self.name, table=self.table.copy())

    def snapshot(self) -> FontSnapshot:
        """Return a read-only view for save/export."""
        return FontSnapshot(name=self.name, characters=tuple(self.table))

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted representation."""
        return self.snapshot().to_dict()

    def __repr__(self) -> str:
        return f"FontDocument(name={self.name!r}, {self.table!r})"
