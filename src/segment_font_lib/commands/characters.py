"""
Character Commands.

This module contains commands that edit characters in place.

Commands:
    - ResetSelectionCommand: Clear segments of every selected character
    - UpdateCharacterCommand: Replace the character at the anchor
    - CopySegmentsCommand: Copy another slot's segments to the anchor
    - ToggleSegmentCommand: Flip one segment of the anchor character
    - SetCharacterNameCommand: Rename the anchor character

Example:
    >>> editor.execute(ToggleSegmentCommand("g1"))
    >>> editor.execute(SetCharacterNameCommand("MINUS"))
"""

from __future__ import annotations

from dataclasses import dataclass

from ..contexts import EditContext
from ..segments import segment_bit, toggle_segment
from ..slots import Character, check_index
from .base import Command, CommandResult


@dataclass
class ResetSelectionCommand(Command):
    """
    Command to set segments to 0 across the selection.

    Names are kept and absent slots stay absent. Never rejected.
    """

    @property
    def description(self) -> str:
        return "Reset selection"

    def execute(self, context: EditContext) -> CommandResult:
        table = context.table
        cleared = 0
        for index, character in list(context.selected_characters()):
            table[index] = character.with_segments(0)
            cleared += 1
        return CommandResult.ok(f"Reset {cleared} character(s)")


@dataclass
class UpdateCharacterCommand(Command):
    """
    Command to replace the character at the anchor.

    Attributes:
        character: New character, or None to make the slot absent.
    """

    character: Character | None

    @property
    def description(self) -> str:
        return f"Update character {self.character}"

    def execute(self, context: EditContext) -> CommandResult:
        context.table[context.anchor] = self.character
        return CommandResult.ok(f"Updated {context.anchor}")


@dataclass
class CopySegmentsCommand(Command):
    """
    Command to copy segments from another slot into the anchor.

    Only segments are copied; the anchor keeps its name. An absent
    anchor slot receives an unnamed character. Rejected if the source
    slot is absent.

    Attributes:
        source_index: Slot to copy segments from.
    """

    source_index: int

    def __post_init__(self):
        check_index(self.source_index)

    @property
    def description(self) -> str:
        return f"Copy segments from {self.source_index}"

    def execute(self, context: EditContext) -> CommandResult:
        source = context.table[self.source_index]
        if source is None:
            return CommandResult.error(f"Slot {self.source_index} is empty")

        target = context.anchor_character or Character()
        context.table[context.anchor] = target.with_segments(source.segments)
        return CommandResult.ok(f"Copied segments {self.source_index} -> {context.anchor}")


@dataclass
class ToggleSegmentCommand(Command):
    """
    Command to flip one segment of the anchor character.

    Attributes:
        segment: Segment name ("a" .. "n", "g1", "g2", "dp").

    Raises:
        UnknownSegmentError: On construction, for a bad segment name.
    """

    segment: str

    def __post_init__(self):
        segment_bit(self.segment)

    @property
    def description(self) -> str:
        return f"Toggle segment {self.segment}"

    def execute(self, context: EditContext) -> CommandResult:
        character = context.anchor_character
        if character is None:
            return CommandResult.error(f"Slot {context.anchor} is empty")

        segments = toggle_segment(character.segments, self.segment)
        context.table[context.anchor] = character.with_segments(segments)
        return CommandResult.ok(f"Segments = {segments}")


@dataclass
class SetCharacterNameCommand(Command):
    """
    Command to rename the anchor character.

    Attributes:
        name: New name. An empty string clears the name.
    """

    name: str | None

    @property
    def description(self) -> str:
        return f"Name character {self.name!r}"

    def execute(self, context: EditContext) -> CommandResult:
        character = context.anchor_character
        if character is None:
            return CommandResult.error(f"Slot {context.anchor} is empty")

        context.table[context.anchor] = character.with_name(self.name or None)
        return CommandResult.ok(f"Named {context.anchor}")
