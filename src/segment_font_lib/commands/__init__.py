"""
Commands Package.

This package contains all command classes for edit operations.

Commands follow the Command Pattern, providing:
- execute(): Perform the operation against an EditContext
- description: Human-readable description for logging

Available Commands:
    Selection:
        - SelectCommand: Grid click with empty-slot tidying
        - NavigateCommand: Arrow-key navigation

    Transfer:
        - MoveCommand: Move the selection by drag offset
        - CopyDragCommand: Copy the selection by drag offset
        - CopySelectionCommand: Copy the selection to the clipboard
        - PasteCommand: Paste the clipboard at the anchor

    Characters:
        - ResetSelectionCommand: Clear segments of the selection
        - UpdateCharacterCommand: Replace the anchor character
        - CopySegmentsCommand: Copy segments from another slot
        - ToggleSegmentCommand: Flip one segment of the anchor
        - SetCharacterNameCommand: Rename the anchor character

    Font:
        - NewFontCommand: Start an empty font
        - LoadFontCommand: Load a persisted font
        - RenameFontCommand: Rename the font

Example:
    >>> from segment_font_lib.commands import MoveCommand
    >>>
    >>> cmd = MoveCommand(from_index=2, to_index=10)
    >>> result = editor.execute(cmd)
"""

from .base import Command, CommandResult
from .characters import (
    CopySegmentsCommand,
    ResetSelectionCommand,
    SetCharacterNameCommand,
    ToggleSegmentCommand,
    UpdateCharacterCommand,
)
from .font import (
    LoadFontCommand,
    NewFontCommand,
    RenameFontCommand,
)
from .selection import NavigateCommand, SelectCommand
from .transfer import (
    CopyDragCommand,
    CopySelectionCommand,
    MoveCommand,
    PasteCommand,
)

__all__ = [
    # Base
    "Command",
    "CommandResult",
    # Selection
    "SelectCommand",
    "NavigateCommand",
    # Transfer
    "MoveCommand",
    "CopyDragCommand",
    "CopySelectionCommand",
    "PasteCommand",
    # Characters
    "ResetSelectionCommand",
    "UpdateCharacterCommand",
    "CopySegmentsCommand",
    "ToggleSegmentCommand",
    "SetCharacterNameCommand",
    # Font
    "NewFontCommand",
    "LoadFontCommand",
    "RenameFontCommand",
]
