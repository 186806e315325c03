"""
Font Commands.

Commands:
    - NewFontCommand: Replace the document with an empty font
    - LoadFontCommand: Replace the document with a loaded one
    - RenameFontCommand: Change the font name

New and load also reset the selection to slot 0. The clipboard is not
part of the document and survives both.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..constants import DEFAULT_FONT_NAME
from ..contexts import EditContext
from ..document import FontDocument
from ..selection import Selection
from .base import Command, CommandResult


@dataclass
class NewFontCommand(Command):
    """
    Command to start a new, empty font.

    Attributes:
        name: Name of the new font.
    """

    name: str = DEFAULT_FONT_NAME

    @property
    def description(self) -> str:
        return f"New font {self.name!r}"

    def execute(self, context: EditContext) -> CommandResult:
        context.document = FontDocument.create_empty(self.name)
        context.selection = Selection.single(0)
        return CommandResult.ok(f"Created {self.name!r}")


@dataclass
class LoadFontCommand(Command):
    """
    Command to load a font from its persisted representation.

    Malformed data is normalized by FontDocument.from_dict().

    Attributes:
        raw: Parsed JSON data.
    """

    raw: Any

    @property
    def description(self) -> str:
        return "Load font"

    def execute(self, context: EditContext) -> CommandResult:
        context.document = FontDocument.from_dict(self.raw)
        context.selection = Selection.single(0)
        return CommandResult.ok(f"Loaded {context.document.name!r}")


@dataclass
class RenameFontCommand(Command):
    """
    Command to rename the font.

    Attributes:
        name: New font name.
    """

    name: str

    @property
    def description(self) -> str:
        return f"Rename font to {self.name!r}"

    def execute(self, context: EditContext) -> CommandResult:
        context.document.rename(self.name)
        return CommandResult.ok(f"Renamed to {self.name!r}")
