"""
Font Editor Module.

This module provides the FontEditor class - the editing session that
owns the current document, selection and clipboard.

The editor acts as the single command executor. Each command runs
against a working copy of the state; on success the editor publishes
document, selection and clipboard in one step, on rejection it discards
the copy. Observers therefore never see a half-applied operation.

Example:
    Basic usage:

    >>> from segment_font_lib import FontEditor
    >>>
    >>> editor = FontEditor()
    >>> editor.select_at(0x41)
    >>> editor.toggle_segment("a")
    >>> editor.set_character_name("A")
    >>>
    >>> # Drag 0x41 onto 0x61 with ctrl held
    >>> editor.copy_drag(0x41, 0x61)
    >>> editor.document.table[0x61].name
    'A_copy'

Event Callbacks:
    >>> def on_change(command, result):
    ...     refresh_grid()
    >>>
    >>> editor.on_change = on_change
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..clipboard import Clipboard
from ..commands.base import Command, CommandResult
from ..commands.characters import (
    CopySegmentsCommand,
    ResetSelectionCommand,
    SetCharacterNameCommand,
    ToggleSegmentCommand,
    UpdateCharacterCommand,
)
from ..commands.font import LoadFontCommand, NewFontCommand, RenameFontCommand
from ..commands.selection import NavigateCommand, SelectCommand
from ..commands.transfer import (
    CopyDragCommand,
    CopySelectionCommand,
    MoveCommand,
    PasteCommand,
)
from ..constants import DEFAULT_FONT_NAME
from ..contexts import EditContext
from ..document import FontDocument, FontSnapshot
from ..selection import Selection
from ..slots import Character


class FontEditor:
    """
    Editing session for one font.

    Attributes:
        on_change: Optional callback called after a command is applied.
            Signature: (command: Command, result: CommandResult) -> None

    Example:
        >>> editor = FontEditor()
        >>> editor.select_at(2)
        >>> editor.select_at(4, shift=True)
        >>> editor.move(2, 10).success
        True

    Note:
        Rejected commands (for example a drag that would push a slot
        off the table) return a failed CommandResult and change nothing.
        A bad slot index raises IndexError.
    """

    def __init__(
        self,
        document: FontDocument | None = None,
        *,
        name: str = DEFAULT_FONT_NAME,
    ):
        """
        Initialize the editor.

        Args:
            document: Starting document. If None, an empty font is
                created with the given name.
            name: Name for the empty font.
        """
        if document is None:
            document = FontDocument.create_empty(name)
        self._state = EditContext.initial(document)

        # Event callback
        self.on_change: Callable[[Command, CommandResult], None] | None = None

        # Logging system
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._logger.addHandler(logging.NullHandler())
        self._collect_log: bool = False
        self._operation_log: list[tuple] = []

    # =========================================================================
    # State Access
    # =========================================================================

    @property
    def document(self) -> FontDocument:
        """Current document. Treat as read-only; edit through commands."""
        return self._state.document

    @property
    def selection(self) -> Selection:
        """Current selection."""
        return self._state.selection

    @property
    def clipboard(self) -> Clipboard | None:
        """Current clipboard, or None before the first copy."""
        return self._state.clipboard

    @property
    def anchor_character(self) -> Character | None:
        """Character shown for editing, or None if the anchor is absent."""
        return self._state.anchor_character

    def snapshot(self) -> FontSnapshot:
        """Read-only view of the document for save/export."""
        return self._state.document.snapshot()

    def copy_sources(self) -> list[tuple[int, Character]]:
        """
        Defined slots other than the anchor, ascending.

        These are the slots copy_segments_from() can use.
        """
        anchor = self._state.anchor
        return [
            (index, character)
            for index, character in self._state.table.items()
            if index != anchor
        ]

    # =========================================================================
    # Command Execution
    # =========================================================================

    def execute(self, command: Command) -> CommandResult:
        """
        Execute a command and publish its result.

        Args:
            command: The command to execute.

        Returns:
            CommandResult from the command execution.

        Note:
            The command sees a working copy. Document, selection and
            clipboard are replaced together only on success.
        """
        working = self._state.working_copy()
        result = command.execute(working)

        if not result.success:
            self._log("rejected", command.description, result.message)
            return result

        self._state = working
        self._log("executed", command.description, result.message)

        if self.on_change:
            self.on_change(command, result)

        return result

    # =========================================================================
    # Engine API
    # =========================================================================

    def select_at(self, index: int, shift: bool = False, ctrl: bool = False) -> CommandResult:
        """Click a grid cell."""
        return self.execute(SelectCommand(index, shift=shift, ctrl=ctrl))

    def navigate(self, direction: str, shift: bool = False) -> CommandResult:
        """Arrow-key step from the anchor."""
        return self.execute(NavigateCommand(direction, shift=shift))

    def move(self, from_index: int, to_index: int) -> CommandResult:
        """Move the selection by dragging from_index onto to_index."""
        return self.execute(MoveCommand(from_index, to_index))

    def copy_drag(self, from_index: int, to_index: int) -> CommandResult:
        """Copy the selection by ctrl-dragging from_index onto to_index."""
        return self.execute(CopyDragCommand(from_index, to_index))

    def copy_selection(self) -> CommandResult:
        """Copy the selection to the clipboard."""
        return self.execute(CopySelectionCommand())

    def paste(self) -> CommandResult:
        """Paste the clipboard around the anchor."""
        return self.execute(PasteCommand())

    def reset_selection(self) -> CommandResult:
        """Clear segments of every selected character."""
        return self.execute(ResetSelectionCommand())

    def update_character(self, character: Character | None) -> CommandResult:
        """Replace the character at the anchor."""
        return self.execute(UpdateCharacterCommand(character))

    def copy_segments_from(self, source_index: int) -> CommandResult:
        """Copy segments of source_index into the anchor character."""
        return self.execute(CopySegmentsCommand(source_index))

    def toggle_segment(self, segment: str) -> CommandResult:
        """Flip one segment of the anchor character."""
        return self.execute(ToggleSegmentCommand(segment))

    def set_character_name(self, name: str | None) -> CommandResult:
        """Rename the anchor character; empty clears the name."""
        return self.execute(SetCharacterNameCommand(name))

    def rename_font(self, name: str) -> CommandResult:
        """Rename the font."""
        return self.execute(RenameFontCommand(name))

    def new_font(self, name: str = DEFAULT_FONT_NAME) -> CommandResult:
        """Replace the document with an empty font."""
        result = self.execute(NewFontCommand(name))
        self._log("font_replaced", self.document.name)
        return result

    def load_font(self, raw: Any) -> CommandResult:
        """Replace the document with one loaded from raw data."""
        result = self.execute(LoadFontCommand(raw))
        self._log("font_replaced", self.document.name)
        return result

    # =========================================================================
    # Logging System
    # =========================================================================

    def _log(self, action: str, *details):
        """
        Log an operation. Fast no-op when logging is disabled.

        Args:
            action: Action name (e.g., 'executed', 'rejected')
            *details: Additional details about the operation
        """
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(f"{action}: {details}")

        if self._collect_log:
            self._operation_log.append((action, *details))

    def start_collecting_log(self):
        """
        Start collecting operations for later retrieval.

        Use this before a batch of operations when the host wants to
        show what happened.
        """
        self._collect_log = True
        self._operation_log.clear()

    def stop_collecting_log(self) -> list[tuple]:
        """
        Stop collecting and return collected operations.

        Returns:
            List of operation tuples: [(action, detail1, detail2, ...), ...]
        """
        self._collect_log = False
        result = self._operation_log.copy()
        self._operation_log.clear()
        return result

    def __repr__(self) -> str:
        """Return string representation of the editor."""
        return (
            f"FontEditor(name={self.document.name!r}, "
            f"anchor={self.selection.anchor}, "
            f"selected={len(self.selection)})"
        )
