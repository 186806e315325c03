"""
Transfer Commands.

This module contains the commands that relocate or duplicate the
selected characters.

Commands:
    - MoveCommand: Drag-and-drop move of the selection
    - CopyDragCommand: Ctrl-drag copy of the selection
    - CopySelectionCommand: Copy the selection to the clipboard
    - PasteCommand: Paste the clipboard around the anchor

Drags apply one offset (drop index - dragged index) to every selected
slot. All destinations are computed and checked first; if any falls
outside 0-255 the whole gesture is rejected and nothing changes.

Example:
    Selection {2, 3, 4}, anchor 2:

    >>> editor.execute(MoveCommand(from_index=2, to_index=10))
    >>> editor.selection.selected
    (10, 11, 12)
    >>> editor.selection.anchor
    10
"""

from __future__ import annotations

from dataclasses import dataclass

from ..clipboard import Clipboard
from ..constants import MAX_INDEX
from ..contexts import EditContext
from ..selection import Selection
from ..slots import check_index, in_range
from .base import Command, CommandResult

# (source, destination) pairs in ascending source order
TransferPlan = list[tuple[int, int]]


def plan_transfer(
    context: EditContext, from_index: int, to_index: int
) -> tuple[TransferPlan | None, str]:
    """
    Compute source/destination pairs for a drag.

    Args:
        context: Context holding the selection.
        from_index: Dragged slot.
        to_index: Drop slot.

    Returns:
        (plan, reason) - plan is None when the drag must be rejected,
        with reason saying why.
    """
    if from_index == to_index:
        return None, "Dropped on itself"
    if not in_range(to_index):
        return None, f"Drop index {to_index} out of range"

    offset = to_index - from_index
    plan = [(source, source + offset) for source in context.selection.sorted_indices()]
    outside = [dst for _, dst in plan if not in_range(dst)]
    if outside:
        return None, f"Offset {offset:+d} pushes {len(outside)} slot(s) off the table"
    return plan, ""


def shifted_anchor(context: EditContext, plan: TransferPlan) -> int:
    """Anchor after a drag, clamped into the table."""
    source, destination = plan[0]
    anchor = context.anchor + (destination - source)
    return max(0, min(MAX_INDEX, anchor))


@dataclass
class MoveCommand(Command):
    """
    Command to move the selected characters.

    Sources that are not also destinations become absent; each
    destination receives its source's character object unchanged
    (an absent source moves as absent). The selection follows the
    characters.

    Attributes:
        from_index: The dragged slot.
        to_index: Where the dragged slot is dropped.
    """

    from_index: int
    to_index: int

    def __post_init__(self):
        check_index(self.from_index)

    @property
    def description(self) -> str:
        return f"Move selection {self.from_index} -> {self.to_index}"

    def execute(self, context: EditContext) -> CommandResult:
        plan, reason = plan_transfer(context, self.from_index, self.to_index)
        if plan is None:
            return CommandResult.error(reason)

        table = context.table
        moved = [(dst, table[src]) for src, dst in plan]
        destinations = {dst for _, dst in plan}
        for src, _ in plan:
            if src not in destinations:
                table[src] = None
        for dst, character in moved:
            table[dst] = character

        context.selection = Selection.of(
            (dst for _, dst in plan), anchor=shifted_anchor(context, plan)
        )
        return CommandResult.ok(f"Moved {len(plan)} slot(s)")


@dataclass
class CopyDragCommand(Command):
    """
    Command to copy the selected characters by dragging.

    Sources are left untouched. Each defined source produces a new
    character at its destination (named "<name>_copy" when the source
    has a name); absent sources write nothing. The selection moves to
    the copies.

    Attributes:
        from_index: The dragged slot.
        to_index: Where the dragged slot is dropped.
    """

    from_index: int
    to_index: int

    def __post_init__(self):
        check_index(self.from_index)

    @property
    def description(self) -> str:
        return f"Copy selection {self.from_index} -> {self.to_index}"

    def execute(self, context: EditContext) -> CommandResult:
        plan, reason = plan_transfer(context, self.from_index, self.to_index)
        if plan is None:
            return CommandResult.error(reason)

        table = context.table
        copies = [(dst, table[src]) for src, dst in plan]
        written = 0
        for dst, source in copies:
            if source is not None:
                table[dst] = source.duplicate()
                written += 1

        context.selection = Selection.of(
            (dst for _, dst in plan), anchor=shifted_anchor(context, plan)
        )
        return CommandResult.ok(f"Copied {written} character(s)")


@dataclass
class CopySelectionCommand(Command):
    """
    Command to copy the selection to the clipboard.

    Stores each defined selected character with its offset from the
    anchor. If no selected slot is defined the clipboard keeps its
    previous content and the command is rejected.
    """

    @property
    def description(self) -> str:
        return "Copy selection to clipboard"

    def execute(self, context: EditContext) -> CommandResult:
        clipboard = Clipboard.from_selection(context.document, context.selection)
        if not clipboard:
            return CommandResult.error("Nothing defined in selection")

        context.clipboard = clipboard
        return CommandResult.ok(f"Copied {len(clipboard)} character(s)", data=clipboard)


@dataclass
class PasteCommand(Command):
    """
    Command to paste the clipboard at the anchor.

    Each entry lands at anchor + offset as a new character (with the
    "_copy" name suffix). All destinations must be in range or nothing
    is written. The pasted slots become the selection; the anchor stays
    where it was.
    """

    @property
    def description(self) -> str:
        return "Paste clipboard"

    def execute(self, context: EditContext) -> CommandResult:
        clipboard = context.clipboard
        if not clipboard:
            return CommandResult.error("Clipboard is empty")

        anchor = context.anchor
        destinations = clipboard.destinations(anchor)
        if not all(in_range(dst) for dst in destinations):
            return CommandResult.error(f"Paste at {anchor} runs off the table")

        table = context.table
        for dst, entry in zip(destinations, clipboard):
            table[dst] = entry.character.duplicate()

        context.selection = Selection.of(destinations, anchor=anchor)
        return CommandResult.ok(f"Pasted {len(destinations)} character(s)")
