"""
Selection Commands.

Commands:
    - SelectCommand: Grid click (plain, shift or ctrl)
    - NavigateCommand: Arrow-key step of the anchor

A grid click also tidies the document. Before the selection changes,
every previously selected slot (other than the clicked one) that holds
an empty character - no segments and no name - reverts to absent. Then,
unless the click was a shift-click, an absent clicked slot gets a blank
character so it is ready to edit.

Arrow navigation reuses the selection transitions but leaves the
document alone.

Example:
    >>> cmd = SelectCommand(index=5)
    >>> editor.execute(cmd)
    >>> editor.document.table[5]
    Character(segments=0, name=None)
"""

from __future__ import annotations

from dataclasses import dataclass

from ..contexts import EditContext
from ..selection import step_anchor
from ..slots import Character, check_index
from .base import Command, CommandResult


@dataclass
class SelectCommand(Command):
    """
    Command for a click on a grid cell.

    Attributes:
        index: Clicked slot.
        shift: Shift held - range select from the anchor.
        ctrl: Ctrl held - toggle the slot. Shift wins if both are set.
    """

    index: int
    shift: bool = False
    ctrl: bool = False

    def __post_init__(self):
        check_index(self.index)

    @property
    def description(self) -> str:
        modifier = " +shift" if self.shift else " +ctrl" if self.ctrl else ""
        return f"Select {self.index}{modifier}"

    def execute(self, context: EditContext) -> CommandResult:
        """
        Revert empty leftovers, auto-create the clicked slot, then
        apply the selection transition.
        """
        table = context.table
        reverted = []
        for previous in context.selection:
            if previous == self.index:
                continue
            character = table[previous]
            if character is not None and character.is_empty_content:
                table[previous] = None
                reverted.append(previous)

        created = False
        if not self.shift and table[self.index] is None:
            table[self.index] = Character()
            created = True

        context.selection = context.selection.apply(
            self.index, shift=self.shift, ctrl=self.ctrl
        )
        return CommandResult.ok(
            f"Selected {len(context.selection)}",
            data={"reverted": reverted, "created": created},
        )


@dataclass
class NavigateCommand(Command):
    """
    Command for an arrow key on the grid.

    Steps the anchor one cell (row stride 16, clamped at the edges) and
    applies a plain or shift transition to the new index. At an edge
    the command is rejected.

    Attributes:
        direction: ARROW_UP, ARROW_DOWN, ARROW_LEFT or ARROW_RIGHT.
        shift: Shift held - extend the range instead of moving.
    """

    direction: str
    shift: bool = False

    @property
    def description(self) -> str:
        return f"Navigate {self.direction}{' +shift' if self.shift else ''}"

    def execute(self, context: EditContext) -> CommandResult:
        current = context.anchor
        target = step_anchor(current, self.direction)
        if target == current:
            return CommandResult.error(f"At grid edge ({self.direction})")

        context.selection = context.selection.apply(target, shift=self.shift)
        return CommandResult.ok(f"Anchor {current} -> {context.anchor}")
