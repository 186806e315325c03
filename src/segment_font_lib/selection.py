"""
Selection Model.

This module provides the Selection class - an anchor plus an
insertion-ordered set of selected slot indices - and the click
transition rules used by the grid:

    plain click   anchor = index, selected = {index}
    shift-click   anchor kept, selected = range anchor..index
    ctrl-click    toggle index in selected

Ctrl-click makes the clicked index the anchor, even when the click
removes it from the set. Ctrl-click on the anchor itself is the
exception: the anchor goes to the first remaining index in insertion
order, not the lowest one. The selected indices are therefore stored as
a tuple in insertion order.

Example:
    >>> sel = Selection.single(4)
    >>> sel = sel.apply(9, ctrl=True)
    >>> sel = sel.apply(2, ctrl=True)
    >>> sel.selected
    (4, 9, 2)
    >>> sel.apply(2, ctrl=True).anchor
    4
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .constants import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    GRID_COLUMNS,
    MAX_INDEX,
    SLOT_COUNT,
)
from .slots import check_index


@dataclass(frozen=True)
class Selection:
    """
    Anchor plus insertion-ordered selected indices.

    Selections are immutable; every transition returns a new one.

    Attributes:
        anchor: The primary index (the one shown for editing).
        selected: Selected indices in insertion order, no duplicates,
            never empty.
    """

    anchor: int
    selected: tuple[int, ...]

    def __post_init__(self):
        """Validate indices and drop duplicate entries."""
        check_index(self.anchor)
        if not self.selected:
            raise ValueError("Selection cannot be empty")
        for index in self.selected:
            check_index(index)
        unique = tuple(dict.fromkeys(self.selected))
        if unique != self.selected:
            object.__setattr__(self, "selected", unique)

    @classmethod
    def single(cls, index: int) -> Selection:
        """Select one index and make it the anchor."""
        return cls(anchor=index, selected=(index,))

    @classmethod
    def range(cls, anchor: int, focus: int) -> Selection:
        """
        Select the inclusive range between anchor and focus.

        The anchor is kept; the range is ascending whatever the
        direction of the drag.
        """
        start, end = min(anchor, focus), max(anchor, focus)
        return cls(anchor=anchor, selected=tuple(range(start, end + 1)))

    @classmethod
    def of(cls, indices: Iterable[int], anchor: int) -> Selection:
        """Build a selection from any iterable of indices."""
        return cls(anchor=anchor, selected=tuple(indices))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def sorted_indices(self) -> list[int]:
        """Selected indices in ascending order."""
        return sorted(self.selected)

    def __contains__(self, index: object) -> bool:
        return index in self.selected

    def __len__(self) -> int:
        return len(self.selected)

    def __iter__(self) -> Iterator[int]:
        return iter(self.selected)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def apply(self, index: int, shift: bool = False, ctrl: bool = False) -> Selection:
        """
        Return the selection after a click on index.

        Args:
            index: Clicked slot.
            shift: Shift held - extend range from the anchor.
            ctrl: Ctrl held - toggle index. Ignored when shift is set.

        Returns:
            New Selection.

        Raises:
            IndexError: If index is outside 0-255.
        """
        check_index(index)
        if shift:
            return Selection.range(self.anchor, index)
        if ctrl:
            return self._toggle(index)
        return Selection.single(index)

    def _toggle(self, index: int) -> Selection:
        """Ctrl-click transition."""
        if index not in self.selected:
            return Selection(anchor=index, selected=self.selected + (index,))

        remaining = tuple(i for i in self.selected if i != index)
        if not remaining:
            return Selection.single(index)
        if index == self.anchor:
            # First remaining in insertion order, not the lowest index
            return Selection(anchor=remaining[0], selected=remaining)

        # The clicked index stays the anchor even though it left the set
        return Selection(anchor=index, selected=remaining)


def step_anchor(anchor: int, direction: str) -> int:
    """
    Move an index one cell across the 16-column grid.

    Clamps at the grid edges; there is no wrap-around between rows
    other than left/right stepping through consecutive indices.

    Args:
        anchor: Current index.
        direction: One of ARROW_UP, ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT.

    Returns:
        The next index, or anchor itself at an edge.

    Raises:
        ValueError: If direction is unknown.

    Example:
        >>> step_anchor(0x12, ARROW_UP)
        2
        >>> step_anchor(3, ARROW_UP)
        3
    """
    check_index(anchor)
    if direction == ARROW_UP:
        return anchor - GRID_COLUMNS if anchor >= GRID_COLUMNS else anchor
    if direction == ARROW_DOWN:
        return anchor + GRID_COLUMNS if anchor < SLOT_COUNT - GRID_COLUMNS else anchor
    if direction == ARROW_LEFT:
        return anchor - 1 if anchor > 0 else anchor
    if direction == ARROW_RIGHT:
        return anchor + 1 if anchor < MAX_INDEX else anchor
    raise ValueError(f"Unknown direction: {direction!r}")
