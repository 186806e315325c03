"""
Segment Font Library - Document and edit engine for segment fonts.

A framework-agnostic library for editing small 15-segment display fonts
held in a fixed 256-slot table: multi-selection with anchor, drag move
and copy, clipboard copy/paste and reset, with document and selection
always updated together.

Main Components:
    - FontEditor: Editing session that executes commands
    - FontDocument: Named 256-slot character table
    - Selection: Anchor plus insertion-ordered selected indices
    - Clipboard: Anchor-relative copy of a selection
    - Commands: One command class per edit operation

Quick Start:
    >>> from segment_font_lib import FontEditor
    >>>
    >>> editor = FontEditor()
    >>> editor.select_at(4)
    >>> editor.select_at(6, ctrl=True)
    >>> editor.copy_selection()
    >>> editor.select_at(20)
    >>> editor.paste()
    >>> editor.selection.selected
    (20, 22)

Persistence:
    >>> from segment_font_lib import dumps_font, loads_font
    >>> text = dumps_font(editor.document)
    >>> editor.load_font(json.loads(text))

License:
    MIT License
"""

__version__ = "0.1.0"

# Core components
from .clipboard import Clipboard, ClipboardEntry

# Commands
from .commands.base import Command, CommandResult
from .commands.characters import (
    CopySegmentsCommand,
    ResetSelectionCommand,
    SetCharacterNameCommand,
    ToggleSegmentCommand,
    UpdateCharacterCommand,
)
from .commands.font import LoadFontCommand, NewFontCommand, RenameFontCommand
from .commands.selection import NavigateCommand, SelectCommand
from .commands.transfer import (
    CopyDragCommand,
    CopySelectionCommand,
    MoveCommand,
    PasteCommand,
)
from .constants import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    GRID_COLUMNS,
    SLOT_COUNT,
)
from .contexts import EditContext
from .document import FontDocument, FontSnapshot, safe_file_stem
from .editors.session import FontEditor
from .font_io import FontFormatError, dumps_font, loads_font
from .segments import SEGMENT_NAMES, SEGMENTS, UnknownSegmentError
from .selection import Selection, step_anchor
from .slots import Character, SlotTable, check_index

__all__ = [
    # Version
    "__version__",
    # Model
    "Character",
    "SlotTable",
    "FontDocument",
    "FontSnapshot",
    "Selection",
    "Clipboard",
    "ClipboardEntry",
    "EditContext",
    # Editor
    "FontEditor",
    # Commands - Base
    "Command",
    "CommandResult",
    # Commands - Selection
    "SelectCommand",
    "NavigateCommand",
    # Commands - Transfer
    "MoveCommand",
    "CopyDragCommand",
    "CopySelectionCommand",
    "PasteCommand",
    # Commands - Characters
    "ResetSelectionCommand",
    "UpdateCharacterCommand",
    "CopySegmentsCommand",
    "ToggleSegmentCommand",
    "SetCharacterNameCommand",
    # Commands - Font
    "NewFontCommand",
    "LoadFontCommand",
    "RenameFontCommand",
    # Persistence
    "dumps_font",
    "loads_font",
    "safe_file_stem",
    "FontFormatError",
    # Segments
    "SEGMENTS",
    "SEGMENT_NAMES",
    "UnknownSegmentError",
    # Helpers
    "check_index",
    "step_anchor",
    # Constants
    "SLOT_COUNT",
    "GRID_COLUMNS",
    "ARROW_UP",
    "ARROW_DOWN",
    "ARROW_LEFT",
    "ARROW_RIGHT",
]
