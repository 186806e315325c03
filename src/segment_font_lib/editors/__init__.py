"""
Editors Package.

This package contains the FontEditor class, the editing session that
executes commands and publishes document and selection together.

Example:
    >>> from segment_font_lib.editors import FontEditor
    >>>
    >>> editor = FontEditor()
    >>> editor.on_change = lambda command, result: print(command.description)
    >>> editor.select_at(5)
    Select 5
"""

from .session import FontEditor

__all__ = [
    "FontEditor",
]
