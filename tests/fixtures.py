"""
Test Fixtures.

Helpers that build documents, contexts and editors with known content,
so tests do not depend on a UI driving the engine.

Example:
    >>> context = make_context({2: (1, "A"), 3: (2, "B")}, selected=(2, 3))
    >>> context.anchor
    2
"""

from segment_font_lib.contexts import EditContext
from segment_font_lib.document import FontDocument
from segment_font_lib.editors.session import FontEditor
from segment_font_lib.selection import Selection
from segment_font_lib.slots import Character

# index -> (segments, name)
SAMPLE_CHARACTERS = {
    1: (5, "A"),
    2: (0x3F, "ZERO"),
    3: (0x06, None),
    4: (7, "X"),
    6: (0x4F, "THREE"),
}


def make_document(characters=None, name="Test Font") -> FontDocument:
    """
    Create a document with the given characters.

    Args:
        characters: Dict of index -> (segments, name), or index -> None
            to make a slot absent. Slot 0 starts as a blank character.
        name: Font name.
    """
    document = FontDocument.create_empty(name)
    for index, value in (characters or {}).items():
        document.table[index] = None if value is None else Character(*value)
    return document


def make_context(characters=None, selected=(0,), anchor=None, clipboard=None) -> EditContext:
    """
    Create an EditContext with a preset selection.

    The anchor defaults to the first selected index.
    """
    if anchor is None:
        anchor = selected[0]
    return EditContext(
        document=make_document(characters),
        selection=Selection.of(selected, anchor=anchor),
        clipboard=clipboard,
    )


def make_editor(characters=None) -> FontEditor:
    """Create an editor over a document with the given characters."""
    return FontEditor(make_document(characters))


def create_sample_editor() -> FontEditor:
    """Create an editor over SAMPLE_CHARACTERS."""
    return make_editor(SAMPLE_CHARACTERS)
