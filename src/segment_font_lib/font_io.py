"""
Font JSON Codec.

Encodes documents to the persisted JSON text and decodes them back.
Reading and writing files is left to the host application.

Example:
    >>> text = dumps_font(editor.document)
    >>> doc = loads_font(text)
    >>> f"{safe_file_stem(doc.name)}.json"
    'Untitled_Font.json'
"""

from __future__ import annotations

import json

from .document import FontDocument, safe_file_stem


class FontFormatError(ValueError):
    """Exception raised when font text is not valid JSON."""

    pass


def dumps_font(document: FontDocument) -> str:
    """Serialize a document as 2-space indented JSON."""
    return json.dumps(document.to_dict(), indent=2)


def loads_font(text: str | bytes) -> FontDocument:
    """
    Parse JSON text into a normalized document.

    Any well-formed JSON is accepted; its content is normalized by
    FontDocument.from_dict().

    Raises:
        FontFormatError: If text is not valid JSON.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise FontFormatError(f"Failed to parse font file: {exc}") from exc
    return FontDocument.from_dict(data)


__all__ = ["FontFormatError", "dumps_font", "loads_font", "safe_file_stem"]
