"""
Segment Font Constants.

This module defines constants used throughout the font document and
edit engine.
"""

# Font table geometry (16x16 grid)
SLOT_COUNT = 256
GRID_COLUMNS = 16
MAX_INDEX = SLOT_COUNT - 1

# Highest segments value (bits 0-14)
SEGMENTS_MASK = 0x7FFF

# Document names
DEFAULT_FONT_NAME = "Untitled Font"
LOADED_FONT_NAME = "Loaded Font"

# Appended to the name of copied/pasted characters
COPY_SUFFIX = "_copy"

# Fallback character name in the export feed ("CHAR_41")
EXPORT_NAME_PREFIX = "CHAR_"

# Arrow-key directions
ARROW_UP = "up"
ARROW_DOWN = "down"
ARROW_LEFT = "left"
ARROW_RIGHT = "right"
