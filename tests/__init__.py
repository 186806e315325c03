"""
Tests package for segment_font_lib.

This package contains unit tests for all library components.
Tests build documents and contexts directly (see fixtures.py), so no
UI layer is needed.

Run all tests:
    python -m pytest tests/ -v

Or with unittest:
    python -m unittest discover tests/ -v
"""
