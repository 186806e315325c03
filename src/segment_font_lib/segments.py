"""
Segment Definitions.

Bit assignments for the 15-segment (14 segments + decimal point)
display, and helpers for reading and formatting segment values.

    a  b  c  d  e  f  g1 g2 h  j  k   l    m    n    dp
    1  2  4  8  16 32 64 128 256 512 1024 2048 4096 8192 16384
"""

from __future__ import annotations

from .constants import SEGMENTS_MASK


class UnknownSegmentError(KeyError):
    """Exception raised for a segment name that is not in SEGMENTS."""

    pass


SEGMENTS: dict[str, int] = {
    "a": 1 << 0,
    "b": 1 << 1,
    "c": 1 << 2,
    "d": 1 << 3,
    "e": 1 << 4,
    "f": 1 << 5,
    "g1": 1 << 6,
    "g2": 1 << 7,
    "h": 1 << 8,
    "j": 1 << 9,
    "k": 1 << 10,
    "l": 1 << 11,
    "m": 1 << 12,
    "n": 1 << 13,
    "dp": 1 << 14,
}

SEGMENT_NAMES: tuple[str, ...] = tuple(SEGMENTS)


def segment_bit(name: str) -> int:
    """
    Get the bit value for a segment name.

    Raises:
        UnknownSegmentError: If name is not a segment.
    """
    try:
        return SEGMENTS[name]
    except KeyError:
        raise UnknownSegmentError(name) from None


def is_lit(value: int, name: str) -> bool:
    """Check if a segment is on in value."""
    return bool(value & segment_bit(name))


def toggle_segment(value: int, name: str) -> int:
    """Flip one segment in value."""
    return (value ^ segment_bit(name)) & SEGMENTS_MASK


def active_segments(value: int) -> list[str]:
    """
    Names of the lit segments, in display order.

    Example:
        >>> active_segments(0b101)
        ['a', 'c']
    """
    return [name for name, bit in SEGMENTS.items() if value & bit]


def format_binary(value: int) -> str:
    """Format as 15 binary digits: 5 -> '000000000000101'."""
    return format(value, "015b")


def format_hex(value: int) -> str:
    """Format as 0x-prefixed, 4 upper-case hex digits: 255 -> '0x00FF'."""
    return f"0x{value:04X}"
