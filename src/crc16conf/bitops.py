# crc16conf/bitops.py
from __future__ import annotations


def reverse16(v: int) -> int:
    """
    Bit-reversed 16-bit value: 0x8005 -> 0xA001, 0x1021 -> 0x8408.
    Bits above bit 15 are ignored.

    Swaps progressively larger groups: neighbouring bits, bit pairs,
    nibbles, then the two bytes.
    """
    v &= 0xFFFF
    v = ((v >> 1) & 0x5555) | ((v & 0x5555) << 1)
    v = ((v >> 2) & 0x3333) | ((v & 0x3333) << 2)
    v = ((v >> 4) & 0x0F0F) | ((v & 0x0F0F) << 4)
    return ((v >> 8) & 0x00FF) | ((v & 0x00FF) << 8)
