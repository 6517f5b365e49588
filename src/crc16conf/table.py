# crc16conf/table.py
from __future__ import annotations

from typing import Callable, Tuple

import numpy as np


# A Table is 256 16-bit words, one per byte value. Stored as a tuple of
# plain ints so the per-byte fold never touches numpy scalars.
Table = Tuple[int, ...]

UpdateFn = Callable[[int, Table, bytes], int]


# ============================
# Table builders
# ============================

def make_table(poly: int) -> Table:
    """
    Polynomial table in bit-reversed order (bit-15 is the X^0 term).

    `poly` must be given bit-reversed, e.g. 0xA001 for the 0x8005
    polynomial or 0x8408 for 0x1021.
    """
    poly = _check_poly(poly)
    crc = np.arange(256, dtype=np.uint32)
    for _ in range(8):
        crc = np.where(crc & 1, (crc >> 1) ^ poly, crc >> 1)
    return _freeze(crc)


def make_table_nbr(poly: int) -> Table:
    """
    Polynomial table in non-bit-reversed order (bit-0 is the X^0 term).
    """
    poly = _check_poly(poly)
    crc = np.arange(256, dtype=np.uint32) << 8
    for _ in range(8):
        crc = np.where(crc & 0x8000, (crc << 1) ^ poly, crc << 1) & 0xFFFF
    return _freeze(crc)


# ============================
# Fold functions
# ============================

def update(crc: int, tab: Table, data: bytes) -> int:
    """
    Fold data into the CRC register using a table from make_table().
    The register stays in bit-reversed order.
    """
    for b in data:
        crc = tab[(crc ^ b) & 0xFF] ^ (crc >> 8)
    return crc


def update_nbr(crc: int, tab: Table, data: bytes) -> int:
    """
    Fold data into the CRC register using a table from make_table_nbr().
    """
    for b in data:
        crc = tab[((crc >> 8) ^ b) & 0xFF] ^ ((crc << 8) & 0xFFFF)
    return crc


# ----------------------------
# Internal
# ----------------------------

def _check_poly(poly: int) -> int:
    if not isinstance(poly, int) or isinstance(poly, bool):
        raise TypeError("poly must be int")
    if not (0 <= poly <= 0xFFFF):
        raise ValueError("poly must be a 16-bit value")
    return poly


def _freeze(crc: np.ndarray) -> Table:
    return tuple(crc.astype(np.uint16).tolist())
