# crc16conf/digest.py
from __future__ import annotations

from typing import Any, Union

import numpy as np

from crc16conf.conf import Conf, ensure_table

# The size of a CRC-16 checksum in bytes.
SIZE = 2

BytesLike = Union[bytes, bytearray, memoryview]


class Digest:
    """
    Partial evaluation of a CRC-16 checksum (hashlib-style).

    Not thread-safe: a digest has a single writer. Wrap it in your own lock
    if it must be shared.
    """

    block_size = 1
    digest_size = SIZE

    def __init__(self, conf: Conf, data: BytesLike = b"") -> None:
        self._table, self._update = ensure_table(conf)
        self._conf = conf
        self._crc = conf.ini_val
        self.write(data)

    @property
    def conf(self) -> Conf:
        return self._conf

    @property
    def name(self) -> str:
        return f"crc16-{self._conf.name}" if self._conf.name else "crc16"

    @property
    def size(self) -> int:
        return SIZE

    def reset(self) -> None:
        self._crc = self._conf.ini_val

    def write(self, data: BytesLike) -> int:
        """
        Fold data into the register. Always consumes all of it.
        """
        b = _as_bytes(data, "write")
        self._crc = self._update(self._crc, self._table, b)
        return len(b)

    def update(self, data: BytesLike) -> None:
        self.write(data)

    def sum16(self) -> int:
        """
        Current checksum. Does not change state; writing may continue.
        """
        return self._crc ^ self._conf.fin_val

    def sum(self, sink: BytesLike = b"") -> Any:
        """
        Append the 2 checksum bytes to sink.

        A bytearray sink is extended in place and returned; any other
        bytes-like sink gives new bytes.
        """
        out = _serialize(self.sum16(), big_end=self._conf.big_end)
        if isinstance(sink, bytearray):
            sink.extend(out)
            return sink
        return _as_bytes(sink, "sum") + out

    def digest(self) -> bytes:
        return self.sum(b"")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def copy(self) -> "Digest":
        d = Digest(self._conf)
        d._crc = self._crc
        return d

    def __repr__(self) -> str:
        return f"<Digest {self.name} crc=0x{self.sum16():04x}>"


def new(conf: Conf, data: BytesLike = b"") -> Digest:
    """
    New digest computing the CRC-16 checksum for conf.
    """
    return Digest(conf, data)


def checksum(conf: Conf, data: BytesLike) -> int:
    """
    CRC-16 checksum of data, without creating a Digest.
    """
    table, fold = ensure_table(conf)
    return fold(conf.ini_val, table, _as_bytes(data, "checksum")) ^ conf.fin_val


# ============================
# Frame helpers
# ============================

def append_checksum(conf: Conf, data: BytesLike) -> bytes:
    """
    data followed by its serialized checksum (byte order per conf.big_end).
    """
    b = _as_bytes(data, "append_checksum")
    return b + _serialize(checksum(conf, b), big_end=conf.big_end)


def verify(conf: Conf, frame: BytesLike) -> bool:
    """
    True if the last 2 bytes of frame are the checksum of the bytes before them.
    """
    b = _as_bytes(frame, "verify")
    if len(b) < SIZE:
        return False
    body, got = b[:-SIZE], b[-SIZE:]
    return _serialize(checksum(conf, body), big_end=conf.big_end) == got


# ----------------------------
# Internal
# ----------------------------

def _serialize(v: int, *, big_end: bool) -> bytes:
    return v.to_bytes(SIZE, "big" if big_end else "little")


def _as_bytes(data: Any, op: str) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8 or data.ndim != 1:
            raise TypeError(f"{op}: numpy data must be a 1-D uint8 array")
        return data.tobytes()
    raise TypeError(f"{op}: data must be bytes-like")
