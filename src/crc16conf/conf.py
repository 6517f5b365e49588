# crc16conf/conf.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple
import logging
import threading

from crc16conf.bitops import reverse16
from crc16conf.table import Table, UpdateFn, make_table, make_table_nbr, update, update_nbr

log = logging.getLogger(__name__)


class BitOrder(Enum):
    REVERSED = "reversed"  # bit-15 is X^0, right-shifting
    NORMAL = "normal"      # bit-0 is X^0, left-shifting


# builder, fold
_ALGORITHMS = {
    BitOrder.REVERSED: (make_table, update),
    BitOrder.NORMAL: (make_table_nbr, update_nbr),
}


class _LazyTable:
    """
    One-time, thread-safe holder for a configuration's (table, update) pair.

    The pair is published as a single tuple assignment after it is fully
    built, so a reader that sees it non-None sees a complete binding.
    """

    __slots__ = ("_lock", "_built")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._built: Optional[Tuple[Table, UpdateFn]] = None

    def get(self, conf: "Conf") -> Tuple[Table, UpdateFn]:
        built = self._built
        if built is not None:
            return built
        with self._lock:
            if self._built is None:
                self._built = _build(conf)
            return self._built

    # Copies and unpickled confs start unbuilt with their own lock.
    def __reduce__(self):
        return (_LazyTable, ())

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_LazyTable":
        return _LazyTable()


def _check_u16(conf: Any, name: str) -> None:
    v = getattr(conf, name)
    if not isinstance(v, int) or isinstance(v, bool):
        raise TypeError(f"conf.{name} must be int")
    if not (0 <= v <= 0xFFFF):
        raise ValueError(f"conf.{name} out of range [0,65535]")


@dataclass(frozen=True)
class Conf:
    """
    CRC-16 configuration.

    poly:    generator polynomial in natural form (e.g. 0x8005, 0x1021)
    bit_rev: bit-reversed CRC (bit-15 is X^0)?
    ini_val: initial value of the CRC register
    fin_val: XOR the register with this at the end
    big_end: emit checksum *bytes* most significant first?
    name:    optional label, not part of equality

    The polynomial table is built the first time the configuration is used
    (checksum(), new(), ensure_table()) and reused afterwards.
    """
    poly: int
    bit_rev: bool
    ini_val: int
    fin_val: int
    big_end: bool
    name: str = field(default="", compare=False)
    _lazy: _LazyTable = field(default_factory=_LazyTable, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        for attr in ("poly", "ini_val", "fin_val"):
            _check_u16(self, attr)
        for attr in ("bit_rev", "big_end"):
            if not isinstance(getattr(self, attr), bool):
                raise TypeError(f"conf.{attr} must be bool")
        if not isinstance(self.name, str):
            raise TypeError("conf.name must be str")

    @property
    def bit_order(self) -> BitOrder:
        return BitOrder.REVERSED if self.bit_rev else BitOrder.NORMAL

    @property
    def table(self) -> Table:
        return self._lazy.get(self)[0]

    def ensure_table(self) -> Tuple[Table, UpdateFn]:
        return self._lazy.get(self)


def ensure_table(conf: Conf) -> Tuple[Table, UpdateFn]:
    """
    Build conf's polynomial table on first call; no-op afterwards.
    Returns the (table, update function) pair bound to conf.
    """
    if not isinstance(conf, Conf):
        raise TypeError("conf must be a Conf")
    return conf.ensure_table()


# ============================
# Predefined configurations
# ============================
#
# Mostly used are the CCITT (0x1021) and IBM/ANSI (0x8005) polynomials,
# either bit-reversed or not. More parameter sets:
#   http://reveng.sourceforge.net/crc-catalogue/

X25 = Conf(poly=0x1021, bit_rev=True, ini_val=0xFFFF, fin_val=0xFFFF, big_end=False, name="x25")
PPP = X25
MODBUS = Conf(poly=0x8005, bit_rev=True, ini_val=0xFFFF, fin_val=0x0000, big_end=False, name="modbus")
XMODEM = Conf(poly=0x1021, bit_rev=False, ini_val=0x0000, fin_val=0x0000, big_end=True, name="xmodem")
KERMIT = Conf(poly=0x1021, bit_rev=True, ini_val=0x0000, fin_val=0x0000, big_end=False, name="kermit")

_REGISTRY: Dict[str, Conf] = {
    "x25": X25,
    "ppp": PPP,
    "modbus": MODBUS,
    "xmodem": XMODEM,
    "kermit": KERMIT,
}


def available_configs() -> list[str]:
    """
    Names accepted by get_config().
    """
    return sorted(_REGISTRY)


def get_config(name: str) -> Conf:
    """
    Look up a predefined configuration by name ("x25", "X-25", "Modbus", ...).
    """
    if not isinstance(name, str) or not name:
        raise ValueError("config name must be a non-empty string")
    key = name.lower().replace("-", "").replace("_", "")
    try:
        return _REGISTRY[key]
    except KeyError:
        raise KeyError(f"unknown CRC-16 config '{name}' (known: {', '.join(available_configs())})") from None


# ----------------------------
# Internal
# ----------------------------

def _build(conf: Conf) -> Tuple[Table, UpdateFn]:
    builder, fold = _ALGORITHMS[conf.bit_order]
    poly = reverse16(conf.poly) if conf.bit_rev else conf.poly
    log.debug("building CRC-16 table: poly=0x%04X order=%s", conf.poly, conf.bit_order.value)
    return builder(poly), fold
