from __future__ import annotations

from pathlib import Path
import sys

from crc16conf.conf import available_configs, get_config
from crc16conf.digest import new


CHUNK = 64 * 1024


def checksum_file(path: str | Path, conf_name: str = "x25") -> int:
    h = new(get_config(conf_name))
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(CHUNK), b""):
            h.write(chunk)
    return h.sum16()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(f"usage: {sys.argv[0]} FILE [{'|'.join(available_configs())}]")
        sys.exit(2)

    name = sys.argv[2] if len(sys.argv) > 2 else "x25"
    print(f"{name}: 0x{checksum_file(sys.argv[1], name):04x}  {sys.argv[1]}")
