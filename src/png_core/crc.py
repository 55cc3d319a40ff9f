"""Table-driven CRC-32 as used by PNG chunk trailers."""
from __future__ import annotations

CRC_POLY = 0xEDB88320
CRC_MASK = 0xFFFFFFFF
CRC_INIT = CRC_MASK


def make_crc_table() -> tuple[int, ...]:
    """Build the 256-entry lookup table for the reflected polynomial."""
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            c = CRC_POLY ^ (c >> 1) if c & 1 else c >> 1
        table.append(c)
    return tuple(table)


# Built once at import; read-only afterwards.
CRC_TABLE = make_crc_table()


def update_crc(crc: int, data: bytes) -> int:
    """Fold `data` into a running (non-complemented) crc."""
    table = CRC_TABLE
    c = crc
    for b in data:
        c = table[(c ^ b) & 0xFF] ^ (c >> 8)
    return c


def crc_complement(crc: int) -> int:
    return crc ^ CRC_MASK


def chunk_crc(tag: bytes, payload: bytes = b"") -> int:
    """Return the value a conformant encoder stores after `tag` + `payload`."""
    return crc_complement(update_crc(update_crc(CRC_INIT, tag), payload))
