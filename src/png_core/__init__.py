"""PNG core - format constants and chunk CRC."""
from .crc import CRC_INIT, CRC_TABLE, chunk_crc, crc_complement, make_crc_table, update_crc

__all__ = ["CRC_INIT", "CRC_TABLE", "chunk_crc", "crc_complement", "make_crc_table", "update_crc"]
