import zlib

from png_core.crc import CRC_INIT, CRC_TABLE, chunk_crc, crc_complement, make_crc_table, update_crc


def test_table_is_deterministic():
    assert make_crc_table() == make_crc_table() == CRC_TABLE
    assert len(CRC_TABLE) == 256
    assert CRC_TABLE[0] == 0
    assert CRC_TABLE[1] == 0x77073096
    assert CRC_TABLE[255] == 0x2D02EF8D
    assert all(0 <= v <= 0xFFFFFFFF for v in CRC_TABLE)


def test_matches_zlib_crc32():
    data = bytes(range(256)) * 3
    assert crc_complement(update_crc(CRC_INIT, data)) == zlib.crc32(data)


def test_incremental_update_equals_one_shot():
    data = b"IDAT" + b"hello world" * 100
    c = CRC_INIT
    for i in range(0, len(data), 7):
        c = update_crc(c, data[i:i + 7])
    assert c == update_crc(CRC_INIT, data)


def test_empty_update_is_identity():
    assert update_crc(0x12345678, b"") == 0x12345678


def test_iend_crc_constant():
    # Every IEND chunk on earth ends with AE 42 60 82.
    assert chunk_crc(b"IEND") == 0xAE426082
