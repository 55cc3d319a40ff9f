"""Conformant PNG chunk encoder for synthetic fixtures."""
from __future__ import annotations

import struct
import zlib

from png_core.crc import chunk_crc
from png_core.protocol import (
    CHUNK_HEADER_FMT,
    PNG_SIGNATURE,
    TAG_END,
    TAG_START,
    TAG_TEXT,
    U32_FMT,
)

# 1x1, 8-bit greyscale, deflate, no filter, no interlace
IHDR_1X1_GREY = struct.pack(">IIBBBBB", 1, 1, 8, 0, 0, 0, 0)


def encode_chunk(tag: bytes, payload: bytes = b"", crc: int | None = None) -> bytes:
    """Encode one chunk; `crc` overrides the stored trailer (for corrupt fixtures)."""
    if crc is None:
        crc = chunk_crc(tag, payload)
    return struct.pack(CHUNK_HEADER_FMT, len(payload), tag) + payload + struct.pack(U32_FMT, crc)


def text_payload(keyword: str, text: str) -> bytes:
    return keyword.encode("latin-1") + b"\x00" + text.encode("latin-1")


def build_png(chunks: list[tuple[bytes, bytes]], signature: bytes = PNG_SIGNATURE) -> bytes:
    """Concatenate the signature and correctly checksummed chunks."""
    return signature + b"".join(encode_chunk(tag, payload) for tag, payload in chunks)


def minimal_chunks(
    texts: list[tuple[str, str]] | None = None,
    ihdr: bool = True,
    iend: bool = True,
) -> list[tuple[bytes, bytes]]:
    """Chunk list for a 1x1 grey image, optionally with tEXt chunks."""
    chunks: list[tuple[bytes, bytes]] = []
    if ihdr:
        chunks.append((TAG_START, IHDR_1X1_GREY))
    for keyword, text in texts or []:
        chunks.append((TAG_TEXT, text_payload(keyword, text)))
    # one scanline: filter byte 0, one grey sample
    chunks.append((b"IDAT", zlib.compress(b"\x00\x80")))
    if iend:
        chunks.append((TAG_END, b""))
    return chunks


def minimal_png(texts: list[tuple[str, str]] | None = None) -> bytes:
    return build_png(minimal_chunks(texts))
