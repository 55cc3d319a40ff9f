from __future__ import annotations

from .const import CheckFailure

_ASCII_LETTERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")


def is_valid_chunk_name(tag: bytes) -> bool:
    return len(tag) == 4 and all(b in _ASCII_LETTERS for b in tag)


def check_chunk_name(tag: bytes) -> None:
    if not is_valid_chunk_name(tag):
        raw = " ".join(f"{b:02x}" for b in tag)
        raise CheckFailure(
            "E_CHUNK_NAME",
            f"chunk name {raw} doesn't comply to naming rules",
            tag_bytes=raw,
        )

