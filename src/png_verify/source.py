from __future__ import annotations

import struct
from typing import BinaryIO

from png_core.protocol import U32_FMT, U32_LEN
from .const import CheckFailure


class OctetSource:
    """Forward-only byte reader with a single byte of lookahead.

    The lookahead slot is explicit so any object with `read(n)` works
    (files, pipes, sockets wrapped with makefile, BytesIO).
    """

    def __init__(self, fp: BinaryIO):
        self.fp = fp
        self.offset = 0
        self._pending: bytes = b""

    def peek(self) -> bytes:
        """Return the next byte without consuming it, or b"" at end of stream."""
        if not self._pending:
            self._pending = self.fp.read(1)
        return self._pending

    def read(self, n: int) -> bytes:
        """Read up to `n` bytes; fewer means the stream ended."""
        if n <= 0:
            return b""
        head = self._pending[:n]
        self._pending = self._pending[n:]
        parts = [head]
        got = len(head)
        # Raw streams may return short reads before EOF.
        while got < n:
            data = self.fp.read(n - got)
            if not data:
                break
            parts.append(data)
            got += len(data)
        out = b"".join(parts)
        self.offset += len(out)
        return out

    def read_exact(self, n: int, field: str) -> bytes:
        data = self.read(n)
        if len(data) != n:
            raise CheckFailure("E_EOF", f"EOF while reading {field}", offset=self.offset)
        return data

    def read_u32(self, field: str = "4 bytes value") -> int:
        (value,) = struct.unpack(U32_FMT, self.read_exact(U32_LEN, field))
        return value
