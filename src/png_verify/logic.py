from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Callable

from png_core.crc import CRC_INIT, crc_complement, update_crc
from png_core.protocol import (
    BLOCK_SIZE,
    CHUNK_TAG_LEN,
    SIGNATURE_LEN,
    TAG_END,
    TAG_START,
    TAG_TEXT,
)
from .const import ERRORS, OK_MESSAGE, CheckFailure
from .names import check_chunk_name
from .signature import check_signature
from .source import OctetSource


def _tag_str(tag: bytes) -> str:
    return tag.decode("ascii", errors="backslashreplace")


class ChunkWalker:
    """Walks one PNG stream chunk by chunk and stops at the first fatal problem.

    - State (first chunk, IEND seen, lines, chunk records) belongs to this
      instance only; use one walker per file.
    - Content problems never raise out of `run()`; they become a FAIL result.
    """

    def __init__(
        self,
        source: OctetSource,
        name: str,
        verbose: bool = False,
        text_out: BinaryIO | None = None,
        block_size: int = BLOCK_SIZE,
        echo: Callable[[str], None] | None = None,
    ):
        if block_size < 1:
            raise ValueError(f"block_size must be >= 1, got {block_size}")
        self.source = source
        self.name = name
        self.verbose = verbose
        self.text_out = text_out
        self.block_size = block_size
        self.echo = echo

        self.first = True
        self.iend_read = False
        self.lines: list[str] = []
        self.warnings: list[dict] = []
        self.chunks: list[dict] = []

    def _say(self, message: str) -> None:
        line = f"{self.name}: {message}"
        self.lines.append(line)
        if self.echo is not None:
            self.echo(line)

    def _result(self, errors: list[dict]) -> dict:
        return {
            "file": self.name,
            "status": "FAIL" if errors else "PASS",
            "error_count": len(errors),
            "errors": errors,
            "warnings": self.warnings,
            "chunks": self.chunks,
            "lines": self.lines,
        }

    def _fail(self, error: dict) -> dict:
        self._say(error["message"])
        for advisory in error.get("advisories", []):
            self._say(advisory)
        return self._result([error])

    def run(self) -> dict:
        try:
            self._check_signature()
            while True:
                # An empty body is a truncated file, not a missing IEND.
                if not self.first:
                    if not self.source.peek():
                        break
                    if self.iend_read:
                        raise CheckFailure("E_TRAILING_DATA", offset=self.source.offset)
                self._check_chunk()
            if not self.iend_read:
                raise CheckFailure("E_NO_IEND")
        except CheckFailure as e:
            return self._fail(e.as_error())

        self._say(OK_MESSAGE)
        return self._result([])

    def _check_signature(self) -> None:
        magic = self.source.read(SIGNATURE_LEN)
        if len(magic) != SIGNATURE_LEN:
            raise CheckFailure("E_EOF", "Cannot read PNG header", offset=len(magic))
        findings = check_signature(magic)
        if findings:
            f = dict(findings[0])
            raise CheckFailure(f.pop("code"), f.pop("message"), **f)

    def _check_chunk(self) -> None:
        src = self.source
        length = src.read_u32()
        tag_offset = src.offset
        tag = src.read_exact(CHUNK_TAG_LEN, "chunk type")
        check_chunk_name(tag)
        tag_name = _tag_str(tag)

        if self.verbose:
            self._say(f"chunk {tag_name} at {tag_offset:x} length {length:x}")

        if self.first and tag != TAG_START:
            self.warnings.append({"code": "W_NO_IHDR", "message": ERRORS["W_NO_IHDR"], "tag": tag_name})
            self._say(ERRORS["W_NO_IHDR"])
        self.first = False

        dump = self.text_out is not None and tag == TAG_TEXT
        crc = self._stream_payload(tag, length, dump)
        if dump:
            self.text_out.write(b"\n")
            self.text_out.flush()

        stored = src.read_u32()
        computed = crc_complement(crc)
        record = {
            "index": len(self.chunks),
            "tag": tag_name,
            "offset": tag_offset,
            "length": length,
            "stored_crc": stored,
            "computed_crc": computed,
            "status": "OK" if stored == computed else "CRC_MISMATCH",
        }
        self.chunks.append(record)
        if stored != computed:
            raise CheckFailure(
                "E_CRC_MISMATCH",
                f"CRC error in chunk {tag_name} (actual {computed:08x}, should be {stored:08x})",
                tag=tag_name,
                computed=f"{computed:08x}",
                stored=f"{stored:08x}",
            )

        if tag == TAG_END:
            self.iend_read = True

    def _stream_payload(self, tag: bytes, length: int, dump: bool) -> int:
        crc = update_crc(CRC_INIT, tag)
        remaining = length
        separated = False
        while remaining > 0:
            toread = min(remaining, self.block_size)
            block = self.source.read(toread)
            if len(block) != toread:
                raise CheckFailure(
                    "E_EOF",
                    f"EOF while reading chunk data ({_tag_str(tag)})",
                    tag=_tag_str(tag),
                    offset=self.source.offset,
                )
            crc = update_crc(crc, block)
            remaining -= toread
            if dump:
                out = block
                if not separated:
                    # keyword NUL text -> keyword:text
                    nul = block.find(b"\x00")
                    if nul != -1:
                        out = block[:nul] + b":" + block[nul + 1:]
                        separated = True
                self.text_out.write(out)
        return crc


def verify_stream(fp: BinaryIO, name: str, **opts) -> dict:
    """Validate an already-open binary stream under display name `name`."""
    return ChunkWalker(OctetSource(fp), name, **opts).run()


def verify_png(path: Path, name: str | None = None, **opts) -> dict:
    """Open and validate one file; an unopenable file yields an E_OPEN result."""
    name = name or str(path)
    try:
        f = open(path, "rb")
    except OSError as e:
        message = f"{e.strerror or e}"
        return {
            "file": name,
            "status": "FAIL",
            "error_count": 1,
            "errors": [{"code": "E_OPEN", "message": message, "path": str(path)}],
            "warnings": [],
            "chunks": [],
            "lines": [f"{name}: {message}"],
        }
    with f:
        return verify_stream(f, name, **opts)
