"""PNG fixture generator - writes conformant (or deliberately broken) files."""
from __future__ import annotations

from pathlib import Path

import click

from png_core.protocol import PNG_SIGNATURE
from png_compile.encoder import encode_chunk, minimal_chunks


def write_fixture(
    out_path: Path,
    texts: list[tuple[str, str]] | None = None,
    ihdr: bool = True,
    iend: bool = True,
    trailing: int = 0,
    bad_crc: str | None = None,
) -> Path:
    """Write a 1x1 PNG fixture to `out_path`."""
    parts = [PNG_SIGNATURE]
    for tag, payload in minimal_chunks(texts, ihdr=ihdr, iend=iend):
        if bad_crc is not None and tag.decode("ascii") == bad_crc:
            parts.append(encode_chunk(tag, payload, crc=0))
        else:
            parts.append(encode_chunk(tag, payload))
    # Junk after IEND
    parts.append(b"\x00" * trailing)

    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_bytes(b"".join(parts))
    return out_path


def _parse_text(ctx, param, values):
    pairs = []
    for v in values:
        key, sep, text = v.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {v!r}")
        pairs.append((key, text))
    return pairs


@click.command()
@click.argument("out", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--text", "texts", multiple=True, callback=_parse_text, help="Add a tEXt chunk (KEY=VALUE)")
@click.option("--no-ihdr", is_flag=True, help="Omit the IHDR chunk")
@click.option("--no-iend", is_flag=True, help="Omit the IEND chunk")
@click.option("--trailing", type=click.IntRange(min=0), default=0, help="Append N junk bytes after the last chunk")
@click.option("--bad-crc", metavar="TAG", default=None, help="Store a wrong CRC for this chunk type")
def main(out: Path, texts, no_ihdr: bool, no_iend: bool, trailing: int, bad_crc: str | None) -> None:
    """Write a synthetic PNG fixture to OUT."""
    try:
        write_fixture(out, texts, ihdr=not no_ihdr, iend=not no_iend, trailing=trailing, bad_crc=bad_crc)
    except OSError as e:
        # Fail closed with a single-line reason.
        print(f"FATAL: {e}")
        raise SystemExit(1)
    print(f"GENERATED: {out}")


if __name__ == "__main__":
    main()
