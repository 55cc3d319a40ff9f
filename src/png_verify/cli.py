import json
import sys
from pathlib import Path

import click

from png_core.protocol import BLOCK_SIZE
from .logic import verify_png, verify_stream
from .report import write_chunk_report


@click.group()
def main():
    pass


@main.command("check")
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option("-v", "--verbose", is_flag=True, help="Print one line per chunk")
@click.option("-t", "--text", "text", is_flag=True, help="Dump tEXt chunks to stdout")
@click.option("--json", "as_json", is_flag=True, help="Print one JSON result per file")
@click.option("--report", type=click.Path(dir_okay=False, path_type=Path), help="Write a Parquet chunk table")
@click.option("--block-size", type=click.IntRange(min=1), default=BLOCK_SIZE, show_default=True)
def check_cmd(files, verbose: bool, text: bool, as_json: bool, report: Path | None, block_size: int):
    """Check PNG files (or stdin) for signature, chunk and CRC errors."""
    if verbose and text:
        raise click.UsageError("-v and -t are mutually exclusive")
    if as_json and text:
        raise click.UsageError("--json and -t are mutually exclusive")

    opts = {
        "verbose": verbose,
        "block_size": block_size,
        "echo": None if as_json else click.echo,
    }
    if text:
        opts["text_out"] = sys.stdout.buffer

    results = []
    if not files:
        results.append(verify_stream(sys.stdin.buffer, "stdin", **opts))
    for path in files:
        result = verify_png(path, **opts)
        if result["errors"] and result["errors"][0]["code"] == "E_OPEN" and not as_json:
            # verify_png never walked the file, so nothing was echoed yet.
            click.echo(result["lines"][0], err=True)
        results.append(result)

    if as_json:
        for result in results:
            click.echo(json.dumps(result, sort_keys=True, separators=(",", ":"), ensure_ascii=False))

    if report is not None:
        write_chunk_report(results, report)

    raise SystemExit(0 if all(r["status"] == "PASS" for r in results) else 1)


if __name__ == "__main__":
    main()
