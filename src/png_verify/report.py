from __future__ import annotations

from pathlib import Path

import pandas as pd
import pyarrow as pa
import pyarrow.parquet as pq

REPORT_SCHEMA = pa.schema(
    [
        ("file", pa.string()),
        ("index", pa.int32()),
        ("tag", pa.string()),
        ("offset", pa.int64()),
        ("length", pa.int64()),
        ("stored_crc", pa.int64()),
        ("computed_crc", pa.int64()),
        ("status", pa.string()),
    ]
)


def chunk_rows(results: list[dict]) -> list[dict]:
    """Flatten per-file results into one row per chunk that was read."""
    rows: list[dict] = []
    for result in results:
        for chunk in result.get("chunks", []):
            rows.append({"file": result["file"], **chunk})
    return rows


def write_chunk_report(results: list[dict], out_path: Path) -> int:
    """Write the chunk table as Parquet. Returns the row count; 0 writes nothing."""
    rows = chunk_rows(results)
    if not rows:
        return 0

    df = pd.DataFrame(rows, columns=REPORT_SCHEMA.names)
    table = pa.Table.from_pandas(df, schema=REPORT_SCHEMA, preserve_index=False)
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(table, out_path)
    return len(rows)
