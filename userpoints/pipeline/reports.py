"""Run report aggregation."""

from __future__ import annotations

from pathlib import Path

from userpoints.common.fs import write_json
from userpoints.common.time_utils import utc_timestamp_iso
from userpoints.pipeline.convert import ConversionResult


def write_run_summary(path: Path, result: ConversionResult, run_id: str) -> Path:
    status = "partial" if result.skipped else "success"
    payload = {
        "run_id": run_id,
        "generated_at": utc_timestamp_iso(),
        "status": status,
        "input_path": str(result.input_path),
        "output_path": str(result.output_path),
        "counts": {
            "records_read": result.records_read,
            "records_written": result.records_written,
            "records_skipped": result.records_skipped,
        },
        "skipped": result.skipped,
    }
    write_json(path, payload)
    return path
