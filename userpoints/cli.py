"""Convert SkyDemon airfield XML into a userpoints CSV file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from userpoints.common.config_loader import load_conversion_config
from userpoints.common.constants import EXIT_HARD_FAIL, EXIT_PARTIAL, EXIT_SUCCESS
from userpoints.common.errors import PipelineError
from userpoints.common.ids import generate_run_id
from userpoints.common.logging import build_logger, log_event
from userpoints.pipeline.convert import run_conversion
from userpoints.pipeline.reports import write_run_summary


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", default=None, help="defaults to source.input_filename from the config")
    parser.add_argument("--output", default=None, help="defaults to output.filename from the config")
    parser.add_argument("--config", default=None)
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--summary", default=None, help="write a JSON run summary to this path")
    parser.add_argument("--log-dir", default=None)
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--strict", action="store_true", help="abort on the first malformed record")
    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    logger = build_logger(
        run_id,
        log_dir=Path(args.log_dir) if args.log_dir else None,
        level=args.log_level,
    )

    try:
        config = load_conversion_config(
            Path(args.config) if args.config else None,
            overlay_path=Path(args.overlay_config) if args.overlay_config else None,
        )
        input_path = Path(args.input or config.input_filename)
        output_path = Path(args.output or config.output_filename)
        result = run_conversion(config, input_path, output_path, logger, run_id, strict=args.strict)
    except PipelineError as exc:
        log_event(
            logger,
            f"conversion failed: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            stage="convert",
            event="STAGE_FAIL",
            status="error",
            error_code=exc.error_code,
        )
        return EXIT_HARD_FAIL

    if args.summary:
        write_run_summary(Path(args.summary), result, run_id)

    if result.skipped:
        return EXIT_PARTIAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except Exception:
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
