"""Airfield to userpoints conversion stage."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from userpoints.common.config_loader import ConversionConfig
from userpoints.common.constants import ON_ERROR_ABORT
from userpoints.common.errors import ConversionAborted, MissingAttributeError, RecordError
from userpoints.common.logging import log_event
from userpoints.common.models import AirfieldRecord, Waypoint
from userpoints.pipeline.coordinates import parse_position
from userpoints.pipeline.export import write_userpoints_csv
from userpoints.pipeline.mapper import build_record
from userpoints.source.skydemon_xml import iter_airfields, parse_elevation

STAGE = "convert"


@dataclass
class ConversionResult:
    input_path: Path
    output_path: Path
    records_read: int = 0
    records_written: int = 0
    skipped: list[dict] = field(default_factory=list)

    @property
    def records_skipped(self) -> int:
        return len(self.skipped)


def convert_record(record: AirfieldRecord, config: ConversionConfig) -> Waypoint:
    """Convert one source record, raising a :class:`RecordError` subclass on bad input."""
    if record.name is None:
        raise MissingAttributeError("airfield has no Name attribute", field="Name")
    if record.position is None:
        raise MissingAttributeError(
            f"airfield {record.name!r} has no Position attribute",
            field="Position",
        )

    position = parse_position(record.position, enforce_axis=config.enforce_axis_letters)
    return build_record(position, record.name, parse_elevation(record.elevation), config.waypoint)


def _skip_entry(record: AirfieldRecord, exc: RecordError) -> dict:
    return {
        "index": record.index,
        "name": record.name,
        "error_code": exc.error_code,
        "field": exc.field,
        "raw_token": exc.token,
        "message": str(exc),
    }


def run_conversion(
    config: ConversionConfig,
    input_path: Path,
    output_path: Path,
    logger: logging.Logger,
    run_id: str,
    *,
    strict: bool = False,
) -> ConversionResult:
    """Convert every airfield in ``input_path`` and write the userpoints CSV.

    Bad records are logged and skipped unless ``strict`` is set or the config
    asks to abort, in which case :class:`ConversionAborted` is raised and no
    output file is written.
    """
    abort_on_error = strict or config.on_error == ON_ERROR_ABORT
    defaults = config.waypoint
    if defaults.import_filename is None:
        defaults = replace(defaults, import_filename=input_path.name)
        config = replace(config, waypoint=defaults)

    result = ConversionResult(input_path=input_path, output_path=output_path)
    waypoints: list[Waypoint] = []

    log_event(logger, "conversion start", run_id=run_id, stage=STAGE, event="STAGE_START", status="ok")
    for record in iter_airfields(input_path, config.element_tag):
        result.records_read += 1
        try:
            waypoint = convert_record(record, config)
        except RecordError as exc:
            log_event(
                logger,
                str(exc),
                level=logging.WARNING,
                run_id=run_id,
                stage=STAGE,
                event="RECORD_FAIL",
                status="error",
                record_index=record.index,
                record_name=record.name,
                raw_token=exc.token,
                field=exc.field,
                error_code=exc.error_code,
            )
            if abort_on_error:
                raise ConversionAborted(f"record {record.index} ({record.name!r}): {exc}") from exc
            result.skipped.append(_skip_entry(record, exc))
            continue

        if record.elevation is not None and waypoint.elevation is None:
            log_event(
                logger,
                f"ignoring non-numeric elevation {record.elevation!r}",
                level=logging.WARNING,
                run_id=run_id,
                stage=STAGE,
                event="ELEVATION_IGNORED",
                status="ok",
                record_index=record.index,
                record_name=record.name,
                raw_token=record.elevation,
                field="Elevation",
            )
        log_event(
            logger,
            f"converted {waypoint}",
            level=logging.DEBUG,
            run_id=run_id,
            stage=STAGE,
            event="RECORD_OK",
            status="ok",
            record_index=record.index,
            record_name=record.name,
        )
        waypoints.append(waypoint)

    result.records_written = write_userpoints_csv(output_path, waypoints)
    log_event(
        logger,
        "conversion end",
        run_id=run_id,
        stage=STAGE,
        event="STAGE_END",
        status="partial" if result.skipped else "ok",
        rows_in=result.records_read,
        rows_out=result.records_written,
    )
    return result
