"""Configuration loading and validation."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from userpoints.common.constants import (
    DEFAULT_ELEMENT_TAG,
    DEFAULT_IMPORT_FILENAME,
    DEFAULT_INPUT_FILENAME,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_REGION,
    DEFAULT_WAYPOINT_TYPE,
    ON_ERROR_SKIP,
)
from userpoints.common.errors import ConfigError
from userpoints.common.fs import read_yaml
from userpoints.common.schema import validate_conversion_config

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "waypoint": {
        "type": DEFAULT_WAYPOINT_TYPE,
        "region": DEFAULT_REGION,
        "import_filename": DEFAULT_IMPORT_FILENAME,
    },
    "source": {
        "input_filename": DEFAULT_INPUT_FILENAME,
        "element_tag": DEFAULT_ELEMENT_TAG,
    },
    "output": {
        "filename": DEFAULT_OUTPUT_FILENAME,
    },
    "parsing": {
        "enforce_axis_letters": False,
        "on_error": ON_ERROR_SKIP,
    },
}


@dataclass(frozen=True)
class WaypointDefaults:
    """Fixed literals stamped onto every output row."""

    waypoint_type: str = DEFAULT_WAYPOINT_TYPE
    region: str | None = DEFAULT_REGION
    import_filename: str | None = DEFAULT_IMPORT_FILENAME


@dataclass(frozen=True)
class ConversionConfig:
    waypoint: WaypointDefaults
    input_filename: str
    element_tag: str
    output_filename: str
    enforce_axis_letters: bool
    on_error: str

    @classmethod
    def from_dict(cls, cfg: dict) -> "ConversionConfig":
        waypoint = cfg["waypoint"]
        return cls(
            waypoint=WaypointDefaults(
                waypoint_type=waypoint["type"],
                region=waypoint["region"],
                import_filename=waypoint["import_filename"],
            ),
            input_filename=cfg["source"]["input_filename"],
            element_tag=cfg["source"]["element_tag"],
            output_filename=cfg["output"]["filename"],
            enforce_axis_letters=cfg["parsing"]["enforce_axis_letters"],
            on_error=cfg["parsing"]["on_error"],
        )


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_config_file(path: Path) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    payload = read_yaml(path)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ConfigError(f"Config file must contain a mapping: {path}")
    return payload


def load_conversion_config(
    path: Path | None = None,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
) -> ConversionConfig:
    """Load the conversion config.

    Values missing from ``path`` fall back to the built-in defaults, and
    ``overlay_path`` (when it exists) is deep-merged on top.
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if path is not None:
        cfg = _deep_merge(cfg, _read_config_file(path))
    if overlay_path is not None and overlay_path.exists():
        cfg = _deep_merge(cfg, _read_config_file(overlay_path))
    validated = validate_conversion_config(cfg, allow_unknown=allow_unknown)
    return ConversionConfig.from_dict(validated)
