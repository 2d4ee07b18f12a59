"""Minimal strict schema for the YAML conversion config."""

from __future__ import annotations

from userpoints.common.constants import ON_ERROR_POLICIES
from userpoints.common.errors import ConfigError


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    if not isinstance(obj, dict):
        raise ConfigError(f"{ctx} must be a mapping")
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_non_empty_string(value: object, ctx: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{ctx} must be a non-empty string")


def validate_conversion_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    sections = {
        "waypoint": {"type", "region", "import_filename"},
        "source": {"input_filename", "element_tag"},
        "output": {"filename"},
        "parsing": {"enforce_axis_letters", "on_error"},
    }
    _assert_required_keys(cfg, set(sections), "conversion config")
    _assert_no_unknown_keys(cfg, set(sections), "conversion config", allow_unknown)
    for name, keys in sections.items():
        _assert_required_keys(cfg[name], keys, name)
        _assert_no_unknown_keys(cfg[name], keys, name, allow_unknown)

    _assert_non_empty_string(cfg["waypoint"]["type"], "waypoint.type")
    region = cfg["waypoint"]["region"]
    if region is not None and not isinstance(region, str):
        raise ConfigError("waypoint.region must be a string or null")
    import_filename = cfg["waypoint"]["import_filename"]
    if import_filename is not None and not isinstance(import_filename, str):
        raise ConfigError("waypoint.import_filename must be a string or null")

    _assert_non_empty_string(cfg["source"]["input_filename"], "source.input_filename")
    _assert_non_empty_string(cfg["source"]["element_tag"], "source.element_tag")
    _assert_non_empty_string(cfg["output"]["filename"], "output.filename")

    if not isinstance(cfg["parsing"]["enforce_axis_letters"], bool):
        raise ConfigError("parsing.enforce_axis_letters must be a boolean")
    if cfg["parsing"]["on_error"] not in ON_ERROR_POLICIES:
        allowed = ", ".join(ON_ERROR_POLICIES)
        raise ConfigError(f"parsing.on_error must be one of: {allowed}")

    return cfg
