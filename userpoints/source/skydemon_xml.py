"""SkyDemon airfield XML reader."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from userpoints.common.constants import DEFAULT_ELEMENT_TAG
from userpoints.common.errors import SourceError
from userpoints.common.models import AirfieldRecord

NAME_ATTRIBUTE = "Name"
POSITION_ATTRIBUTE = "Position"
ELEVATION_ATTRIBUTE = "Elevation"


def parse_elevation(raw: str | None) -> float | None:
    """Return the elevation as a float, or ``None`` when absent or non-numeric."""
    if raw is None:
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        return None


def _load_root(path: Path) -> ET.Element:
    if not path.exists():
        raise SourceError(f"Input document not found: {path}")
    try:
        return ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise SourceError(f"Input document is not well-formed XML: {path}: {exc}") from exc


def iter_airfields(path: Path, element_tag: str = DEFAULT_ELEMENT_TAG) -> Iterator[AirfieldRecord]:
    """Yield every ``element_tag`` element at any depth, in document order."""
    root = _load_root(path)
    for index, element in enumerate(root.iter(element_tag)):
        yield AirfieldRecord(
            index=index,
            name=element.get(NAME_ATTRIBUTE),
            position=element.get(POSITION_ATTRIBUTE),
            elevation=element.get(ELEVATION_ATTRIBUTE),
        )
