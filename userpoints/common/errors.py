"""Domain errors and failure typing."""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for conversion failures."""

    error_code = "PIPELINE_ERROR"


class ConfigError(PipelineError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class SourceError(PipelineError):
    """Raised when the input document cannot be read or parsed."""

    error_code = "SOURCE_ERROR"


class RecordError(PipelineError):
    """Raised when a single source record cannot be converted."""

    error_code = "RECORD_ERROR"

    def __init__(self, message: str, *, token: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.token = token
        self.field = field


class CoordinateFormatError(RecordError):
    """Raised for an unknown hemisphere letter or a malformed fixed-width field."""

    error_code = "COORDINATE_FORMAT_ERROR"


class PositionFormatError(RecordError):
    """Raised when a combined position cannot be split or either half fails to parse."""

    error_code = "POSITION_FORMAT_ERROR"


class MissingAttributeError(RecordError):
    error_code = "MISSING_ATTRIBUTE"


class ConversionAborted(PipelineError):
    """Raised in strict mode on the first record that fails to convert."""

    error_code = "CONVERSION_ABORTED"
