"""Application constants."""

DEFAULT_INPUT_FILENAME = "skydemon_PL_missing.airfields.xml"
DEFAULT_OUTPUT_FILENAME = "userpoints.csv"
DEFAULT_ELEMENT_TAG = "Airfield"

DEFAULT_WAYPOINT_TYPE = "Airstrip"
DEFAULT_REGION = "EP"
DEFAULT_IMPORT_FILENAME = DEFAULT_INPUT_FILENAME

ON_ERROR_SKIP = "skip"
ON_ERROR_ABORT = "abort"
ON_ERROR_POLICIES = (ON_ERROR_SKIP, ON_ERROR_ABORT)

EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "event",
    "status",
    "record_index",
    "record_name",
    "raw_token",
    "field",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)
