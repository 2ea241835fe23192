AUTO_FORMAT = "auto"
FORMAT_SELECTORS = (AUTO_FORMAT, "json", "text", "nginx", "apache")

DEFAULT_ENCODING = "utf-8"

# Only these codes count as errors in summaries
CLIENT_ERROR_CODES = frozenset({400, 401, 403, 404})
SERVER_ERROR_CODES = frozenset({500, 502, 503, 504})
ERROR_STATUS_CODES = CLIENT_ERROR_CODES | SERVER_ERROR_CODES

UNKNOWN_VALUE = "unknown"
TOP_PATHS_LIMIT = 10

DEFAULT_DISPLAY_LIMIT = 10
DEFAULT_TOP_LIMIT = 10
