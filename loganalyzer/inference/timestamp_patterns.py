# Tried in order; the first format that parses the whole value wins.
TIMESTAMP_PATTERNS = [
    {
        "name": "common_log",
        "format": "%d/%b/%Y:%H:%M:%S %z",
        "example": "10/Oct/2020:13:55:36 -0700",
    },
    {
        "name": "iso8601",
        "format": "iso8601",
        "example": "2026-02-19T10:00:00Z",
    },
    {
        "name": "python_logging",
        "format": "%Y-%m-%d %H:%M:%S,%f",
        "example": "2023-07-27 14:30:00,123",
    },
    {
        "name": "slash_datetime",
        "format": "%Y/%m/%d %H:%M:%S",
        "example": "2023/07/27 14:30:00",
    },
    {
        "name": "rfc2822",
        "format": "%a, %d %b %Y %H:%M:%S %z",
        "example": "Thu, 27 Jul 2023 14:30:00 +0000",
    },
]
