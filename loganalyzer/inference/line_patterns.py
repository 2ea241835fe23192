import re
from typing import List
from dataclasses import dataclass


@dataclass
class LogPattern:
    """Represents a log pattern with its regex and field names."""

    pattern: re.Pattern
    field_names: List[str]
    name: str


# Shared prefix of the combined log layouts:
# ip identity user [timestamp] "method path protocol" status size
# status and size take ASCII digits only
_REQUEST_PREFIX = r'^(\S+) (\S+) (\S+) \[([^\]]+)\] "(\S+) (\S+) (\S+)" ([0-9]{3}) ([0-9]+)'

_BASE_FIELDS = [
    "ip",
    "identity",
    "user",
    "timestamp",
    "method",
    "path",
    "protocol",
    "status",
    "size",
]


patterns = {
    "NginxDetector": [
        LogPattern(
            pattern=re.compile(_REQUEST_PREFIX + r' "(.*?)" "(.*?)"$'),
            field_names=_BASE_FIELDS + ["referer", "userAgent"],
            name="nginx_combined",
        ),
    ],
    "ApacheDetector": [
        LogPattern(
            pattern=re.compile(_REQUEST_PREFIX + r"$"),
            field_names=list(_BASE_FIELDS),
            name="apache_combined",
        ),
    ],
}
