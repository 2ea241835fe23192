from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from loganalyzer.constants import (
    CLIENT_ERROR_CODES,
    ERROR_STATUS_CODES,
    SERVER_ERROR_CODES,
    TOP_PATHS_LIMIT,
    UNKNOWN_VALUE,
)
from loganalyzer.inference.log_core import LogFormat
from loganalyzer.inference.timestamp_detector import TimestampDetector
from loganalyzer.parser.base_parser import field_to_string
from loganalyzer.search.search_engine import count_by_status


@dataclass
class TimeStats:
    hour: Dict[int, int] = field(default_factory=dict)
    minute: Dict[str, int] = field(default_factory=dict)

    @property
    def peak_hour(self):
        if not self.hour:
            return None
        return max(self.hour.items(), key=lambda x: x[1])[0]

    def as_dict(self):
        return {"hour": dict(self.hour), "minute": dict(self.minute)}


@dataclass
class LogSummary:
    format: LogFormat
    total_entries: int
    fields_detected: List[str] = field(default_factory=list)
    status_counts: Optional[Dict[str, int]] = None
    error_count: Optional[int] = None
    error_rate: Optional[str] = None
    client_errors: Optional[int] = None
    server_errors: Optional[int] = None
    top_paths: Optional[List[Tuple[str, int]]] = None
    time_stats: Optional[TimeStats] = None

    def as_dict(self):
        """Report form with camelCase keys; absent statistics are left out."""
        report = {
            "format": self.format.value,
            "totalEntries": self.total_entries,
            "fieldsDetected": list(self.fields_detected),
        }
        optional = {
            "statusCounts": self.status_counts,
            "errorCount": self.error_count,
            "errorRate": self.error_rate,
            "clientErrors": self.client_errors,
            "serverErrors": self.server_errors,
            "topPaths": self.top_paths,
            "timeStats": self.time_stats.as_dict() if self.time_stats else None,
        }
        report.update({key: value for key, value in optional.items() if value is not None})
        return report


def _aggregation_key(value):
    if value is None or value == "":
        return UNKNOWN_VALUE
    return field_to_string(value)


def aggregate_by_field(entries, field_name):
    """Count entries per distinct value of a field, in first-seen order."""
    counts = defaultdict(int)
    for entry in entries:
        counts[_aggregation_key(entry.get(field_name))] += 1
    return dict(counts)


def top_values(counts, limit=None):
    """(value, count) pairs by descending count; ties keep first-seen order."""
    ordered = sorted(counts.items(), key=lambda x: x[1], reverse=True)
    return ordered if limit is None else ordered[:limit]


def calculate_time_stats(entries):
    counts_per_hour = defaultdict(int)
    counts_per_minute = defaultdict(int)

    for entry in entries:
        if "timestamp" not in entry:
            continue
        ts = TimestampDetector.parse_timestamp(entry["timestamp"])
        if ts is None:
            continue

        counts_per_hour[ts.hour] += 1
        counts_per_minute[f"{ts.hour}:{ts.minute:02d}"] += 1

    return TimeStats(hour=dict(counts_per_hour), minute=dict(counts_per_minute))


def detect_fields(entries):
    fields = {}
    for entry in entries:
        fields.update(dict.fromkeys(entry))
    return list(fields)


def generate_summary(parsed_log):
    entries = parsed_log.entries
    log_format = LogFormat(parsed_log.format)
    summary = LogSummary(format=log_format, total_entries=len(entries))

    if not entries:
        return summary

    summary.fields_detected = detect_fields(entries)

    if log_format.is_access_log:
        summary.status_counts = aggregate_by_field(entries, "status")

        summary.error_count = count_by_status(entries, ERROR_STATUS_CODES)
        summary.error_rate = f"{summary.error_count / len(entries) * 100:.2f}%"
        summary.client_errors = count_by_status(entries, CLIENT_ERROR_CODES)
        summary.server_errors = count_by_status(entries, SERVER_ERROR_CODES)

        summary.top_paths = top_values(
            aggregate_by_field(entries, "path"), TOP_PATHS_LIMIT
        )

    summary.time_stats = calculate_time_stats(entries)
    return summary
