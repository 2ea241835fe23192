from .analyzer import (
    LogSummary,
    TimeStats,
    aggregate_by_field,
    calculate_time_stats,
    generate_summary,
    top_values,
)

__all__ = [
    "LogSummary",
    "TimeStats",
    "aggregate_by_field",
    "calculate_time_stats",
    "generate_summary",
    "top_values",
]
