from .search_engine import (
    InvalidPatternError,
    compile_pattern,
    filter_entries,
    filter_by_status,
)

__all__ = [
    "InvalidPatternError",
    "compile_pattern",
    "filter_entries",
    "filter_by_status",
]
