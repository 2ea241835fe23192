"""
loganalyzer

Parse JSON, nginx, Apache and plain text logs into uniform records, filter
them with regular expressions, and summarise status codes, paths and traffic
over time.

Basic usage:
    from loganalyzer.parser import parse_log_file
    from loganalyzer.search import filter_entries
    from loganalyzer.stats import generate_summary

    parsed = parse_log_file("access.log")
    errors = filter_entries(parsed.entries, "error", "level")
    print(generate_summary(parsed).as_dict())
"""

__version__ = "1.0.0"
