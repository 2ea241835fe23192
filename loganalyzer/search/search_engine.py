import re
import logging

from loganalyzer.parser.base_parser import field_to_string, serialize_entry

logger = logging.getLogger(__name__)


class InvalidPatternError(ValueError):
    def __init__(self, pattern, reason):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")


def compile_pattern(pattern):
    try:
        return re.compile(pattern, re.IGNORECASE)
    except re.error as e:
        raise InvalidPatternError(pattern, e) from e


def filter_entries(entries, pattern, field=None):
    """
    Keep the entries whose text matches a case-insensitive regex.

    Args:
        entries: Parsed records
        pattern: Regular expression, compiled once before any entry is tested
        field: Restrict matching to this field; entries without it are dropped.
            When omitted the whole record is matched in its JSON form.

    Returns:
        New list with the matching entries in their original order
    """
    regex = compile_pattern(pattern)

    if field:
        matches = []
        for entry in entries:
            value = entry.get(field)
            if value is None:
                continue
            if regex.search(field_to_string(value)):
                matches.append(entry)
    else:
        matches = [entry for entry in entries if regex.search(serialize_entry(entry))]

    logger.debug(
        f"Pattern {pattern!r} on {field or 'entry'} matched {len(matches)}/{len(entries)}"
    )
    return matches


def _status_in(entry, status_codes):
    status = entry.get("status")
    # Only numeric statuses can equal a code; strings such as "404" never do
    if isinstance(status, bool) or not isinstance(status, (int, float)):
        return False
    return status in status_codes


def filter_by_status(entries, status_codes):
    """Keep the entries whose status field is one of the given codes."""
    status_codes = frozenset(status_codes)
    return [entry for entry in entries if _status_in(entry, status_codes)]


def count_by_status(entries, status_codes):
    status_codes = frozenset(status_codes)
    return sum(1 for entry in entries if _status_in(entry, status_codes))
