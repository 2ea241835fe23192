import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from loganalyzer.inference.log_core import LogFormat


def serialize_entry(entry):
    """Compact JSON form of a record, used for whole-record matching."""
    return json.dumps(entry, separators=(",", ":"), ensure_ascii=False, default=str)


def field_to_string(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    # Integral floats read like integers, so 404.0 and 404 share a key
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, (dict, list)):
        return serialize_entry(value)
    return str(value)


@dataclass
class ParsedLog:
    format: LogFormat
    entries: list = field(default_factory=list)
    total_lines: int = 0
    parsed_entries: int = 0
    source: str = None

    @property
    def malformed_lines(self):
        return self.total_lines - self.parsed_entries

    @property
    def success_rate(self):
        return self.parsed_entries / self.total_lines if self.total_lines > 0 else 0.0


class BaseParser(ABC):

    format_type = None

    @abstractmethod
    def parse_line(self, line):
        """Return the record for one line, or None if the line does not match."""
        pass

    def parse_lines(self, lines):
        """Parse non-blank lines, dropping the ones that do not match."""
        lines = [line for line in lines if line.strip()]
        entries = []

        for line in lines:
            entry = self.parse_line(line)
            if entry is not None:
                entries.append(entry)

        return ParsedLog(
            format=self.format_type,
            entries=entries,
            total_lines=len(lines),
            parsed_entries=len(entries),
        )


class PatternBasedParser(BaseParser):

    patterns = []
    field_types = {}
    field_defaults = {}

    def parse_line(self, line):
        for pattern in self.patterns:
            entry = self._try_pattern(line, pattern)
            if entry is not None:
                return entry
        return None

    def _try_pattern(self, line, pattern):
        match = pattern.pattern.match(line)
        if not match:
            return None

        entry = {}
        for i, field_name in enumerate(pattern.field_names, 1):
            value = match.group(i)
            if not value and field_name in self.field_defaults:
                value = self.field_defaults[field_name]
            entry[field_name] = self._convert_field_value(field_name, value)

        return entry

    def _convert_field_value(self, field_name, value):
        data_type = self.field_types.get(field_name, "string")

        if data_type == "integer":
            return int(value, 10)
        return value
