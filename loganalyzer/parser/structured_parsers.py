from .base_parser import BaseParser
from loganalyzer.inference.format_detectors import load_json_value
from loganalyzer.inference.log_core import LogFormat


class JSONParser(BaseParser):

    format_type = LogFormat.JSON

    def parse_line(self, line):
        try:
            json_data = load_json_value(line)
        except ValueError:
            return None

        # Records are mappings; bare scalars and arrays are not log entries
        if not isinstance(json_data, dict):
            return None
        return json_data


class TextParser(BaseParser):

    format_type = LogFormat.TEXT

    def parse_line(self, line):
        return {"raw": line}
