from pathlib import Path
import logging

from .structured_parsers import JSONParser, TextParser
from .web_log_parsers import NginxParser, ApacheParser
from .base_parser import BaseParser, ParsedLog
from loganalyzer.constants import AUTO_FORMAT
from loganalyzer.inference.inference_engine import LogFormatInferenceEngine
from loganalyzer.inference.log_core import LogFormat
from loganalyzer.inference.utils import CompressionHandler, split_lines

logger = logging.getLogger(__name__)


class LogParsingEngine:
    def __init__(self):
        self.parser_classes = {
            LogFormat.JSON: JSONParser,
            LogFormat.NGINX: NginxParser,
            LogFormat.APACHE: ApacheParser,
            LogFormat.TEXT: TextParser,
        }
        self.inference_engine = LogFormatInferenceEngine()
        logger.debug(
            f"Initialized parsing engine with {len(self.parser_classes)} parser types"
        )

    def resolve_format(self, log_format, lines=None) -> LogFormat:
        """Turn a format selector ("auto", "nginx", LogFormat.JSON, ...) into a LogFormat."""
        if isinstance(log_format, LogFormat):
            return log_format

        if log_format == AUTO_FORMAT:
            return self.inference_engine.analyze_lines(lines or [])

        try:
            return LogFormat(log_format)
        except ValueError:
            raise ValueError(f"No parser available for format: {log_format}") from None

    def create_parser(self, log_format) -> BaseParser:
        format_type = self.resolve_format(log_format)

        if format_type not in self.parser_classes:
            raise ValueError(f"No parser available for format: {format_type.value}")

        parser_class = self.parser_classes[format_type]
        logger.debug(f"Created {parser_class.__name__} for format {format_type.value}")
        return parser_class()

    def parse_file(self, filepath, log_format=AUTO_FORMAT) -> ParsedLog:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        content = CompressionHandler.read_text(filepath)
        logger.info(f"Read {len(content)} characters from {filepath}")

        return self.parse_content(content, log_format, source=str(filepath))

    def parse_content(self, content, log_format=AUTO_FORMAT, source=None) -> ParsedLog:
        lines = split_lines(content)
        result = self.parse_lines(lines, self.resolve_format(log_format, lines))
        result.source = source

        logger.info(
            f"Parsed {result.parsed_entries}/{result.total_lines} lines as "
            f"{result.format.value} ({result.success_rate:.1%} success rate)"
        )
        return result

    def parse_lines(self, lines, log_format=AUTO_FORMAT) -> ParsedLog:
        parser = self.create_parser(self.resolve_format(log_format, lines))
        return parser.parse_lines(lines)

    def parse_single_line(self, line, log_format=AUTO_FORMAT):
        parser = self.create_parser(self.resolve_format(log_format, [line]))
        return parser.parse_line(line)


def parse_log_file(filepath, log_format=AUTO_FORMAT) -> ParsedLog:
    """Read a log file and parse every non-blank line with the chosen format."""
    return LogParsingEngine().parse_file(filepath, log_format)
