from .base_parser import ParsedLog
from .parsing_engine import LogParsingEngine, parse_log_file

__all__ = ["ParsedLog", "LogParsingEngine", "parse_log_file"]
