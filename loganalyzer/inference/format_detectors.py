import json
import logging

from .base_detector import BaseFormatDetector
from .line_patterns import patterns
from .log_core import LogFormat

logger = logging.getLogger(__name__)


def _reject_constant(name):
    raise ValueError(f"Non-standard JSON constant: {name}")


def load_json_value(line):
    """Strict JSON decode; NaN/Infinity are rejected like any other syntax error."""
    return json.loads(line, parse_constant=_reject_constant)


class JSONDetector(BaseFormatDetector):

    format_type = LogFormat.JSON

    def matches(self, line):
        try:
            load_json_value(line)
            return True
        except ValueError:
            return False


class PatternDetector(BaseFormatDetector):

    pattern_key = None

    def __init__(self):
        super().__init__()
        self.patterns = patterns[self.pattern_key]

    def matches(self, line):
        for log_pattern in self.patterns:
            if log_pattern.pattern.match(line):
                logger.debug(f"{self.name} matched pattern {log_pattern.name}")
                return True
        return False


class NginxDetector(PatternDetector):
    format_type = LogFormat.NGINX
    pattern_key = "NginxDetector"


class ApacheDetector(PatternDetector):
    format_type = LogFormat.APACHE
    pattern_key = "ApacheDetector"
