from pathlib import Path
import logging

from .log_core import LogFormat
from .utils import CompressionHandler, split_lines
from .format_detectors import JSONDetector, NginxDetector, ApacheDetector

logger = logging.getLogger(__name__)


class LogFormatInferenceEngine:

    def __init__(self):
        # Order matters - nginx combined is a superset of the Apache pattern
        self.detectors = [
            JSONDetector(),
            NginxDetector(),
            ApacheDetector(),
        ]

        logger.debug(
            f"Initialized inference engine with {len(self.detectors)} detectors"
        )

    def analyze_file(self, filepath) -> LogFormat:
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"File not found: {filepath}")

        if not filepath.is_file():
            raise ValueError(f"Path is not a file: {filepath}")

        return self.analyze_content(CompressionHandler.read_text(filepath))

    def analyze_content(self, content) -> LogFormat:
        return self.analyze_lines(split_lines(content))

    def analyze_lines(self, lines) -> LogFormat:
        for detector in self.detectors:
            if detector.detect(lines):
                logger.debug(f"{detector.name} matched: {detector.format_type.value}")
                return detector.format_type

        logger.debug("No structured format matched, falling back to text")
        return LogFormat.TEXT


def detect_format(content) -> LogFormat:
    """Classify raw log content by its first non-blank line."""
    return LogFormatInferenceEngine().analyze_content(content)
