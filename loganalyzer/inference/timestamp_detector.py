from datetime import datetime, timezone

from .timestamp_patterns import TIMESTAMP_PATTERNS

import logging

logger = logging.getLogger(__name__)


class TimestampDetector:

    TIMESTAMP_PATTERNS = TIMESTAMP_PATTERNS

    @classmethod
    def parse_timestamp(cls, value):
        """
        Parse a record's timestamp value into a datetime.

        Args:
            value: Timestamp field value, either a string in one of the known
                formats or a number of milliseconds since the Unix epoch

        Returns:
            datetime (naive or aware, as written in the value) or None
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, (int, float)):
            return cls._parse_epoch_millis(value)
        if not isinstance(value, str):
            return None

        text = value.strip()
        if not text:
            return None

        for pattern_info in cls.TIMESTAMP_PATTERNS:
            parsed = cls._parse_with_format(text, pattern_info["format"])
            if parsed is not None:
                return parsed

        logger.debug(f"Unrecognised timestamp: {value!r}")
        return None

    @staticmethod
    def _parse_with_format(text, format_str):
        try:
            if format_str == "iso8601":
                return datetime.fromisoformat(text)
            return datetime.strptime(text, format_str)
        except ValueError:
            return None

    @staticmethod
    def _parse_epoch_millis(value):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            logger.debug(f"Epoch timestamp out of range {value}: {e}")
            return None
