from abc import ABC, abstractmethod


class BaseFormatDetector(ABC):

    format_type = None

    def __init__(self):
        self.name = self.__class__.__name__

    @abstractmethod
    def matches(self, line) -> bool:
        """Return True when the line has this detector's format."""
        pass

    def detect(self, lines):
        """Classify by the first non-blank line only."""
        first_line = self.first_content_line(lines)
        if first_line is None:
            return False
        return self.matches(first_line)

    @staticmethod
    def first_content_line(lines):
        for line in lines:
            if line.strip():
                return line
        return None
