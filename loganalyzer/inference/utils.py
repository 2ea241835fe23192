import gzip
import bz2
import lzma
from pathlib import Path

from ..constants import DEFAULT_ENCODING

import logging

logger = logging.getLogger(__name__)


class CompressionHandler:

    COMPRESSION_MAP = {".gz": "gzip", ".bz2": "bz2", ".xz": "xz", ".lzma": "lzma"}

    @classmethod
    def detect_compression(cls, filepath):
        suffix = Path(filepath).suffix.lower()
        return cls.COMPRESSION_MAP.get(suffix)

    @classmethod
    def read_text(cls, filepath, encoding=DEFAULT_ENCODING):
        """Read the whole file as text, decompressing by suffix."""
        filepath = Path(filepath)
        compression = cls.detect_compression(filepath)

        try:
            if compression == "gzip":
                with gzip.open(filepath, "rt", encoding=encoding, errors="ignore") as f:
                    return f.read()
            elif compression == "bz2":
                with bz2.open(filepath, "rt", encoding=encoding, errors="ignore") as f:
                    return f.read()
            elif compression in ("xz", "lzma"):
                with lzma.open(filepath, "rt", encoding=encoding, errors="ignore") as f:
                    return f.read()
            else:
                with open(filepath, "r", encoding=encoding, errors="ignore") as f:
                    return f.read()
        except Exception as e:
            logger.error(f"Error opening file {filepath}: {e}")
            raise


def split_lines(content):
    """Split raw content on newlines and drop blank lines."""
    lines = (line.rstrip("\r") for line in content.split("\n"))
    return [line for line in lines if line.strip()]
