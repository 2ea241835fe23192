"""
Log Format Detection

Classifies raw log content as one of the supported formats by looking at its
first non-blank line.

This package provides:
- Format detection for JSON lines, nginx combined and Apache combined logs
- Plain text as the fallback format
- Timestamp parsing for the formats found in those logs
- Transparent reading of compressed files (.gz, .bz2, .xz, .lzma)

Basic usage:
    from loganalyzer.inference import detect_format

    log_format = detect_format(content)
    print(f"Detected format: {log_format.value}")

    Or from file:
    log_format = LogFormatInferenceEngine().analyze_file("path/to/access.log")
"""

from .log_core import LogFormat
from .inference_engine import LogFormatInferenceEngine, detect_format

__all__ = ["LogFormat", "LogFormatInferenceEngine", "detect_format"]
