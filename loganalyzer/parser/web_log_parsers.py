from .base_parser import PatternBasedParser
from loganalyzer.inference.log_core import LogFormat
from loganalyzer.inference.line_patterns import patterns


class WebLogParser(PatternBasedParser):

    field_types = {"status": "integer", "size": "integer"}
    field_defaults = {"referer": "-", "userAgent": "-"}


class NginxParser(WebLogParser):

    format_type = LogFormat.NGINX
    patterns = patterns["NginxDetector"]


class ApacheParser(WebLogParser):

    format_type = LogFormat.APACHE
    patterns = patterns["ApacheDetector"]
