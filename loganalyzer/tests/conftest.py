"""
Shared sample logs and fixtures for loganalyzer tests
"""

import pytest

NGINX_LOG = """\
192.168.1.1 - - [19/Feb/2026:10:00:00 +0000] "GET /api/v1/users HTTP/1.1" 200 1234 "-" "Mozilla/5.0"
192.168.1.2 - - [19/Feb/2026:10:00:01 +0000] "GET /api/v1/posts HTTP/1.1" 200 567 "https://example.com" "Mozilla/5.0"
192.168.1.3 - - [19/Feb/2026:10:00:02 +0000] "GET /api/v1/nonexistent HTTP/1.1" 404 89 "-" "curl/7.68.0"
192.168.1.1 - - [19/Feb/2026:10:00:03 +0000] "POST /api/v1/auth/login HTTP/1.1" 500 234 "-" "Mozilla/5.0"
192.168.1.4 - - [19/Feb/2026:10:00:04 +0000] "GET /api/v1/users HTTP/1.1" 403 45 "-" "curl/7.68.0"
"""

APACHE_LOG = """\
127.0.0.1 - frank [10/Oct/2020:13:55:36 -0700] "GET /apache_pb.gif HTTP/1.0" 200 2326
127.0.0.1 - - [10/Oct/2020:13:56:01 -0700] "GET /index.html HTTP/1.0" 404 0
10.0.0.7 - - [10/Oct/2020:14:02:11 -0700] "POST /login HTTP/1.1" 502 512
"""

JSON_LOG = """\
{"timestamp": "2026-02-19T10:00:00Z", "level": "info", "message": "Server started"}
{"timestamp": "2026-02-19T10:00:01Z", "level": "info", "message": "Request received", "path": "/api/v1/users"}
{"timestamp": "2026-02-19T10:00:02Z", "level": "error", "message": "Database connection failed"}
{"timestamp": "2026-02-19T10:00:03Z", "level": "info", "message": "Request received", "path": "/api/v1/posts"}
{"timestamp": "2026-02-19T10:00:04Z", "level": "warn", "message": "High memory usage"}
"""

TEXT_LOG = """\
[2026-02-19 10:00:00] INFO: Server started
[2026-02-19 10:00:01] INFO: Processing request
[2026-02-19 10:00:02] ERROR: Connection timeout
[2026-02-19 10:00:03] WARN: Slow query detected
[2026-02-19 10:00:04] INFO: Request completed
"""


@pytest.fixture
def log_dir(tmp_path):
    (tmp_path / "nginx.log").write_text(NGINX_LOG, encoding="utf-8")
    (tmp_path / "apache.log").write_text(APACHE_LOG, encoding="utf-8")
    (tmp_path / "json.log").write_text(JSON_LOG, encoding="utf-8")
    (tmp_path / "text.log").write_text(TEXT_LOG, encoding="utf-8")
    (tmp_path / "empty.log").write_text("", encoding="utf-8")
    return tmp_path


@pytest.fixture
def nginx_file(log_dir):
    return log_dir / "nginx.log"


@pytest.fixture
def json_file(log_dir):
    return log_dir / "json.log"


@pytest.fixture
def text_file(log_dir):
    return log_dir / "text.log"


@pytest.fixture
def empty_file(log_dir):
    return log_dir / "empty.log"
