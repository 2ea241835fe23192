import pytest
from loganalyzer.inference.log_core import LogFormat
from loganalyzer.parser.base_parser import ParsedLog
from loganalyzer.parser.parsing_engine import LogParsingEngine, parse_log_file
from loganalyzer.stats.analyzer import (
    TimeStats,
    aggregate_by_field,
    calculate_time_stats,
    generate_summary,
    top_values,
)


def _nginx_line(path, status, second=0):
    return (
        f'10.0.0.1 - - [19/Feb/2026:09:05:{second:02d} +0000] '
        f'"GET {path} HTTP/1.1" {status} 100 "-" "pytest"'
    )


def test_aggregate_status(nginx_file):
    entries = parse_log_file(nginx_file).entries
    counts = aggregate_by_field(entries, "status")

    assert counts == {"200": 2, "404": 1, "500": 1, "403": 1}
    assert list(counts) == ["200", "404", "500", "403"]


def test_aggregate_missing_field_is_unknown(text_file):
    entries = parse_log_file(text_file).entries
    assert aggregate_by_field(entries, "status") == {"unknown": 5}


def test_aggregate_counts_sum_to_entry_count(json_file):
    entries = parse_log_file(json_file).entries
    for field_name in ("level", "path", "missing", "timestamp"):
        assert sum(aggregate_by_field(entries, field_name).values()) == len(entries)


def test_aggregate_null_and_empty_values_are_unknown():
    entries = [{"user": None}, {"user": ""}, {"user": "bob"}, {}]
    assert aggregate_by_field(entries, "user") == {"unknown": 3, "bob": 1}


def test_aggregate_integral_floats_share_integer_key():
    entries = [{"status": 404.0}, {"status": 404}, {"status": 1.5}]
    assert aggregate_by_field(entries, "status") == {"404": 2, "1.5": 1}


def test_top_values_orders_ties_by_first_seen():
    counts = {"/c": 1, "/b": 2, "/a": 2, "/d": 3}
    assert top_values(counts) == [("/d", 3), ("/b", 2), ("/a", 2), ("/c", 1)]
    assert top_values(counts, 2) == [("/d", 3), ("/b", 2)]


def test_time_stats_for_nginx_timestamps(nginx_file):
    stats = calculate_time_stats(parse_log_file(nginx_file).entries)

    assert isinstance(stats, TimeStats)
    assert stats.hour == {10: 5}
    assert stats.minute == {"10:00": 5}
    assert stats.peak_hour == 10


def test_time_stats_for_iso_timestamps(json_file):
    stats = calculate_time_stats(parse_log_file(json_file).entries)
    assert stats.hour == {10: 5}


def test_time_stats_minute_is_zero_padded():
    entries = [{"timestamp": "2026-02-19T09:05:00"}, {"timestamp": "2026-02-19 23:59:59"}]
    stats = calculate_time_stats(entries)

    assert stats.minute == {"9:05": 1, "23:59": 1}
    assert stats.hour == {9: 1, 23: 1}


def test_time_stats_skip_bad_timestamps():
    entries = [
        {"timestamp": "not a date"},
        {"timestamp": "2026-02-30T10:00:00"},
        {"timestamp": None},
        {"raw": "no timestamp"},
        {"timestamp": "2026-02-19T08:15:00Z"},
    ]
    stats = calculate_time_stats(entries)

    assert stats.hour == {8: 1}
    assert stats.minute == {"8:15": 1}


def test_time_stats_empty():
    stats = calculate_time_stats([])
    assert stats.as_dict() == {"hour": {}, "minute": {}}
    assert stats.peak_hour is None


def test_nginx_summary(nginx_file):
    summary = generate_summary(parse_log_file(nginx_file))

    assert summary.format == LogFormat.NGINX
    assert summary.total_entries == 5
    assert summary.status_counts == {"200": 2, "404": 1, "500": 1, "403": 1}
    assert summary.error_count == 3
    assert summary.error_rate == "60.00%"
    assert summary.client_errors == 2
    assert summary.server_errors == 1
    assert summary.top_paths[0] == ("/api/v1/users", 2)
    assert len(summary.top_paths) == 4
    assert summary.time_stats.hour == {10: 5}
    assert "userAgent" in summary.fields_detected


def test_error_rate_uses_fixed_code_list():
    lines = [_nginx_line("/x", status) for status in (200, 405, 410, 418, 503, 301)]
    parsed = LogParsingEngine().parse_content("\n".join(lines))
    summary = generate_summary(parsed)

    assert summary.error_count == 1
    assert summary.client_errors == 0
    assert summary.server_errors == 1
    assert summary.error_rate == "16.67%"


def test_top_paths_ties_keep_first_seen_order():
    paths = ["/c", "/b", "/a", "/b", "/a"]
    lines = [_nginx_line(path, 200, i) for i, path in enumerate(paths)]
    summary = generate_summary(LogParsingEngine().parse_content("\n".join(lines)))

    assert summary.top_paths == [("/b", 2), ("/a", 2), ("/c", 1)]


def test_top_paths_truncated_to_ten():
    lines = [_nginx_line(f"/p{i}", 200) for i in range(15)]
    summary = generate_summary(LogParsingEngine().parse_content("\n".join(lines)))

    assert len(summary.top_paths) == 10
    assert summary.top_paths[0] == ("/p0", 1)


def test_apache_summary_has_status_fields(log_dir):
    summary = generate_summary(parse_log_file(log_dir / "apache.log"))

    assert summary.format == LogFormat.APACHE
    assert summary.client_errors == 1
    assert summary.server_errors == 1
    assert summary.error_rate == "66.67%"
    assert summary.time_stats.hour == {13: 2, 14: 1}


def test_json_summary_omits_access_log_fields(json_file):
    summary = generate_summary(parse_log_file(json_file))
    report = summary.as_dict()

    assert report["totalEntries"] == 5
    assert set(report["fieldsDetected"]) == {"timestamp", "level", "message", "path"}
    for key in ("statusCounts", "errorCount", "errorRate", "clientErrors", "serverErrors", "topPaths"):
        assert key not in report
    assert report["timeStats"]["hour"] == {10: 5}


def test_fields_detected_is_union_in_first_seen_order():
    parsed = ParsedLog(
        format=LogFormat.JSON,
        entries=[{"a": 1}, {"b": 2, "a": 3}, {"c": 4}],
    )
    assert generate_summary(parsed).fields_detected == ["a", "b", "c"]


def test_empty_summary(empty_file):
    parsed = parse_log_file(empty_file)
    summary = generate_summary(parsed)

    assert summary.as_dict() == {
        "format": "text",
        "totalEntries": 0,
        "fieldsDetected": [],
    }


@pytest.mark.parametrize("log_format", [LogFormat.NGINX, LogFormat.APACHE])
def test_empty_access_log_summary_short_circuits(log_format):
    summary = generate_summary(ParsedLog(format=log_format, entries=[]))

    assert summary.as_dict() == {
        "format": log_format.value,
        "totalEntries": 0,
        "fieldsDetected": [],
    }


def test_summary_of_filtered_entries(nginx_file):
    parsed = parse_log_file(nginx_file)
    errors_only = ParsedLog(
        format=parsed.format,
        entries=[e for e in parsed.entries if e["status"] >= 400],
    )
    summary = generate_summary(errors_only)

    assert summary.total_entries == 3
    assert summary.error_rate == "100.00%"
