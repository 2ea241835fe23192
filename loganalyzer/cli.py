"""
cli.py

Command line front end: parse, analyze and export log files.
"""

import json
import logging
from dataclasses import replace

import click

from .constants import (
    AUTO_FORMAT,
    DEFAULT_DISPLAY_LIMIT,
    DEFAULT_TOP_LIMIT,
    FORMAT_SELECTORS,
)
from .export.exporters import CSV_OUTPUT, JSON_OUTPUT, export_entries
from .parser.parsing_engine import parse_log_file
from .search.search_engine import filter_by_status, filter_entries
from .stats.analyzer import aggregate_by_field, generate_summary, top_values

FORMAT_HELP = "Log format (auto, json, text, nginx, apache)"


def _parse_status_codes(ctx, param, value):
    if value is None:
        return None
    try:
        return [int(code.strip()) for code in value.split(",") if code.strip()]
    except ValueError:
        raise click.BadParameter(f"expected comma-separated integers, got {value!r}")


def _format_option(func):
    return click.option(
        "-f",
        "--format",
        "log_format",
        type=click.Choice(FORMAT_SELECTORS),
        default=AUTO_FORMAT,
        show_default=True,
        help=FORMAT_HELP,
    )(func)


def _load_entries(file, log_format, pattern=None, field=None, status_codes=None):
    """Parse a file and apply the optional regex and status filters in order."""
    parsed = parse_log_file(file, log_format)
    entries = parsed.entries

    if pattern:
        entries = filter_entries(entries, pattern, field)
    if status_codes:
        entries = filter_by_status(entries, status_codes)

    return parsed, entries


@click.group()
@click.version_option(version="1.0.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """loganalyzer - parse, filter, and aggregate log files with regex patterns"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
@_format_option
@click.option(
    "-l",
    "--limit",
    type=int,
    default=DEFAULT_DISPLAY_LIMIT,
    show_default=True,
    help="Number of entries to display",
)
def parse(file, log_format, limit):
    """Parse and display log file structure"""
    try:
        parsed = parse_log_file(file, log_format)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(f"\nLog Analysis: {file}")
    click.echo(f"   Format: {parsed.format.value}")
    click.echo(f"   Total lines: {parsed.total_lines}")
    click.echo(f"   Parsed entries: {parsed.parsed_entries}\n")

    if not parsed.entries:
        click.echo("No entries found")
        return

    click.echo("Sample entries:")
    for idx, entry in enumerate(parsed.entries[:limit], 1):
        click.echo(f"\n[{idx}]")
        click.echo(json.dumps(entry, indent=2, ensure_ascii=False, default=str))


@cli.command()
@click.argument("file", type=click.Path(dir_okay=False))
@_format_option
@click.option("--filter", "pattern", help="Filter entries by regex pattern")
@click.option("--filter-field", help="Filter on specific field")
@click.option(
    "--status",
    callback=_parse_status_codes,
    help="Filter by status codes (comma-separated, e.g. 404,500)",
)
@click.option("--aggregate", "aggregate_field", help="Aggregate entries by field")
@click.option(
    "--top",
    type=int,
    default=DEFAULT_TOP_LIMIT,
    show_default=True,
    help="Show top N results for aggregation",
)
def analyze(file, log_format, pattern, filter_field, status, aggregate_field, top):
    """Analyze log file and generate statistics"""
    try:
        parsed, entries = _load_entries(file, log_format, pattern, filter_field)
        if pattern:
            click.echo(f"\nFiltered entries: {len(entries)}")
        if status:
            entries = filter_by_status(entries, status)
            click.echo(f"Status-filtered entries: {len(entries)}")
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    summary = generate_summary(replace(parsed, entries=entries))

    click.echo("\nAnalysis Summary")
    click.echo(f"   Total entries: {summary.total_entries}")
    click.echo(f"   Fields: {', '.join(summary.fields_detected)}\n")

    if summary.status_counts is not None:
        click.echo("Status Codes:")
        for status_code, count in top_values(summary.status_counts):
            click.echo(f"   {status_code}: {count}")

        click.echo(f"\n   Error Rate: {summary.error_rate}")
        click.echo(f"   Client Errors (4xx): {summary.client_errors}")
        click.echo(f"   Server Errors (5xx): {summary.server_errors}\n")

    if summary.top_paths is not None:
        click.echo("Top Paths:")
        for path, count in summary.top_paths:
            click.echo(f"   {path}: {count}")
        click.echo("")

    if summary.time_stats is not None and summary.time_stats.peak_hour is not None:
        click.echo(f"Busiest hour: {summary.time_stats.peak_hour}:00\n")

    if aggregate_field:
        counts = aggregate_by_field(entries, aggregate_field)
        click.echo(f"Top {top} by {aggregate_field}:")
        for value, count in top_values(counts, top):
            click.echo(f"   {value}: {count}")


@cli.command(name="export")
@click.argument("file", type=click.Path(dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False, writable=True))
@_format_option
@click.option("--filter", "pattern", help="Filter entries by regex pattern")
@click.option(
    "--status",
    callback=_parse_status_codes,
    help="Filter by status codes (comma-separated)",
)
@click.option(
    "--output-format",
    type=click.Choice([JSON_OUTPUT, CSV_OUTPUT]),
    default=JSON_OUTPUT,
    show_default=True,
    help="Output format",
)
def export_command(file, output, log_format, pattern, status, output_format):
    """Export parsed (and filtered) entries to JSON or CSV"""
    try:
        _, entries = _load_entries(file, log_format, pattern, status_codes=status)
        written, chosen = export_entries(entries, output, file, output_format)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))

    if chosen == CSV_OUTPUT and not written:
        click.echo("No entries to export")
        return
    click.echo(f"Exported {written} entries to {output} ({chosen})")


if __name__ == "__main__":
    cli()
