import csv
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from loganalyzer.constants import DEFAULT_ENCODING
from loganalyzer.parser.base_parser import field_to_string

logger = logging.getLogger(__name__)

JSON_OUTPUT = "json"
CSV_OUTPUT = "csv"


def export_json(entries, output_path, source=None):
    document = {
        "source": str(source) if source is not None else None,
        "exportedAt": datetime.now(timezone.utc).isoformat(),
        "totalEntries": len(entries),
        "entries": entries,
    }
    with open(output_path, "w", encoding=DEFAULT_ENCODING) as f:
        json.dump(document, f, indent=2, ensure_ascii=False, default=str)
    return len(entries)


def export_csv(entries, output_path):
    """
    Write entries as CSV with the first entry's keys as the header.

    Fields that only appear in later entries are not written.
    """
    if not entries:
        logger.warning(f"No entries to export to {output_path}")
        return 0

    headers = list(entries[0].keys())
    with open(output_path, "w", encoding=DEFAULT_ENCODING, newline="") as f:
        writer = csv.writer(f)
        writer.writerow(headers)
        for entry in entries:
            writer.writerow(
                [
                    "" if entry.get(h) is None else field_to_string(entry[h])
                    for h in headers
                ]
            )
    return len(entries)


def resolve_output_format(output_path, output_format=None):
    if output_format == CSV_OUTPUT or Path(output_path).suffix.lower() == ".csv":
        return CSV_OUTPUT
    return JSON_OUTPUT


def export_entries(entries, output_path, source=None, output_format=None):
    """Export to CSV or JSON; returns (entries written, format used)."""
    chosen = resolve_output_format(output_path, output_format)

    if chosen == CSV_OUTPUT:
        written = export_csv(entries, output_path)
    else:
        written = export_json(entries, output_path, source)

    logger.info(f"Exported {written} entries to {output_path} ({chosen})")
    return written, chosen
