"""
Console and CSV output for fetched health events
"""

import csv
import logging
import sys

CSV_HEADERS = ["Timestamp", "ARN", "Detail", "Affected Entities"]

SEPARATOR = "====="


def format_event_block(event):
    """
    Render one event for the console

    Args:
        event (HealthEvent): Record to render

    Returns:
        str: Separator, labelled fields, bulleted entities and a trailing blank line
    """
    lines = [
        SEPARATOR,
        f"Timestamp: {event.timestamp}",
        f"ARN: {event.arn}",
        f"Detail: {event.detail}",
        "Affected Entities:",
    ]
    lines.extend(f"- {entity}" for entity in event.affected_entities)
    lines.append("")
    return "\n".join(lines) + "\n"


def write_report(events, output_path, stream=None):
    """
    Print each event and write the CSV report

    The file is truncated (or created) and the header written before any
    rows.

    Args:
        events (list): HealthEvent records in output order
        output_path (str): CSV destination
        stream: Console stream, stdout by default

    Returns:
        int: Number of rows written, header excluded
    """
    stream = stream or sys.stdout
    row_count = 0

    with open(output_path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile, lineterminator="\n")
        writer.writerow(CSV_HEADERS)

        for event in events:
            stream.write(format_event_block(event))
            writer.writerow(event.to_csv_row())
            row_count += 1

    logging.info(f"Wrote {row_count} rows to {output_path}")
    return row_count
