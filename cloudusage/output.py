"""Console table and csv output for a report."""

import csv
import logging
import pathlib
from datetime import datetime

from .cloud_utils import build_location
from .errors import OutputError

file_name = pathlib.Path(__file__).name

CSV_HEADER = ['Server', 'Volume Name', 'Size', 'Location']
TABLE_HEADER = ['', 'Size', 'Volume Name', 'UUID']

TIMESTAMP_FORMAT = "%m-%d-%Y-%H%M%S"


def format_table(service, rows):
    """Return the report as a text table, one numbered line per volume."""
    lines = [[str(idx), row.size, row.name, row.uuid] for idx, row in enumerate(rows, 1)]
    underline = ['', '-----', '------------', '-----']

    widths = []
    for column in zip(TABLE_HEADER, underline, *lines):
        widths.append(max(len(cell) for cell in column) + 2)

    def fmt(cells):
        return ''.join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    output = ['', '', f"Cloud Storage Size for {service.title()}:", '']
    output.append(fmt(TABLE_HEADER))
    output.append(fmt(underline))
    output.extend(fmt(line) for line in lines)
    output.append('')
    return '\n'.join(output)


def print_table(service, rows):
    print(format_table(service, rows))


def create_csv(service, rows, output_dir='.', scheme='gs', now=None):
    """Write the report to <service>-<timestamp>.csv and return its path."""
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    filename = pathlib.Path(output_dir) / f"{service}-{timestamp}.csv"

    try:
        with open(filename, 'w', newline='') as f:
            writer = csv.writer(f, lineterminator='\n')
            writer.writerow(CSV_HEADER)
            for row in rows:
                writer.writerow([row.server, row.name, row.size,
                                 build_location(row.bucket, row.uuid, scheme)])
            f.write(f"\nFile generated on {timestamp}")
    except OSError as e:
        raise OutputError(filename, e) from e

    logging.info(f"{file_name} : output saved to {filename}")
    return filename
