"""CSV export of an aggregated timeline."""
from __future__ import annotations

import csv
import os

from tracker.analysis.aggregation import TimelineEntry

CSV_HEADER = ['name', 'url', 'url_solution', 'time']


def timeline_csv_path(data_dir: str, username: str) -> str:
    return os.path.join(data_dir, f'{username}_timeline.csv')


def write_timeline_csv(path: str, entries: list[TimelineEntry]) -> int:
    """Write *entries* to *path*, creating the parent directory. Returns the row count."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_HEADER)
        for entry in entries:
            writer.writerow([entry.name, entry.url, entry.url_solution, entry.time])
    return len(entries)
