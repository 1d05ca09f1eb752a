"""
Timeline aggregation for monitor submissions.

Keeps full-score submissions, collapses them to one record per problem
(the earliest accepted one) and orders the survivors chronologically.
"""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime

from tracker.errors import FormatError
from tracker.scrapers.common import FULL_SCORE_VERDICT, MIN_FIELDS, SubmissionRecord
from tracker.scrapers.dates import compare_infoarena_dates, parse_infoarena_date

logger = logging.getLogger(__name__)

# Rows whose date does not parse sort as if submitted at this instant
_ZERO_INSTANT = datetime(1970, 1, 1)


@dataclass
class TimelineEntry:
    name: str
    url: str
    url_solution: str
    time: str
    id: str

    def to_dict(self) -> dict:
        return asdict(self)


def filter_full_score(records: list[SubmissionRecord]) -> list[SubmissionRecord]:
    """Keep the records whose verdict is exactly the full-score text."""
    return [r for r in records if r.verdict == FULL_SCORE_VERDICT]


def group_by_problem_earliest(
    records: list[SubmissionRecord],
) -> dict[str, SubmissionRecord]:
    """Map each problem name to its earliest submission.

    A later record replaces the held one only when its date compares strictly
    earlier. Equal or unparsable dates leave the first-seen record in place.
    Records with too few columns are skipped.
    """
    grouped = {}
    for record in records:
        if len(record.fields) < MIN_FIELDS:
            logger.debug(f"Skipping short monitor row: {record.fields}")
            continue
        held = grouped.get(record.name)
        if held is None or compare_infoarena_dates(record.date, held.date) < 0:
            grouped[record.name] = record
    return grouped


def _sort_key(record: SubmissionRecord) -> datetime:
    try:
        return parse_infoarena_date(record.date)
    except FormatError:
        return _ZERO_INSTANT


def sort_by_date(grouped: dict[str, SubmissionRecord]) -> list[SubmissionRecord]:
    """Return the grouped records ascending by date (stable on ties)."""
    return sorted(grouped.values(), key=_sort_key)


def to_timeline_entry(record: SubmissionRecord, base_url: str) -> TimelineEntry:
    submission_id = record.submission_id
    return TimelineEntry(
        name=record.name,
        url=record.problem_url,
        url_solution=f"{base_url}/job_detail/{submission_id}",
        time=record.date,
        id=submission_id,
    )


def build_timeline(records: list[SubmissionRecord], base_url: str) -> list[TimelineEntry]:
    """Filter, deduplicate and order *records* into timeline entries."""
    accepted = filter_full_score(records)
    grouped = group_by_problem_earliest(accepted)
    ordered = sort_by_date(grouped)
    logger.info(
        f"Timeline: {len(records)} rows, {len(accepted)} full score, "
        f"{len(ordered)} distinct problems"
    )
    return [to_timeline_entry(r, base_url) for r in ordered]
