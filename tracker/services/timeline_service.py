from __future__ import annotations

import logging
import threading

from tracker.analysis.aggregation import TimelineEntry, build_timeline
from tracker.scrapers import get_scraper_instance
from tracker.scrapers.common import FetchPolicy, SubmissionRecord

logger = logging.getLogger(__name__)

PLATFORM = 'infoarena'

_EXTENSION_KEY = 'tracker.timeline'
_timeline_lock = threading.Lock()


def build_scraper(config, **kwargs):
    """Create the judge scraper with the transport policy from *config*."""
    return get_scraper_instance(PLATFORM, policy=FetchPolicy.from_config(config), **kwargs)


class TimelineService:
    """Fetch a user's monitor history and reduce it to a timeline."""

    def __init__(self, scraper):
        self.scraper = scraper

    @classmethod
    def from_config(cls, config) -> TimelineService:
        return cls(build_scraper(config))

    def fetch(self, username: str) -> list[SubmissionRecord]:
        records = self.scraper.fetch_submissions(username)
        logger.info(f"Fetched {len(records)} monitor rows for {username}")
        return records

    def aggregate(self, records: list[SubmissionRecord]) -> list[TimelineEntry]:
        return build_timeline(records, self.scraper.base_url)

    def build(self, username: str) -> list[TimelineEntry]:
        return self.aggregate(self.fetch(username))


def get_timeline(app, username: str) -> list[TimelineEntry]:
    """Return the timeline for *username*, fetching it once per app instance.

    A failed fetch is not memoized, so the next call retries.
    """
    with _timeline_lock:
        timelines = app.extensions.setdefault(_EXTENSION_KEY, {})
        if username not in timelines:
            timelines[username] = TimelineService.from_config(app.config).build(username)
        return timelines[username]
