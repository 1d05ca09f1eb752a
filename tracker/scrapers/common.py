from __future__ import annotations

from dataclasses import dataclass, field

# Verdict text the monitor shows for a submission that scored 100 points
FULL_SCORE_VERDICT = 'Evaluare completa: 100 puncte'

# Monitor table column positions
COL_ID = 0
COL_PROBLEM = 2
COL_DATE = 5
MIN_FIELDS = 6


@dataclass(frozen=True)
class FetchPolicy:
    """Transport settings passed explicitly to every scraper."""

    base_url: str = 'https://www.infoarena.ro'
    page_size: int = 250
    request_timeout: float | None = None
    reveal_timeout: float = 30.0
    user_agent: str = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'

    @classmethod
    def from_config(cls, config) -> FetchPolicy:
        return cls(
            base_url=config.get('INFOARENA_BASE_URL', cls.base_url).rstrip('/'),
            page_size=int(config.get('MONITOR_PAGE_SIZE', cls.page_size)),
            request_timeout=config.get('REQUEST_TIMEOUT'),
            reveal_timeout=float(config.get('REVEAL_TIMEOUT', cls.reveal_timeout)),
            user_agent=config.get('SCRAPER_USER_AGENT') or cls.user_agent,
        )


@dataclass(frozen=True)
class SubmissionRecord:
    """One monitor row: cell texts in column order plus the problem link."""

    fields: tuple[str, ...]
    problem_url: str = ''

    def _field(self, index: int) -> str:
        return self.fields[index] if len(self.fields) > index else ''

    @property
    def submission_id(self) -> str:
        raw = self._field(COL_ID)
        return raw[1:] if raw.startswith('#') else raw

    @property
    def name(self) -> str:
        return self._field(COL_PROBLEM)

    @property
    def date(self) -> str:
        return self._field(COL_DATE)

    @property
    def verdict(self) -> str:
        return self.fields[-1] if self.fields else ''


@dataclass
class ProblemContent:
    statement: str = ''
    solution: str = ''
    error: Exception | None = field(default=None, compare=False)

    @property
    def ok(self) -> bool:
        return self.error is None


def truncate(text: str, limit: int) -> str:
    """Return the first *limit* characters of *text*, marking the cut with '...'."""
    if len(text) <= limit:
        return text
    return text[:limit] + '...'
