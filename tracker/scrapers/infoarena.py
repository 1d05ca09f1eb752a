from __future__ import annotations

import re

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from tracker.errors import NotFoundError, TrackerError
from .base import BaseScraper
from .common import COL_PROBLEM, ProblemContent, SubmissionRecord, truncate
from . import register_scraper

_ROW_SELECTOR = 'table.monitor tbody tr'
_ROW_FALLBACK_SELECTOR = 'table.monitor tr'
_PROBLEM_PREFIX = '/problema/'
_PROBLEM_LINK_SELECTOR = f'a[href^="{_PROBLEM_PREFIX}"]'

# Strict to loose: the first selector that yields non-empty text wins
_STATEMENT_SELECTORS = (
    '.wiki_text_block',
    '.content .problem-text',
    '.content',
    'body',
)

# Source code may sit in any of these, often split into highlighter <span>s
_SOLUTION_TAGS = ('code', 'pre', 'textarea')

_REVEAL_SELECTOR = '#force_view_source'
_REVEAL_FORM = {'force_view_source': 'Vezi sursa'}

_TEXTAREA_RE = re.compile(r'(<textarea\b[^>]*>)(.*?)(</textarea\s*>)', re.IGNORECASE | re.DOTALL)


def extract_statement(soup: BeautifulSoup) -> str:
    """Return the problem statement text, or '' if every selector is empty."""
    for selector in _STATEMENT_SELECTORS:
        text = ''.join(el.get_text() for el in soup.select(selector)).strip()
        if text:
            return text
    return ''


def text_fragments(node: Tag) -> list[str]:
    """Collect the literal text nodes under *node* in document order."""
    fragments = []
    for child in node.children:
        if isinstance(child, PreformattedString):
            # comments, CDATA, doctype
            continue
        if isinstance(child, NavigableString):
            fragments.append(str(child))
        elif isinstance(child, Tag):
            fragments.extend(text_fragments(child))
    return fragments


def extract_solution(soup: BeautifulSoup) -> str:
    """Concatenate every code, then pre, then textarea block, one per line."""
    blocks = []
    for tag_name in _SOLUTION_TAGS:
        for el in soup.find_all(tag_name):
            blocks.append(''.join(text_fragments(el)) + '\n')
    return ''.join(blocks).strip()


def parse_source_page(html: str) -> BeautifulSoup:
    """Parse a view-source page, keeping <textarea> bodies as raw text.

    html.parser reads textarea content as markup, so an unescaped
    `#include <stdio.h>` would become a tag. Escaping '<' inside the body
    gives it the usual textarea reading: entities decoded, tags literal.
    """
    html = _TEXTAREA_RE.sub(
        lambda m: m.group(1) + m.group(2).replace('<', '&lt;') + m.group(3), html,
    )
    return BeautifulSoup(html, 'html.parser')


@register_scraper
class InfoarenaScraper(BaseScraper):
    PLATFORM_NAME = "infoarena"
    PLATFORM_DISPLAY = "infoarena.ro"

    def fetch_submissions(self, username: str) -> list[SubmissionRecord]:
        """Walk every monitor page of *username* and return all rows.

        A page with fewer rows than the page size is the last one. Any
        network failure propagates and no partial list is returned.
        """
        page_size = self.policy.page_size
        records = []
        offset = 0
        while True:
            soup = self._get_soup(
                f"{self.base_url}/monitor",
                params={
                    'user': username,
                    'display_entries': page_size,
                    'first_entry': offset,
                },
            )
            page_records = self._parse_monitor_page(soup)
            records.extend(page_records)
            self.logger.info(
                f"Monitor page at offset {offset}: {len(page_records)} rows for {username}"
            )
            if len(page_records) < page_size:
                break
            offset += page_size
        return records

    def _parse_monitor_page(self, soup: BeautifulSoup) -> list[SubmissionRecord]:
        rows = soup.select(_ROW_SELECTOR) or soup.select(_ROW_FALLBACK_SELECTOR)
        records = []
        for tr in rows:
            cells = tr.find_all('td')
            if not cells:
                continue
            problem_url = ''
            if len(cells) > COL_PROBLEM:
                problem_url = self._problem_link(cells[COL_PROBLEM])
            records.append(SubmissionRecord(
                fields=tuple(td.get_text().strip() for td in cells),
                problem_url=problem_url,
            ))
        return records

    def _problem_link(self, cell: Tag) -> str:
        anchor = cell.find('a')
        if anchor is None:
            return ''
        href = anchor.get('href') or ''
        if href.startswith(_PROBLEM_PREFIX):
            return self.base_url + href
        return ''

    def fetch_problem_content(self, submission_id: str) -> ProblemContent:
        """Fetch the statement and the accepted source for a submission.

        Errors before the statement is known yield an empty result with the
        error attached. Errors while fetching the source keep the statement.
        """
        job_url = f"{self.base_url}/job_detail/{submission_id}"
        try:
            statement = self._fetch_statement(job_url)
        except TrackerError as e:
            self.logger.error(f"Could not fetch statement for job {submission_id}: {e}")
            return ProblemContent(error=e)
        self.logger.debug(f"Extracted statement (first 200 chars): {truncate(statement, 200)}")

        try:
            solution = self._fetch_solution(f"{job_url}?action=view-source")
        except TrackerError as e:
            self.logger.error(f"Could not fetch source for job {submission_id}: {e}")
            return ProblemContent(statement=statement, error=e)
        self.logger.debug(f"Extracted solution (first 200 chars): {truncate(solution, 200)}")

        return ProblemContent(statement=statement, solution=solution)

    def _fetch_statement(self, job_url: str) -> str:
        detail = self._get_soup(job_url)
        link = detail.select_one(_PROBLEM_LINK_SELECTOR)
        if link is None:
            raise NotFoundError("problem URL not found on job_detail page")
        problem_url = self.base_url + link['href']
        self.logger.debug(f"Problem page for {job_url}: {problem_url}")
        return extract_statement(self._get_soup(problem_url))

    def _fetch_solution(self, solution_url: str) -> str:
        page = parse_source_page(self._get_html(solution_url))
        if page.select_one(_REVEAL_SELECTOR) is not None:
            self.logger.info("'Vezi sursa' button detected, submitting form to reveal source")
            page = parse_source_page(self._get_html(
                solution_url,
                method='POST',
                timeout=self.policy.reveal_timeout,
                data=_REVEAL_FORM,
            ))
        return extract_solution(page)
