from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import requests
from bs4 import BeautifulSoup

from tracker.errors import NetworkError
from .common import FetchPolicy, ProblemContent, SubmissionRecord, truncate


class BaseScraper(ABC):
    PLATFORM_NAME: str = ""
    PLATFORM_DISPLAY: str = ""

    def __init__(
        self,
        policy: FetchPolicy = None,
        session: requests.Session = None,
        logger: logging.Logger = None,
    ):
        self.policy = policy or FetchPolicy()
        self.logger = logger or logging.getLogger(f'scraper.{self.PLATFORM_NAME}')
        self.session = session or self._create_session()

    @property
    def base_url(self) -> str:
        return self.policy.base_url

    @abstractmethod
    def fetch_submissions(self, username: str) -> list[SubmissionRecord]:
        ...

    @abstractmethod
    def fetch_problem_content(self, submission_id: str) -> ProblemContent:
        ...

    def _create_session(self) -> requests.Session:
        session = requests.Session()
        session.headers.update({'User-Agent': self.policy.user_agent})
        return session

    def _request(self, url, method='GET', timeout=None, **kwargs) -> requests.Response:
        """Perform a single HTTP round-trip; any failure becomes a NetworkError."""
        try:
            resp = self.session.request(method, url, timeout=timeout, **kwargs)
            resp.raise_for_status()
            return resp
        except requests.RequestException as e:
            self.logger.warning(f"{method} {url} failed: {e}")
            raise NetworkError(f"{method} {url} failed: {e}") from e

    def _get_html(self, url, method='GET', timeout=None, **kwargs) -> str:
        if timeout is None:
            timeout = self.policy.request_timeout
        resp = self._request(url, method=method, timeout=timeout, **kwargs)
        self.logger.debug(f"{url} HTML (first 500 chars): {truncate(resp.text, 500)}")
        return resp.text

    def _get_soup(self, url, method='GET', timeout=None, **kwargs) -> BeautifulSoup:
        return BeautifulSoup(
            self._get_html(url, method=method, timeout=timeout, **kwargs), 'html.parser'
        )
