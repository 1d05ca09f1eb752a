"""Shared test fixtures for the infoarena tracker test suite."""

import pytest
import requests

from tracker import create_app
from tracker.scrapers.common import FetchPolicy
from tracker.scrapers.infoarena import InfoarenaScraper

BASE_URL = 'https://www.infoarena.ro'
FULL_SCORE = 'Evaluare completa: 100 puncte'


class FakeResponse:
    def __init__(self, text='', status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f'{self.status_code} Error', response=self)


def _params_key(params):
    if not params:
        return None
    return tuple(sorted((k, str(v)) for k, v in params.items()))


class FakeSession:
    """Stand-in for requests.Session that serves canned pages.

    Routes are keyed by (method, url, params). A route value is either an
    HTML string or an exception instance to raise.
    """

    def __init__(self):
        self.headers = {}
        self.routes = {}
        self.calls = []

    def add(self, method, url, result, params=None):
        self.routes[(method, url, _params_key(params))] = result

    def request(self, method, url, timeout=None, params=None, data=None, **kwargs):
        self.calls.append({
            'method': method,
            'url': url,
            'params': params,
            'data': data,
            'timeout': timeout,
        })
        key = (method, url, _params_key(params))
        if key not in self.routes:
            return FakeResponse('Not Found', status_code=404)
        result = self.routes[key]
        if isinstance(result, Exception):
            raise result
        return FakeResponse(result)


def monitor_params(username='testuser', offset=0, page_size=250):
    return {'user': username, 'display_entries': page_size, 'first_entry': offset}


def monitor_row(job_id, problem, date, verdict=FULL_SCORE, slug=None):
    slug = slug or problem.lower()
    return (
        f'<tr>'
        f'<td><a href="/job_detail/{job_id}">#{job_id}</a></td>'
        f'<td><a href="/utilizator/testuser">testuser</a></td>'
        f'<td><a href="/problema/{slug}">{problem}</a></td>'
        f'<td>Arhiva educationala</td>'
        f'<td>1 kb</td>'
        f'<td>{date}</td>'
        f'<td>{verdict}</td>'
        f'</tr>'
    )


def filler_rows(count, start_id=100000):
    return [
        monitor_row(start_id + i, f'Filler{i}', '1 ian 24 08:00:00', 'Evaluare completa: 40 puncte')
        for i in range(count)
    ]


def monitor_page(rows):
    return (
        '<html><body><table class="monitor">'
        '<thead><tr><th>ID</th><th>Utilizator</th><th>Problema</th><th>Runda</th>'
        '<th>Marime</th><th>Data</th><th>Stare</th></tr></thead>'
        '<tbody>' + ''.join(rows) + '</tbody></table></body></html>'
    )


@pytest.fixture()
def app(tmp_path):
    """Create a Flask application configured for testing."""
    application = create_app('testing')
    application.config['DATA_DIR'] = str(tmp_path / 'data')
    yield application


@pytest.fixture()
def client(app):
    """Provide a Flask test client."""
    return app.test_client()


@pytest.fixture()
def fake_session():
    return FakeSession()


@pytest.fixture()
def scraper(fake_session):
    return InfoarenaScraper(policy=FetchPolicy(base_url=BASE_URL), session=fake_session)


@pytest.fixture()
def two_page_monitor(fake_session):
    """Page 1: 250 rows, two full-score rows for the same problem.
    Page 2: 3 rows, one full-score row for another problem.
    """
    page1 = filler_rows(248) + [
        monitor_row(200002, 'Adunare', '10 mai 24 10:00:00'),
        monitor_row(200001, 'Adunare', '3 feb 24 09:00:00'),
    ]
    page2 = [
        monitor_row(300001, 'Cmmdc', '1 apr 25 13:06:35'),
        monitor_row(300002, 'Cmmdc', '2 apr 25 13:06:35', 'Evaluare completa: 90 puncte'),
        monitor_row(300003, 'Ciur', '3 apr 25 13:06:35', 'Eroare de compilare'),
    ]
    fake_session.add('GET', f'{BASE_URL}/monitor', monitor_page(page1), monitor_params(offset=0))
    fake_session.add('GET', f'{BASE_URL}/monitor', monitor_page(page2), monitor_params(offset=250))
    return fake_session
