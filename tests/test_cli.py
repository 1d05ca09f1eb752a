"""Tests for the iasi-tracker command line."""

import csv
import os
from unittest.mock import patch

import pytest

from conftest import BASE_URL, monitor_page, monitor_params
from tracker import cli
from tracker.errors import NetworkError
from tracker.services.export import CSV_HEADER


def _read_csv(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.reader(f))


@pytest.fixture()
def patched_app(app):
    with patch('tracker.cli.create_app', return_value=app):
        yield app


class TestExport:
    def test_bare_username_exports(self, patched_app, two_page_monitor, capsys):
        with patch('tracker.scrapers.base.requests.Session', return_value=two_page_monitor):
            code = cli.main(['testuser'])

        path = os.path.join(patched_app.config['DATA_DIR'], 'testuser_timeline.csv')
        assert code == 0
        assert capsys.readouterr().out.strip() == f'Saved 2 entries to {path}'
        rows = _read_csv(path)
        assert rows[0] == CSV_HEADER
        assert rows[1] == [
            'Adunare', f'{BASE_URL}/problema/adunare',
            f'{BASE_URL}/job_detail/200001', '3 feb 24 09:00:00',
        ]
        assert rows[2][0] == 'Cmmdc'

    def test_explicit_output(self, patched_app, two_page_monitor, tmp_path, capsys):
        out = tmp_path / 'nested' / 'out.csv'
        with patch('tracker.scrapers.base.requests.Session', return_value=two_page_monitor):
            code = cli.main(['export', 'testuser', '-o', str(out)])
        assert code == 0
        assert len(_read_csv(out)) == 3

    def test_no_entries(self, patched_app, fake_session, capsys):
        fake_session.add('GET', f'{BASE_URL}/monitor', monitor_page([]), monitor_params())
        with patch('tracker.scrapers.base.requests.Session', return_value=fake_session):
            code = cli.main(['testuser'])
        assert code == 0
        assert capsys.readouterr().out.strip() == 'No entries found for user.'
        assert not os.path.exists(
            os.path.join(patched_app.config['DATA_DIR'], 'testuser_timeline.csv')
        )

    def test_fetch_failure(self, patched_app):
        with patch('tracker.cli.TimelineService.fetch', side_effect=NetworkError('down')):
            assert cli.main(['testuser']) == 1

    def test_missing_username(self):
        with pytest.raises(SystemExit):
            cli.main([])


class TestDefaultCommand:
    @pytest.mark.parametrize('argv, expected', [
        (['alice'], ['export', 'alice']),
        (['--env', 'production', 'alice'], ['--env', 'production', 'export', 'alice']),
        (['--env=production', 'alice'], ['--env=production', 'export', 'alice']),
        (['--env', 'testing', 'run', 'alice'], ['--env', 'testing', 'run', 'alice']),
        (['export', 'alice'], ['export', 'alice']),
        (['-h'], ['-h']),
        ([], []),
    ])
    def test_export_inserted_before_username(self, argv, expected):
        assert cli._with_default_command(argv) == expected

    def test_env_option_before_bare_username(self, patched_app, two_page_monitor, capsys):
        with patch('tracker.scrapers.base.requests.Session', return_value=two_page_monitor):
            code = cli.main(['--env', 'testing', 'testuser'])
        assert code == 0
        assert capsys.readouterr().out.startswith('Saved 2 entries to ')


class TestRun:
    @patch('tracker.cli.get_timeline')
    def test_prefetches_then_serves(self, mock_get_timeline, patched_app):
        with patch.object(patched_app, 'run') as mock_run:
            code = cli.main(['run', 'alice', '--port', '9000'])

        assert code == 0
        assert patched_app.config['TRACKER_USERNAME'] == 'alice'
        mock_get_timeline.assert_called_once_with(patched_app, 'alice')
        mock_run.assert_called_once_with(host='127.0.0.1', port=9000)

    @patch('tracker.cli.get_timeline', side_effect=NetworkError('down'))
    def test_prefetch_failure_does_not_serve(self, mock_get_timeline, patched_app):
        with patch.object(patched_app, 'run') as mock_run:
            assert cli.main(['run', 'alice']) == 1
        mock_run.assert_not_called()
