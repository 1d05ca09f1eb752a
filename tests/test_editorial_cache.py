"""Tests for the on-disk editorial cache."""

import json
import os

import pytest

from tracker.errors import ParseError
from tracker.services.editorial_cache import EditorialCache, is_valid_problem_id


@pytest.fixture()
def cache(tmp_path):
    return EditorialCache(str(tmp_path / 'editorials'))


class TestProblemId:
    @pytest.mark.parametrize('value', ['12345', 'abc', 'job_1-2'])
    def test_valid(self, value):
        assert is_valid_problem_id(value)

    @pytest.mark.parametrize('value', ['', '../etc/passwd', 'a/b', '1.json', '12 34', '%2e%2e'])
    def test_invalid(self, value):
        assert not is_valid_problem_id(value)

    def test_path_for_rejects_traversal(self, cache):
        with pytest.raises(ValueError):
            cache.path_for('../secret')


class TestEditorialCache:
    def test_missing_entry(self, cache):
        assert cache.get('123') is None

    def test_put_then_get(self, cache):
        payload = {'hints': ['Sortează întâi.'], 'editorial': '## Soluție'}
        path = cache.put('123', payload)
        assert path.endswith(os.path.join('editorials', '123.json'))
        assert cache.get('123') == payload

    def test_file_is_pretty_utf8_json(self, cache):
        path = cache.put('7', {'editorial': 'ă'})
        with open(path, encoding='utf-8') as f:
            text = f.read()
        assert 'ă' in text
        assert json.loads(text) == {'editorial': 'ă'}

    def test_overwrite(self, cache):
        cache.put('1', {'editorial': 'old'})
        cache.put('1', {'editorial': 'new'})
        assert cache.get('1') == {'editorial': 'new'}

    def test_no_temp_files_left(self, cache):
        cache.put('1', {'editorial': 'x'})
        assert os.listdir(cache.directory) == ['1.json']

    def test_failed_write_keeps_previous_entry(self, cache):
        cache.put('1', {'editorial': 'kept'})
        with pytest.raises(TypeError):
            cache.put('1', {'editorial': object()})
        assert cache.get('1') == {'editorial': 'kept'}
        assert os.listdir(cache.directory) == ['1.json']

    def test_corrupt_entry(self, cache):
        os.makedirs(cache.directory)
        with open(os.path.join(cache.directory, '9.json'), 'w', encoding='utf-8') as f:
            f.write('{not json')
        with pytest.raises(ParseError):
            cache.get('9')

    def test_from_config(self):
        cache = EditorialCache.from_config({'DATA_DIR': '/srv/data'})
        assert cache.directory == os.path.join('/srv/data', 'editorials')
