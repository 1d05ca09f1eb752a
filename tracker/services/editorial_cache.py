from __future__ import annotations

import json
import logging
import os
import re
import tempfile

from tracker.errors import ParseError

logger = logging.getLogger(__name__)

_PROBLEM_ID_RE = re.compile(r'^[A-Za-z0-9_-]+$')


def is_valid_problem_id(problem_id: str) -> bool:
    return bool(problem_id) and bool(_PROBLEM_ID_RE.match(problem_id))


class EditorialCache:
    """One JSON document per problem id under *directory*.

    Writes go to a temporary file that is then renamed over the entry, so a
    reader never sees a half-written document. Concurrent writers for the
    same id simply overwrite each other.
    """

    def __init__(self, directory: str):
        self.directory = directory

    @classmethod
    def from_config(cls, config) -> EditorialCache:
        return cls(os.path.join(config.get('DATA_DIR', 'data'), 'editorials'))

    def path_for(self, problem_id: str) -> str:
        if not is_valid_problem_id(problem_id):
            raise ValueError(f"Invalid problem id: {problem_id!r}")
        return os.path.join(self.directory, f'{problem_id}.json')

    def get(self, problem_id: str) -> dict | None:
        path = self.path_for(problem_id)
        if not os.path.exists(path):
            return None
        with open(path, encoding='utf-8') as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                raise ParseError(f"Corrupt editorial cache entry {path}: {e}") from e

    def put(self, problem_id: str, payload: dict) -> str:
        path = self.path_for(problem_id)
        os.makedirs(self.directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, path)
        except Exception:
            os.unlink(tmp_path)
            raise
        logger.info(f"Editorial cached at {path}")
        return path
