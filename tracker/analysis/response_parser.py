"""
Recover a {hints, editorial} object from free-text model output.

Models often wrap the requested JSON in prose or markdown fences, so a direct
parse is followed by a second attempt on the outermost brace pair. When both
fail the raw text is kept as the editorial and a sentinel hint is returned.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

UNPARSEABLE_HINT = 'LLM output could not be parsed as JSON.'


class ParseStatus(str, Enum):
    DIRECT = 'direct'
    SALVAGED = 'salvaged'
    DEGRADED = 'degraded'


@dataclass
class EditorialResult:
    payload: dict
    status: ParseStatus = ParseStatus.DIRECT

    @property
    def is_parsed(self) -> bool:
        return self.status != ParseStatus.DEGRADED

    @property
    def hints(self) -> list:
        return self.payload.get('hints') or []

    @property
    def editorial(self) -> str:
        return self.payload.get('editorial') or ''

    def to_dict(self) -> dict:
        return self.payload

    @classmethod
    def degraded(cls, raw: str) -> EditorialResult:
        return cls(
            payload={'hints': [UNPARSEABLE_HINT], 'editorial': raw},
            status=ParseStatus.DEGRADED,
        )


def _loads_object(text: str) -> dict | None:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        # RecursionError: nesting deeper than the decoder's stack allows
        logger.debug(f"JSON parse failed: {e}")
        return None
    if not isinstance(parsed, dict):
        logger.debug(f"JSON parsed to {type(parsed).__name__}, expected an object")
        return None
    return parsed


def parse_editorial_response(raw: str) -> EditorialResult:
    """Turn raw model text into an EditorialResult. Never raises.

    Field names and types are not checked: any JSON object is accepted.
    """
    parsed = _loads_object(raw)
    if parsed is not None:
        return EditorialResult(parsed, ParseStatus.DIRECT)

    logger.warning("Direct JSON parse of LLM output failed, trying brace extraction")
    start = raw.find('{')
    end = raw.rfind('}')
    if start != -1 and end > start:
        parsed = _loads_object(raw[start:end + 1])
        if parsed is not None:
            logger.info("JSON extracted from LLM output")
            return EditorialResult(parsed, ParseStatus.SALVAGED)

    logger.warning("LLM output could not be parsed, returning raw text as editorial")
    return EditorialResult.degraded(raw)
