from __future__ import annotations

import logging

from tracker.analysis.llm import get_provider
from tracker.analysis.llm.config import get_api_key_setting
from tracker.analysis.prompts.editorial import build_editorial_messages
from tracker.analysis.response_parser import parse_editorial_response
from tracker.errors import LLMError, NotFoundError, TrackerError
from tracker.scrapers.common import truncate
from .editorial_cache import EditorialCache
from .timeline_service import build_scraper

logger = logging.getLogger(__name__)


class EditorialService:
    """Generate and cache hints plus an editorial for one submission.

    Args:
        scraper: Judge scraper used to fetch statement and source.
        provider: LLM provider instance.
        cache: Editorial cache.
        model: Model name, or None for the provider default.
    """

    def __init__(
        self,
        scraper,
        provider,
        cache: EditorialCache,
        model: str = None,
        max_tokens: int = 8192,
        temperature: float = 0,
        system_prompt: str = None,
        language: str = 'English',
        hint_count: int = 3,
    ):
        self.scraper = scraper
        self.provider = provider
        self.cache = cache
        self.model = model or None
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.system_prompt = system_prompt or None
        self.language = language
        self.hint_count = hint_count

    @classmethod
    def from_app(cls, app) -> EditorialService:
        config = app.config
        provider_name = config.get('AI_PROVIDER', 'gemini')
        key_setting = get_api_key_setting(provider_name)
        try:
            provider = get_provider(
                provider_name,
                api_key=config.get(key_setting, '') if key_setting else '',
                timeout=config.get('AI_TIMEOUT'),
            )
        except ValueError as e:
            raise LLMError(str(e)) from e

        return cls(
            scraper=build_scraper(config),
            provider=provider,
            cache=EditorialCache.from_config(config),
            model=config.get('AI_MODEL'),
            max_tokens=config.get('AI_MAX_TOKENS', 8192),
            temperature=config.get('AI_TEMPERATURE', 0),
            system_prompt=config.get('AI_SYSTEM_PROMPT'),
            language=config.get('EDITORIAL_LANGUAGE', 'English'),
            hint_count=config.get('EDITORIAL_HINT_COUNT', 3),
        )

    def get_cached(self, problem_id: str) -> dict | None:
        return self.cache.get(problem_id)

    def generate(self, problem_id: str) -> dict:
        """Return the editorial for *problem_id*, generating it if not cached.

        Only results recovered as JSON are written to the cache; a degraded
        result is returned to the caller but regenerated next time.

        Raises:
            TrackerError: If the statement or source cannot be fetched or the
                model call fails.
        """
        cached = self.cache.get(problem_id)
        if cached is not None:
            logger.info(f"Editorial cache hit for {problem_id}")
            return cached

        logger.info(f"Fetching problem and solution for id {problem_id}")
        content = self.scraper.fetch_problem_content(problem_id)
        if content.error is not None:
            raise content.error
        if not content.statement.strip() or not content.solution.strip():
            logger.error(
                f"Statement or solution missing. Statement: '{truncate(content.statement, 100)}' "
                f"Solution: '{truncate(content.solution, 100)}'"
            )
            raise NotFoundError(
                "Problem statement or solution could not be fetched. "
                "Please check the infoarena page structure."
            )

        messages = build_editorial_messages(
            content.statement,
            content.solution,
            system_prompt=self.system_prompt,
            language=self.language,
            hint_count=self.hint_count,
        )
        logger.debug(f"Prompt: {truncate(messages[-1]['content'], 1000)}")

        try:
            response = self.provider.chat(
                messages,
                model=self.model,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
            )
        except TrackerError:
            raise
        except Exception as e:
            logger.error(f"LLM error for {problem_id}: {e}")
            raise LLMError(f"LLM error: {e}") from e
        logger.debug(f"Raw LLM response: {truncate(response.content, 1000)}")

        result = parse_editorial_response(response.content)
        if result.is_parsed:
            self.cache.put(problem_id, result.to_dict())
        else:
            logger.warning(f"Editorial for {problem_id} not cached: output was not JSON")
        logger.info(f"Editorial for {problem_id} generated ({result.status.value})")
        return result.to_dict()
