"""
Word list sourcing for word-search rounds.

Words come from a remote LLM (a single attempt with a bounded timeout)
or, on any failure, from the bundled offline word bank.
"""

import asyncio
import logging
import random
import re
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from ..puzzle.data import get_offline_words
from ..puzzle.sanitize import sanitize_word, sanitize_words
from .llm_client import LLMClient
from .models import LLMSettings
from .prompts import build_word_prompt, get_system_prompt

logger = logging.getLogger(__name__)

_WORD_LIST = TypeAdapter(List[str])


def extract_json_content(text: str) -> str:
    """Extract content from a markdown code fence, if the response has one."""
    match = re.search(r'```(?:json)?\s*(.*?)```', text, re.DOTALL)
    if match:
        return match.group(1).strip()
    return text.strip()


def parse_word_list(text: str) -> List[str]:
    """
    Parse a response as a non-empty JSON array of strings.

    Raises:
        ValueError: If the response is not valid JSON, not an array of
            strings, or empty
    """
    words = _WORD_LIST.validate_json(extract_json_content(text))
    if not words:
        raise ValueError("Empty word list in response")
    return words


def _prefer_unused(candidates: List[str], excluding: Iterable[str], count: int) -> List[str]:
    """Drop excluded words when enough remain, else keep the full list."""
    excluded = {sanitize_word(w) for w in excluding}
    unused = [w for w in candidates if w not in excluded]
    final = unused if len(unused) >= count else candidates
    return final[:count]


class WordListProvider(BaseModel):
    """
    Supplies target words for a theme.

    get_words() never raises: remote failures (network, timeout,
    malformed or empty response) fall back to the offline word bank.

    Attributes:
        settings: Remote generator settings
        llm_client: Client for the remote generator; None means offline only
        history_prompt_limit: Recent history words listed in the prompt
        seed: Optional random seed for the offline shuffle
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    settings: LLMSettings = Field(default_factory=LLMSettings)
    llm_client: Optional[LLMClient] = None
    history_prompt_limit: int = 50
    seed: Optional[int] = None
    _rng: random.Random = None

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(cls, settings: Optional[LLMSettings] = None, seed: Optional[int] = None) -> "WordListProvider":
        """
        Factory method building the LLM client from settings.

        Args:
            settings: Remote generator settings; a None model means offline only
            seed: Optional random seed for the offline shuffle

        Returns:
            A configured WordListProvider
        """
        settings = settings or LLMSettings()
        llm_client = None
        if settings.model:
            llm_kwargs = dict(settings.__pydantic_extra__ or {})
            llm_client = LLMClient(
                model=settings.model,
                temperature=settings.temperature,
                max_tokens=settings.max_tokens,
                timeout=settings.timeout_seconds,
                **llm_kwargs
            )
        return cls(settings=settings, llm_client=llm_client, seed=seed)

    async def get_words(
        self,
        theme: str,
        count: int,
        excluding: Optional[List[str]] = None,
        max_length: int = 10,
        theme_name: Optional[str] = None,
    ) -> List[str]:
        """
        Get `count` sanitized words for a theme.

        Args:
            theme: Theme key (e.g. "animais"), used for the offline bank
            count: Number of words wanted
            excluding: Words already served this session
            max_length: Longest acceptable word (the grid size)
            theme_name: Display name sent to the remote generator

        Returns:
            List of uppercase, accent-free words
        """
        excluding = excluding or []

        if self.llm_client is not None:
            try:
                return await self._fetch_remote(theme_name or theme, count, excluding, max_length)
            except asyncio.TimeoutError:
                logger.warning(
                    f"Word generation timed out after {self.settings.timeout_seconds}s, using offline words"
                )
            except Exception as e:
                logger.warning(f"Failed to generate words with the LLM, using offline words: {e}")

        return self.get_offline(theme, count, excluding, max_length=max_length)

    async def _fetch_remote(
        self,
        theme_name: str,
        count: int,
        excluding: List[str],
        max_length: int,
    ) -> List[str]:
        prompt = build_word_prompt(
            theme_name=theme_name,
            count=count,
            max_length=max_length,
            language=self.settings.language,
            excluding=excluding,
            history_limit=self.history_prompt_limit,
        )

        self.llm_client.clear_messages()
        self.llm_client.add_message("system", get_system_prompt())
        self.llm_client.add_message("user", prompt)

        response = await asyncio.wait_for(
            self.llm_client.acompletion(),
            timeout=self.settings.timeout_seconds,
        )
        raw_response = response.choices[0].message.content or ""

        words = sanitize_words(parse_word_list(raw_response), max_length=max_length)
        if not words:
            raise ValueError(f"No usable words in response: {raw_response[:200]!r}")

        logger.debug(f"LLM returned {len(words)} usable words for {theme_name!r}")
        return _prefer_unused(words, excluding, count)

    def get_offline(
        self,
        theme: str,
        count: int,
        excluding: Optional[List[str]] = None,
        max_length: Optional[int] = None,
    ) -> List[str]:
        """
        Draw `count` words from the offline bank, avoiding `excluding` when
        enough other words remain.
        """
        pool = get_offline_words(theme, rng=self._rng, max_length=max_length)
        return _prefer_unused(pool, excluding or [], count)
