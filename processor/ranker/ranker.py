"""
Event Reranker - Semantic re-ranking of keyword matches with an LLM.

Keyword matching finds candidates; the LLM orders the top of that list by
how related each event really is to the trend. Any failure (no API key,
transport error, unparseable answer) yields None and the caller keeps the
keyword order.
"""
import json
import re
from typing import Optional, Sequence

from loguru import logger

from config import settings
from llm import LLMClient, get_client, set_llm_context
from prompts import PromptLoader, get_prompt_loader


RERANK_MAX_TOKENS = 500
DESCRIPTION_CHARS = 200

_INDEX_ARRAY = re.compile(r"\[[\d,\s]+\]")


class RerankError(Exception):
    """The LLM answer could not be turned into a ranking."""
    pass


def format_events_list(events: Sequence) -> str:
    """Numbered event list, 1-indexed, descriptions truncated."""
    lines = []
    for index, event in enumerate(events, start=1):
        line = f'{index}. "{event.title}"'
        if event.description:
            line += f" - {event.description[:DESCRIPTION_CHARS]}"
        lines.append(line)
    return "\n".join(lines)


def parse_ranking(text: str, size: int) -> list[int]:
    """
    Zero-based indices from the first JSON integer array in text.

    Out-of-range and repeated indices are dropped.

    Raises:
        RerankError: no array, invalid JSON, or no usable index
    """
    match = _INDEX_ARRAY.search(text or "")
    if not match:
        raise RerankError("no index array in response")
    try:
        raw = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise RerankError(f"invalid index array: {match.group(0)}") from e

    indices: list[int] = []
    for value in raw:
        index = int(value) - 1
        if 0 <= index < size and index not in indices:
            indices.append(index)
    if not indices:
        raise RerankError("no valid event index in response")
    return indices


class EventReranker:
    """
    Re-ranks matched events with an LLM.

    The client is created on first use from settings unless one is given.
    """

    def __init__(
        self,
        client: Optional[LLMClient] = None,
        window: Optional[int] = None,
        max_tokens: int = RERANK_MAX_TOKENS,
        prompt_loader: Optional[PromptLoader] = None,
    ):
        self._client = client
        self.window = window or settings.LLM_RERANK_WINDOW
        self.max_tokens = max_tokens
        self.prompt_loader = prompt_loader or get_prompt_loader()

    @property
    def client(self) -> LLMClient:
        if self._client is None:
            self._client = get_client()
        return self._client

    def _rank_indices(self, window: list, title: str, summary: str, category: str, limit: int) -> list[int]:
        system = self.prompt_loader.format("event_ranking_system", limit=limit)
        prompt = self.prompt_loader.format(
            "event_ranking",
            title=title,
            summary=summary or "",
            category=category or "",
            events_list=format_events_list(window),
        )

        set_llm_context(task_type="event_rerank")
        response = self.client.generate(
            prompt,
            system=system,
            max_tokens=self.max_tokens,
            temperature=0.0,
        )
        return parse_ranking(response.content, len(window))

    def rerank(
        self,
        events: Sequence,
        title: str,
        summary: str = "",
        category: str = "",
        limit: int = 8,
    ) -> Optional[list]:
        """
        Order events by semantic relevance to a trend.

        Args:
            events: Keyword-ranked events (only the first `window` are sent)
            title: Trend title
            summary: Trend summary
            category: Trend category
            limit: Max events returned

        Returns:
            Up to `limit` events in LLM order, or None when re-ranking failed
        """
        if not events or not title:
            return None

        window = list(events[:self.window])
        try:
            indices = self._rank_indices(window, title, summary, category, limit)
        except RerankError as e:
            logger.warning(f"LLM returned unusable ranking, keeping keyword order: {e}")
            return None
        except Exception as e:
            logger.warning(f"LLM re-rank failed, keeping keyword order: {e}")
            return None

        ranked = [window[i] for i in indices][:limit]
        logger.info(f"LLM re-ranked {len(window)} events -> {len(ranked)}")
        return ranked
