"""
Similar Events Pipeline - Trend title/summary to related market events.

Pipeline Flow:
1. Build search keywords (title, summary, category tags)
2. Fallback orchestrator over the candidate pool
3. Optional LLM re-rank of the top matches
4. Truncate and convert to SimilarEvent
"""
from typing import Optional, Sequence

from loguru import logger

from config import settings
from constants import normalize_category
from llm import has_api_key
from .config import MatchingConfig, get_matching_config
from .keywords import extract_keywords
from .matching import dedupe, sort_by_specificity
from .models import SimilarEvent
from .orchestrator import FallbackOrchestrator
from .ranker import EventReranker


MAX_SUMMARY_KEYWORDS = 15
MAX_CATEGORY_TAGS = 5
MAX_SEARCH_KEYWORDS = 30
CANDIDATE_MULTIPLIER = 2


def build_search_keywords(
    title: Optional[str],
    summary: Optional[str] = None,
    category: Optional[str] = None,
    config: Optional[MatchingConfig] = None,
) -> list[str]:
    """
    Keywords for a trend, most specific first.

    Title keywords, then up to 15 summary keywords, then up to 5 category
    tags (an unknown category contributes its own lowercased name).
    """
    config = config or get_matching_config()
    resolved = normalize_category(category)

    keywords: list[str] = []
    if title:
        keywords.extend(extract_keywords(title, resolved, config))
    if summary:
        keywords.extend(extract_keywords(summary, resolved, config)[:MAX_SUMMARY_KEYWORDS])
    if category:
        tags = config.tags_for(resolved) or (category.strip().lower(),)
        keywords.extend(tags[:MAX_CATEGORY_TAGS])

    keywords = [k for k in keywords if k]
    return sort_by_specificity(dedupe(keywords))[:MAX_SEARCH_KEYWORDS]


def default_reranker() -> Optional[EventReranker]:
    """An EventReranker when re-ranking is enabled and a key is configured."""
    if not settings.LLM_RERANK_ENABLED or not has_api_key():
        return None
    return EventReranker()


class SimilarEventsPipeline:
    """
    Finds prediction-market events related to a trend.

    Stateless apart from its collaborators; safe to share across requests.
    """

    def __init__(
        self,
        orchestrator: Optional[FallbackOrchestrator] = None,
        reranker: Optional[EventReranker] = None,
        config: Optional[MatchingConfig] = None,
    ):
        self.config = config or get_matching_config()
        self.orchestrator = orchestrator or FallbackOrchestrator(self.config)
        self.reranker = reranker

    def find_similar_events(
        self,
        title: Optional[str],
        summary: Optional[str],
        category: Optional[str],
        pool: Sequence,
        limit: int = 8,
        keywords: Optional[list[str]] = None,
    ) -> list[SimilarEvent]:
        """
        Run the full matching flow for one trend.

        Args:
            title: Trend title
            summary: Trend summary
            category: Trend category
            pool: Candidate events
            limit: Max events returned
            keywords: Precomputed search keywords (built from title/summary
                      when omitted)

        Returns:
            Up to `limit` SimilarEvent, most relevant first
        """
        if keywords is None:
            keywords = build_search_keywords(title, summary, category, self.config)
        if not keywords or limit <= 0:
            return []

        logger.info(f"Matching '{(title or '')[:60]}' with {len(keywords)} keywords: {', '.join(keywords[:8])}")
        events = self.orchestrator.resolve(
            keywords,
            category,
            title,
            pool,
            limit * CANDIDATE_MULTIPLIER,
        )

        ranked = None
        if self.reranker is not None and events and title:
            try:
                ranked = self.reranker.rerank(events, title, summary or "", category or "", limit)
            except Exception as e:
                logger.warning(f"Re-rank raised, using keyword order: {e}")
                ranked = None

        events = ranked if ranked else events[:limit]
        return [SimilarEvent.from_candidate(event) for event in events]
