"""
Event Scorer - Keyword relevance scoring for candidate events.

Scores every event in the pool against a classified keyword set:
trend-specific keywords carry the weight, category keywords only nudge, and
events that match nothing (or match only the category when the trend is
well described) are dropped.
"""
from typing import Iterable, Optional, Sequence

from loguru import logger

from constants import Category, normalize_category
from ..classifier import ClassifiedKeywords
from ..config import MatchingConfig, get_matching_config
from ..matching import (
    KeywordMatcher,
    build_matchers,
    event_text,
    is_excluded,
    keywords_domain,
    text_domain,
)
from . import config as weights
from .models import CandidateEvent, ScoredEvent


def _phrase_exact_weight(word_count: int) -> int:
    if word_count >= 4:
        return weights.PHRASE_EXACT_4_PLUS
    if word_count == 3:
        return weights.PHRASE_EXACT_3
    return weights.PHRASE_EXACT_2


def _score_trend_keyword(matcher: KeywordMatcher, text: str) -> float:
    """Points for one trend keyword (0 = no match)."""
    if matcher.is_phrase:
        if matcher.in_text(text):
            return _phrase_exact_weight(matcher.word_count)
        if matcher.all_words_on_boundary(text):
            if matcher.word_count == 3:
                return weights.PHRASE_PARTIAL_3
            return weights.PHRASE_PARTIAL_OTHER
        return 0
    if matcher.on_boundary(text):
        return weights.WORD_BOUNDARY
    if matcher.in_text(text):
        return weights.WORD_SUBSTRING
    return 0


def _score_category_keyword(matcher: KeywordMatcher, text: str) -> float:
    """Points for one category keyword (0 = no match)."""
    if matcher.is_phrase:
        if not matcher.in_text(text):
            return 0
        if matcher.word_count == 3:
            return weights.CATEGORY_PHRASE_3
        return weights.CATEGORY_PHRASE_2
    if matcher.on_boundary(text):
        return weights.CATEGORY_WORD
    return 0


def _aggregate_bonus(trend_matches: int, total_matches: int) -> float:
    if trend_matches >= 3:
        return weights.AGGREGATE_BONUS_3_PLUS
    if trend_matches == 2:
        return weights.AGGREGATE_BONUS_2
    if trend_matches == 1 and total_matches >= weights.AGGREGATE_MIN_TOTAL:
        return weights.AGGREGATE_BONUS_1_OF_3
    return 0


def _popularity_bonus(event: CandidateEvent) -> float:
    bonus = 0
    if event.liquidity and event.liquidity > weights.LIQUIDITY_THRESHOLD:
        bonus += weights.LIQUIDITY_BONUS
    if event.volume and event.volume > weights.VOLUME_THRESHOLD:
        bonus += weights.VOLUME_BONUS
    return bonus


def rank_key(item: ScoredEvent):
    """Score desc, match count desc, liquidity desc."""
    return (-item.score, -item.match_count, -(item.event.liquidity or 0))


class EventScorer:
    """
    Strict keyword scorer.

    Holds only the read-only MatchingConfig; every call compiles its own
    matchers, so one instance is safe to share across requests.
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or get_matching_config()

    def score(
        self,
        events: Iterable[CandidateEvent],
        classified: ClassifiedKeywords,
        category=None,
        exclusions: Optional[Sequence[str]] = None,
    ) -> list[ScoredEvent]:
        """
        Score events against classified keywords.

        Args:
            events: Candidate pool
            classified: Trend / category keyword split
            category: Request category (drives exclusions and Gaming rules)
            exclusions: Override for the category's exclusion keywords

        Returns:
            ScoredEvent for every surviving event, in pool order
        """
        category = normalize_category(category)
        if exclusions is None:
            exclusions = self.config.exclusions_for(category)

        trend_matchers = build_matchers(classified.trend_keywords)
        category_matchers = build_matchers(classified.category_keywords)
        trend_keyword_count = len(trend_matchers)
        trend_domain = keywords_domain(
            (m.keyword for m in trend_matchers), self.config
        )

        results: list[ScoredEvent] = []
        for event in events:
            text = event_text(event)
            if is_excluded(text, exclusions, category):
                continue

            title = (event.title or "").lower()
            score = 0.0
            matched: list[str] = []
            trend_matches = 0
            category_matches = 0

            for matcher in trend_matchers:
                points = _score_trend_keyword(matcher, text)
                if not points:
                    continue
                score += points
                trend_matches += 1
                matched.append(matcher.keyword)
                if matcher.keyword in title:
                    score += weights.TITLE_BONUS_PHRASE if matcher.is_phrase else weights.TITLE_BONUS_WORD

            for matcher in category_matchers:
                points = _score_category_keyword(matcher, text)
                if not points:
                    continue
                score += points
                category_matches += 1
                matched.append(matcher.keyword)

            # Category-only matches are noise once the trend is well described
            if (
                trend_keyword_count >= weights.GATE_MIN_TREND_KEYWORDS
                and trend_matches == 0
                and category_matches > 0
            ):
                continue

            if category is Category.GAMING:
                if trend_domain.conflicts_with(text_domain(text, self.config)):
                    continue

            match_count = trend_matches + category_matches
            if match_count == 0:
                continue

            score += _aggregate_bonus(trend_matches, match_count)
            score += _popularity_bonus(event)

            results.append(ScoredEvent(
                event=event,
                score=score,
                match_count=match_count,
                matched_keywords=matched,
            ))

        logger.debug(f"Scored {len(results)} matching events")
        return results

    @staticmethod
    def rank(scored: Iterable[ScoredEvent], limit: int) -> list[ScoredEvent]:
        """Sort by score, match count, liquidity (all desc) and truncate."""
        if limit <= 0:
            return []
        return sorted(scored, key=rank_key)[:limit]
