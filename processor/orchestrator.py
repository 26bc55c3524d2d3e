"""
Fallback Orchestrator - Pick the first strategy that finds relevant events.

Strategies run in order and each returns a tagged outcome:
- Matched(events): stop here, these are the results
- NoMatch(reason): try the next strategy

Plans:
- with trend keywords: strict -> lenient -> detected type
- without trend keywords: strict -> pure category

Running out of strategies is a normal outcome and yields an empty list.
"""
import dataclasses
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence, Union

from loguru import logger

from constants import Category, normalize_category
from .classifier import ClassifiedKeywords, classify_keywords, detect_category_type
from .config import MatchingConfig, get_matching_config
from .keywords import expand_keywords
from .matching import (
    KeywordMatcher,
    build_matchers,
    event_text,
    is_excluded,
    keywords_domain,
    phrase_threshold,
    text_domain,
)
from .scorer import CandidateEvent, EventScorer


@dataclass(frozen=True)
class Matched:
    """Strategy found events."""
    strategy: str
    events: list = field(default_factory=list)


@dataclass(frozen=True)
class NoMatch:
    """Strategy found nothing."""
    strategy: str
    reason: str = ""


StrategyOutcome = Union[Matched, NoMatch]


@dataclass(frozen=True)
class MatchContext:
    """Everything a strategy needs for one resolve() call."""
    keywords: list
    classified: ClassifiedKeywords
    category: Optional[Category]
    original_title: str
    pool: list
    limit: int


def _by_liquidity(events: Iterable[CandidateEvent]) -> list[CandidateEvent]:
    return sorted(events, key=lambda e: -(e.liquidity or 0))


def _term_match(term: str, text: str) -> bool:
    """Raw substring, or enough words of a phrase present as substrings."""
    if term in text:
        return True
    words = term.split()
    if len(words) < 2:
        return False
    found = sum(1 for word in words if word in text)
    return found >= phrase_threshold(len(words))


class FallbackOrchestrator:
    """
    Sequences the scorer through progressively more lenient strategies.

    Each strategy is a method taking a MatchContext, so tests can patch a
    single tier and count calls.
    """

    def __init__(
        self,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[EventScorer] = None,
    ):
        self.config = config or get_matching_config()
        self.scorer = scorer or EventScorer(self.config)

    # ============================================
    # ENTRY POINT
    # ============================================

    def resolve(
        self,
        raw_keywords: Sequence[str],
        category=None,
        original_title: Optional[str] = None,
        pool: Optional[Sequence[CandidateEvent]] = None,
        limit: int = 8,
    ) -> list[CandidateEvent]:
        """
        Find the most relevant events in the pool for a keyword set.

        Args:
            raw_keywords: Keywords from the extractor (expanded here)
            category: Request category (string or Category)
            original_title: Trend title, used by the category fallback
            pool: Candidate events
            limit: Maximum events returned

        Returns:
            Events with url set, or [] when no strategy matched
        """
        pool = list(pool or [])
        if not pool:
            logger.warning("Empty event pool, nothing to match")
            return []
        if limit <= 0:
            return []

        category = normalize_category(category)
        keywords = expand_keywords(raw_keywords, category, self.config)
        classified = classify_keywords(keywords, category, self.config)
        logger.debug(
            f"Resolving {len(pool)} events: {len(classified.trend_keywords)} trend / "
            f"{len(classified.category_keywords)} category keywords"
        )

        context = MatchContext(
            keywords=keywords,
            classified=classified,
            category=category,
            original_title=original_title or "",
            pool=pool,
            limit=limit,
        )

        for strategy in self._plan(classified):
            outcome = strategy(context)
            if isinstance(outcome, Matched):
                logger.info(f"[{outcome.strategy}] Matched {len(outcome.events)} events")
                return [self._with_url(event) for event in outcome.events]
            logger.debug(f"[{outcome.strategy}] No match: {outcome.reason}")

        logger.info("No relevant events found, returning empty")
        return []

    def _plan(self, classified: ClassifiedKeywords) -> list[Callable[[MatchContext], StrategyOutcome]]:
        if classified.has_trend_keywords:
            return [self._strict, self._lenient, self._detected_type]
        return [self._strict, self._category_only]

    def _with_url(self, event: CandidateEvent) -> CandidateEvent:
        return dataclasses.replace(event, url=self.config.event_url(event.slug, event.id))

    # ============================================
    # STRATEGIES
    # ============================================

    def _strict(self, context: MatchContext) -> StrategyOutcome:
        """S1: full relevance scoring over the pool."""
        scored = self.scorer.score(context.pool, context.classified, context.category)
        ranked = self.scorer.rank(scored, context.limit)
        if not ranked:
            return NoMatch("strict", "no event scored")
        return Matched("strict", [item.event for item in ranked])

    def _lenient(self, context: MatchContext) -> StrategyOutcome:
        """S2: any single trend keyword matching loosely; liquidity order."""
        category = context.category
        exclusions = self.config.exclusions_for(category)
        matchers = build_matchers(context.classified.trend_keywords)
        trend_domain = keywords_domain((m.keyword for m in matchers), self.config)

        def accepts(event: CandidateEvent) -> bool:
            text = event_text(event, include_tags=False)
            if is_excluded(text, exclusions, category):
                return False
            if category is Category.GAMING and trend_domain.conflicts_with(text_domain(text, self.config)):
                return False
            return any(m.lenient_match(text) for m in matchers)

        events = _by_liquidity(e for e in context.pool if accepts(e))[:context.limit]
        if not events:
            return NoMatch("lenient", "no trend keyword matched loosely")
        return Matched("lenient", events)

    def _search_terms(self, detected) -> tuple:
        if detected.is_sport:
            return self.config.sport_terms.get(detected.value, ())
        terms = self.config.category_search_terms.get(detected.value)
        if terms:
            return terms
        return self.config.tags_for(normalize_category(detected.value))

    def _detected_type(self, context: MatchContext) -> StrategyOutcome:
        """S3: events about the detected sport or category; liquidity order."""
        category = context.category
        detected = detect_category_type(context.keywords, category, self.config)
        if detected is None:
            return NoMatch("detected_type", "no sport or category detected")

        terms = self._search_terms(detected)
        if not terms:
            return NoMatch("detected_type", f"no search terms for {detected}")
        logger.debug(f"Detected {detected}, searching {len(terms)} terms")

        exclusions = self.config.exclusions_for(category)
        drop_esports = category is Category.GAMING and detected.is_sport

        def accepts(event: CandidateEvent) -> bool:
            text = event_text(event)
            if is_excluded(text, exclusions, category):
                return False
            if drop_esports and text_domain(text, self.config).is_esports:
                return False
            return any(_term_match(term, text) for term in terms)

        events = _by_liquidity(e for e in context.pool if accepts(e))[:context.limit]
        if not events:
            return NoMatch("detected_type", f"no {detected} events")
        return Matched("detected_type", events)

    def _category_only(self, context: MatchContext) -> StrategyOutcome:
        """S4: category tags alone; liquidity order."""
        category = context.category
        if category is None:
            return NoMatch("category", "no category")

        tags = self.config.tags_for(category) or (category.value.lower(),)
        matchers = [KeywordMatcher.build(tag) for tag in tags]
        exclusions = self.config.exclusions_for(category)
        title = context.original_title.lower()
        title_is_sports = category is Category.GAMING and any(
            sk in title for sk in self.config.sports_keywords
        )

        def accepts(event: CandidateEvent) -> bool:
            text = event_text(event, include_tags=False)
            if is_excluded(text, exclusions, category):
                return False
            if title_is_sports and text_domain(text, self.config).is_esports:
                return False
            return any(
                m.in_text(text) if m.is_phrase else m.on_boundary(text)
                for m in matchers
            )

        events = _by_liquidity(e for e in context.pool if accepts(e))[:context.limit]
        if not events:
            return NoMatch("category", f"no {category.value} events")
        return Matched("category", events)
