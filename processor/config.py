"""
Matching Configuration - Immutable view of the vocabulary tables.

The matching engine never reads constants directly. It receives a
MatchingConfig (built once per process by get_matching_config) so every
stage stays pure and can be tested against a custom table set.
"""
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from constants import (
    Category,
    CATEGORY_TAGS,
    CATEGORY_EXCLUSIONS,
    CATEGORY_DETECTION_TERMS,
    CATEGORY_SEARCH_TERMS,
    SPORT_TERMS,
    SPORTS_KEYWORDS,
    ESPORTS_KEYWORDS,
    STOP_WORDS,
    KNOWN_ENTITIES,
    SPORTS_SYNONYMS,
    GAMING_SYNONYMS,
    GENERAL_SYNONYMS,
)


def _freeze(table: Mapping) -> Mapping:
    """Lowercase and freeze a {key: [terms]} table."""
    return MappingProxyType({
        key: tuple(term.lower() for term in terms)
        for key, terms in table.items()
    })


@dataclass(frozen=True)
class MatchingConfig:
    """Read-only tables shared by all matching stages."""
    category_tags: Mapping[Category, Tuple[str, ...]]
    category_exclusions: Mapping[Category, Tuple[str, ...]]
    known_entities: Mapping[Category, Tuple[str, ...]]
    stop_words: frozenset
    sports_synonyms: Mapping[str, Tuple[str, ...]]
    gaming_synonyms: Mapping[str, Tuple[str, ...]]
    general_synonyms: Mapping[str, Tuple[str, ...]]
    sports_keywords: Tuple[str, ...]
    esports_keywords: Tuple[str, ...]
    sport_terms: Mapping[str, Tuple[str, ...]]
    category_detection_terms: Mapping[str, Tuple[str, ...]]
    category_search_terms: Mapping[str, Tuple[str, ...]]
    event_url_base: str = "https://polymarket.com/event"

    def tags_for(self, category: Optional[Category]) -> Tuple[str, ...]:
        if category is None:
            return ()
        return self.category_tags.get(category, ())

    def exclusions_for(self, category: Optional[Category]) -> Tuple[str, ...]:
        if category is None:
            return ()
        return self.category_exclusions.get(category, ())

    def entities_for(self, category: Optional[Category]) -> Tuple[str, ...]:
        if category is None:
            return ()
        return self.known_entities.get(category, ())

    def expansions_for(self, category: Optional[Category]) -> Mapping[str, Tuple[str, ...]]:
        """Synonym table for a category: sports + general, plus gaming for Gaming."""
        table = {**self.sports_synonyms, **self.general_synonyms}
        if category is Category.GAMING:
            table.update(self.gaming_synonyms)
        return MappingProxyType(table)

    def event_url(self, slug: Optional[str], event_id: str) -> str:
        return f"{self.event_url_base.rstrip('/')}/{slug or event_id}"


def build_matching_config(event_url_base: str = "https://polymarket.com/event") -> MatchingConfig:
    """Build a MatchingConfig from the constants package."""
    return MatchingConfig(
        category_tags=_freeze(CATEGORY_TAGS),
        category_exclusions=_freeze(CATEGORY_EXCLUSIONS),
        known_entities=_freeze(KNOWN_ENTITIES),
        stop_words=frozenset(w.lower() for w in STOP_WORDS),
        sports_synonyms=_freeze(SPORTS_SYNONYMS),
        gaming_synonyms=_freeze(GAMING_SYNONYMS),
        general_synonyms=_freeze(GENERAL_SYNONYMS),
        sports_keywords=tuple(SPORTS_KEYWORDS),
        esports_keywords=tuple(ESPORTS_KEYWORDS),
        sport_terms=_freeze(SPORT_TERMS),
        category_detection_terms=_freeze(CATEGORY_DETECTION_TERMS),
        category_search_terms=_freeze(CATEGORY_SEARCH_TERMS),
        event_url_base=event_url_base,
    )


@lru_cache(maxsize=1)
def get_matching_config() -> MatchingConfig:
    """Process-wide MatchingConfig, built on first use."""
    from config import settings
    return build_matching_config(event_url_base=settings.POLYMARKET_EVENT_URL)
