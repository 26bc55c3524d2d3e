"""
Matching Helpers - Precompiled keyword matchers and shared text rules.

Keywords come from uncontrolled free text, so every pattern is built from
re.escape'd input. Matchers are compiled once per request (one per keyword)
and reused for every candidate event.
"""
import math
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Pattern, Sequence, Tuple

from constants import Category, GAMING_TRADING_EXCLUSION, GAMING_TRADING_REQUIRES
from .config import MatchingConfig


def word_pattern(word: str) -> Pattern:
    """Case-insensitive whole-word pattern for a literal word or phrase."""
    return re.compile(rf"\b{re.escape(word)}\b", re.IGNORECASE)


def specificity_key(keyword: str) -> Tuple[int, int]:
    """Sort key putting longer phrases first, then longer strings."""
    return (-len(keyword.split()), -len(keyword))


def sort_by_specificity(keywords: Iterable[str]) -> list[str]:
    """Stable sort by (word count desc, length desc)."""
    return sorted(keywords, key=specificity_key)


def phrase_threshold(word_count: int) -> int:
    """Words that must be present for a lenient phrase match."""
    if word_count == 2:
        return 2
    return math.ceil(word_count * 0.67)


def dedupe(items: Iterable[str]) -> list[str]:
    """De-duplicate preserving first occurrence order."""
    return list(dict.fromkeys(items))


@dataclass(frozen=True)
class KeywordMatcher:
    """A keyword with its word-boundary patterns compiled up front."""
    keyword: str
    words: Tuple[str, ...]
    boundary: Pattern
    word_boundaries: Tuple[Pattern, ...]

    @classmethod
    def build(cls, keyword: str) -> "KeywordMatcher":
        keyword = keyword.lower().strip()
        words = tuple(keyword.split())
        return cls(
            keyword=keyword,
            words=words,
            boundary=word_pattern(keyword),
            word_boundaries=tuple(word_pattern(w) for w in words),
        )

    @property
    def word_count(self) -> int:
        return len(self.words)

    @property
    def is_phrase(self) -> bool:
        return self.word_count > 1

    def in_text(self, text: str) -> bool:
        """Raw substring containment (text must already be lowercase)."""
        return self.keyword in text

    def on_boundary(self, text: str) -> bool:
        return self.boundary.search(text) is not None

    def all_words_on_boundary(self, text: str) -> bool:
        return all(p.search(text) for p in self.word_boundaries)

    def words_found(self, text: str) -> int:
        """Count phrase words present on a boundary or as a raw substring."""
        return sum(
            1 for word, pattern in zip(self.words, self.word_boundaries)
            if pattern.search(text) or word in text
        )

    def lenient_match(self, text: str) -> bool:
        """Substring, word-boundary, or enough phrase words present."""
        if self.in_text(text):
            return True
        if self.is_phrase:
            return self.words_found(text) >= phrase_threshold(self.word_count)
        return self.on_boundary(text)


def build_matchers(keywords: Iterable[str]) -> list[KeywordMatcher]:
    """Compile matchers for keywords, most specific first."""
    cleaned = dedupe(k.lower().strip() for k in keywords if k and k.strip())
    return [KeywordMatcher.build(k) for k in sort_by_specificity(cleaned)]


# ============================================
# EVENT TEXT
# ============================================

def event_text(event, include_tags: bool = True) -> str:
    """Lowercase title + description (+ tag names) of a candidate event."""
    parts = [event.title or "", event.description or ""]
    if include_tags:
        parts.append(" ".join(event.tags))
    return " ".join(parts).lower()


# ============================================
# EXCLUSIONS
# ============================================

def is_excluded(
    text: str,
    exclusions: Sequence[str],
    category: Optional[Category] = None,
) -> bool:
    """
    True when the text mentions any exclusion keyword.

    Gaming carve-out: "trading" only excludes crypto trading, so items about
    in-game trading survive.
    """
    for exclusion in exclusions:
        exclusion = exclusion.lower()
        if category is Category.GAMING and exclusion == GAMING_TRADING_EXCLUSION:
            if GAMING_TRADING_REQUIRES in text and GAMING_TRADING_EXCLUSION in text:
                return True
            continue
        if exclusion in text:
            return True
    return False


# ============================================
# SPORT / ESPORT DISAMBIGUATION
# ============================================

def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


@dataclass(frozen=True)
class SportDomain:
    """Whether a keyword set or text is about sports and/or esports."""
    is_sports: bool = False
    is_esports: bool = False

    def conflicts_with(self, other: "SportDomain") -> bool:
        return (self.is_sports and other.is_esports) or (self.is_esports and other.is_sports)


def keywords_domain(keywords: Iterable[str], config: MatchingConfig) -> SportDomain:
    """Classify keywords by containment in either direction."""
    keywords = [k for k in keywords if k]
    return SportDomain(
        is_sports=any(_overlaps(k, sk) for k in keywords for sk in config.sports_keywords),
        is_esports=any(_overlaps(k, ek) for k in keywords for ek in config.esports_keywords),
    )


def text_domain(text: str, config: MatchingConfig) -> SportDomain:
    """Classify lowercase event text by substring containment."""
    return SportDomain(
        is_sports=any(sk in text for sk in config.sports_keywords),
        is_esports=any(ek in text for ek in config.esports_keywords),
    )
