"""
Title De-duplication - Drop trends whose titles say the same thing.

Two titles are duplicates when, after normalization, they are identical,
share more than 70% of their significant words, or one contains the other
and their lengths differ by fewer than 10 characters.
"""
import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

OVERLAP_THRESHOLD = 0.7
MIN_WORD_LENGTH = 4
CONTAINMENT_MAX_LENGTH_DIFF = 10

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_title(title: str) -> str:
    """Lowercase, strip punctuation, collapse whitespace."""
    text = _PUNCTUATION.sub("", (title or "").lower())
    return _WHITESPACE.sub(" ", text).strip()


def _significant_words(normalized: str) -> set:
    return {w for w in normalized.split(" ") if len(w) >= MIN_WORD_LENGTH}


def title_similarity(a: str, b: str) -> float:
    """Share of significant words two titles have in common (0.0 - 1.0)."""
    words_a = _significant_words(normalize_title(a))
    words_b = _significant_words(normalize_title(b))
    union = words_a | words_b
    if not union:
        return 0.0
    return len(words_a & words_b) / len(union)


def is_duplicate_title(title: str, seen: Iterable[str]) -> bool:
    """True when title duplicates any already normalized title in seen."""
    normalized = normalize_title(title)
    words = _significant_words(normalized)

    for other in seen:
        if normalized == other:
            return True

        other_words = _significant_words(other)
        union = words | other_words
        if union and len(words & other_words) / len(union) > OVERLAP_THRESHOLD:
            return True

        if normalized and other and (normalized in other or other in normalized):
            if abs(len(normalized) - len(other)) < CONTAINMENT_MAX_LENGTH_DIFF:
                return True
    return False


def deduplicate_trends(items: Iterable[T], title_of: Callable[[T], str] = None) -> list[T]:
    """
    Keep the first of every group of near-duplicate titles.

    Args:
        items: Trends (or anything with a title), best first
        title_of: Title accessor; defaults to the .title attribute

    Returns:
        Items in input order with later duplicates removed
    """
    title_of = title_of or (lambda item: item.title)
    kept: list[T] = []
    seen: list[str] = []

    for item in items:
        title = title_of(item) or ""
        if is_duplicate_title(title, seen):
            continue
        kept.append(item)
        seen.append(normalize_title(title))
    return kept
