"""
Keyword Extractor - Free text to a ranked keyword list.

Extraction tiers, in priority order:
1. Known entities for the category (company, product and team names)
2. Proper nouns (runs of capitalized words)
3. Bigrams / trigrams anchored on an entity or proper noun
4. Remaining significant single words

The combined list is sorted so longer phrases come first and capped at
MAX_KEYWORDS. Output is deterministic for a given text, category and config.
"""
import re
from typing import Optional

from constants import Category, normalize_category
from ..config import MatchingConfig, get_matching_config
from ..matching import dedupe, sort_by_specificity, word_pattern


MAX_ENTITIES = 20
MAX_TRIGRAMS = 5
MAX_BIGRAMS = 10
MAX_SINGLE_WORDS = 15
MAX_KEYWORDS = 25

MIN_TOKEN_LENGTH = 3        # tokens shorter than this never form phrases
MIN_SINGLE_WORD_LENGTH = 4  # single-word tier

PROPER_NOUN_PATTERN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")
_PUNCTUATION = re.compile(r"[^\w\s]")
_DIGITS = re.compile(r"^\d+$")


def extract_entities(
    text: str,
    category: Optional[Category] = None,
    config: Optional[MatchingConfig] = None,
) -> list[str]:
    """
    Find the category's known entities in text.

    Multi-word entities match as case-insensitive substrings, single-word
    entities only on whole-word boundaries.
    """
    if not text:
        return []
    config = config or get_matching_config()
    category = normalize_category(category)
    text_lower = text.lower()

    found = []
    for entity in config.entities_for(category):
        if " " in entity:
            if entity in text_lower:
                found.append(entity)
        elif word_pattern(entity).search(text):
            found.append(entity)
    return found[:MAX_ENTITIES]


def extract_proper_nouns(text: str) -> list[str]:
    """Capitalized word runs as they appear in the text."""
    if not text:
        return []
    return PROPER_NOUN_PATTERN.findall(text)


def tokenize(text: str, stop_words: frozenset) -> list[str]:
    """Lowercase, punctuation-stripped tokens that can take part in phrases."""
    tokens = _PUNCTUATION.sub(" ", text.lower()).split()
    return [
        t for t in tokens
        if len(t) >= MIN_TOKEN_LENGTH and t not in stop_words and not _DIGITS.match(t)
    ]


def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


def extract_keywords(
    text: str,
    category=None,
    config: Optional[MatchingConfig] = None,
) -> list[str]:
    """
    Turn free text into a ranked keyword list.

    Args:
        text: Title, summary or any free text (empty -> [])
        category: Optional category used for the entity table
        config: Matching tables (defaults to the process-wide config)

    Returns:
        Up to MAX_KEYWORDS lowercase keywords, longer phrases first
    """
    if not text or not text.strip():
        return []

    config = config or get_matching_config()
    category = normalize_category(category)
    stop_words = config.stop_words

    keywords: list[str] = []

    # Tier 1: known entities
    entities = extract_entities(text, category, config)
    keywords.extend(entities)

    # Tier 2: proper nouns
    proper_nouns = [pn.lower() for pn in extract_proper_nouns(text)]
    for noun in proper_nouns:
        if noun in keywords or len(noun) <= 2:
            continue
        if " " not in noun and noun in stop_words:
            continue
        keywords.append(noun)
        if " " in noun:
            for word in noun.split():
                if len(word) > 2 and word not in stop_words and word not in keywords:
                    keywords.append(word)

    # Tier 3: anchored phrases
    tokens = tokenize(text, stop_words)
    anchors = entities + proper_nouns
    multi_word_entities = [e for e in entities if " " in e]
    proper_noun_words = {w for pn in proper_nouns for w in pn.split()}

    bigrams: list[str] = []
    for first, second in zip(tokens, tokens[1:]):
        bigram = f"{first} {second}"
        if bigram in keywords or bigram in bigrams:
            continue
        word_anchored = any(
            _overlaps(first, anchor) or _overlaps(second, anchor)
            for anchor in anchors
        )
        phrase_anchored = any(_overlaps(bigram, pn) for pn in proper_nouns)
        if word_anchored or phrase_anchored:
            bigrams.append(bigram)

    trigrams: list[str] = []
    for first, second, third in zip(tokens, tokens[1:], tokens[2:]):
        trigram = f"{first} {second} {third}"
        if trigram in keywords or trigram in trigrams:
            continue
        proper_noun_sequence = any(pn in trigram for pn in proper_nouns) or any(
            word in trigram for word in proper_noun_words
        )
        contains_entity = any(e in trigram for e in multi_word_entities)
        if proper_noun_sequence or contains_entity:
            trigrams.append(trigram)

    # Tier 4: significant single words
    single_words: list[str] = []
    for token in tokens:
        if len(token) >= MIN_SINGLE_WORD_LENGTH and token not in keywords and token not in single_words:
            single_words.append(token)

    keywords.extend(trigrams[:MAX_TRIGRAMS])
    keywords.extend(bigrams[:MAX_BIGRAMS])
    keywords.extend(single_words[:MAX_SINGLE_WORDS])

    return sort_by_specificity(dedupe(keywords))[:MAX_KEYWORDS]
