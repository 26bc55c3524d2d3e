"""
Tests for keyword extraction and expansion.
"""
import pytest

from constants import Category
from processor.keywords import MAX_KEYWORDS, expand_keywords, extract_keywords


def _word_counts(keywords):
    return [len(k.split()) for k in keywords]


class TestExtractKeywords:
    """Tests for extract_keywords."""

    def test_empty_text(self, config):
        assert extract_keywords("", config=config) == []
        assert extract_keywords(None, config=config) == []
        assert extract_keywords("   ", config=config) == []

    def test_known_entities_found(self, config):
        keywords = extract_keywords(
            "TSMC expands Taiwan Semiconductor production",
            Category.SEMICONDUCTORS,
            config,
        )
        assert "tsmc" in keywords
        assert "taiwan semiconductor" in keywords

    def test_output_is_lowercase(self, config):
        keywords = extract_keywords("Nvidia Unveils Blackwell Chips", "Semiconductors", config)
        assert keywords
        assert all(k == k.lower() for k in keywords)

    def test_phrases_come_first(self, config):
        keywords = extract_keywords(
            "Rangers beat Islanders in overtime as NHL playoffs heat up",
            Category.GAMING,
            config,
        )
        counts = _word_counts(keywords)
        assert counts == sorted(counts, reverse=True)
        assert counts[0] >= 2

    def test_lone_stop_word_proper_noun_skipped(self, config):
        keywords = extract_keywords("The Rangers won again", Category.GAMING, config)
        assert "the" not in keywords
        assert "rangers" in keywords

    def test_short_single_words_dropped(self, config):
        keywords = extract_keywords("big red dog runs", config=config)
        assert "big" not in keywords
        assert "runs" in keywords

    def test_capped(self, config):
        text = " ".join(f"Word{i} alpha{i}" for i in range(60))
        assert len(extract_keywords(text, config=config)) <= MAX_KEYWORDS

    def test_no_duplicates(self, config):
        keywords = extract_keywords("Bitcoin bitcoin BITCOIN price rally", Category.CRYPTO, config)
        assert len(keywords) == len(set(keywords))

    def test_deterministic(self, config):
        text = "OpenAI launches GPT model as Anthropic ships Claude update"
        first = extract_keywords(text, Category.AI, config)
        assert extract_keywords(text, Category.AI, config) == first
        assert extract_keywords(text, "ai", config) == first

    def test_unknown_category_has_no_entities(self, config):
        assert "amd" not in extract_keywords("amd output", "Sports", config)
        assert "amd" in extract_keywords("amd output", "Semiconductors", config)


class TestExpandKeywords:
    """Tests for expand_keywords."""

    def test_exact_synonyms(self, config):
        expanded = expand_keywords(["nhl"], config=config)
        assert expanded[0] == "nhl"
        assert "hockey" in expanded
        assert "stanley cup" in expanded

    def test_partial_key_match(self, config):
        expanded = expand_keywords(["quarterfinal game"], config=config)
        assert "playoffs" in expanded
        assert "bracket" in expanded

    def test_gaming_synonyms_only_for_gaming(self, config):
        assert expand_keywords(["valorant"], config=config) == ["valorant"]
        assert "riot games" in expand_keywords(["valorant"], Category.GAMING, config)

    def test_original_order_preserved(self, config):
        expanded = expand_keywords(["rangers", "nhl"], config=config)
        assert expanded[:2] == ["rangers", "nhl"]

    def test_superset_without_duplicates(self, config):
        source = ["nhl", "hockey", "rangers"]
        expanded = expand_keywords(source, config=config)
        assert set(source) <= set(expanded)
        assert len(expanded) == len(set(expanded))

    @pytest.mark.parametrize("keywords", [[], ["", "  "]])
    def test_empty(self, config, keywords):
        assert expand_keywords(keywords, config=config) == []
