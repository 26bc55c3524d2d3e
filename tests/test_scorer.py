"""
Tests for the strict event scorer.
"""
import pytest

from constants import Category
from processor.classifier import ClassifiedKeywords
from processor.scorer import EventScorer, ScoredEvent


def _classified(trend, category=()):
    return ClassifiedKeywords(trend_keywords=list(trend), category_keywords=list(category))


@pytest.fixture
def scorer(config):
    return EventScorer(config)


class TestTrendKeywordWeights:
    """Points per trend keyword match type."""

    def test_word_boundary_with_title_bonus(self, scorer, make_event):
        event = make_event("1", "Nvidia earnings")
        [result] = scorer.score([event], _classified(["nvidia"]))
        assert result.score == 8
        assert result.match_count == 1
        assert result.matched_keywords == ["nvidia"]

    def test_word_substring(self, scorer, make_event):
        event = make_event("1", "Chipmaker rally continues")
        [result] = scorer.score([event], _classified(["chip"]))
        # substring 2 + title bonus 3
        assert result.score == 5

    def test_exact_phrase_by_length(self, scorer, make_event):
        event = make_event("1", "Nvidia Blackwell chips shipping to data centers")
        [three] = scorer.score([event], _classified(["nvidia blackwell chips"]))
        assert three.score == 15 + 5
        [two] = scorer.score([event], _classified(["blackwell chips"]))
        assert two.score == 10 + 5
        [four] = scorer.score([event], _classified(["nvidia blackwell chips shipping"]))
        assert four.score == 20 + 5

    def test_all_words_present_not_contiguous(self, scorer, make_event):
        event = make_event("1", "Nvidia ships Blackwell chips")
        [three] = scorer.score([event], _classified(["blackwell nvidia chips"]))
        assert three.score == 8
        [two] = scorer.score([event], _classified(["chips nvidia"]))
        assert two.score == 5

    def test_description_match_has_no_title_bonus(self, scorer, make_event):
        event = make_event("1", "Chip stocks", description="Nvidia guidance raised")
        [result] = scorer.score([event], _classified(["nvidia"]))
        assert result.score == 5


class TestBonuses:
    """Aggregate and popularity bonuses."""

    def test_three_trend_matches(self, scorer, make_event):
        event = make_event("1", "Nvidia Blackwell chips")
        [result] = scorer.score([event], _classified(["nvidia", "blackwell", "chips"]))
        assert result.score == 3 * 8 + 10
        assert result.matched_keywords == ["blackwell", "nvidia", "chips"]

    def test_two_trend_matches(self, scorer, make_event):
        event = make_event("1", "Nvidia Blackwell")
        [result] = scorer.score([event], _classified(["nvidia", "blackwell"]))
        assert result.score == 2 * 8 + 5

    def test_one_trend_match_with_category_support(self, scorer, make_event):
        event = make_event("1", "Nvidia tech chips")
        [result] = scorer.score([event], _classified(["nvidia"], ["tech", "chips"]))
        # 8 trend + 0.5 + 0.5 category + 3 aggregate
        assert result.score == 12
        assert result.match_count == 3

    def test_popularity(self, scorer, make_event):
        event = make_event("1", "Nvidia earnings", liquidity=20_000, volume=60_000)
        [result] = scorer.score([event], _classified(["nvidia"]))
        assert result.score == 8 + 2 + 1

    def test_popularity_thresholds_are_exclusive(self, scorer, make_event):
        event = make_event("1", "Nvidia earnings", liquidity=10_000, volume=50_000)
        [result] = scorer.score([event], _classified(["nvidia"]))
        assert result.score == 8


class TestFiltering:
    """Events removed before or after scoring."""

    def test_no_match_dropped(self, scorer, make_event):
        event = make_event("1", "Fed decision in March?")
        assert scorer.score([event], _classified(["nvidia"])) == []

    def test_category_only_match_gated(self, scorer, make_event):
        event = make_event("1", "Gaming console sales record")
        gated = scorer.score([event], _classified(["alpha", "beta", "gamma"], ["gaming"]))
        assert gated == []

    def test_category_only_match_kept_below_gate(self, scorer, make_event):
        event = make_event("1", "Gaming console sales record")
        [result] = scorer.score([event], _classified(["alpha", "beta"], ["gaming"]))
        assert result.score == 0.5
        assert result.match_count == 1

    def test_exclusion_dominates(self, scorer, make_event):
        event = make_event("1", "OpenAI token price prediction")
        assert scorer.score([event], _classified(["openai"]), Category.AI) == []

    def test_explicit_exclusions(self, scorer, make_event):
        event = make_event("1", "OpenAI token launch")
        assert scorer.score([event], _classified(["openai"]), exclusions=["token"]) == []

    def test_gaming_in_game_trading_survives(self, scorer, make_event):
        event = make_event("1", "Fortnite in-game item trading returns")
        [result] = scorer.score([event], _classified(["fortnite"]), Category.GAMING)
        assert result.event.id == "1"

    def test_gaming_crypto_trading_excluded(self, scorer, make_event):
        event = make_event("1", "Fortnite skins crypto trading")
        assert scorer.score([event], _classified(["fortnite"]), Category.GAMING) == []

    def test_gaming_sport_esport_conflict(self, scorer, nhl_event, make_event):
        esports = make_event("2", "Rangers esports team wins Valorant Masters")
        results = scorer.score([nhl_event, esports], _classified(["rangers"]), Category.GAMING)
        assert [r.event.id for r in results] == [nhl_event.id]

    def test_conflict_only_applies_to_gaming(self, scorer, make_event):
        esports = make_event("2", "Rangers esports team wins Valorant Masters")
        [result] = scorer.score([esports], _classified(["rangers"]))
        assert result.event.id == "2"


class TestRank:
    """Tests for EventScorer.rank."""

    def test_order_and_tie_breaks(self, make_event):
        a = ScoredEvent(make_event("a", "A", liquidity=1), score=10, match_count=1)
        b = ScoredEvent(make_event("b", "B", liquidity=5), score=10, match_count=1)
        c = ScoredEvent(make_event("c", "C"), score=10, match_count=2)
        d = ScoredEvent(make_event("d", "D"), score=20, match_count=1)
        ranked = EventScorer.rank([a, b, c, d], limit=10)
        assert [r.event.id for r in ranked] == ["d", "c", "b", "a"]

    def test_limit(self, make_event):
        items = [
            ScoredEvent(make_event(str(i), f"E{i}"), score=i, match_count=1)
            for i in range(5)
        ]
        assert [r.event.id for r in EventScorer.rank(items, 2)] == ["4", "3"]
        assert EventScorer.rank(items, 0) == []
