"""
Tests for the fallback orchestrator and the end-to-end matching scenarios.
"""
from unittest.mock import patch

import pytest

from constants import Category
from processor.orchestrator import FallbackOrchestrator, Matched, NoMatch


@pytest.fixture
def orchestrator(config):
    return FallbackOrchestrator(config)


class TestStrict:
    """Pool matched by the strict scorer."""

    def test_semiconductor_trend(self, orchestrator, tsmc_event, fed_event):
        events = orchestrator.resolve(
            ["taiwan semiconductor", "tsmc"],
            Category.SEMICONDUCTORS,
            pool=[fed_event, tsmc_event],
            limit=5,
        )
        assert [e.id for e in events] == [tsmc_event.id]
        assert events[0].url == "https://polymarket.com/event/tsmc-arizona"

    def test_gaming_sports_trend_skips_esports(self, orchestrator, nhl_event, valorant_event):
        events = orchestrator.resolve(
            ["nhl", "rangers"],
            Category.GAMING,
            pool=[valorant_event, nhl_event],
            limit=5,
        )
        assert [e.id for e in events] == [nhl_event.id]

    def test_later_strategies_not_run(self, orchestrator, tsmc_event):
        with patch.object(FallbackOrchestrator, "_lenient") as lenient, \
                patch.object(FallbackOrchestrator, "_detected_type") as detected:
            events = orchestrator.resolve(["tsmc"], Category.SEMICONDUCTORS, pool=[tsmc_event])
        assert events
        lenient.assert_not_called()
        detected.assert_not_called()

    def test_url_falls_back_to_id(self, orchestrator, make_event):
        event = make_event("777", "TSMC output")
        [result] = orchestrator.resolve(["tsmc"], pool=[event])
        assert result.url == "https://polymarket.com/event/777"
        assert event.url is None


class TestLenient:
    """Second tier: loose trend keyword matches."""

    def test_partial_phrase_match_sorted_by_liquidity(self, orchestrator, make_event):
        ibm = make_event("1", "IBM quantum computing breakthrough expected", liquidity=100)
        google = make_event("2", "Google quantum computing breakthrough by 2026", liquidity=5000)
        other = make_event("3", "Fed decision in March?", liquidity=99999)

        with patch.object(FallbackOrchestrator, "_detected_type") as detected:
            events = orchestrator.resolve(
                ["quantum computing breakthrough announced"],
                pool=[ibm, google, other],
            )
        assert [e.id for e in events] == ["2", "1"]
        detected.assert_not_called()

    def test_strategy_outcome(self, orchestrator, config, make_event):
        from processor.classifier import classify_keywords
        from processor.orchestrator import MatchContext

        event = make_event("1", "IBM quantum computing breakthrough expected")
        context = MatchContext(
            keywords=["quantum computing breakthrough announced"],
            classified=classify_keywords(["quantum computing breakthrough announced"], None, config),
            category=None,
            original_title="",
            pool=[event],
            limit=5,
        )
        assert isinstance(orchestrator._strict(context), NoMatch)
        outcome = orchestrator._lenient(context)
        assert isinstance(outcome, Matched)
        assert outcome.strategy == "lenient"
        assert outcome.events == [event]


class TestDetectedType:
    """Third tier: events about the detected sport or category."""

    def test_detected_sport(self, orchestrator, make_event):
        cup = make_event("1", "Will the Hurricanes win the Stanley Cup?", liquidity=10)
        esports = make_event("2", "Esports arena hockey exhibition", liquidity=50000)
        unrelated = make_event("3", "New console sales record", liquidity=100)

        events = orchestrator.resolve(["stanley cup final"], Category.GAMING, pool=[cup, esports, unrelated])
        assert [e.id for e in events] == ["1"]


class TestCategoryOnly:
    """Fallback for requests without trend keywords."""

    def test_category_tags(self, orchestrator, make_event):
        console = make_event("1", "Will Nintendo announce a new console in 2025?", liquidity=300)
        esports = make_event("2", "Esports console cup winner", liquidity=100)

        with patch.object(FallbackOrchestrator, "_lenient") as lenient, \
                patch.object(FallbackOrchestrator, "_detected_type") as detected:
            events = orchestrator.resolve(["gaming"], Category.GAMING, pool=[esports, console])
        assert [e.id for e in events] == ["1", "2"]
        lenient.assert_not_called()
        detected.assert_not_called()

    def test_sports_title_drops_esports(self, orchestrator, make_event):
        console = make_event("1", "Will Nintendo announce a new console in 2025?")
        esports = make_event("2", "Esports console cup winner")

        events = orchestrator.resolve(
            ["gaming"],
            Category.GAMING,
            original_title="NHL playoffs tonight",
            pool=[esports, console],
        )
        assert [e.id for e in events] == ["1"]

    def test_no_category(self, orchestrator, make_event):
        assert orchestrator.resolve([], None, pool=[make_event("1", "Anything")]) == []


def _context(config, keywords, category, pool, original_title=""):
    from processor.classifier import classify_keywords
    from processor.orchestrator import MatchContext

    return MatchContext(
        keywords=keywords,
        classified=classify_keywords(keywords, category, config),
        category=category,
        original_title=original_title,
        pool=pool,
        limit=5,
    )


class TestExclusionsInFallbacks:
    """Excluded events never come back from the looser tiers."""

    def test_lenient(self, orchestrator, config, make_event):
        crypto = make_event("1", "Speedrun world record on crypto trading stream", liquidity=99999)
        priced = make_event("2", "Speedrun world record price pool", liquidity=50000)
        item_trading = make_event("3", "Speedrun world record set during item trading marathon", liquidity=500)

        context = _context(config, ["speedrun world record"], Category.GAMING, [crypto, priced, item_trading])
        outcome = orchestrator._lenient(context)

        assert isinstance(outcome, Matched)
        assert [e.id for e in outcome.events] == ["3"]

    def test_lenient_only_exclusions_match(self, orchestrator, config, make_event):
        crypto = make_event("1", "Speedrun world record crypto bounty", liquidity=99999)
        context = _context(config, ["speedrun world record"], Category.GAMING, [crypto])
        assert isinstance(orchestrator._lenient(context), NoMatch)

    def test_detected_type(self, orchestrator, config, make_event):
        cup = make_event("1", "Will the Hurricanes win the Stanley Cup?", liquidity=10)
        crypto = make_event("2", "Stanley Cup champion crypto bet", liquidity=99999)
        tickets = make_event("3", "Stanley Cup final ticket price over $1000?", liquidity=80000)

        context = _context(config, ["stanley cup final"], Category.GAMING, [crypto, tickets, cup])
        outcome = orchestrator._detected_type(context)

        assert isinstance(outcome, Matched)
        assert [e.id for e in outcome.events] == ["1"]

    def test_category_only(self, orchestrator, config, make_event):
        exports = make_event("1", "Will chips export rules tighten in 2025?", liquidity=100)
        mining = make_event("2", "Bitcoin mining chips sell out", liquidity=99999)
        stock = make_event("3", "Chips stock price above $200?", liquidity=50000)

        context = _context(config, ["chips"], Category.SEMICONDUCTORS, [mining, stock, exports])
        outcome = orchestrator._category_only(context)

        assert isinstance(outcome, Matched)
        assert [e.id for e in outcome.events] == ["1"]

    def test_resolve_never_returns_excluded(self, orchestrator, make_event):
        mining = make_event("1", "Bitcoin mining chips sell out", liquidity=99999)
        assert orchestrator.resolve(["chips"], Category.SEMICONDUCTORS, pool=[mining]) == []


class TestEdgeCases:
    """Empty inputs and exhausted strategies."""

    def test_empty_pool(self, orchestrator):
        assert orchestrator.resolve(["tsmc"], Category.SEMICONDUCTORS, pool=[]) == []
        assert orchestrator.resolve(["tsmc"], Category.SEMICONDUCTORS, pool=None) == []

    def test_zero_limit(self, orchestrator, tsmc_event):
        assert orchestrator.resolve(["tsmc"], pool=[tsmc_event], limit=0) == []

    def test_all_strategies_exhausted(self, orchestrator, tsmc_event):
        assert orchestrator.resolve(["zzzunknownterm"], None, pool=[tsmc_event]) == []

    def test_limit_respected(self, orchestrator, make_event):
        pool = [make_event(str(i), f"TSMC update {i}") for i in range(6)]
        assert len(orchestrator.resolve(["tsmc"], pool=pool, limit=3)) == 3
