"""
Tests for marketability detection on posts and news articles.
"""
import pytest

from processor.marketability import (
    EventDetails,
    assess_article,
    classify_event_type,
    extract_deadline,
    extract_question,
    is_marketable,
    marketability_score,
)


FDA_TITLE = "FDA expected to approve new drug by March 2025"


class TestIsMarketable:
    """Tests for the social post gate."""

    def test_regulatory_decision_with_deadline(self):
        assert is_marketable(FDA_TITLE) is True

    def test_vote_with_time_bound(self):
        assert is_marketable("The Senate will vote on the bill next week") is True

    def test_major_event_overrides_exclusion(self):
        # "review" is excluded, but the SEC makes it a major event
        assert is_marketable("SEC to review ETF filings") is True

    @pytest.mark.parametrize("text", [
        "Just curious what everyone thinks about the new phone",
        "Looking to hire a senior engineer, apply today",
        "Released v1.2.3 of the library with bug fixes",
        "My thoughts on the launch next week",
    ])
    def test_excluded(self, text):
        assert is_marketable(text) is False

    def test_no_event_indicator(self):
        assert is_marketable("Bitcoin hits record high") is False

    @pytest.mark.parametrize("text", ["", "   ", None])
    def test_empty(self, text):
        assert is_marketable(text) is False


class TestClassifyEventType:
    """Tests for question / deadline / type extraction."""

    def test_regulatory(self):
        details = classify_event_type("", FDA_TITLE)
        assert details == EventDetails(
            question=None,
            deadline="March 2025",
            event_type="Regulatory Decision",
        )

    def test_question_from_title(self):
        details = classify_event_type("Decision pending", "Will the SEC approve a Bitcoin ETF?")
        assert details.question == "Will the SEC approve a Bitcoin ETF?"
        assert details.event_type == "Regulatory Decision"

    def test_policy(self):
        details = classify_event_type("The Senate will vote on the bill next week", "Senate vote")
        assert details.event_type == "Policy Decision"

    def test_product_launch(self):
        assert classify_event_type("Apple to launch a foldable phone", "").event_type == "Product Launch"

    def test_general(self):
        details = classify_event_type("Team wins match", "Team wins")
        assert details == EventDetails(question=None, deadline=None, event_type="General Event")

    def test_to_dict(self):
        assert classify_event_type("", FDA_TITLE).to_dict() == {
            "question": None,
            "deadline": "March 2025",
            "eventType": "Regulatory Decision",
        }


class TestExtractDeadline:
    """Tests for extract_deadline."""

    @pytest.mark.parametrize("text, expected", [
        ("Vote due by 12/31/2025", "12/31/2025"),
        ("Ruling on January 5, 2026 at the latest", "January 5, 2026"),
        ("Launch before June 2026", "June 2026"),
        ("Decision expected by next month", "next month"),
        ("No date here", None),
        ("", None),
    ])
    def test_deadlines(self, text, expected):
        assert extract_deadline(text) == expected


class TestMarketabilityScore:
    """Tests for marketability_score."""

    def test_components(self):
        assert marketability_score(2, False, False) == 20
        assert marketability_score(3, True, False) == 50
        assert marketability_score(4, True, True) == 75

    def test_capped(self):
        assert marketability_score(10, True, True) == 100


class TestAssessArticle:
    """Tests for news article assessment."""

    def test_fda_article(self):
        assessment = assess_article(FDA_TITLE)
        assert assessment is not None
        assert assessment.indicator_count == 4
        assert assessment.score == 75
        assert assessment.event_type == "Regulatory Decision"
        assert assessment.deadline == "March 2025"
        assert assessment.question is None

    def test_indicator_flags(self):
        assessment = assess_article(FDA_TITLE)
        assert assessment.indicators["deadline"]
        assert assessment.indicators["date"]
        assert assessment.indicators["decision"]
        assert assessment.indicators["regulatory"]
        assert not assessment.indicators["policy"]
        assert not assessment.indicators["election"]

    def test_short_words_match_whole_words_only(self):
        # "sec" inside "second" and "act" inside "impact" must not count
        assert assess_article("Second quarter impact", "Nearby shops") is None

    def test_one_indicator_is_not_enough(self):
        assert assess_article("Apple earnings beat estimates") is None

    def test_nothing_marketable(self):
        assert assess_article("Local bakery opens", "Fresh bread daily") is None

    def test_question_from_article(self):
        assessment = assess_article("Will the FDA approve the drug?", "Decision expected this month")
        assert assessment.question == "the fda approve the drug"

    def test_to_dict(self):
        data = assess_article(FDA_TITLE).to_dict()
        assert data["eventType"] == "Regulatory Decision"
        assert data["marketabilityScore"] == 75
        assert data["indicators"]["hasDeadline"] is True
        assert data["indicators"]["hasPolicy"] is False


class TestExtractQuestion:
    """Tests for extract_question."""

    def test_title_marker_fallback(self):
        title = "Drug approval pending"
        assert extract_question(title) == title

    def test_none(self):
        assert extract_question("Local bakery opens") is None
