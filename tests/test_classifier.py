"""
Tests for keyword classification and type detection.
"""
from constants import Category
from processor.classifier import DetectedType, classify_keywords, detect_category_type


class TestClassifyKeywords:
    """Tests for classify_keywords."""

    def test_tag_overlap_is_category_keyword(self, config):
        result = classify_keywords(["gaming news", "nhl", "console"], Category.GAMING, config)
        assert result.category_keywords == ["gaming news", "console"]
        assert result.trend_keywords == ["nhl"]

    def test_keyword_inside_tag(self, config):
        result = classify_keywords(["video"], Category.GAMING, config)
        assert result.category_keywords == ["video"]
        assert not result.has_trend_keywords

    def test_every_keyword_in_exactly_one_side(self, config):
        keywords = ["tsmc", "chips", "taiwan semiconductor", "tech giants", "arizona"]
        result = classify_keywords(keywords, Category.SEMICONDUCTORS, config)
        assert sorted(result.trend_keywords + result.category_keywords) == sorted(keywords)
        assert not set(result.trend_keywords) & set(result.category_keywords)

    def test_unknown_category_all_trend(self, config):
        result = classify_keywords(["gaming", "nhl"], "Sports", config)
        assert result.trend_keywords == ["gaming", "nhl"]
        assert result.category_keywords == []

    def test_blank_keywords_skipped(self, config):
        result = classify_keywords(["", "  ", "tsmc"], None, config)
        assert result.trend_keywords == ["tsmc"]

    def test_to_dict(self, config):
        result = classify_keywords(["console", "halo"], Category.GAMING, config)
        assert result.to_dict() == {
            "trend_keywords": ["halo"],
            "category_keywords": ["console"],
        }


class TestDetectCategoryType:
    """Tests for detect_category_type."""

    def test_sport_detected_for_gaming(self, config):
        detected = detect_category_type(["stanley cup", "rangers"], Category.GAMING, config)
        assert detected == DetectedType(kind="sport", value="hockey")
        assert detected.is_sport
        assert str(detected) == "sport:hockey"

    def test_sport_not_checked_outside_gaming(self, config):
        detected = detect_category_type(["stanley cup"], Category.FINANCE, config)
        assert detected == DetectedType(kind="category", value="finance")

    def test_own_category_checked_first(self, config):
        # "solar" is both an energy and a climate term
        assert detect_category_type(["solar"], Category.CLIMATE, config).value == "climate"
        assert detect_category_type(["solar"], Category.ENERGY, config).value == "energy"

    def test_other_category_detected(self, config):
        detected = detect_category_type(["fda drug review"], Category.POLICY, config)
        assert detected == DetectedType(kind="category", value="healthcare")

    def test_terms_match_whole_words(self, config):
        # "ai" must not fire inside "taiwan"
        detected = detect_category_type(["taiwan exports"], Category.SEMICONDUCTORS, config)
        assert detected == DetectedType(kind="category", value="semiconductors")

    def test_nothing_detected(self, config):
        assert detect_category_type(["zzzunknownterm"], None, config) is None
        assert detect_category_type([], None, config) is None

    def test_falls_back_to_request_category(self, config):
        detected = detect_category_type([], Category.GAMING, config)
        assert detected == DetectedType(kind="category", value="gaming")
