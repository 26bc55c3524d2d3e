"""
Scorer Configuration - Relevance weights and thresholds.

Tuned against the dashboard's trend feed; change together and re-check the
ranking tests when adjusting.
"""

# ============================================
# TREND KEYWORD WEIGHTS
# ============================================

# Exact phrase substring, by word count
PHRASE_EXACT_4_PLUS = 20
PHRASE_EXACT_3 = 15
PHRASE_EXACT_2 = 10

# Every phrase word on a word boundary, phrase not contiguous
PHRASE_PARTIAL_3 = 8
PHRASE_PARTIAL_OTHER = 5

# Single words
WORD_BOUNDARY = 5
WORD_SUBSTRING = 2

# Matched keyword also appears in the event title
TITLE_BONUS_PHRASE = 5
TITLE_BONUS_WORD = 3


# ============================================
# CATEGORY KEYWORD WEIGHTS
# ============================================

CATEGORY_PHRASE_3 = 2
CATEGORY_PHRASE_2 = 1
CATEGORY_WORD = 0.5


# ============================================
# RELEVANCE GATE
# ============================================
# With this many trend keywords, an event matching only category keywords
# is dropped.

GATE_MIN_TREND_KEYWORDS = 3


# ============================================
# AGGREGATE BONUS
# ============================================

AGGREGATE_BONUS_3_PLUS = 10
AGGREGATE_BONUS_2 = 5
AGGREGATE_BONUS_1_OF_3 = 3
AGGREGATE_MIN_TOTAL = 3


# ============================================
# POPULARITY
# ============================================

LIQUIDITY_THRESHOLD = 10_000
LIQUIDITY_BONUS = 2
VOLUME_THRESHOLD = 50_000
VOLUME_BONUS = 1
