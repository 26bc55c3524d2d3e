"""
Marketability Configuration - Patterns for spotting market-worthy events.

A marketable event is a concrete, time-bound decision or outcome that could
back a prediction market ("FDA to approve X by March"), as opposed to
discussion, help requests, job posts or release notes.
"""
import re

_I = re.IGNORECASE


# ============================================
# EXCLUSIONS
# ============================================
# Any hit rejects the text unless a major-event keyword is present.

# Software packages and versions; also used to drop release-note news
SOFTWARE_PATTERNS = [
    re.compile(r"\b(v\d+\.\d+\.\d+|version \d+|package|library|npm|pypi|pip install|github\.com)\b", _I),
    re.compile(r"\b(lib\w+|pkg\w+|module|dependency|install|update|upgrade)\b", _I),
    re.compile(r"\b(\w+-\d+\.\d+\.\d+|\d+\.\d+\.\d+\.\d+)\b", _I),
]

EXCLUSION_PATTERNS = [
    # Job postings
    re.compile(r"\b(hiring|hire|looking to hire|job|position|apply|resume|cv|salary|wage)\b", _I),
    re.compile(r"\b(seeking|wanted|needed|available|open position|full time|part time)\b", _I),
    # Personal requests / ads
    re.compile(r"\b(buy|sell|trade|for sale|wanted|looking for|need help|can someone)\b", _I),
    re.compile(r"\b(anyone|somebody|someone|help me|please help|advice needed)\b", _I),
    # Questions
    re.compile(r"\b(how do|how to|what is|why|when should|where can|help with|question about)\b", _I),
    re.compile(r"\b(need advice|looking for advice|can anyone|does anyone know)\b", _I),
    # Discussion
    re.compile(r"\b(thoughts|opinions|discussion|what do you think|what's your take)\b", _I),
    re.compile(r"\b(just|only|simply|basically|just wondering|curious)\b", _I),
    # Personal experience
    re.compile(r"\b(my|i|me|personally|in my opinion|i think|i feel|i believe)\b", _I),
    # Reviews / tutorials
    re.compile(r"\b(review|tutorial|guide|tips|tricks|how to|explanation)\b", _I),
    *SOFTWARE_PATTERNS,
]

MAJOR_EVENT_PATTERN = re.compile(
    r"\b(fda|sec|bill|ipo)\b|\b(approval|regulation|legislation|election|merger)", _I
)


# ============================================
# EVENT GATE
# ============================================

EVENT_INDICATOR_PATTERNS = [
    re.compile(r"\b(will|to|expected to|planned to|scheduled to|set to)\s+(approve|reject|pass|fail|launch|release|announce|decide)", _I),
    re.compile(r"\b(approval|decision|vote|launch|release|announcement)\s+(by|on|before|in|this|next)", _I),
    re.compile(r"\b(fda|sec|congress|senate|house|government|regulator)\s+(will|to|expected|planned)", _I),
    re.compile(r"\b(bill|legislation|regulation|policy)\s+(will|to|expected|pass|fail)", _I),
    re.compile(r"\b(ipo|merger|acquisition|earnings)\s+(expected|scheduled|planned|announced)", _I),
    re.compile(r"\b(election|vote|referendum|ballot)\s+(on|for|in|this|next)", _I),
]

TIME_BOUND_PATTERN = re.compile(
    r"\b(by|deadline|on|before|until|this month|next month|this year|next year|20\d{2}|q[1-4])\b", _I
)

DECISION_PATTERN = re.compile(
    r"\b(approval|rejection|decision|vote|pass|fail|announce|launch|release|approve|reject)", _I
)

REGULATORY_PATTERN = re.compile(
    r"\b(fda|sec|congress|senate|house|government|regulator|bill|legislation)\b", _I
)


# ============================================
# DETAILS
# ============================================

QUESTION_PATTERN = re.compile(r"will (.+?)(?:\?|\.|$)", _I)

DEADLINE_PATTERN = re.compile(
    r"\b(?:by|on|before|until)\s+("
    r"[a-z]+\s+\d{1,2},?\s+\d{4}"
    r"|\d{1,2}/\d{1,2}/\d{4}"
    r"|[a-z]+\s+\d{4}"
    r"|this month|next month|this year|next year"
    r")",
    _I,
)

# Checked in order; first hit wins
EVENT_TYPE_PATTERNS = [
    ("Regulatory Decision", re.compile(r"\b(?:fda|sec)\b|approval", _I)),
    ("Policy Decision", re.compile(r"\bbill\b|legislation|\bvote", _I)),
    ("Product Launch", re.compile(r"launch|release", _I)),
    ("Financial Event", re.compile(r"\bipo\b|merger|acquisition", _I)),
    ("Election", re.compile(r"election|\bvote", _I)),
]
GENERAL_EVENT = "General Event"


# ============================================
# NEWS ARTICLE INDICATORS
# ============================================
# Keyword lists are matched from a word start, so "approve" also hits
# "approved" and "launch" hits "launches".

ARTICLE_INDICATORS = {
    "deadline": ["by", "deadline", "due", "before", "until", "by end of", "by the end"],
    "date": ["this month", "next month", "this year", "next year"],
    "decision": ["will", "vote", "decision", "approve", "reject", "pass", "fail", "announce"],
    "regulatory": ["regulation", "regulatory", "approval", "fda", "sec", "license", "permit"],
    "policy": ["bill", "legislation", "law", "act", "policy", "rule"],
    "launch": ["launch", "release", "unveil", "debut", "ship", "rollout"],
    "financial": ["ipo", "merger", "acquisition", "earnings", "quarterly", "report"],
    "election": ["election", "vote", "ballot", "referendum", "primary"],
}

# Whole-word only: these are short enough to hide inside other words
WHOLE_WORD_INDICATORS = {"by", "due", "act", "sec", "fda", "ipo", "will", "ship", "law", "rule", "pass", "fail"}

YEAR_PATTERN = re.compile(r"\b20\d{2}\b")

MIN_ARTICLE_INDICATORS = 2

# Precedence when more than one indicator fires
ARTICLE_EVENT_TYPES = [
    ("regulatory", "Regulatory Decision"),
    ("policy", "Policy Decision"),
    ("launch", "Product Launch"),
    ("financial", "Financial Event"),
    ("election", "Election"),
    ("decision", "Decision"),
]
ARTICLE_GENERAL_EVENT = "General"

ARTICLE_QUESTION_PATTERNS = [
    re.compile(r"will (.+?)\?", _I),
    re.compile(r"will (.+?) (?:by|on|before)", _I),
    re.compile(r"(.+?) (?:will|to) (?:be|get|have|reach)", _I),
]
QUESTION_TITLE_MARKERS = ("will", "approval", "decision")
MAX_QUESTION_LENGTH = 100


# ============================================
# SCORE
# ============================================

INDICATOR_POINTS = 10
DEADLINE_BONUS = 20
DATE_BONUS = 15
MAX_SCORE = 100
