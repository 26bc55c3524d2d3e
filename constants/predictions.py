"""
Prediction Tables - Per-interest vocabulary for the predictive trend feed.
"""
from typing import Dict, List

from .categories import Category


# ============================================
# INTEREST KEYWORDS
# ============================================
# Used for the news / social search queries and for article relevance.

PREDICTION_KEYWORDS: Dict[Category, List[str]] = {
    Category.AI: [
        "artificial intelligence", "AI", "machine learning", "LLM", "GPT",
        "neural network", "deep learning",
    ],
    Category.POLICY: ["regulation", "policy", "legislation", "government", "law", "compliance"],
    Category.SEMICONDUCTORS: ["semiconductor", "chip", "TSMC", "Intel", "NVIDIA", "processor", "silicon"],
    Category.FINANCE: ["finance", "banking", "cryptocurrency", "bitcoin", "stock", "market", "investment"],
    Category.E_COMMERCE: ["e-commerce", "online shopping", "retail", "amazon", "shopify", "marketplace"],
    Category.HEALTHCARE: ["healthcare", "medical", "pharmaceutical", "health", "medicine", "treatment"],
    Category.ENERGY: [
        "energy", "renewable energy", "solar energy", "wind energy", "oil", "gas",
        "electricity", "nuclear energy", "hydroelectric", "geothermal", "battery",
        "energy storage", "power grid", "energy policy", "energy transition",
        "clean energy", "fossil fuels", "natural gas", "crude oil", "petroleum",
        "energy infrastructure", "energy market", "energy prices", "energy sector",
        "solar power", "wind power", "energy efficiency", "energy crisis",
        "energy security", "carbon neutral", "net zero", "green energy",
    ],
    Category.CRYPTO: ["cryptocurrency", "bitcoin", "ethereum", "blockchain", "crypto", "DeFi"],
    Category.CLIMATE: ["climate", "environment", "carbon", "emissions", "sustainability", "green"],
    Category.GAMING: [
        "gaming", "video game", "video games", "esports", "e-sports", "console",
        "gaming industry", "streaming", "twitch", "youtube gaming", "playstation",
        "xbox", "nintendo", "steam", "epic games", "roblox", "mobile gaming",
        "pc gaming", "game development", "game publisher", "gaming market",
        "gaming revenue", "game sales", "gaming platform", "VR gaming",
        "gaming tournament", "gaming event",
    ],
}

# How far out an article-based prediction is expected to resolve
PREDICTION_TIMEFRAMES: Dict[Category, List[str]] = {
    Category.AI: ["3-6 months", "6-12 months", "12-18 months", "18-24 months"],
    Category.POLICY: ["6-12 months", "12-18 months", "18-24 months"],
    Category.SEMICONDUCTORS: ["3-6 months", "6-12 months", "12-18 months"],
    Category.FINANCE: ["3-6 months", "6-12 months", "12-18 months"],
    Category.E_COMMERCE: ["3-6 months", "6-12 months", "12-18 months"],
    Category.HEALTHCARE: ["6-12 months", "12-18 months", "18-24 months"],
    Category.ENERGY: ["6-12 months", "12-18 months", "18-24 months"],
    Category.CRYPTO: ["3-6 months", "6-12 months", "12-18 months"],
    Category.CLIMATE: ["6-12 months", "12-18 months", "18-24 months"],
    Category.GAMING: ["3-6 months", "6-12 months", "12-18 months"],
}

# Days until the outcome, keyed by the timeframe's leading range
TIMEFRAME_DAYS = (("3-6", 90), ("6-12", 180), ("12-18", 360))
DEFAULT_TIMEFRAME_DAYS = 540


# ============================================
# MARKET POOL
# ============================================
# Open markets whose text mentions one of these become trends themselves.

POOL_TREND_KEYWORDS: Dict[Category, List[str]] = {
    Category.AI: ["ai", "artificial intelligence", "machine learning", "llm", "gpt"],
    Category.POLICY: ["policy", "regulation", "government", "legislation"],
    Category.SEMICONDUCTORS: ["semiconductor", "chip", "tsmc", "intel", "nvidia", "processor", "silicon"],
    Category.FINANCE: ["finance", "banking", "economics", "markets"],
    Category.E_COMMERCE: ["e-commerce", "retail", "commerce", "shopping"],
    Category.HEALTHCARE: ["healthcare", "medical", "health", "medicine"],
    Category.ENERGY: ["energy", "renewable", "solar", "wind", "oil"],
    Category.CRYPTO: ["crypto", "cryptocurrency", "bitcoin", "ethereum", "blockchain"],
    Category.CLIMATE: ["climate", "environment", "carbon", "sustainability"],
    Category.GAMING: [
        "gaming", "video game", "esports", "console", "playstation", "xbox",
        "nintendo", "steam", "twitch", "streaming game",
    ],
}


# ============================================
# SOCIAL
# ============================================

SUBREDDITS: Dict[Category, List[str]] = {
    Category.AI: ["artificial", "MachineLearning", "ChatGPT", "OpenAI"],
    Category.POLICY: ["politics", "law", "government"],
    Category.SEMICONDUCTORS: ["hardware", "intel", "nvidia", "AMD"],
    Category.FINANCE: ["finance", "investing", "stocks", "cryptocurrency"],
    Category.E_COMMERCE: ["ecommerce", "shopify", "business"],
    Category.HEALTHCARE: ["healthcare", "medicine", "pharmacy"],
    Category.ENERGY: ["energy", "renewable", "solar", "wind", "nuclear"],
    Category.CRYPTO: ["cryptocurrency", "bitcoin", "ethereum"],
    Category.CLIMATE: ["climate", "environment", "sustainability"],
    Category.GAMING: ["gaming", "games", "pcgaming", "xbox", "playstation"],
}

# Appended to tweet searches so results lean toward decisions and deadlines
TWITTER_MARKETABLE_TERMS = [
    "will", "approval", "decision", "launch", "release", "announcement", "deadline", "by",
]


# ============================================
# NEWS
# ============================================

# Terms counted when deciding whether an article describes a marketable event
MARKETABLE_NEWS_TERMS: List[str] = [
    "will", "by", "deadline", "approval", "decision", "vote", "launch", "release",
    "announcement", "regulation", "bill", "legislation", "fda", "sec", "ipo",
    "merger", "acquisition", "election", "referendum", "target", "goal",
]

# Dropped from loosely filtered news unless the interest covers them
UNRELATED_NEWS_TERMS: List[str] = ["crypto", "bitcoin", "trading", "price"]
UNRELATED_TERMS_ALLOWED = (Category.CRYPTO, Category.FINANCE)

# Interests whose news is sparse enough to get wider queries and more predictions
BROAD_NEWS_INTERESTS = (Category.GAMING, Category.ENERGY)
