"""
Category Constants

Defines the fixed category set and the per-category tables used by the
matching engine: marketplace tags, exclusion keywords, detection terms,
fallback search terms and news search keywords.

These are configuration data. processor.config freezes them into a
MatchingConfig once per process.
"""
from enum import Enum
from typing import Dict, List, Optional


class Category(str, Enum):
    """Trend categories shown on the dashboard."""
    AI = "AI"
    POLICY = "Policy"
    SEMICONDUCTORS = "Semiconductors"
    FINANCE = "Finance"
    E_COMMERCE = "E-commerce"
    HEALTHCARE = "Healthcare"
    ENERGY = "Energy"
    CRYPTO = "Crypto"
    CLIMATE = "Climate"
    GAMING = "Gaming"


def normalize_category(value) -> Optional[Category]:
    """
    Resolve a raw category value to a Category.

    Matching is case-insensitive. Unknown values resolve to None so lookups
    degrade to "no category" instead of failing.
    """
    if value is None:
        return None
    if isinstance(value, Category):
        return value
    text = str(value).strip().lower()
    if not text:
        return None
    for category in Category:
        if category.value.lower() == text:
            return category
    return None


# ============================================
# MARKETPLACE TAGS
# ============================================
# Generic vocabulary per category. Keywords overlapping these are
# "category keywords" and carry very little weight.

CATEGORY_TAGS: Dict[Category, List[str]] = {
    Category.AI: ["ai", "artificial-intelligence", "technology", "tech"],
    Category.POLICY: ["politics", "policy", "regulation", "government"],
    Category.SEMICONDUCTORS: ["technology", "semiconductors", "chips", "tech"],
    Category.FINANCE: ["finance", "crypto", "economics", "markets"],
    Category.E_COMMERCE: ["business", "commerce", "retail"],
    Category.HEALTHCARE: ["health", "healthcare", "medicine", "medical"],
    Category.ENERGY: ["energy", "oil", "renewable", "climate"],
    Category.CRYPTO: ["crypto", "cryptocurrency", "bitcoin", "blockchain"],
    Category.CLIMATE: ["climate", "environment", "sustainability"],
    Category.GAMING: [
        "gaming",
        "video game",
        "esports",
        "console",
        "playstation",
        "xbox",
        "nintendo",
        "steam",
        "twitch",
    ],
}


# ============================================
# EXCLUSIONS
# ============================================
# An event mentioning any of these is never surfaced for the category.

CATEGORY_EXCLUSIONS: Dict[Category, List[str]] = {
    Category.GAMING: [
        "crypto",
        "bitcoin",
        "ethereum",
        "solana",
        "xrp",
        "trading",
        "price",
        "up or down",
        "cryptocurrency",
        "blockchain",
        "defi",
        "nft",
    ],
    Category.AI: ["crypto", "bitcoin", "trading", "price"],
    Category.SEMICONDUCTORS: ["crypto", "bitcoin", "trading", "price"],
    Category.POLICY: ["crypto", "bitcoin", "trading", "price"],
    Category.FINANCE: [],
    Category.CRYPTO: [],
    Category.HEALTHCARE: ["crypto", "bitcoin", "trading", "price"],
    Category.ENERGY: ["crypto", "bitcoin", "trading", "price"],
    Category.CLIMATE: ["crypto", "bitcoin", "trading", "price"],
    Category.E_COMMERCE: ["crypto", "bitcoin", "trading", "price"],
}

# Gaming only drops "trading" when it is crypto trading
GAMING_TRADING_EXCLUSION = "trading"
GAMING_TRADING_REQUIRES = "crypto"


# ============================================
# SPORT / ESPORT DISAMBIGUATION (Gaming)
# ============================================

SPORTS_KEYWORDS: List[str] = [
    "nhl",
    "nba",
    "nfl",
    "mlb",
    "hockey",
    "basketball",
    "football",
    "baseball",
    "soccer",
    "tennis",
    "golf",
    "rangers",
    "yankees",
    "knicks",
]

ESPORTS_KEYWORDS: List[str] = [
    "counter-strike",
    "csgo",
    "valorant",
    "league of legends",
    "dota",
    "overwatch",
    "esports",
]


# ============================================
# SPORT TERMS
# ============================================
# Used both to detect a sport from keywords and as the search terms of the
# detected-type fallback.

SPORT_TERMS: Dict[str, List[str]] = {
    "soccer": [
        "soccer",
        "football",
        "futbol",
        "mls",
        "premier league",
        "champions league",
        "world cup",
        "euro",
        "men's soccer",
        "women's soccer",
        "college soccer",
        "ncaa soccer",
    ],
    "basketball": [
        "basketball",
        "nba",
        "college basketball",
        "ncaa basketball",
        "march madness",
        "ncaa tournament",
        "final four",
        "nba playoffs",
        "nba finals",
    ],
    "football": [
        "nfl",
        "american football",
        "football",
        "super bowl",
        "college football",
        "ncaa football",
        "cfp",
        "college football playoff",
        "nfl playoffs",
    ],
    "baseball": [
        "baseball",
        "mlb",
        "world series",
        "college baseball",
        "ncaa baseball",
        "college world series",
        "mlb playoffs",
    ],
    "hockey": [
        "hockey",
        "nhl",
        "ice hockey",
        "stanley cup",
        "college hockey",
        "ncaa hockey",
    ],
    "tennis": [
        "tennis",
        "wimbledon",
        "us open",
        "french open",
        "australian open",
        "atp",
        "wta",
        "grand slam",
    ],
    "golf": [
        "golf",
        "pga",
        "masters",
        "us open",
        "british open",
        "pga tour",
        "liv golf",
    ],
}


# ============================================
# CATEGORY DETECTION TERMS
# ============================================
# Keys are lowercase category names. Order matters: the first list with a
# hit wins (after the request's own category).

CATEGORY_DETECTION_TERMS: Dict[str, List[str]] = {
    "ai": [
        "ai", "artificial intelligence", "machine learning", "ml", "llm",
        "gpt", "chatgpt", "openai", "anthropic", "claude", "deepmind",
        "neural network", "deep learning", "generative ai", "agi",
        "transformer", "language model",
    ],
    "semiconductors": [
        "semiconductor", "chip", "gpu", "cpu", "nvidia", "intel", "amd",
        "tsmc", "samsung", "qualcomm", "broadcom", "micron", "blackwell",
        "hopper", "h100", "a100", "silicon", "wafer", "foundry",
    ],
    "finance": [
        "finance", "banking", "fed", "federal reserve", "interest rate",
        "inflation", "stock", "nasdaq", "sp500", "dow jones", "s&p 500",
        "market", "trading", "economy", "recession", "gdp", "unemployment",
    ],
    "healthcare": [
        "health", "healthcare", "medicine", "medical", "fda", "drug",
        "pharmaceutical", "treatment", "therapy", "vaccine", "clinical trial",
        "approval", "biotech", "hospital", "patient", "diagnosis",
    ],
    "energy": [
        "energy", "oil", "gas", "renewable", "solar", "wind", "nuclear",
        "battery", "tesla", "electric", "ev", "crude", "petroleum",
        "fossil fuel", "green energy", "power plant", "grid",
    ],
    "climate": [
        "climate", "environment", "sustainability", "carbon", "emissions",
        "global warming", "greenhouse", "renewable", "solar", "wind",
        "clean energy", "pollution", "epa", "environmental", "conservation",
    ],
    "e-commerce": [
        "e-commerce", "commerce", "retail", "amazon", "shopify",
        "online shopping", "marketplace", "sales", "revenue", "consumer",
        "shopping", "delivery",
    ],
    "policy": [
        "policy", "politics", "regulation", "government", "congress",
        "senate", "house", "bill", "legislation", "law", "vote", "election",
        "president", "senator", "representative", "federal", "state",
    ],
    "crypto": [
        "crypto", "cryptocurrency", "bitcoin", "ethereum", "blockchain",
        "btc", "eth", "defi", "nft", "solana", "trading", "exchange", "wallet",
    ],
}


# ============================================
# CATEGORY SEARCH TERMS
# ============================================
# Search terms of the detected-type fallback, keyed like the detection terms.

CATEGORY_SEARCH_TERMS: Dict[str, List[str]] = {
    "ai": [
        "ai", "artificial intelligence", "machine learning", "llm", "gpt",
        "chatgpt", "openai", "anthropic", "claude", "deepmind",
        "neural network", "generative ai",
    ],
    "semiconductors": [
        "semiconductor", "chip", "gpu", "cpu", "nvidia", "intel", "amd",
        "tsmc", "samsung", "qualcomm", "broadcom", "micron", "blackwell",
        "hopper",
    ],
    "finance": [
        "finance", "banking", "fed", "federal reserve", "interest rate",
        "inflation", "stock", "nasdaq", "sp500", "dow jones", "market",
        "economy",
    ],
    "healthcare": [
        "health", "healthcare", "medicine", "medical", "fda", "drug",
        "pharmaceutical", "treatment", "therapy", "vaccine", "clinical trial",
        "biotech",
    ],
    "energy": [
        "energy", "oil", "gas", "renewable", "solar", "wind", "nuclear",
        "battery", "tesla", "electric", "ev", "crude", "petroleum",
    ],
    "climate": [
        "climate", "environment", "sustainability", "carbon", "emissions",
        "global warming", "renewable", "solar", "wind", "clean energy",
        "pollution",
    ],
    "e-commerce": [
        "e-commerce", "commerce", "retail", "amazon", "shopify",
        "online shopping", "marketplace", "sales", "consumer",
    ],
    "policy": [
        "policy", "politics", "regulation", "government", "congress",
        "senate", "house", "bill", "legislation", "law", "vote", "election",
    ],
    "crypto": [
        "crypto", "cryptocurrency", "bitcoin", "ethereum", "blockchain",
        "btc", "eth", "defi", "nft", "solana",
    ],
    "gaming": [
        "gaming", "video game", "esports", "console", "playstation", "xbox",
        "nintendo",
    ],
}


# ============================================
# NEWS KEYWORDS
# ============================================

# Keywords used to assign a category to a news article
NEWS_CATEGORY_KEYWORDS: Dict[Category, List[str]] = {
    Category.AI: ["artificial intelligence", "AI", "machine learning", "LLM", "GPT", "neural network"],
    Category.POLICY: ["regulation", "policy", "legislation", "government", "law"],
    Category.SEMICONDUCTORS: ["semiconductor", "chip", "TSMC", "Intel", "NVIDIA", "processor"],
    Category.FINANCE: ["finance", "banking", "cryptocurrency", "bitcoin", "stock", "market"],
    Category.E_COMMERCE: ["e-commerce", "online shopping", "retail", "amazon", "shopify"],
    Category.HEALTHCARE: ["healthcare", "medical", "pharmaceutical", "health", "medicine"],
    Category.ENERGY: ["energy", "renewable", "solar", "wind", "oil", "gas"],
    Category.CRYPTO: ["cryptocurrency", "bitcoin", "ethereum", "blockchain", "crypto"],
    Category.CLIMATE: ["climate", "environment", "carbon", "emissions", "sustainability"],
    Category.GAMING: ["gaming", "video game", "esports", "console", "gaming industry"],
}

# News search queries aimed at decision/deadline style stories
MARKETABLE_QUERY_KEYWORDS: Dict[Category, List[str]] = {
    Category.AI: ["AI regulation", "AI approval", "GPT launch", "AI policy", "AI legislation"],
    Category.POLICY: ["bill", "legislation", "regulation", "vote", "approval", "policy decision"],
    Category.SEMICONDUCTORS: ["chip approval", "semiconductor regulation", "TSMC", "Intel", "NVIDIA"],
    Category.FINANCE: ["IPO", "merger", "acquisition", "earnings", "SEC approval", "Fed decision"],
    Category.E_COMMERCE: ["launch", "IPO", "merger", "acquisition"],
    Category.HEALTHCARE: ["FDA approval", "drug approval", "clinical trial", "medical device"],
    Category.ENERGY: ["energy policy", "renewable energy", "regulation", "approval"],
    Category.CRYPTO: ["crypto regulation", "bitcoin ETF", "approval", "SEC decision"],
    Category.CLIMATE: ["climate policy", "carbon regulation", "climate bill", "approval"],
    Category.GAMING: ["game launch", "console release", "acquisition", "merger"],
}

CREDIBLE_SOURCES: List[str] = [
    "Reuters",
    "Bloomberg",
    "Financial Times",
    "The Wall Street Journal",
    "TechCrunch",
]
