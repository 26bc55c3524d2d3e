"""
Vocabulary Constants

Word lists used by keyword extraction and expansion:
- STOP_WORDS: words never used as keywords
- KNOWN_ENTITIES: per-category company/product/team names
- *_SYNONYMS: expansion tables keyed by lowercase keyword
"""
from typing import Dict, List

from .categories import Category


# ============================================
# STOP WORDS
# ============================================
# Articles, auxiliaries and the generic forecasting filler that shows up in
# almost every trend summary.

STOP_WORDS: List[str] = [
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
    "of", "with", "by", "from", "will", "this", "that", "these", "those",
    "when", "what", "how", "why", "where", "is", "are", "was", "were", "be",
    "been", "being", "have", "has", "had", "do", "does", "did", "can",
    "could", "should", "would", "may", "might", "must", "shall", "its",
    "it's", "they", "them", "their", "there", "then", "than",
    # Forecasting filler
    "based", "recent", "signals", "key", "indicators", "suggest",
    "likelihood", "within", "driven", "transforms", "accelerates", "evolve",
    "shifts", "expansion", "innovation", "market", "trends", "applications",
    "technology", "patterns", "demographics",
    # News filler
    "ceo", "company", "companies", "news", "article", "report", "says",
    "sees", "expects", "among", "top", "well", "put", "drops", "gloves",
    "exciting", "debut",
]


# ============================================
# KNOWN ENTITIES
# ============================================

KNOWN_ENTITIES: Dict[Category, List[str]] = {
    Category.SEMICONDUCTORS: [
        "nvidia", "intel", "amd", "tsmc", "samsung", "qualcomm", "broadcom",
        "micron", "blackwell", "hopper", "h100", "a100", "gpu", "chip",
        "semiconductor", "taiwan semiconductor", "asml", "applied materials",
    ],
    Category.AI: [
        "openai", "chatgpt", "gpt", "anthropic", "claude", "google",
        "deepmind", "gemini", "llm", "ai", "machine learning",
        "artificial intelligence", "neural network",
    ],
    Category.FINANCE: [
        "fed", "federal reserve", "interest rate", "inflation", "bitcoin",
        "ethereum", "crypto", "stock", "nasdaq", "sp500", "dow jones",
        "s&p 500",
    ],
    Category.ENERGY: [
        "solar", "wind", "nuclear", "oil", "gas", "renewable", "tesla",
        "battery", "energy storage", "crude oil", "natural gas",
    ],
    Category.GAMING: [
        # Sports
        "nhl", "nba", "nfl", "mlb", "hockey", "basketball", "football",
        "baseball", "soccer", "tennis", "golf", "rangers", "yankees",
        "knicks", "giants", "jets", "mets", "islanders", "nets",
        # Video games / esports
        "playstation", "xbox", "nintendo", "steam", "epic games", "roblox",
        "fortnite", "gaming", "esports", "sony", "microsoft", "switch",
        "ps5", "counter-strike", "csgo", "valorant", "league of legends",
        "dota", "overwatch",
    ],
    Category.CRYPTO: [
        "bitcoin", "ethereum", "solana", "crypto", "blockchain", "defi",
        "nft", "btc", "eth",
    ],
}


# ============================================
# SYNONYM TABLES
# ============================================

SPORTS_SYNONYMS: Dict[str, List[str]] = {
    "quarterfinals": ["playoffs", "tournament", "championship", "bracket", "knockout", "elimination"],
    "quarterfinal": ["playoffs", "tournament", "championship", "bracket", "knockout", "elimination"],
    "semifinals": ["playoffs", "tournament", "championship", "bracket", "final four"],
    "semifinal": ["playoffs", "tournament", "championship", "bracket", "final four"],
    "finals": ["championship", "tournament", "playoffs", "title game"],
    "final": ["championship", "tournament", "playoffs", "title game"],
    "victory": ["win", "triumph", "success", "championship"],
    "victories": ["wins", "triumphs", "successes"],
    "leads": ["wins", "beats", "defeats", "victory"],
    "nhl": ["hockey", "ice hockey", "professional hockey", "stanley cup"],
    "nba": ["basketball", "professional basketball", "nba playoffs", "nba finals", "playoffs"],
    "nfl": ["football", "american football", "professional football", "super bowl", "nfl playoffs"],
    "mlb": ["baseball", "professional baseball", "world series", "mlb playoffs"],
    "rangers": ["hockey", "nhl", "new york"],
    "yankees": ["baseball", "mlb", "new york"],
    "knicks": ["basketball", "nba", "new york"],
    "basketball": ["nba", "college basketball", "ncaa basketball", "march madness", "ncaa tournament", "final four"],
    "football": ["nfl", "american football", "super bowl", "college football", "ncaa football", "cfp", "college football playoff"],
    "baseball": ["mlb", "world series", "college baseball", "ncaa baseball", "college world series"],
    "hockey": ["nhl", "ice hockey", "stanley cup", "college hockey", "ncaa hockey"],
    "tennis": ["wimbledon", "us open", "french open", "australian open", "atp", "wta", "grand slam"],
    "golf": ["pga", "masters", "us open", "british open", "pga tour", "liv golf"],
    "freshmen": ["freshman", "first year", "rookie", "debut"],
    "freshman": ["freshmen", "first year", "rookie", "debut"],
    "debut": ["first game", "first appearance", "rookie", "debut season"],
    "soccer": [
        "football", "futbol", "mls", "premier league", "champions league",
        "world cup", "euro", "college soccer", "ncaa soccer",
    ],
    "men's soccer": ["soccer", "football", "mls", "college soccer", "ncaa"],
    "women's soccer": ["soccer", "football", "nwsl", "college soccer", "ncaa"],
    "big ten": ["big ten conference", "b1g", "college", "ncaa", "conference"],
    "outlast": ["beats", "defeats", "wins", "victory"],
}

GAMING_SYNONYMS: Dict[str, List[str]] = {
    "counter-strike": ["csgo", "cs", "counterstrike", "fps", "esports"],
    "csgo": ["counter-strike", "cs", "counterstrike", "fps", "esports"],
    "valorant": ["riot games", "fps", "esports", "tactical shooter"],
    "league of legends": ["lol", "moba", "riot games", "esports"],
    "dota": ["dota 2", "moba", "esports", "valve"],
}

GENERAL_SYNONYMS: Dict[str, List[str]] = {
    "championship": ["title", "trophy", "cup", "crown"],
    "tournament": ["competition", "championship", "bracket", "playoffs"],
    "playoffs": ["postseason", "tournament", "championship", "bracket"],
}
