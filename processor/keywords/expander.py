"""
Keyword Expander - Widen a keyword list with synonym tables.

Exact hits on a table key add that key's synonyms. Partial hits (the key
inside the keyword or the keyword inside the key) add them too, so
"quarterfinal" also picks up the "quarterfinals" entry.
"""
from typing import Iterable, Optional

from constants import normalize_category
from ..config import MatchingConfig, get_matching_config
from ..matching import dedupe


def expand_keywords(
    keywords: Iterable[str],
    category=None,
    config: Optional[MatchingConfig] = None,
) -> list[str]:
    """
    Expand keywords with sports, general and (for Gaming) esports synonyms.

    Returns:
        De-duplicated superset of the input; original keywords keep their
        order and synonyms follow.
    """
    config = config or get_matching_config()
    category = normalize_category(category)
    expansions = config.expansions_for(category)

    keywords = [k.lower().strip() for k in keywords if k and k.strip()]
    expanded = list(keywords)

    for keyword in keywords:
        exact = expansions.get(keyword)
        if exact:
            expanded.extend(exact)

        for key, synonyms in expansions.items():
            if key in keyword or keyword in key:
                expanded.extend(synonyms)

    return dedupe(expanded)
