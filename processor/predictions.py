"""
Predictive Trends - Interest-driven trend feed from markets, social and news.

Per interest, three kinds of cards are built:
- market: open prediction markets from the pool that mention the interest
- social: Reddit posts / tweets that pass the is_marketable() gate
- prediction: groups of recent news articles summarized as one outlook

Cards are ranked (markets, then marketable, then social, then the rest;
probability breaks ties), de-duplicated by title and truncated.
"""
import math
from datetime import datetime, timedelta, timezone
from typing import Iterable, Optional, Sequence

from loguru import logger

from constants import (
    BROAD_NEWS_INTERESTS,
    CREDIBLE_SOURCES,
    DEFAULT_TIMEFRAME_DAYS,
    MARKETABLE_NEWS_TERMS,
    POOL_TREND_KEYWORDS,
    PREDICTION_KEYWORDS,
    PREDICTION_TIMEFRAMES,
    SUBREDDITS,
    TIMEFRAME_DAYS,
    TWITTER_MARKETABLE_TERMS,
    UNRELATED_NEWS_TERMS,
    UNRELATED_TERMS_ALLOWED,
    Category,
)
from .config import MatchingConfig, get_matching_config
from .dedup import deduplicate_trends
from .marketability import classify_event_type, is_marketable
from .marketability.config import SOFTWARE_PATTERNS
from .matching import event_text, is_excluded, word_pattern
from .models import TimelineEntry, Trend, TrendSource


MAX_PREDICTIONS = 20
SOURCES_PER_INTEREST = 3

MIN_PROBABILITY = 20
MAX_PROBABILITY = 70

# Social posts
SOCIAL_BASE_PROBABILITY = 30
ENGAGEMENT_BONUSES = ((1000, 15), (500, 12), (100, 8))    # (more than, bonus)
COMMENT_BONUSES = ((100, 8), (50, 5))                     # (more than, bonus)
SOCIAL_RECENCY_BONUSES = ((6, 8), (24, 4))                # (max hours old, bonus)
MARKETABLE_BONUS = 8
MAX_TITLE_LENGTH = 80
MIN_REDDIT_TITLE = 10
MIN_TWEET_LENGTH = 20

# Market pool
MARKET_BASE_PROBABILITY = 40
DEFAULT_MARKET_DAYS = 90

# News
NEWS_BASE_PROBABILITY = 35
RECENT_ARTICLE_HOURS = 48
MIN_LOOSE_ARTICLES = 5
MIN_MARKETABLE_TERMS = 2
MAX_ARTICLE_SOURCES = 3
SHORT_KEYWORD_LENGTH = 3

_DEADLINE_FORMATS = ("%B %d, %Y", "%B %d %Y", "%b %d, %Y", "%b %d %Y", "%m/%d/%Y", "%B %Y", "%b %Y")


def _clamp(probability: float) -> int:
    return round(min(MAX_PROBABILITY, max(MIN_PROBABILITY, probability)))


def _stamp(now: datetime) -> int:
    return int(now.timestamp() * 1000)


def _truncate(title: str) -> str:
    if len(title) > MAX_TITLE_LENGTH:
        return f"{title[:MAX_TITLE_LENGTH - 3]}..."
    return title


def _hours_old(created_at: Optional[datetime], now: datetime) -> Optional[float]:
    if created_at is None:
        return None
    return (now - created_at).total_seconds() / 3600


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    """ISO-8601 timestamp to an aware datetime (None when unparseable)."""
    if not value or not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def parse_deadline(deadline: Optional[str]) -> Optional[datetime]:
    """
    Calendar date for a deadline phrase such as "March 15, 2026" or "3/15/2026".

    Relative phrases ("next month") and anything else unparseable give None.
    """
    if not deadline:
        return None
    text = deadline.strip()
    for fmt in _DEADLINE_FORMATS:
        try:
            return datetime.strptime(text, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue
    return None


def _deadline_entry(deadline: Optional[str]) -> list[TimelineEntry]:
    parsed = parse_deadline(deadline)
    if parsed is None:
        return []
    return [TimelineEntry(date=parsed.isoformat(), label=f"Expected deadline: {deadline}")]


def _keyword_hit(keyword: str, text: str) -> bool:
    """
    Interest keyword match on lowercase text.

    Phrases need every word; short keywords ("ai", "gas") must stand alone.
    """
    keyword = keyword.lower()
    if " " in keyword:
        return all(word in text for word in keyword.split())
    if len(keyword) <= SHORT_KEYWORD_LENGTH:
        return word_pattern(keyword).search(text) is not None
    return keyword in text


def interest_keywords(interest: Category) -> list[str]:
    return PREDICTION_KEYWORDS.get(interest, [])


# ============================================
# SEARCH QUERIES
# ============================================

def reddit_query(interest: Category) -> str:
    return " OR ".join(interest_keywords(interest)[:3])


def subreddits_for(interest: Category) -> list[str]:
    return SUBREDDITS.get(interest, [])[:3]


def twitter_query(interest: Category) -> str:
    keywords = " OR ".join(interest_keywords(interest)[:5])
    terms = " OR ".join(TWITTER_MARKETABLE_TERMS)
    return f"({keywords}) ({terms})"


def news_query(interest: Category) -> str:
    limit = 15 if interest in BROAD_NEWS_INTERESTS else 8
    return " OR ".join(interest_keywords(interest)[:limit])


def news_page_size(interest: Category) -> int:
    return 40 if interest is Category.ENERGY else 20


# ============================================
# SOCIAL POSTS
# ============================================

def social_probability(post, now: datetime) -> int:
    """30 base + engagement, comments (Reddit), recency and marketable bonuses."""
    probability = SOCIAL_BASE_PROBABILITY

    if post.platform == "reddit":
        engagement = post.score
    else:
        engagement = post.retweets + post.likes
    for threshold, bonus in ENGAGEMENT_BONUSES:
        if engagement > threshold:
            probability += bonus
            break

    if post.platform == "reddit":
        for threshold, bonus in COMMENT_BONUSES:
            if post.comments > threshold:
                probability += bonus
                break

    hours_old = _hours_old(post.created_at, now)
    if hours_old is not None:
        for max_hours, bonus in SOCIAL_RECENCY_BONUSES:
            if hours_old < max_hours:
                probability += bonus
                break

    probability += MARKETABLE_BONUS
    return _clamp(probability)


def social_post_to_trend(post, interest: Category, now: Optional[datetime] = None) -> Optional[Trend]:
    """
    Trend card for a social post, or None when the post is not marketable.

    Reddit titles under 10 characters and tweets under 20 are skipped before
    the marketability gate runs.
    """
    now = now or datetime.now(timezone.utc)
    if post.platform == "reddit" and len(post.title) < MIN_REDDIT_TITLE:
        return None
    if post.platform == "twitter" and len(post.text) < MIN_TWEET_LENGTH:
        return None
    if not is_marketable(post.full_text):
        return None

    details = classify_event_type(post.full_text, post.title)
    deadline_note = f" (deadline: {details.deadline})" if details.deadline else ""
    posted = (post.created_at or now).isoformat()

    if post.platform == "reddit":
        summary = (
            f"Marketable event from r/{post.author}: {post.title}{deadline_note} "
            f"({post.score} upvotes, {post.comments} comments)"
        )
        source = TrendSource(name=f"r/{post.author} - Reddit", url=post.url, type="social")
        posted_label = "Posted on Reddit"
    else:
        summary = f"Marketable event from @{post.author}: {post.text}{deadline_note}"
        source = TrendSource(name=f"@{post.author} - Twitter", url=post.url, type="social")
        posted_label = "Tweet posted"

    return Trend(
        id=f"{post.platform}-{interest.value.lower()}-{post.post_id}-{_stamp(now)}",
        title=details.question or _truncate(post.title),
        category=interest.value,
        probability=social_probability(post, now),
        summary=summary,
        sources=[source],
        timeline=[TimelineEntry(date=posted, label=posted_label), *_deadline_entry(details.deadline)],
        origin="social",
        engagement=post.engagement,
        is_marketable=True,
        event_type=details.event_type,
        deadline=details.deadline,
        question=details.question,
    )


def social_trends(
    posts: Iterable,
    interest: Category,
    limit: int = SOURCES_PER_INTEREST,
    now: Optional[datetime] = None,
) -> list[Trend]:
    """Marketable posts as trends; tweets must also mention an interest keyword."""
    now = now or datetime.now(timezone.utc)
    keywords = [k.lower() for k in interest_keywords(interest)]
    trends = []
    for post in posts:
        if len(trends) >= limit:
            break
        if post.platform == "twitter":
            text = post.text.lower()
            if not any(keyword in text for keyword in keywords):
                continue
        trend = social_post_to_trend(post, interest, now)
        if trend is not None:
            trends.append(trend)
    return trends


# ============================================
# MARKET POOL
# ============================================

def market_probability(event) -> int:
    probability = MARKET_BASE_PROBABILITY
    if event.liquidity:
        probability = min(65, max(25, 25 + (event.liquidity / 10000) * 40))
    if event.volume:
        probability = min(MAX_PROBABILITY, probability + min(8, event.volume / 100000))
    return _clamp(probability)


def market_event_to_trend(
    event,
    interest: Category,
    config: Optional[MatchingConfig] = None,
    now: Optional[datetime] = None,
) -> Trend:
    """Trend card for an open market."""
    config = config or get_matching_config()
    now = now or datetime.now(timezone.utc)
    end = _parse_date(event.end_date) or now + timedelta(days=DEFAULT_MARKET_DAYS)
    days = max(1, (end - now).days)
    url = event.url or config.event_url(event.slug, event.id)

    summary = event.description
    if not summary:
        summary = "Active prediction market on Polymarket."
        if event.liquidity:
            summary += f" Liquidity: ${event.liquidity:,.0f}"

    return Trend(
        id=f"polymarket-{event.id}-{_stamp(now)}",
        title=event.title,
        category=interest.value,
        probability=market_probability(event),
        summary=summary,
        sources=[TrendSource(name=f"Polymarket - {event.title[:40]}...", url=url, type="research")],
        timeline=[
            TimelineEntry(date=now.isoformat(), label="Market active on Polymarket"),
            TimelineEntry(date=end.isoformat(), label=f"Market resolution ({days} days)"),
        ],
        origin="market",
        market_url=url,
    )


def pool_trends(
    pool: Sequence,
    interest: Category,
    limit: int = SOURCES_PER_INTEREST,
    config: Optional[MatchingConfig] = None,
    now: Optional[datetime] = None,
) -> list[Trend]:
    """Markets whose title or description names the interest on a word boundary."""
    config = config or get_matching_config()
    patterns = [word_pattern(k) for k in POOL_TREND_KEYWORDS.get(interest, [])]
    exclusions = config.exclusions_for(interest)

    trends = []
    for event in pool or []:
        if len(trends) >= limit:
            break
        text = event_text(event, include_tags=False)
        if is_excluded(text, exclusions, interest):
            continue
        if any(p.search(text) for p in patterns):
            trends.append(market_event_to_trend(event, interest, config, now))
    return trends


# ============================================
# NEWS
# ============================================

def _article_text(article, with_content: bool = True) -> str:
    parts = [article.title or "", article.description or ""]
    if with_content:
        parts.append(article.content or "")
    return " ".join(parts).lower()


def relevant_articles(
    articles: Sequence,
    interest: Category,
    config: Optional[MatchingConfig] = None,
) -> list:
    """Articles without exclusion terms that mention an interest keyword."""
    config = config or get_matching_config()
    exclusions = config.exclusions_for(interest)
    keywords = interest_keywords(interest)
    kept = []
    for article in articles:
        text = _article_text(article)
        if is_excluded(text, exclusions, interest):
            continue
        if any(_keyword_hit(k, text) for k in keywords):
            kept.append(article)
    return kept


def loose_articles(articles: Sequence, interest: Category) -> list:
    """
    Any interest keyword is enough. With fewer than five hits every article
    is used, minus the ones about crypto or prices (unless the interest
    covers them).
    """
    keywords = [k.lower() for k in interest_keywords(interest)]
    kept = [a for a in articles if any(k in _article_text(a) for k in keywords)]
    if len(kept) >= MIN_LOOSE_ARTICLES:
        return kept

    if interest in UNRELATED_TERMS_ALLOWED:
        return list(articles)
    return [
        a for a in articles
        if not any(term in _article_text(a, with_content=False) for term in UNRELATED_NEWS_TERMS)
    ]


def select_articles(articles: Sequence, interest: Category, has_social: bool) -> list:
    """Articles to predict from; stricter when social posts already cover the interest."""
    if not has_social:
        return loose_articles(articles, interest)

    selected = relevant_articles(articles, interest)
    if not selected and interest in BROAD_NEWS_INTERESTS:
        keywords = [k.lower() for k in interest_keywords(interest)]
        selected = [
            a for a in articles
            if any(k in _article_text(a, with_content=False) for k in keywords)
        ]
    return selected


def plan_groups(article_count: int, interest: Category, has_social: bool) -> list[tuple[int, int]]:
    """(start, end) slices splitting articles into prediction groups."""
    if article_count <= 0:
        return []
    if has_social:
        target = 5 if interest is Category.ENERGY else 3
    else:
        target = 8 if interest in BROAD_NEWS_INTERESTS else 6

    per_group = max(2, article_count // target)
    count = min(target, math.ceil(article_count / per_group))
    groups = []
    for i in range(count):
        start, end = i * per_group, min(article_count, (i + 1) * per_group)
        if start < end:
            groups.append((start, end))
    return groups


def marketable_articles(articles: Sequence) -> list:
    """Articles (release notes excluded) naming at least two decision terms."""
    kept = []
    for article in articles:
        text = _article_text(article)
        if any(p.search(text) for p in SOFTWARE_PATTERNS):
            continue
        hits = sum(1 for term in MARKETABLE_NEWS_TERMS if term in text)
        if hits >= MIN_MARKETABLE_TERMS:
            kept.append(article)
    return kept


def timeframe_days(timeframe: str) -> int:
    for prefix, days in TIMEFRAME_DAYS:
        if prefix in timeframe:
            return days
    return DEFAULT_TIMEFRAME_DAYS


def article_prediction(
    interest: Category,
    articles: Sequence,
    index: int,
    now: Optional[datetime] = None,
) -> Trend:
    """
    One prediction card from a group of related articles.

    The most marketable article (or the first one) leads: its "will ..."
    clause becomes the question and its date phrase the deadline.
    """
    now = now or datetime.now(timezone.utc)
    marketable = marketable_articles(articles)
    primary = (marketable or list(articles))[0]

    details = classify_event_type(primary.description or "", primary.title)
    question, deadline = details.question, details.deadline
    title = question or primary.title

    timeframes = PREDICTION_TIMEFRAMES.get(interest) or PREDICTION_TIMEFRAMES[Category.AI]
    timeframe = timeframes[index % len(timeframes)]
    days = timeframe_days(timeframe)

    recent = sum(
        1 for a in articles
        if a.published_at is not None and _hours_old(a.published_at, now) < RECENT_ARTICLE_HOURS
    )
    credible = sum(1 for a in articles if any(name in (a.source or "") for name in CREDIBLE_SOURCES))
    probability = NEWS_BASE_PROBABILITY
    probability += min(12, recent * 2)
    probability += min(10, len(articles) * 1.5)
    if marketable:
        probability += MARKETABLE_BONUS
    probability += min(8, credible * 1.5)
    probability = _clamp(probability)

    timeline = [TimelineEntry(date=now.isoformat(), label="Event detected")]
    deadline_entry = _deadline_entry(deadline)
    if deadline_entry:
        timeline.extend(deadline_entry)
    else:
        midpoint = now + timedelta(days=days // 2)
        timeline.append(TimelineEntry(date=midpoint.isoformat(), label=f"Mid-point ({timeframe})"))
    timeline.append(TimelineEntry(
        date=(now + timedelta(days=days)).isoformat(),
        label=f"Outcome expected ({timeframe})",
    ))

    if marketable:
        summary = (
            f"{primary.title}. {primary.description or ''} "
            "This event could become a Polymarket prediction market."
        )
    else:
        plural = "s" if len(articles) > 1 else ""
        outlets = ", ".join(a.source for a in articles[:MAX_ARTICLE_SOURCES])
        summary = (
            f"Based on {len(articles)} recent signal{plural} from {outlets}, "
            f"{title.lower()}. Key indicators suggest {probability}% likelihood within {timeframe}."
        )

    return Trend(
        id=f"prediction-{interest.value.lower()}-{index}-{_stamp(now)}",
        title=title,
        category=interest.value,
        probability=probability,
        summary=summary,
        sources=[
            TrendSource(name=f"{a.source} - {a.title[:50]}...", url=a.url, type="news")
            for a in articles[:MAX_ARTICLE_SOURCES]
        ],
        timeline=timeline,
        origin="prediction",
        is_marketable=bool(marketable),
        event_type=details.event_type,
        deadline=deadline,
        question=question,
    )


def news_predictions(
    articles: Sequence,
    interest: Category,
    has_social: bool,
    now: Optional[datetime] = None,
) -> list[Trend]:
    """Select, group and summarize an interest's news articles."""
    now = now or datetime.now(timezone.utc)
    selected = select_articles(articles, interest, has_social)
    groups = plan_groups(len(selected), interest, has_social)
    logger.debug(
        f"[predict] {interest.value}: {len(selected)}/{len(articles)} articles "
        f"-> {len(groups)} predictions (social={has_social})"
    )
    return [
        article_prediction(interest, selected[start:end], index, now)
        for index, (start, end) in enumerate(groups)
    ]


# ============================================
# RANK + FINALIZE
# ============================================

def _rank_key(trend: Trend) -> tuple:
    if trend.origin == "market":
        tier = 0
    elif trend.is_marketable:
        tier = 1
    elif trend.origin == "social":
        tier = 2
    else:
        tier = 3
    return (tier, -trend.probability)


def rank_predictions(trends: Iterable[Trend]) -> list[Trend]:
    """Markets first, then marketable, then social; higher probability first within a tier."""
    return sorted(trends, key=_rank_key)


def finalize_predictions(trends: Iterable[Trend], limit: int = MAX_PREDICTIONS) -> tuple[list[Trend], int]:
    """
    Rank, drop near-duplicate titles and truncate.

    Returns:
        (kept trends, count before truncation)
    """
    unique = deduplicate_trends(rank_predictions(trends))
    return unique[:limit], len(unique)
