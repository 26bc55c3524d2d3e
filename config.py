"""
Trend Radar - Configuration
"""
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data")
    LOG_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data" / "logs")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_TO_FILE: bool = Field(default=True)
    LOG_RETENTION_DAYS: int = Field(default=14)

    # LLM (optional re-rank of matched events)
    ANTHROPIC_API_KEY: str = Field(default="", description="Claude API key")
    GLM_API_KEY: str = Field(default="", description="Z.AI API key")
    LLM_PROVIDER: str = Field(default="anthropic")
    LLM_MODEL: str = Field(default="")
    LLM_VERIFY_SSL: bool = Field(default=True)
    LLM_RERANK_ENABLED: bool = Field(default=True)
    LLM_RERANK_WINDOW: int = Field(default=30, description="Max events sent to the LLM for re-ranking")

    # Polymarket
    POLYMARKET_API_BASE: str = Field(default="https://gamma-api.polymarket.com")
    POLYMARKET_EVENT_URL: str = Field(default="https://polymarket.com/event")
    POLYMARKET_POOL_SIZE: int = Field(default=200)
    POLYMARKET_CACHE_SECONDS: int = Field(default=300)

    # News
    NEWS_API_KEY: str = Field(default="", description="NewsAPI key")
    NEWS_API_BASE: str = Field(default="https://newsapi.org/v2")

    # Social
    REDDIT_API_BASE: str = Field(default="https://www.reddit.com")
    TWITTER_BEARER_TOKEN: str = Field(default="", description="Twitter API v2 bearer token")
    TWITTER_API_BASE: str = Field(default="https://api.twitter.com/2")

    # Crawler
    CRAWLER_TIMEOUT: float = Field(default=15.0)
    CRAWLERS_ENABLE_SSL: bool = Field(default=True, description="Enable SSL verification for crawlers")

    # Matching
    DEFAULT_EVENT_LIMIT: int = Field(default=8)

    # API
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    CORS_ORIGINS: list[str] = Field(default=["*"])

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    dirs = [
        settings.DATA_DIR,
        settings.LOG_DIR,
    ]
    for dir_path in dirs:
        dir_path.mkdir(parents=True, exist_ok=True)
